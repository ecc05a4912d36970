"""
Reward points engine: tiered points calculation and monthly aggregation.
Pure and storage-agnostic; collaborators supply customers and transactions.
"""

from rewards_engine.aggregator import RewardsAggregator, month_key
from rewards_engine.errors import CustomerNotFound, NoTransactionsFound, RewardsError
from rewards_engine.models import Customer, RewardResult, RewardSummary, TimeFrame, Transaction
from rewards_engine.points import calculate_points

__all__ = [
    "Customer",
    "CustomerNotFound",
    "NoTransactionsFound",
    "RewardResult",
    "RewardSummary",
    "RewardsAggregator",
    "RewardsError",
    "TimeFrame",
    "Transaction",
    "calculate_points",
    "month_key",
]
