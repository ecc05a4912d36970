"""
Reward aggregation over a customer's transactions.
Deterministic and unit-testable: all data comes from the injected sources.
"""

import logging
from datetime import date
from typing import Dict, List, Mapping, Optional, Protocol, Sequence

from rewards_engine.errors import CustomerNotFound, NoTransactionsFound
from rewards_engine.models import Customer, RewardResult, RewardSummary, TimeFrame, Transaction
from rewards_engine.points import calculate_points

logger = logging.getLogger(__name__)

CUSTOMER_NOT_FOUND = "customer_not_found"
NO_TRANSACTIONS_FOUND = "no_transactions_found"

DEFAULT_MESSAGES: Dict[str, str] = {
    CUSTOMER_NOT_FOUND: "Customer not found",
    NO_TRANSACTIONS_FOUND: "No transactions found",
}


class CustomerSource(Protocol):
    def find_customer_by_id(self, customer_id: int) -> Optional[Customer]: ...


class TransactionSource(Protocol):
    def find_transactions_by_customer_id(self, customer_id: int) -> Sequence[Transaction]: ...

    def find_transactions_by_customer_id_and_date_range(
        self, customer_id: int, start_date: date, end_date: date
    ) -> Sequence[Transaction]: ...


def month_key(txn_date: date) -> str:
    """
    Month bucket for a transaction date.

    Example:
        >>> month_key(date(2025, 8, 10))
        "2025-08"
    """
    return f"{txn_date.year:04d}-{txn_date.month:02d}"


def to_reward_result(txn: Transaction) -> RewardResult:
    return RewardResult(
        amount=txn.amount,
        date=txn.date,
        product=txn.product,
        points=calculate_points(txn.amount),
    )


class RewardsAggregator:
    """
    Turns a customer's transactions into reward points.

    The aggregator holds no per-request state and never writes to its
    sources, so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        customers: CustomerSource,
        transactions: TransactionSource,
        messages: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.customers = customers
        self.transactions = transactions
        self.messages = {**DEFAULT_MESSAGES, **(messages or {})}

    def list_transactions(self, customer_id: int) -> List[RewardResult]:
        """All of the customer's transactions with points, in source order. Empty if none."""
        rows = self.transactions.find_transactions_by_customer_id(customer_id)
        logger.debug("Loaded %d transactions for customer %s", len(rows), customer_id)
        return [to_reward_result(txn) for txn in rows]

    def get_rewards(self, customer_id: int, start_date: date, end_date: date) -> RewardSummary:
        """
        Summarise points earned between start_date and end_date inclusive.

        Raises:
            CustomerNotFound: no customer with this id
            NoTransactionsFound: the customer has nothing in the range
        """
        customer = self.customers.find_customer_by_id(customer_id)
        if customer is None:
            raise CustomerNotFound(
                customer_id, f"{self.messages[CUSTOMER_NOT_FOUND]} {customer_id}"
            )

        rows = self.transactions.find_transactions_by_customer_id_and_date_range(
            customer_id, start_date, end_date
        )
        if not rows:
            raise NoTransactionsFound(customer_id, self.messages[NO_TRANSACTIONS_FOUND])

        results: List[RewardResult] = []
        monthly_points: Dict[str, int] = {}
        total_points = 0
        for txn in rows:
            result = to_reward_result(txn)
            results.append(result)
            key = month_key(txn.date)
            monthly_points[key] = monthly_points.get(key, 0) + result.points
            total_points += result.points

        logger.info(
            "Computed %d points over %d transactions for customer %s (%s to %s)",
            total_points,
            len(results),
            customer_id,
            start_date,
            end_date,
        )
        return RewardSummary(
            customer_id=customer.id,
            customer_name=customer.name,
            transactions=results,
            total_points=total_points,
            monthly_points=monthly_points,
            time_frame=TimeFrame(start_date=start_date.isoformat(), end_date=end_date.isoformat()),
        )
