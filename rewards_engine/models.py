"""
Data models for the reward points engine.
All models are dataclasses for simplicity and type safety.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Transaction:
    """
    A purchase read from the transaction source.

    Fields:
    - id: storage identifier (opaque to the engine)
    - amount: signed currency amount
    - date: calendar date of the purchase
    - product: free-text product label
    - customer_id: id of the owning customer
    """
    id: Optional[int]
    amount: Decimal
    date: date
    product: str
    customer_id: int


@dataclass
class Customer:
    """
    A customer as seen by the engine.

    Fields:
    - id: customer identifier
    - name: display name
    - phone_no: contact number
    - transactions: the customer's transactions, in storage order
    """
    id: int
    name: str
    phone_no: Optional[str] = None
    transactions: List[Transaction] = field(default_factory=list)


@dataclass(frozen=True)
class RewardResult:
    """Points earned by a single transaction. Recomputed on every read."""
    amount: Decimal
    date: date
    product: str
    points: int

    def to_dict(self) -> dict:
        return {
            "amount": float(self.amount),
            "date": self.date.isoformat(),
            "product": self.product,
            "points": self.points,
        }


@dataclass(frozen=True)
class TimeFrame:
    """Requested inclusive date range, as ISO strings (YYYY-MM-DD)."""
    start_date: str
    end_date: str


@dataclass
class RewardSummary:
    """
    Rewards for one customer over a requested time frame.

    Fields:
    - customer_id / customer_name: who the summary is for
    - transactions: per-transaction results, in source order
    - total_points: sum of all transaction points
    - monthly_points: dict[YYYY-MM -> points earned that month]
    - time_frame: the requested range, not the span of the transactions
    """
    customer_id: int
    customer_name: str
    transactions: List[RewardResult]
    total_points: int
    monthly_points: Dict[str, int]
    time_frame: TimeFrame

    def to_dict(self) -> dict:
        return {
            "customerId": self.customer_id,
            "customerName": self.customer_name,
            "transactions": [result.to_dict() for result in self.transactions],
            "totalPoints": self.total_points,
            "monthlyPoints": dict(self.monthly_points),
            "timeFrame": {
                "startDate": self.time_frame.start_date,
                "endDate": self.time_frame.end_date,
            },
        }
