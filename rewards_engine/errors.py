from typing import Any


class RewardsError(Exception):
    """Base class for reward lookups that cannot produce a result."""

    def __init__(self, customer_id: Any, message: str) -> None:
        super().__init__(message)
        self.customer_id = customer_id
        self.message = message


class CustomerNotFound(RewardsError):
    """No customer matches the requested id."""


class NoTransactionsFound(RewardsError):
    """The customer has no transactions inside the requested date range."""
