from .transaction import (
    CustomerTransaction,
    TransactionCreate,
    TransactionResponse,
    RewardTransactionResponse,
    TransactionListResponse,
    TimeFrameResponse,
    RewardSummaryResponse,
)
from .customer import Customer, CustomerCreate, CustomerResponse

__all__ = [
    "Customer",
    "CustomerCreate",
    "CustomerResponse",
    "CustomerTransaction",
    "TransactionCreate",
    "TransactionResponse",
    "RewardTransactionResponse",
    "TransactionListResponse",
    "TimeFrameResponse",
    "RewardSummaryResponse",
]
