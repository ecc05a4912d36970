from .customer_service import CustomerService
from .errors import ServiceError
from .reward_service import RewardService

__all__ = [
    "CustomerService",
    "RewardService",
    "ServiceError",
]
