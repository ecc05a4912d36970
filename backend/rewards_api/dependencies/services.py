from fastapi import Depends
from sqlalchemy.orm import Session

from rewards_api.dependencies.db import get_db
from rewards_api.services.customer_service import CustomerService
from rewards_api.services.reward_service import RewardService


def get_customer_service(db: Session = Depends(get_db)) -> CustomerService:
    return CustomerService(db)

def get_reward_service(db: Session = Depends(get_db)) -> RewardService:
    # Creates a RewardService backed by the injected database session.
    return RewardService(db)
