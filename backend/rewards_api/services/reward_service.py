import logging
from datetime import date
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy.orm import Session

from rewards_api.config import MessageConfig
from rewards_api.services.errors import ServiceError
from rewards_api.services.repository import SqlAlchemyRewardsRepository
from rewards_engine import CustomerNotFound, NoTransactionsFound, RewardsAggregator

logger = logging.getLogger(__name__)


class RewardService:
    def __init__(self, db: Session, messages: Optional[Mapping[str, str]] = None) -> None:
        self.db = db
        repository = SqlAlchemyRewardsRepository(db)
        self.aggregator = RewardsAggregator(
            customers=repository,
            transactions=repository,
            messages=messages if messages is not None else MessageConfig.as_mapping(),
        )

    def get_customer_transactions(self, customer_id: int) -> List[Dict[str, Any]]:
        return [result.to_dict() for result in self.aggregator.list_transactions(customer_id)]

    def get_rewards_for_customer(self, customer_id: int, start_date: date, end_date: date) -> Dict[str, Any]:
        if start_date > end_date:
            raise ServiceError(
                400,
                "VALIDATION_ERROR",
                "startDate must be on or before endDate.",
                {"start_date": start_date.isoformat(), "end_date": end_date.isoformat()},
            )

        try:
            summary = self.aggregator.get_rewards(customer_id, start_date, end_date)
        except CustomerNotFound as exc:
            logger.warning("Rewards requested for unknown customer %s", customer_id)
            raise ServiceError(404, "CUSTOMER_NOT_FOUND", exc.message, {"customer_id": customer_id}) from exc
        except NoTransactionsFound as exc:
            logger.warning(
                "No transactions for customer %s between %s and %s", customer_id, start_date, end_date
            )
            raise ServiceError(
                404,
                "NO_TRANSACTIONS_FOUND",
                exc.message,
                {
                    "customer_id": customer_id,
                    "start_date": start_date.isoformat(),
                    "end_date": end_date.isoformat(),
                },
            ) from exc
        return summary.to_dict()
