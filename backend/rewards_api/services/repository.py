from datetime import date
from decimal import Decimal
from typing import List, Optional, cast

from sqlalchemy.orm import Session

from rewards_api.models.customer import Customer as CustomerRow
from rewards_api.models.transaction import CustomerTransaction
from rewards_engine.models import Customer, Transaction


def to_engine_transaction(row: CustomerTransaction) -> Transaction:
    return Transaction(
        id=cast(int, row.id),
        amount=Decimal(row.amount),
        date=cast(date, row.transaction_date),
        product=cast(str, row.product),
        customer_id=cast(int, row.customer_id),
    )


class SqlAlchemyRewardsRepository:
    """Customer and transaction lookups backed by a SQLAlchemy session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_customer_by_id(self, customer_id: int) -> Optional[Customer]:
        row = self.db.query(CustomerRow).filter(CustomerRow.id == customer_id).first()
        if row is None:
            return None
        # Transactions are fetched separately by the aggregator; only id and name are needed here
        return Customer(
            id=cast(int, row.id),
            name=cast(str, row.cust_name),
            phone_no=row.phone_no,
        )

    def find_transactions_by_customer_id(self, customer_id: int) -> List[Transaction]:
        rows = (
            self.db.query(CustomerTransaction)
            .filter(CustomerTransaction.customer_id == customer_id)
            .order_by(CustomerTransaction.id.asc())
            .all()
        )
        return [to_engine_transaction(row) for row in rows]

    def find_transactions_by_customer_id_and_date_range(
        self, customer_id: int, start_date: date, end_date: date
    ) -> List[Transaction]:
        rows = (
            self.db.query(CustomerTransaction)
            .filter(
                CustomerTransaction.customer_id == customer_id,
                CustomerTransaction.transaction_date.between(start_date, end_date),
            )
            .order_by(CustomerTransaction.id.asc())
            .all()
        )
        return [to_engine_transaction(row) for row in rows]
