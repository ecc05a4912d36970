import logging
from typing import Any, Dict, Optional, cast

from passlib.context import CryptContext
from sqlalchemy.orm import Session

from rewards_api.config import MessageConfig
from rewards_api.models.customer import Customer, CustomerCreate
from rewards_api.models.transaction import CustomerTransaction
from rewards_api.services.errors import ServiceError

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


class CustomerService:
    def __init__(self, db: Session) -> None:
        self.db = db

    def _customer_to_dict(self, customer: Customer) -> Dict[str, Any]:
        return {
            "id": customer.id,
            "custName": customer.cust_name,
            "phoneNo": customer.phone_no,
            "transactions": [
                {
                    "id": txn.id,
                    "amount": float(txn.amount),
                    "date": txn.transaction_date.isoformat(),
                    "product": txn.product,
                }
                for txn in customer.transactions
            ],
        }

    def create_customer(self, payload: CustomerCreate) -> Dict[str, Any]:
        """Persist a customer together with any initial transactions."""
        # Normalize empty strings to None for optional fields
        phone_no = payload.phone_no.strip() if payload.phone_no and payload.phone_no.strip() else None
        password_hash: Optional[str] = hash_password(payload.password) if payload.password else None

        customer = Customer(
            cust_name=payload.cust_name,
            phone_no=phone_no,
            password_hash=password_hash,
        )
        customer.transactions = [
            CustomerTransaction(
                amount=txn.amount,
                transaction_date=txn.transaction_date,
                product=txn.product.strip(),
            )
            for txn in payload.transactions
        ]

        self.db.add(customer)
        self.db.commit()
        self.db.refresh(customer)
        logger.info(
            "Created customer %s with %d transactions", customer.id, len(customer.transactions)
        )
        return self._customer_to_dict(customer)

    def get_customer(self, customer_id: int) -> Dict[str, Any]:
        customer = self.db.query(Customer).filter(Customer.id == customer_id).first()
        if not customer:
            raise ServiceError(
                404,
                "CUSTOMER_NOT_FOUND",
                f"{MessageConfig.CUSTOMER_NOT_FOUND} {customer_id}",
                {"customer_id": customer_id},
            )
        return self._customer_to_dict(cast(Customer, customer))
