from sqlalchemy import Column, Integer, String, DateTime
from rewards_api.db.db import Base
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from sqlalchemy.orm import relationship
from datetime import datetime, UTC

from rewards_api.models.transaction import TransactionCreate, TransactionResponse


def _utc_now_naive() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)

class Customer(Base):
    __tablename__ = "customers"
    id = Column(Integer, primary_key=True, index=True)
    cust_name = Column(String, nullable=False)
    phone_no = Column(String, nullable=True)
    password_hash = Column(String, nullable=True)
    created_date = Column(DateTime, default=_utc_now_naive, nullable=False)

    # Transactions are read back by customer_id; the relationship is only used for cascade and creation
    transactions = relationship(
        "CustomerTransaction",
        back_populates="customer",
        cascade="all, delete-orphan",
        order_by="CustomerTransaction.id",
    )


# Pydantic Models for Request/Response Validation
class CustomerBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
    cust_name: str
    phone_no: str | None = None

    @field_validator("cust_name")
    @classmethod
    def name_required(cls, v):
        if not v or len(v.strip()) == 0:
            raise ValueError("custName is required")
        return v.strip()

# password only on the create model so it is never echoed back
class CustomerCreate(CustomerBase):
    password: str | None = None
    transactions: list[TransactionCreate] = Field(default_factory=list)

class CustomerResponse(CustomerBase):
    id: int
    transactions: list[TransactionResponse] = Field(default_factory=list)
