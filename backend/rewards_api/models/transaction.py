from sqlalchemy import Column, Integer, Numeric, String, Date, ForeignKey
from rewards_api.db.db import Base
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from sqlalchemy.orm import relationship
from datetime import date
from decimal import Decimal


class CustomerTransaction(Base):
    __tablename__ = "transactions"
    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id", ondelete="CASCADE"), nullable=False, index=True)
    amount = Column(Numeric(10, 2), nullable=False)
    transaction_date = Column(Date, default=date.today, nullable=False, index=True)
    product = Column(String, nullable=False)

    customer = relationship("Customer", back_populates="transactions")


# Create Pydantic models for Transaction
class TransactionCreate(BaseModel):
    """Transaction supplied when registering a customer"""
    model_config = ConfigDict(populate_by_name=True)
    amount: Decimal = Field(max_digits=10, decimal_places=2)  # must fit the Numeric(10, 2) column
    transaction_date: date | None = Field(default=None, alias="date")  # YYYY-MM-DD, defaults to today if omitted
    product: str

    @field_validator("product")
    @classmethod
    def product_required(cls, v):
        if not v or len(v.strip()) == 0:
            raise ValueError("product is required")
        return v

    @field_validator("transaction_date", mode="before")
    @classmethod
    def set_transaction_date(cls, v):
        return date.today() if v is None else v

class TransactionResponse(BaseModel):
    """Stored transaction as returned from customer endpoints"""
    model_config = ConfigDict(populate_by_name=True)
    id: int
    amount: float
    transaction_date: date = Field(alias="date")
    product: str

class RewardTransactionResponse(BaseModel):
    """A transaction with the points it earned"""
    model_config = ConfigDict(populate_by_name=True)
    amount: float
    transaction_date: date = Field(alias="date")
    product: str
    points: int

class TransactionListResponse(BaseModel):
    transactions: list[RewardTransactionResponse]

class TimeFrameResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
    start_date: str
    end_date: str

class RewardSummaryResponse(BaseModel):
    """Reward totals for a customer over the requested time frame"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
    customer_id: int
    customer_name: str
    transactions: list[RewardTransactionResponse]
    total_points: int
    monthly_points: dict[str, int]
    time_frame: TimeFrameResponse
