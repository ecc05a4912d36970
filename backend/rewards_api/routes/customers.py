from datetime import date
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Query, status

from rewards_api.dependencies.services import get_customer_service, get_reward_service
from rewards_api.models.customer import CustomerCreate, CustomerResponse
from rewards_api.models.transaction import RewardSummaryResponse, TransactionListResponse
from rewards_api.services.customer_service import CustomerService
from rewards_api.services.errors import ServiceError
from rewards_api.services.reward_service import RewardService

router = APIRouter(
    prefix="/api/v1/customers",
    tags=["customers"]
)


def _http_error(exc: ServiceError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.to_payload())


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CustomerResponse)
def create_customer(
    payload: CustomerCreate,
    service: CustomerService = Depends(get_customer_service),
) -> Dict[str, Any]:
    """
    Register a customer, optionally with initial transactions.

    Request body:
    {
        "custName": "John Doe",
        "phoneNo": "1234567890",
        "transactions": [
            {"amount": 120.0, "date": "2025-08-10", "product": "Product B"}
        ]
    }
    """
    return service.create_customer(payload)


@router.get("/{customer_id}", response_model=CustomerResponse)
def get_customer(
    customer_id: int,
    service: CustomerService = Depends(get_customer_service),
) -> Dict[str, Any]:
    try:
        return service.get_customer(customer_id)
    except ServiceError as exc:
        raise _http_error(exc)


@router.get("/{customer_id}/transactions", response_model=TransactionListResponse)
def get_customer_transactions(
    customer_id: int,
    service: RewardService = Depends(get_reward_service),
) -> Dict[str, Any]:
    """
    List every transaction for the customer with the points it earned.

    Returns an empty list when the customer has no transactions.
    """
    return {"transactions": service.get_customer_transactions(customer_id)}


@router.get("/{customer_id}/rewards", response_model=RewardSummaryResponse)
def get_rewards_for_customer(
    customer_id: int,
    start_date: date = Query(..., alias="startDate"),
    end_date: date = Query(..., alias="endDate"),
    service: RewardService = Depends(get_reward_service),
) -> Dict[str, Any]:
    """
    Reward points for the customer between startDate and endDate (inclusive).

    Query Parameters:
    - startDate: YYYY-MM-DD
    - endDate: YYYY-MM-DD

    Returns:
    - transactions with points, totalPoints, monthlyPoints keyed by YYYY-MM,
      and the requested timeFrame

    Errors:
    - 404 CUSTOMER_NOT_FOUND / NO_TRANSACTIONS_FOUND
    - 400 VALIDATION_ERROR when startDate is after endDate
    """
    try:
        return service.get_rewards_for_customer(customer_id, start_date, end_date)
    except ServiceError as exc:
        raise _http_error(exc)
