# External package imports
from fastapi import APIRouter, Depends

# Local application imports
from ...application.dto.checkout_dto import (
    CheckoutRequest,
    CheckoutResponse,
    PurchaseHistoryResponse,
)
from ...application.use_cases.checkout.checkout import CheckoutUseCase
from ...application.use_cases.checkout.get_purchase_history import GetPurchaseHistoryUseCase
from ...di.container import get_container
from ..errors import to_http_exception
from .dependencies import get_current_user_id


router = APIRouter(tags=["checkout"])


@router.post("/checkout", response_model=CheckoutResponse, response_model_exclude_none=True)
@router.post("/cart/checkout", response_model=CheckoutResponse, response_model_exclude_none=True)
async def checkout(
    request: CheckoutRequest,
    user_id: str = Depends(get_current_user_id),
) -> CheckoutResponse:
    """
    Buy everything in the cart

    Args:
        request: Shipping address and payment method
        user_id: Current authenticated user (from dependency)

    Returns:
        CheckoutResponse with the order summary
    """
    container = get_container()
    checkout_use_case = container.get(CheckoutUseCase)

    try:
        return await checkout_use_case.execute(user_id, request)
    except ValueError as exception:
        raise to_http_exception(exception)


@router.get("/purchase-history", response_model=PurchaseHistoryResponse)
async def get_purchase_history(user_id: str = Depends(get_current_user_id)) -> PurchaseHistoryResponse:
    """List the current user's past orders, oldest first"""
    container = get_container()
    history_use_case = container.get(GetPurchaseHistoryUseCase)

    try:
        return await history_use_case.execute(user_id)
    except ValueError as exception:
        raise to_http_exception(exception)
