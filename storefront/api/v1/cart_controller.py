# External package imports
from fastapi import APIRouter, Depends

# Local application imports
from ...application.dto.cart_dto import AddToCartRequest, CartResponse, UpdateCartItemRequest
from ...application.use_cases.cart.get_cart import GetCartUseCase
from ...application.use_cases.cart.add_to_cart import AddToCartUseCase
from ...application.use_cases.cart.update_cart_item import UpdateCartItemUseCase
from ...application.use_cases.cart.remove_from_cart import RemoveFromCartUseCase
from ...application.use_cases.cart.clear_cart import ClearCartUseCase
from ...di.container import get_container
from ..errors import to_http_exception
from .dependencies import get_current_user_id


router = APIRouter(prefix="/cart", tags=["cart"])


@router.get("", response_model=CartResponse)
async def get_cart(user_id: str = Depends(get_current_user_id)) -> CartResponse:
    """Get the current user's cart and total"""
    container = get_container()
    get_cart_use_case = container.get(GetCartUseCase)

    try:
        return await get_cart_use_case.execute(user_id)
    except ValueError as exception:
        raise to_http_exception(exception)


@router.post("", response_model=CartResponse)
async def add_to_cart(
    request: AddToCartRequest,
    user_id: str = Depends(get_current_user_id),
) -> CartResponse:
    """
    Add a catalog product to the cart

    Args:
        request: Product ID and quantity
        user_id: Current authenticated user (from dependency)
    """
    container = get_container()
    add_to_cart_use_case = container.get(AddToCartUseCase)

    try:
        return await add_to_cart_use_case.execute(user_id, request)
    except ValueError as exception:
        raise to_http_exception(exception)


@router.post("/clear", response_model=CartResponse)
async def clear_cart(user_id: str = Depends(get_current_user_id)) -> CartResponse:
    """Remove every line from the cart"""
    container = get_container()
    clear_cart_use_case = container.get(ClearCartUseCase)

    try:
        return await clear_cart_use_case.execute(user_id)
    except ValueError as exception:
        raise to_http_exception(exception)


@router.patch("/{product_id}", response_model=CartResponse)
async def update_cart_item(
    product_id: str,
    request: UpdateCartItemRequest,
    user_id: str = Depends(get_current_user_id),
) -> CartResponse:
    """
    Set the quantity of a cart line; 0 removes it

    Args:
        product_id: Product already in the cart
        request: New quantity
        user_id: Current authenticated user (from dependency)
    """
    container = get_container()
    update_use_case = container.get(UpdateCartItemUseCase)

    try:
        return await update_use_case.execute(user_id, product_id, request)
    except ValueError as exception:
        raise to_http_exception(exception)


@router.delete("/{product_id}", response_model=CartResponse)
async def remove_from_cart(
    product_id: str,
    user_id: str = Depends(get_current_user_id),
) -> CartResponse:
    """Remove a product line from the cart"""
    container = get_container()
    remove_use_case = container.get(RemoveFromCartUseCase)

    try:
        return await remove_use_case.execute(user_id, product_id)
    except ValueError as exception:
        raise to_http_exception(exception)
