# Standard library imports
from typing import Iterable, List

# Local application imports
from ..domain.models.cart import Cart
from ..domain.models.catalog_item import CatalogItem
from ..domain.models.purchase_history import PurchaseRecord
from ..domain.models.user import User
from .dto.cart_dto import CartItemResponse, CartResponse
from .dto.catalog_dto import CatalogItemResponse
from .dto.checkout_dto import OrderItemResponse
from .dto.user_dto import ProfileInfo, UserResponse


def to_user_response(user: User) -> UserResponse:
    """Build the public view of a user; the profile block only appears when set"""
    profile = None
    if user.full_name or user.bio:
        profile = ProfileInfo(
            full_name=user.full_name or None,
            bio=user.bio or None,
        )
    return UserResponse(
        id=user.id,
        username=user.username,
        email=user.email,
        profile=profile,
    )


def to_cart_response(cart: Cart) -> CartResponse:
    return CartResponse(
        cart=[
            CartItemResponse(
                product_id=item.product_id,
                name=item.name,
                price=item.price,
                quantity=item.quantity,
            )
            for item in cart.get_items()
        ],
        total=cart.get_total(),
    )


def to_catalog_items(items: Iterable[CatalogItem]) -> List[CatalogItemResponse]:
    return [
        CatalogItemResponse(
            id=item.id,
            name=item.name,
            price=item.price,
            description=item.description,
        )
        for item in items
    ]


def to_order_items(records: Iterable[PurchaseRecord]) -> List[OrderItemResponse]:
    return [
        OrderItemResponse(
            product_id=record.id,
            name=record.name,
            price=record.price,
            quantity=record.quantity,
            subtotal=record.subtotal,
        )
        for record in records
    ]
