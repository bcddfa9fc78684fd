from .get_cart import GetCartUseCase
from .add_to_cart import AddToCartUseCase
from .update_cart_item import UpdateCartItemUseCase
from .remove_from_cart import RemoveFromCartUseCase
from .clear_cart import ClearCartUseCase

__all__ = [
    "GetCartUseCase",
    "AddToCartUseCase",
    "UpdateCartItemUseCase",
    "RemoveFromCartUseCase",
    "ClearCartUseCase",
]
