from .user import User
from .cart import Cart, CartItem
from .purchase_history import PurchaseHistory, PurchaseRecord, Order
from .catalog_item import CatalogItem

__all__ = [
    "User",
    "Cart",
    "CartItem",
    "PurchaseHistory",
    "PurchaseRecord",
    "Order",
    "CatalogItem",
]
