"""Constants for domain document field names"""

from .user_fields import UserFields, CartItemFields, PurchaseRecordFields
from .order_fields import OrderFields, TokenFields

__all__ = [
    "UserFields",
    "CartItemFields",
    "PurchaseRecordFields",
    "OrderFields",
    "TokenFields",
]
