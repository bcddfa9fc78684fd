from .common_dto import ApiModel, MessageResponse, HealthResponse
from .user_dto import ProfileInfo, UserResponse, CurrentUserResponse
from .auth_dto import SignupRequest, LoginRequest, AuthResponse
from .catalog_dto import CatalogItemResponse, CatalogResponse, SearchResponse
from .cart_dto import AddToCartRequest, UpdateCartItemRequest, CartItemResponse, CartResponse
from .checkout_dto import (
    PaymentMethodRequest,
    CheckoutRequest,
    PaymentSummary,
    OrderItemResponse,
    OrderResponse,
    CheckoutResponse,
    PurchaseHistoryEntry,
    PurchaseHistoryResponse,
)
from .profile_dto import UpdateProfileRequest

__all__ = [
    "ApiModel",
    "MessageResponse",
    "HealthResponse",
    "ProfileInfo",
    "UserResponse",
    "CurrentUserResponse",
    "SignupRequest",
    "LoginRequest",
    "AuthResponse",
    "CatalogItemResponse",
    "CatalogResponse",
    "SearchResponse",
    "AddToCartRequest",
    "UpdateCartItemRequest",
    "CartItemResponse",
    "CartResponse",
    "PaymentMethodRequest",
    "CheckoutRequest",
    "PaymentSummary",
    "OrderItemResponse",
    "OrderResponse",
    "CheckoutResponse",
    "PurchaseHistoryEntry",
    "PurchaseHistoryResponse",
    "UpdateProfileRequest",
]
