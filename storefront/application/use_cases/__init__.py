from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    AuthenticateTokenUseCase,
    GetCurrentUserUseCase,
)
from .catalog import ListCatalogUseCase, SearchCatalogUseCase
from .cart import (
    GetCartUseCase,
    AddToCartUseCase,
    UpdateCartItemUseCase,
    RemoveFromCartUseCase,
    ClearCartUseCase,
)
from .checkout import CheckoutUseCase, GetPurchaseHistoryUseCase
from .profile import UpdateProfileUseCase

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "AuthenticateTokenUseCase",
    "GetCurrentUserUseCase",
    "ListCatalogUseCase",
    "SearchCatalogUseCase",
    "GetCartUseCase",
    "AddToCartUseCase",
    "UpdateCartItemUseCase",
    "RemoveFromCartUseCase",
    "ClearCartUseCase",
    "CheckoutUseCase",
    "GetPurchaseHistoryUseCase",
    "UpdateProfileUseCase",
]
