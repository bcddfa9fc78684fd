from .store_provider import StoreProvider
from .auth_provider import AuthProvider
from .catalog_provider import CatalogProvider
from .cart_provider import CartProvider
from .checkout_provider import CheckoutProvider
from .profile_provider import ProfileProvider


__all__ = [
    "StoreProvider",
    "AuthProvider",
    "CatalogProvider",
    "CartProvider",
    "CheckoutProvider",
    "ProfileProvider",
]
