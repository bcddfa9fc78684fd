from .health_controller import router as health_router
from .auth_controller import router as auth_router
from .catalog_controller import router as catalog_router
from .cart_controller import router as cart_router
from .checkout_controller import router as checkout_router
from .profile_controller import router as profile_router


__all__ = [
    "health_router",
    "auth_router",
    "catalog_router",
    "cart_router",
    "checkout_router",
    "profile_router",
]
