# Standard library imports
from typing import Optional

# Local application imports
from ..domain.repositories.user_store import UserStore
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    CartProvider,
    CatalogProvider,
    CheckoutProvider,
    ProfileProvider,
    StoreProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Stores (StoreProvider) - the user store selected at startup
    2. Use cases (Auth, Catalog, Cart, Checkout, Profile) - depend on stores
    """

    def __init__(self, user_store: UserStore) -> None:
        super().__init__()
        self.setup(user_store)

    def setup(self, user_store: UserStore) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: stores → use cases
        """
        # Step 1: Register stores (foundation)
        StoreProvider.register(self, user_store)

        # Step 2: Register use cases (depend on stores)
        AuthProvider.register(self)
        CatalogProvider.register(self)
        CartProvider.register(self)
        CheckoutProvider.register(self)
        ProfileProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def init_container(user_store: UserStore) -> DIContainer:
    """
    Build the global DI container around the selected user store

    Args:
        user_store: Store returned by backend selection

    Returns:
        The new DIContainer
    """
    global _container
    _container = DIContainer(user_store)
    return _container


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered

    Raises:
        RuntimeError: If called before init_container()
    """
    if _container is None:
        raise RuntimeError("DI container is not initialized; the application has not started")
    return _container


def reset_container() -> None:
    global _container
    _container = None
