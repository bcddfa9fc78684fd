from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.user_store import UserStore
from ...infrastructure.catalog.catalog_store import CatalogStore
from ...application.services.user_locks import UserLockRegistry

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class StoreProvider:
    """Storage provider - registers the selected user store and the shared stores"""

    @staticmethod
    def register(container: "BaseContainer", user_store: UserStore) -> None:
        """
        Register the user store chosen at startup, the catalog and the user locks.
        The user store is selected once per process and never swapped.
        """
        container.register_singleton("settings", get_settings())
        container.register_singleton(UserStore, user_store)
        container.register_singleton(CatalogStore, CatalogStore())
        container.register_singleton(UserLockRegistry, UserLockRegistry())
