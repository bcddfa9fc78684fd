from typing import TYPE_CHECKING
from ...domain.repositories.user_store import UserStore
from ...infrastructure.catalog.catalog_store import CatalogStore
from ...application.services.user_locks import UserLockRegistry
from ...application.use_cases.cart.get_cart import GetCartUseCase
from ...application.use_cases.cart.add_to_cart import AddToCartUseCase
from ...application.use_cases.cart.update_cart_item import UpdateCartItemUseCase
from ...application.use_cases.cart.remove_from_cart import RemoveFromCartUseCase
from ...application.use_cases.cart.clear_cart import ClearCartUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CartProvider:
    """Cart use case provider - every mutating use case shares the user lock registry"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            GetCartUseCase,
            lambda: GetCartUseCase(
                user_store=container.get(UserStore)
            )
        )

        container.register_factory(
            AddToCartUseCase,
            lambda: AddToCartUseCase(
                user_store=container.get(UserStore),
                catalog_store=container.get(CatalogStore),
                user_locks=container.get(UserLockRegistry),
            )
        )

        container.register_factory(
            UpdateCartItemUseCase,
            lambda: UpdateCartItemUseCase(
                user_store=container.get(UserStore),
                user_locks=container.get(UserLockRegistry),
            )
        )

        container.register_factory(
            RemoveFromCartUseCase,
            lambda: RemoveFromCartUseCase(
                user_store=container.get(UserStore),
                user_locks=container.get(UserLockRegistry),
            )
        )

        container.register_factory(
            ClearCartUseCase,
            lambda: ClearCartUseCase(
                user_store=container.get(UserStore),
                user_locks=container.get(UserLockRegistry),
            )
        )
