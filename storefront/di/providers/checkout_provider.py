from typing import TYPE_CHECKING
from ...domain.repositories.user_store import UserStore
from ...application.services.user_locks import UserLockRegistry
from ...application.use_cases.checkout.checkout import CheckoutUseCase
from ...application.use_cases.checkout.get_purchase_history import GetPurchaseHistoryUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CheckoutProvider:
    """Checkout and purchase history use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            CheckoutUseCase,
            lambda: CheckoutUseCase(
                user_store=container.get(UserStore),
                user_locks=container.get(UserLockRegistry),
            )
        )

        container.register_factory(
            GetPurchaseHistoryUseCase,
            lambda: GetPurchaseHistoryUseCase(
                user_store=container.get(UserStore),
                order_history_limit=container.get("settings").order_history_limit,
            )
        )
