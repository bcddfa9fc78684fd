# Standard library imports
import logging
from typing import List

# Local application imports
from ....domain.models.purchase_history import Order
from ....domain.models.user import User
from ....domain.repositories.user_store import UserStore
from ....utils.datetime_utils import to_iso
from ...dto.checkout_dto import PurchaseHistoryEntry, PurchaseHistoryResponse
from ...exceptions import NotFoundError
from ...mappers import to_order_items

logger = logging.getLogger(__name__)

LEGACY_ORDER_PREFIX = "HISTORY_"


class GetPurchaseHistoryUseCase:
    """Use case for listing the current user's past orders"""

    def __init__(self, user_store: UserStore, order_history_limit: int = 100) -> None:
        self.user_store = user_store
        self.order_history_limit = order_history_limit

    @staticmethod
    def _order_to_entry(order: Order) -> PurchaseHistoryEntry:
        return PurchaseHistoryEntry(
            order_id=order.order_id,
            purchased_at=to_iso(order.timestamp),
            items=to_order_items(order.items),
            total=order.total,
        )

    @staticmethod
    def _history_to_entry(user: User) -> PurchaseHistoryEntry:
        # Purchases recorded without order documents are shown as one order
        purchases = user.history.get_purchases()
        return PurchaseHistoryEntry(
            order_id=f"{LEGACY_ORDER_PREFIX}{user.id}",
            purchased_at=None,
            items=to_order_items(purchases),
            total=user.history.get_total_spent(),
        )

    async def execute(self, user_id: str) -> PurchaseHistoryResponse:
        """
        Args:
            user_id: Current user

        Returns:
            PurchaseHistoryResponse with orders oldest first

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_store.find_user_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")

        orders = await self.user_store.get_orders(user_id, limit=self.order_history_limit)
        history: List[PurchaseHistoryEntry] = [self._order_to_entry(order) for order in orders]

        if not history and user.history.get_purchases():
            logger.info(f"User {user_id} has purchase records but no orders, returning them as one entry")
            history.append(self._history_to_entry(user))

        return PurchaseHistoryResponse(history=history)
