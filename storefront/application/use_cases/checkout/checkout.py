# Standard library imports
import logging

# Local application imports
from ....core.security import extract_card_last4, generate_order_id
from ....domain.models.purchase_history import PurchaseRecord
from ....domain.repositories.user_store import UserStore
from ....utils.datetime_utils import to_iso, utc_now
from ...dto.checkout_dto import CheckoutRequest, CheckoutResponse, OrderResponse, PaymentSummary
from ...exceptions import NotFoundError, PersistenceError, ValidationError
from ...mappers import to_order_items
from ...services.user_locks import UserLockRegistry

logger = logging.getLogger(__name__)


class CheckoutUseCase:
    """Use case for turning the cart into an order and emptying it"""

    def __init__(self, user_store: UserStore, user_locks: UserLockRegistry) -> None:
        self.user_store = user_store
        self.user_locks = user_locks

    async def execute(self, user_id: str, request: CheckoutRequest) -> CheckoutResponse:
        """
        Check out the current cart

        The purchase is recorded first, then the cart is cleared. A failure to
        clear the cart after a recorded purchase is logged and not reported to
        the caller.

        Args:
            user_id: Current user
            request: Shipping address and payment method

        Returns:
            CheckoutResponse with the order summary; only the last 4 card
            digits are included

        Raises:
            NotFoundError: If the user does not exist
            ValidationError: If the cart is empty or checkout data is missing
            PersistenceError: If the purchase could not be saved
        """
        async with self.user_locks.hold(user_id):
            user = await self.user_store.find_user_by_id(user_id)
            if user is None:
                raise NotFoundError("User not found")

            if user.cart.is_empty():
                raise ValidationError("Cart is empty")

            if request.shipping_address is None or request.payment_method is None:
                raise ValidationError("Shipping address and payment method are required")

            records = [
                PurchaseRecord(
                    id=item.product_id,
                    name=item.name,
                    price=item.price,
                    quantity=item.quantity,
                )
                for item in user.cart.get_items()
            ]
            total = user.cart.get_total()
            order_id = generate_order_id()

            if not await self.user_store.add_purchase(user_id, records, order_id, total):
                raise PersistenceError("Failed to save purchase")

            if not await self.user_store.clear_cart(user_id):
                logger.warning(f"Order {order_id} saved but cart of user {user_id} was not cleared")

        payment = request.payment_method
        logger.info(f"User {user_id} checked out order {order_id} ({len(records)} items, total {total:.2f})")
        return CheckoutResponse(
            message="Checkout successful",
            order=OrderResponse(
                order_id=order_id,
                purchased_at=to_iso(utc_now()),
                total=total,
                items=to_order_items(records),
                shipping_address=request.shipping_address,
                payment_summary=PaymentSummary(
                    last4=extract_card_last4(payment.card_number),
                    cardholder_name=payment.cardholder_name,
                ),
            ),
        )
