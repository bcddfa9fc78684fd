# Local application imports
from ....domain.repositories.user_store import UserStore
from ...dto.cart_dto import CartResponse, UpdateCartItemRequest
from ...exceptions import NotFoundError, PersistenceError
from ...mappers import to_cart_response
from ...services.user_locks import UserLockRegistry

DEFAULT_QUANTITY = 1


class UpdateCartItemUseCase:
    """Use case for setting the quantity of a cart line"""

    def __init__(self, user_store: UserStore, user_locks: UserLockRegistry) -> None:
        self.user_store = user_store
        self.user_locks = user_locks

    async def execute(
        self,
        user_id: str,
        product_id: str,
        request: UpdateCartItemRequest,
    ) -> CartResponse:
        """
        Set the quantity of a product already in the cart

        A quantity of 0 (or less) removes the line. A missing quantity means 1.

        Raises:
            NotFoundError: If the user does not exist or the product is not in the cart
            PersistenceError: If the cart could not be saved
        """
        quantity = request.quantity if request.quantity is not None else DEFAULT_QUANTITY
        quantity = max(0, quantity)

        async with self.user_locks.hold(user_id):
            cart = await self.user_store.get_cart(user_id)
            if cart is None:
                raise NotFoundError("User not found")

            if not cart.update_quantity(product_id, quantity):
                raise NotFoundError("Item not found in cart")

            if not await self.user_store.update_cart(user_id, cart):
                raise PersistenceError("Failed to update cart")

        return to_cart_response(cart)
