# Local application imports
from ....domain.repositories.user_store import UserStore
from ...dto.cart_dto import CartResponse
from ...exceptions import NotFoundError, PersistenceError
from ...mappers import to_cart_response
from ...services.user_locks import UserLockRegistry


class RemoveFromCartUseCase:
    """Use case for removing a product line from the cart"""

    def __init__(self, user_store: UserStore, user_locks: UserLockRegistry) -> None:
        self.user_store = user_store
        self.user_locks = user_locks

    async def execute(self, user_id: str, product_id: str) -> CartResponse:
        async with self.user_locks.hold(user_id):
            cart = await self.user_store.get_cart(user_id)
            if cart is None:
                raise NotFoundError("User not found")

            if not cart.remove_item(product_id):
                raise NotFoundError("Item not found in cart")

            if not await self.user_store.update_cart(user_id, cart):
                raise PersistenceError("Failed to update cart")

        return to_cart_response(cart)
