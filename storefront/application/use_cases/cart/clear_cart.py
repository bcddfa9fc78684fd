# Local application imports
from ....domain.models.cart import Cart
from ....domain.repositories.user_store import UserStore
from ...dto.cart_dto import CartResponse
from ...exceptions import NotFoundError
from ...mappers import to_cart_response
from ...services.user_locks import UserLockRegistry


class ClearCartUseCase:
    """Use case for emptying the cart"""

    def __init__(self, user_store: UserStore, user_locks: UserLockRegistry) -> None:
        self.user_store = user_store
        self.user_locks = user_locks

    async def execute(self, user_id: str) -> CartResponse:
        async with self.user_locks.hold(user_id):
            if not await self.user_store.clear_cart(user_id):
                raise NotFoundError("User not found")
        return to_cart_response(Cart())
