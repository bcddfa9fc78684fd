# Local application imports
from ....domain.repositories.user_store import UserStore
from ...dto.cart_dto import CartResponse
from ...exceptions import NotFoundError
from ...mappers import to_cart_response


class GetCartUseCase:
    """Use case for reading the current user's cart"""

    def __init__(self, user_store: UserStore) -> None:
        self.user_store = user_store

    async def execute(self, user_id: str) -> CartResponse:
        cart = await self.user_store.get_cart(user_id)
        if cart is None:
            raise NotFoundError("User not found")
        return to_cart_response(cart)
