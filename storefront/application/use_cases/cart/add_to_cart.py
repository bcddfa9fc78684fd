# Standard library imports
import logging

# Local application imports
from ....domain.models.cart import CartItem
from ....domain.repositories.user_store import UserStore
from ....infrastructure.catalog.catalog_store import CatalogStore
from ...dto.cart_dto import AddToCartRequest, CartResponse
from ...exceptions import NotFoundError, PersistenceError, ValidationError
from ...mappers import to_cart_response
from ...services.user_locks import UserLockRegistry

logger = logging.getLogger(__name__)

MIN_ADD_QUANTITY = 1
MAX_ADD_QUANTITY = 99


class AddToCartUseCase:
    """Use case for adding a catalog product to the user's cart"""

    def __init__(
        self,
        user_store: UserStore,
        catalog_store: CatalogStore,
        user_locks: UserLockRegistry,
    ) -> None:
        self.user_store = user_store
        self.catalog_store = catalog_store
        self.user_locks = user_locks

    async def execute(self, user_id: str, request: AddToCartRequest) -> CartResponse:
        """
        Add a product; adding a product already in the cart raises its quantity

        Args:
            user_id: Current user
            request: Product ID and quantity (clamped to 1..99, default 1)

        Returns:
            CartResponse with the updated cart

        Raises:
            ValidationError: If no product ID was sent
            NotFoundError: If the product or the user does not exist
            PersistenceError: If the cart could not be saved
        """
        product_id = (request.product_id or "").strip()
        if not product_id:
            raise ValidationError("Product ID is required")

        product = self.catalog_store.get_by_id(product_id)
        if product is None:
            raise NotFoundError("Product not found")

        quantity = request.quantity if request.quantity is not None else MIN_ADD_QUANTITY
        quantity = max(MIN_ADD_QUANTITY, min(MAX_ADD_QUANTITY, quantity))

        async with self.user_locks.hold(user_id):
            cart = await self.user_store.get_cart(user_id)
            if cart is None:
                raise NotFoundError("User not found")

            cart.add_item(
                CartItem(
                    product_id=product.id,
                    name=product.name,
                    price=product.price,
                    quantity=quantity,
                )
            )
            if not await self.user_store.update_cart(user_id, cart):
                raise PersistenceError("Failed to update cart")

        logger.debug(f"Added {quantity} x {product.id} to cart of user {user_id}")
        return to_cart_response(cart)
