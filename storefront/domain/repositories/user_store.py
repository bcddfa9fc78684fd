from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.cart import Cart
from ..models.purchase_history import Order, PurchaseRecord
from ..models.user import User


class UserStore(ABC):
    """
    Persistence contract for user aggregates, orders and tokens.

    Implementations never raise across this boundary: failures are reported
    as False, None or an empty list and logged by the implementation.
    """

    name: str = "abstract"

    @abstractmethod
    async def create_user(self, username: str, email: str, password: str, user_id: str) -> bool:
        """Create a user; fails if the username or (case-insensitive) email is taken"""
        pass

    @abstractmethod
    async def find_user_by_username(self, username: str) -> Optional[User]:
        """Find user by exact username"""
        pass

    @abstractmethod
    async def find_user_by_email(self, email: str) -> Optional[User]:
        """Find user by email, case-insensitive"""
        pass

    @abstractmethod
    async def find_user_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def email_exists(self, email: str) -> bool:
        """Case-insensitive existence check without loading the aggregate"""
        pass

    @abstractmethod
    async def update_user(self, user_id: str, user: User) -> bool:
        """Replace account fields, cart and history of an existing user"""
        pass

    async def get_cart(self, user_id: str) -> Optional[Cart]:
        user = await self.find_user_by_id(user_id)
        if user is None:
            return None
        return user.cart

    async def update_cart(self, user_id: str, cart: Cart) -> bool:
        user = await self.find_user_by_id(user_id)
        if user is None:
            return False

        user.cart.clear()
        for item in cart.get_items():
            user.cart.add_item(item)
        return await self.update_user(user_id, user)

    async def clear_cart(self, user_id: str) -> bool:
        user = await self.find_user_by_id(user_id)
        if user is None:
            return False

        user.cart.clear()
        return await self.update_user(user_id, user)

    @abstractmethod
    async def add_purchase(
        self,
        user_id: str,
        records: List[PurchaseRecord],
        order_id: str,
        total: float,
    ) -> bool:
        """
        Append records to the user's history and write an order record.

        The two writes are not atomic. A failure between them leaves one of
        them applied; implementations log it and return False.
        """
        pass

    @abstractmethod
    async def get_orders(self, user_id: str, limit: int = 100) -> List[Order]:
        """List a user's orders, oldest first"""
        pass

    @abstractmethod
    async def save_token(self, token: str, user_id: str) -> bool:
        """Map a token to a user, replacing any prior mapping of the same token"""
        pass

    @abstractmethod
    async def get_user_id_from_token(self, token: str) -> Optional[str]:
        """Resolve a token to its user ID"""
        pass
