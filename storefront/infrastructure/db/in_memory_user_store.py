# Standard library imports
import asyncio
import copy
import logging
from typing import Dict, List, Optional

# Local application imports
from ...domain.models.purchase_history import Order, PurchaseRecord
from ...domain.models.user import User
from ...domain.repositories.user_store import UserStore
from ...domain.validators.credential_validator import normalize_email
from ...utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)


class InMemoryUserStore(UserStore):
    """
    Process-local UserStore used when MongoDB is unavailable.

    Aggregates are copied on the way in and out, so callers only change
    stored state through update_user, like with a document database. A single
    lock guards all maps.
    """

    name = "memory"

    def __init__(self) -> None:
        self._users: Dict[str, User] = {}
        self._tokens: Dict[str, str] = {}
        self._orders: List[Order] = []
        self._lock = asyncio.Lock()

    def _find_by_username(self, username: str) -> Optional[User]:
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    def _find_by_email(self, email: str) -> Optional[User]:
        normalized = normalize_email(email)
        for user in self._users.values():
            if normalize_email(user.email) == normalized:
                return user
        return None

    def _has_conflict(self, username: str, email: str, exclude_user_id: Optional[str] = None) -> bool:
        by_username = self._find_by_username(username)
        if by_username is not None and by_username.id != exclude_user_id:
            return True
        by_email = self._find_by_email(email)
        return by_email is not None and by_email.id != exclude_user_id

    async def create_user(self, username: str, email: str, password: str, user_id: str) -> bool:
        normalized_email = normalize_email(email)
        async with self._lock:
            if user_id in self._users:
                logger.warning(f"User ID {user_id} already exists")
                return False
            if self._has_conflict(username, normalized_email):
                logger.info(f"Refusing to create user '{username}': username or email already exists")
                return False

            self._users[user_id] = User(
                id=user_id,
                username=username,
                email=normalized_email,
                password=password,
            )
        logger.debug(f"Created user {user_id} ({username})")
        return True

    async def find_user_by_username(self, username: str) -> Optional[User]:
        if not username:
            return None
        async with self._lock:
            return copy.deepcopy(self._find_by_username(username))

    async def find_user_by_email(self, email: str) -> Optional[User]:
        if not email:
            return None
        async with self._lock:
            return copy.deepcopy(self._find_by_email(email))

    async def find_user_by_id(self, user_id: str) -> Optional[User]:
        if not user_id:
            return None
        async with self._lock:
            return copy.deepcopy(self._users.get(user_id))

    async def email_exists(self, email: str) -> bool:
        if not email:
            return False
        async with self._lock:
            return self._find_by_email(email) is not None

    async def update_user(self, user_id: str, user: User) -> bool:
        normalized_email = normalize_email(user.email)
        async with self._lock:
            if user_id not in self._users:
                logger.warning(f"Cannot update user {user_id}: not found")
                return False
            if self._has_conflict(user.username, normalized_email, exclude_user_id=user_id):
                logger.warning(f"Cannot update user {user_id}: username or email already taken")
                return False

            stored = copy.deepcopy(user)
            stored.id = user_id
            stored.email = normalized_email
            self._users[user_id] = stored
        return True

    async def add_purchase(
        self,
        user_id: str,
        records: List[PurchaseRecord],
        order_id: str,
        total: float,
    ) -> bool:
        async with self._lock:
            user = self._users.get(user_id)
            if user is None:
                logger.warning(f"Cannot record purchase {order_id}: user {user_id} not found")
                return False

            user.history.record_purchases(records)
            self._orders.append(
                Order(
                    order_id=order_id,
                    user_id=user_id,
                    items=list(records),
                    total=total,
                    timestamp=utc_now(),
                )
            )
        logger.info(f"Recorded order {order_id} for user {user_id} ({len(records)} items)")
        return True

    async def get_orders(self, user_id: str, limit: int = 100) -> List[Order]:
        async with self._lock:
            orders = [order for order in self._orders if order.user_id == user_id]
        return orders[:max(1, int(limit))]

    async def save_token(self, token: str, user_id: str) -> bool:
        if not token or not user_id:
            return False
        async with self._lock:
            self._tokens.pop(token, None)
            self._tokens[token] = user_id
        return True

    async def get_user_id_from_token(self, token: str) -> Optional[str]:
        if not token:
            return None
        async with self._lock:
            return self._tokens.get(token)
