# Standard library imports
import logging
import re
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.constants import (
    CartItemFields,
    OrderFields,
    PurchaseRecordFields,
    TokenFields,
    UserFields,
)
from ...domain.models.cart import Cart, CartItem
from ...domain.models.purchase_history import Order, PurchaseHistory, PurchaseRecord
from ...domain.models.user import User
from ...domain.repositories.user_store import UserStore
from ...domain.validators.credential_validator import normalize_email
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import get_order_collection, get_token_collection, get_user_collection

logger = logging.getLogger(__name__)


class MongoUserStore(UserStore):
    """
    MongoDB implementation of UserStore

    Users live in one document each with the cart and purchase history
    embedded. Orders and tokens have their own collections. Driver errors
    are logged and reported as False/None, never raised.
    """

    name = "mongodb"

    def __init__(
        self,
        user_collection: Optional[AsyncIOMotorCollection] = None,
        order_collection: Optional[AsyncIOMotorCollection] = None,
        token_collection: Optional[AsyncIOMotorCollection] = None,
    ) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
        self.order_collection = order_collection if order_collection is not None else get_order_collection()
        self.token_collection = token_collection if token_collection is not None else get_token_collection()

    async def ensure_indexes(self) -> bool:
        """
        Create the unique indexes that enforce username, email and token uniqueness

        Returns:
            True if all indexes exist, False if creation failed (for example
            because legacy data already contains duplicates)
        """
        try:
            await self.user_collection.create_index([(UserFields.USERNAME, ASCENDING)], unique=True)
            await self.user_collection.create_index([(UserFields.EMAIL, ASCENDING)], unique=True)
            await self.token_collection.create_index([(TokenFields.TOKEN, ASCENDING)], unique=True)
            await self.order_collection.create_index([(OrderFields.USER_ID, ASCENDING)])
            return True
        except PyMongoError as e:
            logger.error(
                f"Could not create MongoDB indexes, uniqueness falls back to lookups only: {e}"
            )
            return False

    async def create_user(self, username: str, email: str, password: str, user_id: str) -> bool:
        """
        Create a new user document

        Both uniqueness constraints are checked, then re-checked right before
        the insert. The unique indexes reject anything that slips through.
        """
        normalized_email = normalize_email(email)
        try:
            if await self.user_collection.find_one({UserFields.USERNAME: username}) is not None:
                return False
            if await self.email_exists(normalized_email):
                return False

            conflict = await self.user_collection.find_one(
                {
                    "$or": [
                        {UserFields.USERNAME: username},
                        {UserFields.EMAIL: normalized_email},
                    ]
                }
            )
            if conflict is not None:
                logger.info(f"Final check found a conflict for username '{username}', aborting creation")
                return False

            document = self._user_to_document(
                User(id=user_id, username=username, email=normalized_email, password=password)
            )
            await self.user_collection.insert_one(document)
            logger.info(f"Created user {user_id} ({username})")
            return True
        except DuplicateKeyError:
            logger.info(f"Insert rejected by unique index for username '{username}'")
            return False
        except PyMongoError as e:
            logger.error(f"Error creating user '{username}': {e}", exc_info=True)
            return False

    async def find_user_by_username(self, username: str) -> Optional[User]:
        if not username:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.USERNAME: username})
        except PyMongoError as e:
            logger.error(f"Error finding user by username: {e}", exc_info=True)
            return None

        if document is None:
            return None
        return self._document_to_user(document)

    async def find_user_by_email(self, email: str) -> Optional[User]:
        if not email:
            return None

        normalized = normalize_email(email)
        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: normalized})
            if document is None:
                document = await self.user_collection.find_one(self._legacy_email_filter(normalized))
        except PyMongoError as e:
            logger.error(f"Error finding user by email: {e}", exc_info=True)
            return None

        if document is None:
            return None
        return self._document_to_user(document)

    async def find_user_by_id(self, user_id: str) -> Optional[User]:
        if not user_id:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: user_id})
        except PyMongoError as e:
            logger.error(f"Error finding user by ID: {e}", exc_info=True)
            return None

        if document is None:
            return None
        return self._document_to_user(document)

    async def email_exists(self, email: str) -> bool:
        if not email:
            return False

        normalized = normalize_email(email)
        projection = {UserFields.MONGO_ID: 1}
        try:
            if await self.user_collection.find_one({UserFields.EMAIL: normalized}, projection) is not None:
                return True
            # Degraded mode: documents written before emails were normalized
            legacy = await self.user_collection.find_one(self._legacy_email_filter(normalized), projection)
            return legacy is not None
        except PyMongoError as e:
            logger.error(f"Error checking email existence: {e}", exc_info=True)
            return False

    async def update_user(self, user_id: str, user: User) -> bool:
        """
        Replace the stored fields of an existing user

        Fails when another user already holds the username or email, even if
        the unique indexes are missing.
        """
        document = self._user_to_document(user)
        document.pop(UserFields.MONGO_ID, None)

        try:
            conflict = await self.user_collection.find_one(
                {
                    "$or": [
                        {UserFields.USERNAME: document[UserFields.USERNAME]},
                        {UserFields.EMAIL: document[UserFields.EMAIL]},
                    ],
                    UserFields.MONGO_ID: {"$ne": user_id},
                },
                {UserFields.MONGO_ID: 1},
            )
            if conflict is not None:
                logger.warning(f"Cannot update user {user_id}: username or email already taken")
                return False

            result = await self.user_collection.update_one(
                {UserFields.MONGO_ID: user_id},
                {"$set": document},
            )
        except DuplicateKeyError:
            logger.warning(f"Update of user {user_id} rejected: username or email already taken")
            return False
        except PyMongoError as e:
            logger.error(f"Error updating user {user_id}: {e}", exc_info=True)
            return False

        if result.matched_count == 0:
            logger.warning(f"Cannot update user {user_id}: not found")
            return False
        return True

    async def add_purchase(
        self,
        user_id: str,
        records: List[PurchaseRecord],
        order_id: str,
        total: float,
    ) -> bool:
        user = await self.find_user_by_id(user_id)
        if user is None:
            logger.warning(f"Cannot record purchase {order_id}: user {user_id} not found")
            return False

        order_document = {
            OrderFields.MONGO_ID: order_id,
            OrderFields.USER_ID: user_id,
            OrderFields.ITEMS: [self._record_to_order_line(record) for record in records],
            OrderFields.TOTAL: total,
            OrderFields.TIMESTAMP: utc_now(),
        }
        try:
            await self.order_collection.insert_one(order_document)
        except PyMongoError as e:
            logger.error(f"Error saving order {order_id}: {e}", exc_info=True)
            return False

        user.history.record_purchases(records)
        if not await self.update_user(user_id, user):
            # The order document stays; nothing is rolled back.
            logger.error(
                f"Order {order_id} was saved but purchase history of user {user_id} was not updated"
            )
            return False

        logger.info(f"Recorded order {order_id} for user {user_id} ({len(records)} items)")
        return True

    async def get_orders(self, user_id: str, limit: int = 100) -> List[Order]:
        orders: List[Order] = []
        try:
            cursor = (
                self.order_collection.find({OrderFields.USER_ID: user_id})
                .sort([(OrderFields.TIMESTAMP, ASCENDING)])
                .limit(max(1, int(limit)))
            )
            async for document in cursor:
                orders.append(self._document_to_order(document))
        except PyMongoError as e:
            logger.error(f"Error loading orders for user {user_id}: {e}", exc_info=True)
            return []
        return orders

    async def save_token(self, token: str, user_id: str) -> bool:
        if not token or not user_id:
            return False

        try:
            await self.token_collection.delete_one({TokenFields.TOKEN: token})
            await self.token_collection.insert_one(
                {
                    TokenFields.TOKEN: token,
                    TokenFields.USER_ID: user_id,
                    TokenFields.CREATED_AT: utc_now(),
                }
            )
            return True
        except PyMongoError as e:
            logger.error(f"Error saving token for user {user_id}: {e}", exc_info=True)
            return False

    async def get_user_id_from_token(self, token: str) -> Optional[str]:
        if not token:
            return None

        try:
            document = await self.token_collection.find_one({TokenFields.TOKEN: token})
        except PyMongoError as e:
            logger.error(f"Error looking up token: {e}", exc_info=True)
            return None

        if document is None:
            return None
        return document.get(TokenFields.USER_ID) or None

    @staticmethod
    def _legacy_email_filter(normalized_email: str) -> Dict[str, Any]:
        return {
            UserFields.EMAIL: {
                "$regex": f"^\\s*{re.escape(normalized_email)}\\s*$",
                "$options": "i",
            }
        }

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User aggregate

        Args:
            document: MongoDB document dictionary

        Returns:
            User aggregate with cart and purchase history
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        cart = Cart()
        for line in document.get(UserFields.CART) or []:
            try:
                cart.add_item(
                    CartItem(
                        product_id=line.get(CartItemFields.PRODUCT_ID, ""),
                        name=line.get(CartItemFields.NAME, ""),
                        price=float(line.get(CartItemFields.PRICE, 0.0)),
                        quantity=int(line.get(CartItemFields.QUANTITY, 0)),
                    )
                )
            except (ValueError, TypeError) as e:
                logger.warning(f"Skipping invalid cart line for user {document[UserFields.MONGO_ID]}: {e}")

        history = PurchaseHistory()
        for record in document.get(UserFields.PURCHASE_HISTORY) or []:
            try:
                history.record_purchase(
                    PurchaseRecord(
                        id=record.get(PurchaseRecordFields.ID, ""),
                        name=record.get(PurchaseRecordFields.NAME, ""),
                        price=float(record.get(PurchaseRecordFields.PRICE, 0.0)),
                        quantity=int(record.get(PurchaseRecordFields.QUANTITY, 0)),
                    )
                )
            except (ValueError, TypeError) as e:
                logger.warning(
                    f"Skipping invalid purchase record for user {document[UserFields.MONGO_ID]}: {e}"
                )

        return User(
            id=str(document[UserFields.MONGO_ID]),
            username=document.get(UserFields.USERNAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            password=document.get(UserFields.PASSWORD, ""),
            full_name=document.get(UserFields.FULL_NAME, ""),
            bio=document.get(UserFields.BIO, ""),
            cart=cart,
            history=history,
        )

    def _user_to_document(self, user: User) -> dict:
        """
        Convert User aggregate to MongoDB document

        Args:
            user: User aggregate

        Returns:
            Dictionary ready for MongoDB storage, email normalized
        """
        return {
            UserFields.MONGO_ID: user.id,
            UserFields.USERNAME: user.username,
            UserFields.EMAIL: normalize_email(user.email),
            UserFields.PASSWORD: user.password,
            UserFields.FULL_NAME: user.full_name,
            UserFields.BIO: user.bio,
            UserFields.CART: [
                {
                    CartItemFields.PRODUCT_ID: item.product_id,
                    CartItemFields.NAME: item.name,
                    CartItemFields.PRICE: item.price,
                    CartItemFields.QUANTITY: item.quantity,
                }
                for item in user.cart.get_items()
            ],
            UserFields.PURCHASE_HISTORY: [
                {
                    PurchaseRecordFields.ID: record.id,
                    PurchaseRecordFields.NAME: record.name,
                    PurchaseRecordFields.PRICE: record.price,
                    PurchaseRecordFields.QUANTITY: record.quantity,
                }
                for record in user.history.get_purchases()
            ],
        }

    @staticmethod
    def _record_to_order_line(record: PurchaseRecord) -> dict:
        return {
            OrderFields.PRODUCT_ID: record.id,
            OrderFields.ITEM_ID: record.id,
            OrderFields.NAME: record.name,
            OrderFields.PRICE: record.price,
            OrderFields.QUANTITY: record.quantity,
            OrderFields.SUBTOTAL: record.subtotal,
        }

    @staticmethod
    def _document_to_order(document: dict) -> Order:
        items = [
            PurchaseRecord(
                id=line.get(OrderFields.PRODUCT_ID) or line.get(OrderFields.ITEM_ID, ""),
                name=line.get(OrderFields.NAME, ""),
                price=float(line.get(OrderFields.PRICE, 0.0)),
                quantity=int(line.get(OrderFields.QUANTITY, 0)),
            )
            for line in document.get(OrderFields.ITEMS) or []
        ]
        return Order(
            order_id=str(document.get(OrderFields.MONGO_ID)),
            user_id=document.get(OrderFields.USER_ID, ""),
            items=items,
            total=float(document.get(OrderFields.TOTAL, 0.0)),
            timestamp=ensure_utc(document.get(OrderFields.TIMESTAMP)) or utc_now(),
        )
