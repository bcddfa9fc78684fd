# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo.errors import PyMongoError

# Local application imports
from ...core.config import get_settings

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
ORDERS_COLLECTION = "orders"
TOKENS_COLLECTION = "tokens"

# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_client() -> AsyncIOMotorClient:
    """
    Get MongoDB client instance (singleton pattern)

    Returns:
        MongoDB client configured from settings
    """
    global _mongo_client

    if _mongo_client is not None:
        return _mongo_client

    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=settings.mongo_connect_timeout_ms,
    )
    return _mongo_client


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    Returns:
        MongoDB database instance
    """
    global _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    _mongo_database = get_client()[settings.mongo_database_name]
    return _mongo_database


async def ping_database() -> bool:
    """
    Check that MongoDB answers a ping within the configured timeout

    Returns:
        True if the server is reachable, False otherwise
    """
    try:
        await get_client().admin.command("ping")
        return True
    except PyMongoError as e:
        logger.warning(f"MongoDB ping failed: {e}")
        return False


def close_connection() -> None:
    """Close the MongoDB client, if one was created"""
    global _mongo_client, _mongo_database
    if _mongo_client is not None:
        _mongo_client.close()
    _mongo_client = None
    _mongo_database = None


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Returns:
        MongoDB collection for users
    """
    return get_database()[USERS_COLLECTION]


def get_order_collection() -> AsyncIOMotorCollection:
    """
    Get orders collection from MongoDB

    Returns:
        MongoDB collection for orders
    """
    return get_database()[ORDERS_COLLECTION]


def get_token_collection() -> AsyncIOMotorCollection:
    """
    Get tokens collection from MongoDB

    Returns:
        MongoDB collection for tokens
    """
    return get_database()[TOKENS_COLLECTION]
