# Standard library imports
import logging
from typing import Optional

# Local application imports
from ...core.config import (
    STORAGE_BACKEND_MEMORY,
    STORAGE_BACKEND_MONGODB,
    Settings,
    get_settings,
)
from ...domain.repositories.user_store import UserStore
from .in_memory_user_store import InMemoryUserStore
from .mongo_connection import ping_database
from .mongo_user_store import MongoUserStore

logger = logging.getLogger(__name__)


async def select_user_store(settings: Optional[Settings] = None) -> UserStore:
    """
    Pick the user store for this process

    MongoDB is used when it answers a ping within the connect timeout.
    Otherwise the in-memory store is returned, so the service stays up
    without a database. "memory" skips MongoDB entirely.

    Args:
        settings: Settings to read the backend choice from (defaults to global settings)

    Returns:
        The selected UserStore
    """
    settings = settings or get_settings()
    backend = settings.storage_backend

    if backend == STORAGE_BACKEND_MEMORY:
        logger.info("Using in-memory user store (STORAGE_BACKEND=memory)")
        return InMemoryUserStore()

    if await ping_database():
        store = MongoUserStore()
        await store.ensure_indexes()
        logger.info(f"Using MongoDB user store (database '{settings.mongo_database_name}')")
        return store

    if backend == STORAGE_BACKEND_MONGODB:
        logger.error("STORAGE_BACKEND=mongodb but MongoDB is unreachable, falling back to in-memory store")
    else:
        logger.warning("MongoDB unreachable, falling back to in-memory user store")
    return InMemoryUserStore()
