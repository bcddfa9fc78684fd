from .mongo_connection import (
    get_database,
    get_user_collection,
    get_order_collection,
    get_token_collection,
    ping_database,
    close_connection,
)
from .mongo_user_store import MongoUserStore
from .in_memory_user_store import InMemoryUserStore
from .store_selector import select_user_store

__all__ = [
    "get_database",
    "get_user_collection",
    "get_order_collection",
    "get_token_collection",
    "ping_database",
    "close_connection",
    "MongoUserStore",
    "InMemoryUserStore",
    "select_user_store",
]
