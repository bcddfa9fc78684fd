from .config import Settings, get_settings
from .logging_config import configure_logging
from .security import (
    hash_password,
    verify_password,
    generate_user_id,
    generate_token,
    generate_order_id,
    extract_card_last4,
)

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "hash_password",
    "verify_password",
    "generate_user_id",
    "generate_token",
    "generate_order_id",
    "extract_card_last4",
]
