"""
Credential helpers.

Passwords are stored as given and tokens are opaque random strings looked up
in the user store. Neither is meant to be secure.
"""
# Standard library imports
import hmac
import re
import time
import uuid
from typing import Optional


def hash_password(plain_password: str) -> str:
    """
    Placeholder password "hash"

    Returns the password unchanged. NOT SECURE.

    Args:
        plain_password: The plain text password

    Returns:
        The same password string
    """
    return plain_password


def verify_password(plain_password: str, stored_password: str) -> bool:
    """
    Compare a plain password against the stored one

    Args:
        plain_password: The plain text password to verify
        stored_password: The password as returned by hash_password

    Returns:
        True if passwords match, False otherwise
    """
    if plain_password is None or stored_password is None:
        return False
    return hmac.compare_digest(
        hash_password(plain_password).encode("utf-8"),
        stored_password.encode("utf-8"),
    )


def generate_user_id() -> str:
    return uuid.uuid4().hex


def generate_token(user_id: str, username: str) -> str:
    """
    Create a new opaque bearer token

    Tokens embed the username and user ID for readability plus a random
    suffix, so two tokens issued in the same second still differ.
    """
    return f"token_{username}_{user_id}_{uuid.uuid4().hex}"


def generate_order_id() -> str:
    return f"ORD_{int(time.time())}_{uuid.uuid4().hex[:8]}"


def extract_card_last4(card_number: Optional[str]) -> Optional[str]:
    """
    Last four digits of a card number, ignoring spaces and dashes

    Returns:
        The last four digits, or None when fewer than five digits are given
    """
    if not card_number:
        return None
    digits = re.sub(r"\D", "", str(card_number))
    if len(digits) <= 4:
        return None
    return digits[-4:]
