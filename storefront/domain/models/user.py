from dataclasses import dataclass, field

from .cart import Cart
from .purchase_history import PurchaseHistory


@dataclass
class User:
    """
    User aggregate: account fields plus the cart and purchase history it owns.

    Cart and history have no identity outside their user and are loaded and
    saved together with it.
    """
    id: str
    username: str
    email: str
    password: str
    full_name: str = ""
    bio: str = ""
    cart: Cart = field(default_factory=Cart)
    history: PurchaseHistory = field(default_factory=PurchaseHistory)
