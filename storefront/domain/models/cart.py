# Standard library imports
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class CartItem:
    """A product line in a user's cart"""
    product_id: str
    name: str
    price: float
    quantity: int = 1

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.product_id:
            raise ValueError("Product ID is required")
        if self.price < 0:
            raise ValueError("Price cannot be negative")
        if self.quantity < 0:
            raise ValueError("Quantity cannot be negative")

    @property
    def subtotal(self) -> float:
        return self.price * self.quantity


@dataclass
class Cart:
    """
    Ordered collection of cart items keyed by product ID.

    A product ID appears at most once; adding an existing product merges
    quantities instead of creating a second line. Insertion order is kept
    for every line that stays in the cart.

    Operations never raise: failures are reported as False or ignored.
    """
    items: List[CartItem] = field(default_factory=list)

    def _find_item(self, product_id: str) -> Optional[CartItem]:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    def add_item(self, item: CartItem) -> None:
        """
        Add an item, merging with an existing line for the same product.

        A new product with a quantity of zero is ignored.
        """
        existing = self._find_item(item.product_id)
        if existing is not None:
            existing.quantity += item.quantity
        elif item.quantity > 0:
            self.items.append(
                CartItem(
                    product_id=item.product_id,
                    name=item.name,
                    price=item.price,
                    quantity=item.quantity,
                )
            )

    def update_quantity(self, product_id: str, quantity: int) -> bool:
        """
        Set the quantity of a product already in the cart.

        A quantity of zero (or less) removes the line.

        Returns:
            False if the product is not in the cart, True otherwise
        """
        existing = self._find_item(product_id)
        if existing is None:
            return False

        if quantity <= 0:
            self.remove_item(product_id)
            return True

        existing.quantity = quantity
        return True

    def remove_item(self, product_id: str) -> bool:
        """Remove a product line. Returns True iff something was removed."""
        original_size = len(self.items)
        self.items = [item for item in self.items if item.product_id != product_id]
        return len(self.items) != original_size

    def clear(self) -> None:
        self.items = []

    def is_empty(self) -> bool:
        return not self.items

    def get_total(self) -> float:
        return sum((item.subtotal for item in self.items), 0.0)

    def get_items(self) -> List[CartItem]:
        return list(self.items)
