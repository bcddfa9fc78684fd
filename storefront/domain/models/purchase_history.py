# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List


@dataclass(frozen=True)
class PurchaseRecord:
    """A purchased line item; immutable once recorded"""
    id: str
    name: str
    price: float
    quantity: int

    @property
    def subtotal(self) -> float:
        return self.price * self.quantity


@dataclass
class PurchaseHistory:
    """
    Append-only list of purchase records owned by a single user.

    Unlike Cart, records with the same ID are never merged: buying the same
    product twice yields two records.
    """
    purchases: List[PurchaseRecord] = field(default_factory=list)

    def record_purchase(self, record: PurchaseRecord) -> None:
        self.purchases.append(record)

    def record_purchases(self, records: Iterable[PurchaseRecord]) -> None:
        self.purchases.extend(records)

    def get_purchases(self) -> List[PurchaseRecord]:
        return list(self.purchases)

    def has_purchase(self, item_id: str) -> bool:
        return any(record.id == item_id for record in self.purchases)

    def get_total_spent(self) -> float:
        return sum((record.subtotal for record in self.purchases), 0.0)

    def clear(self) -> None:
        """Drop every record. Administrative use only; checkout never clears history."""
        self.purchases = []


@dataclass(frozen=True)
class Order:
    """Immutable record of a single checkout"""
    order_id: str
    user_id: str
    items: List[PurchaseRecord]
    total: float
    timestamp: datetime
