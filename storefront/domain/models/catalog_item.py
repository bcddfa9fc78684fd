from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogItem:
    """Read-only product definition from the store catalog"""
    id: str
    name: str
    price: float
    description: str = ""
