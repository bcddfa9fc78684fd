# Standard library imports
from typing import Iterable, List, Optional

# Local application imports
from ...domain.models.catalog_item import CatalogItem
from .catalog_data import CATALOG


class CatalogStore:
    """Read-only product catalog with case-insensitive substring search"""

    def __init__(self, items: Optional[Iterable[CatalogItem]] = None) -> None:
        self._items = tuple(items) if items is not None else CATALOG

    def search(self, query: str) -> List[CatalogItem]:
        """
        Find catalog items whose ID, name or description contains the query.

        Args:
            query: Search text; surrounding whitespace and case are ignored

        Returns:
            Matching items in catalog order; empty for a blank query
        """
        normalized = (query or "").strip().lower()
        if not normalized:
            return []

        return [
            item
            for item in self._items
            if normalized in item.id.lower()
            or normalized in item.name.lower()
            or normalized in item.description.lower()
        ]

    def get_all(self) -> List[CatalogItem]:
        return list(self._items)

    def get_by_id(self, item_id: str) -> Optional[CatalogItem]:
        # Exact, case-sensitive match
        for item in self._items:
            if item.id == item_id:
                return item
        return None
