# Standard library imports
from typing import Optional

# Local application imports
from ....infrastructure.catalog.catalog_store import CatalogStore
from ...dto.catalog_dto import SearchResponse
from ...exceptions import ValidationError
from ...mappers import to_catalog_items


class SearchCatalogUseCase:
    """Use case for case-insensitive substring search over the catalog"""

    def __init__(self, catalog_store: CatalogStore) -> None:
        self.catalog_store = catalog_store

    async def execute(self, query: Optional[str]) -> SearchResponse:
        """
        Args:
            query: Raw search text from the request

        Returns:
            SearchResponse with matching items in catalog order

        Raises:
            ValidationError: If the query is missing or blank
        """
        normalized = (query or "").strip()
        if not normalized:
            raise ValidationError("Search query is required")

        return SearchResponse(
            query=normalized,
            results=to_catalog_items(self.catalog_store.search(normalized)),
        )
