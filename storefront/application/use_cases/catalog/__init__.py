from .list_catalog import ListCatalogUseCase
from .search_catalog import SearchCatalogUseCase

__all__ = ["ListCatalogUseCase", "SearchCatalogUseCase"]
