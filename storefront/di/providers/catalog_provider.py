from typing import TYPE_CHECKING
from ...infrastructure.catalog.catalog_store import CatalogStore
from ...application.use_cases.catalog.list_catalog import ListCatalogUseCase
from ...application.use_cases.catalog.search_catalog import SearchCatalogUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CatalogProvider:
    """Catalog use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            ListCatalogUseCase,
            lambda: ListCatalogUseCase(
                catalog_store=container.get(CatalogStore)
            )
        )

        container.register_factory(
            SearchCatalogUseCase,
            lambda: SearchCatalogUseCase(
                catalog_store=container.get(CatalogStore)
            )
        )
