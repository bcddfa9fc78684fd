# Local application imports
from ....infrastructure.catalog.catalog_store import CatalogStore
from ...dto.catalog_dto import CatalogResponse
from ...mappers import to_catalog_items


class ListCatalogUseCase:
    """Use case for listing the whole product catalog"""

    def __init__(self, catalog_store: CatalogStore) -> None:
        self.catalog_store = catalog_store

    async def execute(self) -> CatalogResponse:
        return CatalogResponse(items=to_catalog_items(self.catalog_store.get_all()))
