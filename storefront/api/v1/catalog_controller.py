# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter

# Local application imports
from ...application.dto.catalog_dto import CatalogResponse, SearchResponse
from ...application.use_cases.catalog.list_catalog import ListCatalogUseCase
from ...application.use_cases.catalog.search_catalog import SearchCatalogUseCase
from ...di.container import get_container
from ..errors import to_http_exception


router = APIRouter(tags=["catalog"])


@router.get("/catalog", response_model=CatalogResponse)
async def list_catalog() -> CatalogResponse:
    """List every product in catalog order"""
    container = get_container()
    list_catalog_use_case = container.get(ListCatalogUseCase)
    return await list_catalog_use_case.execute()


@router.get("/search", response_model=SearchResponse)
async def search_catalog(q: Optional[str] = None) -> SearchResponse:
    """
    Search products by ID, name or description

    Args:
        q: Search text (case-insensitive substring)
    """
    container = get_container()
    search_use_case = container.get(SearchCatalogUseCase)

    try:
        return await search_use_case.execute(q)
    except ValueError as exception:
        raise to_http_exception(exception)
