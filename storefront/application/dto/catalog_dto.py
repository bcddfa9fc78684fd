from typing import List

from .common_dto import ApiModel


class CatalogItemResponse(ApiModel):
    """DTO for one catalog product"""
    id: str
    name: str
    price: float
    description: str = ""


class CatalogResponse(ApiModel):
    success: bool = True
    items: List[CatalogItemResponse]


class SearchResponse(ApiModel):
    success: bool = True
    query: str
    results: List[CatalogItemResponse]
