from .catalog_data import CATALOG
from .catalog_store import CatalogStore

__all__ = ["CATALOG", "CatalogStore"]
