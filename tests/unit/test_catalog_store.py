"""
Unit tests for storefront.infrastructure.catalog.catalog_store
"""
from storefront.domain.models.catalog_item import CatalogItem
from storefront.infrastructure.catalog import CATALOG, CatalogStore


class TestCatalogContent:
    """Tests for the fixed catalog"""

    def test_has_fifteen_items_in_order(self):
        items = CatalogStore().get_all()
        assert len(items) == 15
        assert items[0].id == "ITEM001"
        assert items[-1].id == "ITEM015"

    def test_ids_are_unique(self):
        assert len({item.id for item in CATALOG}) == len(CATALOG)


class TestSearch:
    """Tests for CatalogStore.search"""

    def test_blank_query_returns_nothing(self):
        store = CatalogStore()
        assert store.search("") == []
        assert store.search("   ") == []

    def test_case_insensitive_name_match(self):
        store = CatalogStore()
        lower = [item.id for item in store.search("laptop")]
        upper = [item.id for item in store.search("  LAPTOP ")]
        assert lower == upper
        assert "ITEM001" in lower
        assert "ITEM008" in lower
        assert "ITEM013" in lower

    def test_matches_description(self):
        store = CatalogStore()
        results = store.search("ergonomic")
        assert [item.id for item in results] == ["ITEM002", "ITEM008"]

    def test_matches_id(self):
        results = CatalogStore().search("item015")
        assert [item.id for item in results] == ["ITEM015"]

    def test_results_keep_catalog_order(self):
        results = CatalogStore().search("usb-c")
        ids = [item.id for item in results]
        assert ids == sorted(ids)

    def test_no_match(self):
        assert CatalogStore().search("refrigerator") == []

    def test_custom_items(self):
        store = CatalogStore(items=[CatalogItem("X1", "Teapot", 12.5, "Ceramic")])
        assert [item.id for item in store.search("ceramic")] == ["X1"]


class TestGetById:
    """Tests for CatalogStore.get_by_id"""

    def test_exact_match(self):
        item = CatalogStore().get_by_id("ITEM002")
        assert item is not None
        assert item.name == "Wireless Mouse"

    def test_case_sensitive(self):
        assert CatalogStore().get_by_id("item002") is None

    def test_unknown(self):
        assert CatalogStore().get_by_id("ITEM999") is None
