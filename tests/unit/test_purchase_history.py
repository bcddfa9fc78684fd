"""
Unit tests for storefront.domain.models.purchase_history
"""
import dataclasses

import pytest
from storefront.domain.models.purchase_history import PurchaseHistory, PurchaseRecord


class TestPurchaseRecord:
    """Tests for PurchaseRecord"""

    def test_subtotal(self):
        record = PurchaseRecord(id="ITEM002", name="Wireless Mouse", price=29.99, quantity=2)
        assert record.subtotal == pytest.approx(59.98)

    def test_is_immutable(self):
        record = PurchaseRecord(id="ITEM002", name="Wireless Mouse", price=29.99, quantity=2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.quantity = 5


class TestPurchaseHistory:
    """Tests for PurchaseHistory"""

    def test_empty_history(self):
        history = PurchaseHistory()
        assert history.get_purchases() == []
        assert history.get_total_spent() == 0
        assert history.has_purchase("ITEM001") is False

    def test_same_product_twice_is_not_merged(self):
        history = PurchaseHistory()
        record = PurchaseRecord(id="ITEM001", name="Laptop Pro 15", price=999.99, quantity=1)
        history.record_purchase(record)
        history.record_purchase(record)
        assert len(history.get_purchases()) == 2
        assert history.get_total_spent() == pytest.approx(1999.98)

    def test_record_purchases_appends_in_order(self):
        history = PurchaseHistory()
        history.record_purchases(
            [
                PurchaseRecord(id="ITEM001", name="Laptop Pro 15", price=999.99, quantity=1),
                PurchaseRecord(id="ITEM002", name="Wireless Mouse", price=29.99, quantity=2),
            ]
        )
        assert [record.id for record in history.get_purchases()] == ["ITEM001", "ITEM002"]
        assert history.has_purchase("ITEM002") is True
        assert history.get_total_spent() == pytest.approx(1059.97)

    def test_clear(self):
        history = PurchaseHistory()
        history.record_purchase(PurchaseRecord(id="ITEM001", name="Laptop Pro 15", price=999.99, quantity=1))
        history.clear()
        assert history.get_purchases() == []
