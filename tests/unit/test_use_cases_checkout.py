"""
Unit tests for checkout, purchase history and profile use cases.
"""
import asyncio
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from storefront.application.dto.cart_dto import AddToCartRequest
from storefront.application.dto.checkout_dto import CheckoutRequest, PaymentMethodRequest
from storefront.application.dto.profile_dto import UpdateProfileRequest
from storefront.application.exceptions import (
    ConflictError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from storefront.application.services.user_locks import UserLockRegistry
from storefront.application.use_cases.cart import AddToCartUseCase
from storefront.application.use_cases.checkout import CheckoutUseCase, GetPurchaseHistoryUseCase
from storefront.application.use_cases.profile import UpdateProfileUseCase
from storefront.domain.models.cart import Cart, CartItem
from storefront.domain.models.purchase_history import Order, PurchaseRecord
from storefront.domain.models.user import User
from storefront.infrastructure.catalog.catalog_store import CatalogStore


def checkout_request(card_number="4111 1111 1111 4242"):
    return CheckoutRequest(
        shipping_address={"street": "1 Main St", "city": "Springfield"},
        payment_method=PaymentMethodRequest(cardholder_name="Alice", card_number=card_number),
    )


@pytest_asyncio.fixture
async def user_with_cart(memory_store):
    await memory_store.create_user("alice", "alice@example.com", "secret1", "u-1")
    cart = Cart()
    cart.add_item(CartItem("ITEM001", "Laptop Pro 15", 999.99, 1))
    cart.add_item(CartItem("ITEM002", "Wireless Mouse", 29.99, 2))
    await memory_store.update_cart("u-1", cart)
    return "u-1"


class TestCheckoutUseCase:
    """Tests for CheckoutUseCase"""

    @pytest.mark.asyncio
    async def test_checkout_records_order_and_clears_cart(self, memory_store, user_with_cart):
        use_case = CheckoutUseCase(memory_store, UserLockRegistry())

        result = await use_case.execute(user_with_cart, checkout_request())

        assert result.message == "Checkout successful"
        assert result.order.order_id.startswith("ORD_")
        assert result.order.total == pytest.approx(1059.97)
        assert [item.product_id for item in result.order.items] == ["ITEM001", "ITEM002"]
        assert result.order.shipping_address["city"] == "Springfield"
        assert result.order.payment_summary.last4 == "4242"
        assert result.order.payment_summary.cardholder_name == "Alice"

        user = await memory_store.find_user_by_id(user_with_cart)
        assert user.cart.is_empty()
        assert user.history.has_purchase("ITEM001")
        orders = await memory_store.get_orders(user_with_cart)
        assert [order.order_id for order in orders] == [result.order.order_id]

    @pytest.mark.asyncio
    async def test_full_card_number_never_returned(self, memory_store, user_with_cart):
        result = await CheckoutUseCase(memory_store, UserLockRegistry()).execute(
            user_with_cart, checkout_request(card_number="4111111111111111")
        )
        dumped = result.model_dump_json(by_alias=True)
        assert "4111111111111111" not in dumped

    @pytest.mark.asyncio
    async def test_empty_cart(self, memory_store):
        await memory_store.create_user("bob", "bob@example.com", "secret1", "u-2")
        with pytest.raises(ValidationError) as exc_info:
            await CheckoutUseCase(memory_store, UserLockRegistry()).execute("u-2", checkout_request())
        assert str(exc_info.value) == "Cart is empty"

    @pytest.mark.asyncio
    async def test_missing_checkout_data(self, memory_store, user_with_cart):
        with pytest.raises(ValidationError) as exc_info:
            await CheckoutUseCase(memory_store, UserLockRegistry()).execute(
                user_with_cart, CheckoutRequest(shipping_address={"city": "Springfield"})
            )
        assert str(exc_info.value) == "Shipping address and payment method are required"
        assert not (await memory_store.get_cart(user_with_cart)).is_empty()

    @pytest.mark.asyncio
    async def test_failed_purchase_keeps_cart(self, mock_user_store):
        user = User(id="u-1", username="alice", email="alice@example.com", password="secret1")
        user.cart.add_item(CartItem("ITEM001", "Laptop Pro 15", 999.99, 1))
        mock_user_store.find_user_by_id.return_value = user
        mock_user_store.add_purchase.return_value = False

        with pytest.raises(PersistenceError) as exc_info:
            await CheckoutUseCase(mock_user_store, UserLockRegistry()).execute("u-1", checkout_request())
        assert str(exc_info.value) == "Failed to save purchase"
        mock_user_store.clear_cart.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_user(self, memory_store):
        with pytest.raises(NotFoundError):
            await CheckoutUseCase(memory_store, UserLockRegistry()).execute("u-404", checkout_request())

    @pytest.mark.asyncio
    async def test_item_added_during_checkout_stays_in_cart(self, yielding_store):
        await yielding_store.create_user("alice", "alice@example.com", "secret1", "u-1")
        locks = UserLockRegistry()
        add_use_case = AddToCartUseCase(yielding_store, CatalogStore(), locks)
        await add_use_case.execute("u-1", AddToCartRequest(product_id="ITEM001"))

        result, _ = await asyncio.gather(
            CheckoutUseCase(yielding_store, locks).execute("u-1", checkout_request()),
            add_use_case.execute("u-1", AddToCartRequest(product_id="ITEM009")),
        )

        assert [item.product_id for item in result.order.items] == ["ITEM001"]
        cart = await yielding_store.get_cart("u-1")
        assert [item.product_id for item in cart.get_items()] == ["ITEM009"]


class TestGetPurchaseHistoryUseCase:
    """Tests for GetPurchaseHistoryUseCase"""

    @pytest.mark.asyncio
    async def test_history_after_checkouts(self, memory_store, user_with_cart):
        checkout = CheckoutUseCase(memory_store, UserLockRegistry())
        first = await checkout.execute(user_with_cart, checkout_request())

        cart = Cart()
        cart.add_item(CartItem("ITEM009", "USB-C Cable", 19.99, 1))
        await memory_store.update_cart(user_with_cart, cart)
        second = await checkout.execute(user_with_cart, checkout_request())

        result = await GetPurchaseHistoryUseCase(memory_store).execute(user_with_cart)

        assert [entry.order_id for entry in result.history] == [first.order.order_id, second.order.order_id]
        assert result.history[0].items[1].subtotal == pytest.approx(59.98)
        assert result.history[0].purchased_at.endswith("Z")

    @pytest.mark.asyncio
    async def test_limit_is_passed_to_store(self, mock_user_store):
        mock_user_store.find_user_by_id.return_value = User(
            id="u-1", username="alice", email="alice@example.com", password="secret1"
        )
        mock_user_store.get_orders.return_value = [
            Order(
                order_id="ORD_1",
                user_id="u-1",
                items=[PurchaseRecord("ITEM001", "Laptop Pro 15", 999.99, 1)],
                total=999.99,
                timestamp=datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc),
            )
        ]

        result = await GetPurchaseHistoryUseCase(mock_user_store, order_history_limit=5).execute("u-1")

        mock_user_store.get_orders.assert_awaited_once_with("u-1", limit=5)
        assert result.history[0].purchased_at == "2025-01-15T12:00:00Z"

    @pytest.mark.asyncio
    async def test_records_without_orders_are_grouped(self, mock_user_store):
        user = User(id="u-1", username="alice", email="alice@example.com", password="secret1")
        user.history.record_purchases(
            [
                PurchaseRecord("ITEM001", "Laptop Pro 15", 999.99, 1),
                PurchaseRecord("ITEM002", "Wireless Mouse", 29.99, 2),
            ]
        )
        mock_user_store.find_user_by_id.return_value = user
        mock_user_store.get_orders.return_value = []

        result = await GetPurchaseHistoryUseCase(mock_user_store).execute("u-1")

        assert len(result.history) == 1
        assert result.history[0].total == pytest.approx(1059.97)
        assert result.history[0].purchased_at is None

    @pytest.mark.asyncio
    async def test_no_purchases(self, memory_store):
        await memory_store.create_user("bob", "bob@example.com", "secret1", "u-2")
        result = await GetPurchaseHistoryUseCase(memory_store).execute("u-2")
        assert result.history == []

    @pytest.mark.asyncio
    async def test_unknown_user(self, memory_store):
        with pytest.raises(NotFoundError):
            await GetPurchaseHistoryUseCase(memory_store).execute("u-404")


class TestUpdateProfileUseCase:
    """Tests for UpdateProfileUseCase"""

    @pytest.mark.asyncio
    async def test_update_profile_fields(self, memory_store, user_with_cart):
        result = await UpdateProfileUseCase(memory_store, UserLockRegistry()).execute(
            user_with_cart, UpdateProfileRequest(full_name="  Alice Liddell ", bio="Curious")
        )

        assert result.message == "Profile updated successfully"
        assert result.user.profile.full_name == "Alice Liddell"
        assert await memory_store.get_user_id_from_token(result.token) == user_with_cart
        user = await memory_store.find_user_by_id(user_with_cart)
        assert user.bio == "Curious"
        assert len(user.cart.get_items()) == 2

    @pytest.mark.asyncio
    async def test_change_username_and_email(self, memory_store, user_with_cart):
        result = await UpdateProfileUseCase(memory_store, UserLockRegistry()).execute(
            user_with_cart, UpdateProfileRequest(username="alice2", email="New@Example.com")
        )
        assert result.user.username == "alice2"
        assert result.user.email == "new@example.com"
        assert result.token.startswith("token_alice2_")
        assert await memory_store.find_user_by_username("alice") is None

    @pytest.mark.asyncio
    async def test_no_changes(self, memory_store, user_with_cart):
        with pytest.raises(ValidationError) as exc_info:
            await UpdateProfileUseCase(memory_store, UserLockRegistry()).execute(
                user_with_cart, UpdateProfileRequest(username="alice", email="ALICE@example.com")
            )
        assert str(exc_info.value) == "No profile changes detected"

    @pytest.mark.asyncio
    async def test_username_taken(self, memory_store, user_with_cart):
        await memory_store.create_user("bob", "bob@example.com", "secret1", "u-2")
        with pytest.raises(ConflictError) as exc_info:
            await UpdateProfileUseCase(memory_store, UserLockRegistry()).execute(
                user_with_cart, UpdateProfileRequest(username="bob")
            )
        assert str(exc_info.value) == "Username already taken"

    @pytest.mark.asyncio
    async def test_email_taken_in_other_case(self, memory_store, user_with_cart):
        await memory_store.create_user("bob", "bob@example.com", "secret1", "u-2")
        with pytest.raises(ConflictError) as exc_info:
            await UpdateProfileUseCase(memory_store, UserLockRegistry()).execute(
                user_with_cart, UpdateProfileRequest(email="BOB@example.com")
            )
        assert str(exc_info.value) == "Email already taken"

    @pytest.mark.asyncio
    async def test_first_error_wins(self, memory_store, user_with_cart):
        with pytest.raises(ValidationError) as exc_info:
            await UpdateProfileUseCase(memory_store, UserLockRegistry()).execute(
                user_with_cart,
                UpdateProfileRequest(username="ab", password="123", bio="b" * 161),
            )
        assert str(exc_info.value) == "Username must be 3-30 characters"

    @pytest.mark.asyncio
    async def test_password_max_length_enforced(self, memory_store, user_with_cart):
        with pytest.raises(ValidationError) as exc_info:
            await UpdateProfileUseCase(memory_store, UserLockRegistry()).execute(
                user_with_cart, UpdateProfileRequest(password="x" * 101)
            )
        assert str(exc_info.value) == "Password must be 100 characters or less"

    @pytest.mark.asyncio
    async def test_store_refuses_update(self, mock_user_store):
        mock_user_store.find_user_by_id.return_value = User(
            id="u-1", username="alice", email="alice@example.com", password="secret1"
        )
        mock_user_store.update_user.return_value = False
        with pytest.raises(PersistenceError):
            await UpdateProfileUseCase(mock_user_store, UserLockRegistry()).execute(
                "u-1", UpdateProfileRequest(bio="hello")
            )

    @pytest.mark.asyncio
    async def test_concurrent_cart_change_keeps_profile_update(self, yielding_store):
        await yielding_store.create_user("alice", "alice@example.com", "secret1", "u-1")
        locks = UserLockRegistry()

        await asyncio.gather(
            UpdateProfileUseCase(yielding_store, locks).execute("u-1", UpdateProfileRequest(bio="hello")),
            AddToCartUseCase(yielding_store, CatalogStore(), locks).execute(
                "u-1", AddToCartRequest(product_id="ITEM001", quantity=2)
            ),
        )

        user = await yielding_store.find_user_by_id("u-1")
        assert user.bio == "hello"
        assert [(item.product_id, item.quantity) for item in user.cart.get_items()] == [("ITEM001", 2)]
