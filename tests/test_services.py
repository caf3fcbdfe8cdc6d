"""
Unit tests for the cart and order services.
"""

import re
import threading
from decimal import Decimal

import pytest

from core.exceptions import CartItemNotFoundError, EmptyCheckoutError, OrderNotFoundError
from models.order import GuestDetails, PaymentMethod, PaymentStatus
from models.print_job import ColorMode, PrintJob
from modules.pricing import PriceCalculator
from services.cart_service import CART_SESSION_KEY, CartService
from services.order_service import OrderService, OrderStore


class FakeSession(dict):
    """Dict with the ``modified`` flag Flask sessions expose."""

    modified = False


# Fixtures

@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def calculator():
    return PriceCalculator()


@pytest.fixture
def cart(session, calculator):
    return CartService(session, calculator)


@pytest.fixture
def order_service(calculator):
    return OrderService(calculator, OrderStore())


@pytest.fixture
def guest():
    return GuestDetails(name="Asha", phone="9876543210", email="asha@example.com")


class TestCartService:

    def test_add_prices_entry(self, cart, session):
        entry = cart.add("thesis.pdf", "20261019_thesis.pdf", PrintJob(total_pages=39))
        assert entry.price == Decimal("78.00")
        assert len(cart) == 1
        assert session.modified is True
        assert session[CART_SESSION_KEY][0]["price"] == "78.00"

    def test_entries_survive_session_round_trip(self, cart):
        entry = cart.add("a.pdf", "a.pdf", PrintJob(total_pages=5, color_mode=ColorMode.COLOR))
        restored = cart.get(entry.id)
        assert restored.job == entry.job
        assert restored.price == Decimal("50.00")

    def test_change_copies_reprices(self, cart):
        entry = cart.add("a.pdf", "a.pdf", PrintJob(total_pages=10))
        updated = cart.change_copies(entry.id, 2)
        assert updated.job.copies == 3
        assert updated.price == Decimal("60.00")
        assert cart.get(entry.id).price == Decimal("60.00")

    def test_copies_never_below_one(self, cart):
        entry = cart.add("a.pdf", "a.pdf", PrintJob(total_pages=10))
        assert cart.change_copies(entry.id, -5).job.copies == 1

    def test_update_replaces_job(self, cart):
        entry = cart.add("a.pdf", "a.pdf", PrintJob(total_pages=10))
        cart.update(entry.id, PrintJob(total_pages=10, spiral_binding_count=1))
        assert cart.get(entry.id).price == Decimal("50.00")
        assert len(cart) == 1

    def test_remove(self, cart):
        first = cart.add("a.pdf", "a.pdf", PrintJob(total_pages=1))
        second = cart.add("b.pdf", "b.pdf", PrintJob(total_pages=2))
        removed = cart.remove(first.id)
        assert removed.document_name == "a.pdf"
        assert [e.id for e in cart.entries()] == [second.id]

    @pytest.mark.parametrize("action", ["get", "remove"])
    def test_unknown_item(self, cart, action):
        with pytest.raises(CartItemNotFoundError):
            getattr(cart, action)("missing")

    def test_update_unknown_item(self, cart):
        with pytest.raises(CartItemNotFoundError):
            cart.update("missing", PrintJob(total_pages=1))

    def test_selected_keeps_cart_order_and_ignores_unknown(self, cart):
        a = cart.add("a.pdf", "a.pdf", PrintJob(total_pages=1))
        b = cart.add("b.pdf", "b.pdf", PrintJob(total_pages=1))
        c = cart.add("c.pdf", "c.pdf", PrintJob(total_pages=1))
        selected = cart.selected([c.id, "bogus", a.id])
        assert [e.id for e in selected] == [a.id, c.id]
        assert b.id not in {e.id for e in selected}

    def test_remove_many(self, cart):
        a = cart.add("a.pdf", "a.pdf", PrintJob(total_pages=1))
        cart.add("b.pdf", "b.pdf", PrintJob(total_pages=1))
        assert cart.remove_many([a.id, "bogus"]) == 1
        assert len(cart) == 1

    def test_totals(self, cart):
        cart.add("a.pdf", "a.pdf", PrintJob(total_pages=39))
        cart.add("b.pdf", "b.pdf", PrintJob(total_pages=40))
        totals = cart.totals()
        assert totals.subtotal == Decimal("138.00")
        assert totals.convenience_fee == Decimal("4.00")
        assert totals.total == Decimal("142.00")

    def test_clear(self, cart, session):
        cart.add("a.pdf", "a.pdf", PrintJob(total_pages=1))
        cart.clear()
        assert CART_SESSION_KEY not in session
        assert len(cart) == 0


class TestOrderService:

    def test_place_order(self, cart, order_service, guest):
        entry = cart.add("a.pdf", "a.pdf", PrintJob(total_pages=39))
        order = order_service.place_order([entry], PaymentMethod.ONLINE, guest)

        assert re.fullmatch(r"PO-\d{8}-[0-9A-F]{6}", order.order_number)
        assert order.totals.total == Decimal("82.00")
        assert order.payment_status is PaymentStatus.PENDING
        assert order_service.get_order(order.order_number) is order

    def test_prices_recomputed_at_checkout(self, cart, order_service, guest):
        entry = cart.add("a.pdf", "a.pdf", PrintJob(total_pages=10))
        entry.price = Decimal("0.01")
        order = order_service.place_order([entry], PaymentMethod.COD, guest)
        assert order.items[0]["price"] == "20.00"
        assert order.totals.subtotal == Decimal("20.00")
        assert order.totals.fee_waived

    def test_empty_checkout(self, order_service, guest):
        with pytest.raises(EmptyCheckoutError):
            order_service.place_order([], PaymentMethod.COD, guest)
        assert order_service.store.count() == 0

    def test_unknown_order(self, order_service):
        with pytest.raises(OrderNotFoundError):
            order_service.get_order("PO-00000000-000000")


class TestOrderStore:

    def test_concurrent_writes(self, cart, calculator, guest):
        store = OrderStore()
        service = OrderService(calculator, store)
        entry = cart.add("a.pdf", "a.pdf", PrintJob(total_pages=1))

        def place():
            for _ in range(4):
                service.place_order([entry], PaymentMethod.COD, guest)

        threads = [threading.Thread(target=place) for _ in range(5)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert store.count() == 20
        assert store.clear() == 20
        assert store.get_order("anything") is None
