"""
Unit tests for the data models and their session serialization.
"""

from decimal import Decimal

import pytest

from models.cart import CartEntry
from models.order import GuestDetails, Order, OrderTotals, PaymentMethod, PaymentStatus, OrderStatus
from models.print_job import ColorMode, CustomPageSelection, PaperSize, PrintJob, Sides


@pytest.fixture
def custom_job():
    return PrintJob(
        total_pages=12,
        copies=2,
        color_mode=ColorMode.CUSTOM,
        sides=Sides.DOUBLE,
        paper_size=PaperSize.A3,
        spiral_binding_count=1,
        custom_pages=CustomPageSelection(bw_pages="1-10", color_pages="11-12"),
    )


class TestColorMode:

    @pytest.mark.parametrize("raw", ["bw", "blackAndWhite", "black_and_white", "mono"])
    def test_black_and_white_spellings(self, raw):
        assert ColorMode.parse(raw) is ColorMode.BLACK_AND_WHITE

    def test_enum_passthrough(self):
        assert ColorMode.parse(ColorMode.CUSTOM) is ColorMode.CUSTOM

    def test_unknown_mode_rejected(self):
        with pytest.raises(ValueError):
            ColorMode.parse("sepia")


class TestPrintJob:

    def test_session_dict_shape(self, custom_job):
        data = custom_job.to_dict()
        assert data["color_mode"] == "custom"
        assert data["sides"] == "double"
        assert data["paper_size"] == "A3"
        assert data["spiral_binding"] == 1
        assert data["custom_pages_config"] == {"bwPages": "1-10", "colorPages": "11-12"}

    def test_restores_from_session_dict(self, custom_job):
        assert PrintJob.from_dict(custom_job.to_dict()) == custom_job

    def test_defaults_from_sparse_dict(self):
        job = PrintJob.from_dict({"total_pages": 3})
        assert job.copies == 1
        assert job.color_mode is ColorMode.BLACK_AND_WHITE
        assert job.sides is Sides.SINGLE
        assert job.paper_size is PaperSize.A4
        assert job.custom_pages is None

    def test_with_copies_returns_new_job(self, custom_job):
        updated = custom_job.with_copies(5)
        assert updated.copies == 5
        assert custom_job.copies == 2
        assert updated.custom_pages == custom_job.custom_pages

    def test_job_is_immutable(self, custom_job):
        with pytest.raises(AttributeError):
            custom_job.copies = 3

    def test_paper_label(self):
        assert PaperSize.LETTER.label == "Letter (8.5 × 11 in)"


class TestCartEntry:

    def test_price_stored_as_string(self):
        entry = CartEntry(document_name="a.pdf", job=PrintJob(total_pages=5), price=Decimal("10"))
        assert entry.to_dict()["price"] == "10.00"

    def test_round_trip_keeps_id_and_price(self, custom_job):
        entry = CartEntry(document_name="notes.pdf", job=custom_job, price=Decimal("95.00"))
        restored = CartEntry.from_dict(entry.to_dict())
        assert restored.id == entry.id
        assert restored.price == Decimal("95.00")
        assert restored.job == custom_job

    def test_ids_are_unique(self):
        job = PrintJob(total_pages=1)
        assert CartEntry(document_name="a", job=job).id != CartEntry(document_name="a", job=job).id


class TestOrder:

    def test_from_entries_snapshots_items(self):
        entry = CartEntry(document_name="a.pdf", job=PrintJob(total_pages=39), price=Decimal("78.00"))
        totals = OrderTotals(Decimal("78.00"), Decimal("4.00"), Decimal("82.00"))
        order = Order.from_entries(
            order_number="PO-20261019-ABC123",
            entries=[entry],
            totals=totals,
            payment_method=PaymentMethod.COD,
            guest=GuestDetails(name="Asha", phone="9876543210"),
            created_at="2026-10-19T10:00:00+00:00",
        )

        entry.price = Decimal("1.00")

        assert order.item_count == 1
        assert order.items[0]["price"] == "78.00"
        assert order.total_amount == Decimal("82.00")
        assert order.status is OrderStatus.PLACED
        assert order.payment_status is PaymentStatus.PENDING

        data = order.to_dict()
        assert data["payment_method"] == "cod"
        assert data["totals"] == {"subtotal": "78.00", "convenience_fee": "4.00", "total": "82.00"}
        assert data["guest"]["name"] == "Asha"
