"""Tiered per-page pricing for print jobs and carts.

Pricing rules:
    - Black & white pages use a bulk tier: 40+ pages in one copy of the
      document get a cheaper per-page rate. Copies never count toward the
      tier.
    - Color pages use a flat rate per side option.
    - Custom jobs price their black & white and color subsets separately;
      the bulk tier is decided on the black & white subset alone.
    - Binding is a per-bound-copy add-on, never multiplied by copies and
      never discounted.
    - Checkout adds a flat convenience fee when the subtotal is strictly
      above the threshold.

All money is Decimal, rounded half away from zero to 2 places.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Iterable, Tuple, Union

from models.cart import CartEntry
from models.order import OrderTotals
from models.print_job import ColorMode, PrintJob, Sides
from modules.page_ranges import parse_page_numbers
from logging_config import get_logger

CENT = Decimal("0.01")
ZERO = Decimal("0")

BULK_MESSAGE = "Bulk discount applied! (40+ pages)"
BULK_HINT_MESSAGE = "Tip: 40+ pages get bulk discount rates!"


def round_money(value: Decimal) -> Decimal:
    """Round to 2 decimal places, halves away from zero."""
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def format_price(amount: Decimal) -> str:
    """Format an amount for display, e.g. '₹12.50'."""
    return f"₹{round_money(amount):.2f}"


@dataclass(frozen=True)
class SideRates:
    """Per-page rate for single- and double-sided printing."""

    single: Decimal
    double: Decimal

    def for_sides(self, sides: Sides) -> Decimal:
        return self.single if sides is Sides.SINGLE else self.double


@dataclass(frozen=True)
class PricingTable:
    """
    Static price list.

    Injected into PriceCalculator; never mutated at runtime, so one instance
    can be shared by every request thread.
    """

    bw_less_than_bulk: SideRates = SideRates(Decimal("2.00"), Decimal("3.00"))
    bw_bulk: SideRates = SideRates(Decimal("1.50"), Decimal("2.50"))
    color: SideRates = SideRates(Decimal("10.00"), Decimal("15.00"))
    spiral_binding_per_copy: Decimal = Decimal("30.00")
    record_binding_per_copy: Decimal = Decimal("40.00")
    convenience_fee: Decimal = Decimal("4.00")
    convenience_fee_threshold: Decimal = Decimal("50.00")
    bulk_tier_threshold: int = 40
    bulk_hint_threshold: int = 30


DEFAULT_PRICING = PricingTable()


@dataclass(frozen=True)
class TierInfo:
    """Advisory bulk-tier status for UI messaging. No pricing effect."""

    tier: str
    """'bulk' or 'standard'."""

    message: str = ""

    @property
    def is_bulk(self) -> bool:
        return self.tier == "bulk"

    def to_dict(self) -> Dict[str, Any]:
        return {"tier": self.tier, "message": self.message, "is_bulk": self.is_bulk}


PricedItem = Union[PrintJob, CartEntry]


def _job_of(item: PricedItem) -> PrintJob:
    return item.job if isinstance(item, CartEntry) else item


class PriceCalculator:
    """Computes item prices, cart totals and checkout fees from a PricingTable."""

    def __init__(self, table: PricingTable = DEFAULT_PRICING) -> None:
        self.table = table
        self.logger = get_logger(__name__)

    # ------------------------------------------------------------------
    # Rates
    # ------------------------------------------------------------------

    def black_and_white_rate(self, pages: int, sides: Sides) -> Decimal:
        """Per-page B&W rate; bulk rate once pages reach the tier threshold."""
        if pages >= self.table.bulk_tier_threshold:
            return self.table.bw_bulk.for_sides(sides)
        return self.table.bw_less_than_bulk.for_sides(sides)

    def color_rate(self, sides: Sides) -> Decimal:
        """Flat per-page color rate."""
        return self.table.color.for_sides(sides)

    # ------------------------------------------------------------------
    # Page counts
    # ------------------------------------------------------------------

    @staticmethod
    def custom_page_counts(job: PrintJob) -> Tuple[int, int]:
        """Return (bw_count, color_count) for a custom job's selections."""
        selection = job.custom_pages
        if selection is None:
            return 0, 0
        bw_pages = parse_page_numbers(selection.bw_pages, job.total_pages)
        color_pages = parse_page_numbers(selection.color_pages, job.total_pages)
        return len(bw_pages), len(color_pages)

    def effective_pages(self, job: PrintJob) -> int:
        """Page count that decides the bulk tier (per copy, never times copies)."""
        if job.color_mode is ColorMode.CUSTOM:
            bw_count, _ = self.custom_page_counts(job)
            return bw_count
        return max(job.total_pages, 0)

    # ------------------------------------------------------------------
    # Item pricing
    # ------------------------------------------------------------------

    def price_per_copy(self, job: PrintJob) -> Decimal:
        """Unrounded price of a single copy, before binding."""
        pages = max(job.total_pages, 0)

        if job.color_mode is ColorMode.BLACK_AND_WHITE:
            return pages * self.black_and_white_rate(pages, job.sides)

        if job.color_mode is ColorMode.COLOR:
            return pages * self.color_rate(job.sides)

        bw_count, color_count = self.custom_page_counts(job)
        return (
            bw_count * self.black_and_white_rate(bw_count, job.sides)
            + color_count * self.color_rate(job.sides)
        )

    def binding_cost(self, job: PrintJob) -> Decimal:
        """Binding add-ons. Counts are absolute, not per copy."""
        return (
            job.spiral_binding_count * self.table.spiral_binding_per_copy
            + job.record_binding_count * self.table.record_binding_per_copy
        )

    def calculate_item_price(self, job: PrintJob) -> Decimal:
        """Total price of one cart item: per-copy price x copies + binding."""
        total = self.price_per_copy(job) * job.copies + self.binding_cost(job)
        price = round_money(total)
        self.logger.debug(
            f"Priced job: pages={job.total_pages}, copies={job.copies}, "
            f"mode={job.color_mode.value}, sides={job.sides.value} -> {price}"
        )
        return price

    def breakdown(self, job: PrintJob) -> Dict[str, Any]:
        """
        Itemized price for the live preview.

        Returns:
            Dictionary of page counts, rates and totals. Money values are
            2-decimal strings so they survive JSON unchanged.
        """
        if job.color_mode is ColorMode.CUSTOM:
            bw_count, color_count = self.custom_page_counts(job)
        elif job.color_mode is ColorMode.COLOR:
            bw_count, color_count = 0, max(job.total_pages, 0)
        else:
            bw_count, color_count = max(job.total_pages, 0), 0

        effective = self.effective_pages(job)
        return {
            "bw_pages": bw_count,
            "color_pages": color_count,
            "billable_pages": bw_count + color_count,
            "total_sheets_printed": (bw_count + color_count) * job.copies,
            "bw_rate": f"{self.black_and_white_rate(effective, job.sides):.2f}",
            "color_rate": f"{self.color_rate(job.sides):.2f}",
            "price_per_copy": f"{round_money(self.price_per_copy(job)):.2f}",
            "copies": job.copies,
            "binding_cost": f"{round_money(self.binding_cost(job)):.2f}",
            "total": f"{self.calculate_item_price(job):.2f}",
            "display_total": format_price(self.calculate_item_price(job)),
            "tier": self.tier_info(effective).to_dict(),
        }

    # ------------------------------------------------------------------
    # Cart aggregation
    # ------------------------------------------------------------------

    def calculate_cart_total(self, items: Iterable[PricedItem]) -> Decimal:
        """Sum of each item's rounded price, rounded once more."""
        total = sum(
            (self.calculate_item_price(_job_of(item)) for item in items), ZERO
        )
        return round_money(total)

    def convenience_fee(self, subtotal: Decimal) -> Decimal:
        """Flat fee when subtotal is strictly above the threshold, else zero."""
        if subtotal > self.table.convenience_fee_threshold:
            return self.table.convenience_fee
        return ZERO

    def checkout_totals(self, items: Iterable[PricedItem]) -> OrderTotals:
        """Subtotal, convenience fee and grand total for a set of cart items."""
        subtotal = self.calculate_cart_total(items)
        fee = self.convenience_fee(subtotal)
        return OrderTotals(
            subtotal=subtotal,
            convenience_fee=fee,
            total=round_money(subtotal + fee),
        )

    def tier_info(self, effective_pages: int) -> TierInfo:
        """Whether the bulk tier applies, with a hint when it is close."""
        if effective_pages >= self.table.bulk_tier_threshold:
            return TierInfo("bulk", BULK_MESSAGE)
        if effective_pages >= self.table.bulk_hint_threshold:
            return TierInfo("standard", BULK_HINT_MESSAGE)
        return TierInfo("standard")
