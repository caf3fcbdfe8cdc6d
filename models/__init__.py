"""
Data models for the print storefront.

This module contains dataclasses for:
- PrintJob: One document configured for printing (pricing input)
- CartEntry: A priced PrintJob held in the session cart
- Order: Frozen snapshot of a checkout handed to the order sink

PrintJob and Order are frozen so they can be shared between request
threads and stored without defensive copies.
"""

from .print_job import PrintJob, CustomPageSelection, ColorMode, Sides, PaperSize
from .cart import CartEntry
from .order import (
    Order,
    OrderTotals,
    GuestDetails,
    OrderStatus,
    PaymentMethod,
    PaymentStatus,
)

__all__ = [
    # Print job models
    "PrintJob",
    "CustomPageSelection",
    "ColorMode",
    "Sides",
    "PaperSize",
    # Cart models
    "CartEntry",
    # Order models
    "Order",
    "OrderTotals",
    "GuestDetails",
    "OrderStatus",
    "PaymentMethod",
    "PaymentStatus",
]
