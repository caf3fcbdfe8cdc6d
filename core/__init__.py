"""
Core module for the print storefront.

Contains fundamental infrastructure components:
- exceptions: Custom exception hierarchy
"""

from .exceptions import (
    PrintStorefrontError,
    UploadError,
    InvalidPrintOptionsError,
    CartItemNotFoundError,
    EmptyCheckoutError,
    OrderNotFoundError,
)

__all__ = [
    "PrintStorefrontError",
    "UploadError",
    "InvalidPrintOptionsError",
    "CartItemNotFoundError",
    "EmptyCheckoutError",
    "OrderNotFoundError",
]
