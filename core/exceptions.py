"""
Custom exceptions for the print storefront.

Exception Hierarchy:
    PrintStorefrontError (base)
    ├── UploadError              - Uploaded document rejected (runtime, graceful)
    ├── InvalidPrintOptionsError - Print options form could not be turned into a job
    ├── CartItemNotFoundError    - Cart entry id not present in the session cart
    ├── EmptyCheckoutError       - Checkout requested with no selected items
    └── OrderNotFoundError       - Unknown order number

Usage:
    Routes catch these and flash a user-friendly message.
    The pricing engine itself never raises: malformed page selections are
    silently ignored so live price previews keep working while the user types.
"""

from typing import Optional, Dict, Any


class PrintStorefrontError(Exception):
    """
    Base exception for all print storefront errors.

    All custom exceptions inherit from this class, allowing callers to catch
    all application-specific errors with a single except clause if needed.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional context for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class UploadError(PrintStorefrontError):
    """
    An uploaded document was rejected.

    Typical causes:
    - No file chosen
    - Unsupported file extension
    - Page count could not be detected and none was entered manually
    """

    def __init__(self, message: str, filename: Optional[str] = None):
        details = {}
        if filename:
            details["filename"] = filename
        super().__init__(message, details)
        self.filename = filename


class InvalidPrintOptionsError(PrintStorefrontError):
    """
    Print options could not be converted into a PrintJob.

    Raised for structural problems only (unknown color mode, non-numeric
    copies). Page-range text is never validated here.
    """

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        details = {}
        if field:
            details["field"] = field
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class CartItemNotFoundError(PrintStorefrontError):
    """The requested cart entry is not in the cart (removed or stale link)."""

    def __init__(self, item_id: str):
        super().__init__(f"Cart item not found: {item_id}", {"item_id": item_id})
        self.item_id = item_id


class EmptyCheckoutError(PrintStorefrontError):
    """Checkout was requested without any selected cart items."""

    def __init__(self, message: str = "Please select at least one item to proceed"):
        super().__init__(message)


class OrderNotFoundError(PrintStorefrontError):
    """No order with the given order number was recorded."""

    def __init__(self, order_number: str):
        super().__init__(
            f"Order not found: {order_number}", {"order_number": order_number}
        )
        self.order_number = order_number
