"""
Services layer for the print storefront.

This module contains the business logic services:
- CartService: Session-backed cart with automatic re-pricing
- OrderService: Checkout and order recording
- OrderStore: Thread-safe in-memory order sink

Thread Model:
    Flask request threads share one OrderService/OrderStore (lock-guarded)
    and one PriceCalculator (stateless). Cart state is per-session.
"""

from .cart_service import CartService
from .order_service import OrderService, OrderStore

__all__ = [
    "CartService",
    "OrderService",
    "OrderStore",
]
