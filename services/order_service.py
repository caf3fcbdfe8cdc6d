"""
Checkout service and in-memory order store.

Order persistence belongs to an external backend; OrderStore is the local
sink that stands in for it. It is the only shared mutable state in the web
layer and is guarded by a lock because Flask may serve requests from
several threads.

Flow:
    1. Cart route collects the selected CartEntry list
    2. OrderService.place_order re-prices the entries and computes totals
    3. The frozen Order is recorded in OrderStore
    4. Confirmation page reads it back by order number
"""

from __future__ import annotations

import threading
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional

from core.exceptions import EmptyCheckoutError, OrderNotFoundError
from logging_config import get_logger
from models.cart import CartEntry
from models.order import GuestDetails, Order, PaymentMethod
from modules.pricing import PriceCalculator


# Module logger
logger = get_logger(__name__)


class OrderStore:
    """
    Thread-safe storage for placed orders.

    Usage:
        store.put_order(order)
        order = store.get_order(order_number)
    """

    def __init__(self):
        """Initialize empty order store."""
        self._orders: Dict[str, Order] = {}
        self._lock = threading.Lock()

    def put_order(self, order: Order) -> None:
        with self._lock:
            self._orders[order.order_number] = order
            logger.debug(f"Stored order {order.order_number}")

    def get_order(self, order_number: str) -> Optional[Order]:
        """Return the order, or None if it was never recorded."""
        with self._lock:
            return self._orders.get(order_number)

    def count(self) -> int:
        with self._lock:
            return len(self._orders)

    def clear(self) -> int:
        """
        Remove all stored orders.

        Returns:
            Number of orders removed
        """
        with self._lock:
            count = len(self._orders)
            self._orders.clear()
            return count


class OrderService:
    """Turns selected cart entries into recorded orders."""

    def __init__(self, calculator: PriceCalculator, store: Optional[OrderStore] = None):
        self.calculator = calculator
        self.store = store or OrderStore()

    @staticmethod
    def generate_order_number(now: Optional[datetime] = None) -> str:
        """Order numbers look like PO-20261019-1A2B3C."""
        now = now or datetime.now(timezone.utc)
        return f"PO-{now:%Y%m%d}-{uuid.uuid4().hex[:6].upper()}"

    def place_order(
        self,
        entries: List[CartEntry],
        payment_method: PaymentMethod,
        guest: GuestDetails,
    ) -> Order:
        """
        Price the entries and record a new order.

        Prices are recomputed from each entry's job rather than trusted from
        the session.

        Raises:
            EmptyCheckoutError: If entries is empty
        """
        if not entries:
            raise EmptyCheckoutError()

        for entry in entries:
            entry.price = self.calculator.calculate_item_price(entry.job)

        now = datetime.now(timezone.utc)
        order = Order.from_entries(
            order_number=self.generate_order_number(now),
            entries=entries,
            totals=self.calculator.checkout_totals(entries),
            payment_method=payment_method,
            guest=guest,
            created_at=now.isoformat(),
        )
        self.store.put_order(order)

        logger.info(
            f"Order {order.order_number} placed: {order.item_count} items, "
            f"total {order.totals.total} ({payment_method.value})"
        )
        return order

    def get_order(self, order_number: str) -> Order:
        """
        Raises:
            OrderNotFoundError: If the order number is unknown
        """
        order = self.store.get_order(order_number)
        if order is None:
            raise OrderNotFoundError(order_number)
        return order
