"""
Order data models.

An Order is the snapshot handed to the order sink at checkout: the selected
cart entries, their totals, payment choice and guest contact details.

Orders are frozen once built. Payment collection and delivery tracking
happen outside this application.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from models.cart import CartEntry


class OrderStatus(Enum):
    """
    Fulfilment status of an order.

    Lifecycle:
        PLACED -> PROCESSING -> READY -> OUT_FOR_DELIVERY -> DELIVERED
        (any state before DELIVERED may go to CANCELLED)
    """

    PLACED = "placed"
    PROCESSING = "processing"
    READY = "ready"
    OUT_FOR_DELIVERY = "out_for_delivery"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentMethod(Enum):
    """How the customer pays."""

    COD = "cod"
    """Cash on delivery."""

    ONLINE = "online"
    """Paid through the payment gateway."""


class PaymentStatus(Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class OrderTotals:
    """Money summary for a checkout."""

    subtotal: Decimal
    """Sum of item prices."""

    convenience_fee: Decimal
    """Flat fee, zero when the subtotal is at or below the threshold."""

    total: Decimal
    """Amount the customer pays."""

    @property
    def fee_waived(self) -> bool:
        return self.convenience_fee == 0

    def to_dict(self) -> Dict[str, str]:
        return {
            "subtotal": f"{self.subtotal:.2f}",
            "convenience_fee": f"{self.convenience_fee:.2f}",
            "total": f"{self.total:.2f}",
        }


@dataclass(frozen=True)
class GuestDetails:
    """Contact details collected by the guest checkout form."""

    name: str
    phone: str
    email: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "phone": self.phone, "email": self.email}


@dataclass(frozen=True)
class Order:
    """
    A placed order.

    This is a FROZEN dataclass - items are stored as a tuple of cart entry
    dictionaries so the snapshot cannot change after the cart is edited.
    """

    order_number: str
    items: Tuple[Dict[str, Any], ...]
    totals: OrderTotals
    payment_method: PaymentMethod
    guest: GuestDetails
    created_at: str
    status: OrderStatus = OrderStatus.PLACED
    payment_status: PaymentStatus = PaymentStatus.PENDING

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def total_amount(self) -> Decimal:
        return self.totals.total

    @classmethod
    def from_entries(
        cls,
        order_number: str,
        entries: "list[CartEntry]",
        totals: OrderTotals,
        payment_method: PaymentMethod,
        guest: GuestDetails,
        created_at: str,
    ) -> "Order":
        """Snapshot cart entries into a new order."""
        return cls(
            order_number=order_number,
            items=tuple(entry.to_dict() for entry in entries),
            totals=totals,
            payment_method=payment_method,
            guest=guest,
            created_at=created_at,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for templates and JSON responses."""
        return {
            "order_number": self.order_number,
            "status": self.status.value,
            "payment_method": self.payment_method.value,
            "payment_status": self.payment_status.value,
            "items": [dict(item) for item in self.items],
            "totals": self.totals.to_dict(),
            "guest": self.guest.to_dict(),
            "created_at": self.created_at,
        }
