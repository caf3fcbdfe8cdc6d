"""
Session-backed shopping cart.

The cart is a list of CartEntry dictionaries stored under one session key.
Every mutation re-prices the affected entry through the injected
PriceCalculator, so the stored price always matches the stored job.

Usage:
    cart = CartService(session, calculator)
    entry = cart.add("thesis.pdf", "20261019_thesis.pdf", job)
    cart.change_copies(entry.id, +1)
    totals = cart.totals()
"""

from __future__ import annotations

from typing import Iterable, List, MutableMapping, Optional

from core.exceptions import CartItemNotFoundError
from logging_config import get_logger
from models.cart import CartEntry
from models.order import OrderTotals
from models.print_job import PrintJob
from modules.pricing import PriceCalculator


# Module logger
logger = get_logger(__name__)

CART_SESSION_KEY = "cart"


class CartService:
    """Cart operations over a Flask session (or any mutable mapping)."""

    def __init__(self, session: MutableMapping, calculator: PriceCalculator):
        self.session = session
        self.calculator = calculator

    def __len__(self) -> int:
        return len(self._raw())

    def _raw(self) -> list:
        return self.session.setdefault(CART_SESSION_KEY, [])

    def _save(self, entries: List[CartEntry]) -> None:
        self.session[CART_SESSION_KEY] = [entry.to_dict() for entry in entries]
        # Nested list changes are invisible to the session otherwise.
        self.session.modified = True

    def entries(self) -> List[CartEntry]:
        """All cart entries in insertion order."""
        return [CartEntry.from_dict(data) for data in self._raw()]

    def get(self, item_id: str) -> CartEntry:
        """
        Look up a single entry.

        Raises:
            CartItemNotFoundError: If no entry has this id
        """
        for entry in self.entries():
            if entry.id == item_id:
                return entry
        raise CartItemNotFoundError(item_id)

    def add(self, document_name: str, stored_filename: str, job: PrintJob) -> CartEntry:
        """Price a job and append it to the cart."""
        entry = CartEntry(
            document_name=document_name,
            stored_filename=stored_filename,
            job=job,
            price=self.calculator.calculate_item_price(job),
        )
        entries = self.entries()
        entries.append(entry)
        self._save(entries)
        logger.info(f"Added {document_name} to cart: {entry.price} ({len(entries)} items)")
        return entry

    def update(self, item_id: str, job: PrintJob) -> CartEntry:
        """Replace an entry's print options and re-price it."""
        entries = self.entries()
        for entry in entries:
            if entry.id == item_id:
                entry.job = job
                entry.price = self.calculator.calculate_item_price(job)
                self._save(entries)
                logger.info(f"Updated cart item {item_id[:8]}: {entry.price}")
                return entry
        raise CartItemNotFoundError(item_id)

    def change_copies(self, item_id: str, delta: int) -> CartEntry:
        """Adjust copies by delta, never below one."""
        entry = self.get(item_id)
        copies = max(1, entry.job.copies + delta)
        return self.update(item_id, entry.job.with_copies(copies))

    def remove(self, item_id: str) -> CartEntry:
        """Remove one entry and return it."""
        entry = self.get(item_id)
        self._save([e for e in self.entries() if e.id != item_id])
        logger.info(f"Removed cart item {item_id[:8]}")
        return entry

    def remove_many(self, item_ids: Iterable[str]) -> int:
        """Remove every entry whose id is listed. Returns the number removed."""
        ids = set(item_ids)
        entries = self.entries()
        kept = [e for e in entries if e.id not in ids]
        self._save(kept)
        return len(entries) - len(kept)

    def selected(self, item_ids: Iterable[str]) -> List[CartEntry]:
        """Entries whose ids are listed, in cart order. Unknown ids are ignored."""
        ids = set(item_ids)
        return [entry for entry in self.entries() if entry.id in ids]

    def totals(self, entries: Optional[List[CartEntry]] = None) -> OrderTotals:
        """Checkout totals for the given entries (default: whole cart)."""
        if entries is None:
            entries = self.entries()
        return self.calculator.checkout_totals(entries)

    def clear(self) -> None:
        self.session.pop(CART_SESSION_KEY, None)
        self.session.modified = True
