"""
Cart data models.

A CartEntry is a priced PrintJob committed to the cart. Entries live in the
Flask session as plain dictionaries; money is stored as a string so the
session serializer never has to deal with Decimal.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict

from models.print_job import PrintJob


def _new_entry_id() -> str:
    return uuid.uuid4().hex


@dataclass
class CartEntry:
    """
    One document in the cart.

    Lifecycle:
        1. Created when the customize form is submitted
        2. Re-priced whenever copies change or the options are edited
        3. Removed by the user or snapshotted into an Order at checkout
    """

    document_name: str
    """Original filename shown to the customer."""

    job: PrintJob
    """Print configuration this entry was priced from."""

    price: Decimal = Decimal("0.00")
    """Item price with copies and binding folded in."""

    stored_filename: str = ""
    """Name of the uploaded file on disk."""

    id: str = field(default_factory=_new_entry_id)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for session storage."""
        return {
            "id": self.id,
            "document_name": self.document_name,
            "stored_filename": self.stored_filename,
            "job": self.job.to_dict(),
            "price": f"{self.price:.2f}",
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CartEntry":
        """Create from dictionary (e.g., from session)."""
        return cls(
            id=data.get("id") or _new_entry_id(),
            document_name=data.get("document_name", ""),
            stored_filename=data.get("stored_filename", ""),
            job=PrintJob.from_dict(data.get("job", {})),
            price=Decimal(str(data.get("price", "0.00"))),
        )
