"""
Print job data models.

A PrintJob is one uploaded document configured for printing. It is built
transiently for every price preview and again when the document is added to
the cart, so it is a frozen dataclass: the calculator reads it, nobody
mutates it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional


class ColorMode(Enum):
    """How pages of a job are billed."""

    BLACK_AND_WHITE = "bw"
    """Every page billed at the black & white rate (bulk tier applies)."""

    COLOR = "color"
    """Every page billed at the flat color rate."""

    CUSTOM = "custom"
    """Pages assigned individually via CustomPageSelection."""

    @classmethod
    def parse(cls, value: Any) -> "ColorMode":
        """Resolve form/session spellings ('bw', 'blackAndWhite', ...)."""
        if isinstance(value, cls):
            return value
        key = str(value or "").strip()
        return _COLOR_MODE_ALIASES.get(key.lower(), None) or cls(key)


_COLOR_MODE_ALIASES = {
    "blackandwhite": ColorMode.BLACK_AND_WHITE,
    "black_and_white": ColorMode.BLACK_AND_WHITE,
    "mono": ColorMode.BLACK_AND_WHITE,
}


class Sides(Enum):
    """Whether each sheet is printed on one face or both."""

    SINGLE = "single"
    DOUBLE = "double"


class PaperSize(Enum):
    """Paper sizes offered in the options form. No effect on price."""

    A4 = "A4"
    LETTER = "Letter"
    LEGAL = "Legal"
    A3 = "A3"

    @property
    def label(self) -> str:
        return _PAPER_LABELS[self]


_PAPER_LABELS = {
    PaperSize.A4: "A4 (210 × 297 mm)",
    PaperSize.LETTER: "Letter (8.5 × 11 in)",
    PaperSize.LEGAL: "Legal (8.5 × 14 in)",
    PaperSize.A3: "A3 (297 × 420 mm)",
}


@dataclass(frozen=True)
class CustomPageSelection:
    """
    Raw page-range text for custom color mode.

    The strings are kept exactly as typed; they are parsed at pricing time
    against the job's page count. A page listed in both strings is billed
    twice.
    """

    bw_pages: str = ""
    """Pages to print in black & white, e.g. '1-10, 15'."""

    color_pages: str = ""
    """Pages to print in color, e.g. '11-14'."""

    def to_dict(self) -> Dict[str, str]:
        return {"bwPages": self.bw_pages, "colorPages": self.color_pages}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["CustomPageSelection"]:
        if not data:
            return None
        return cls(
            bw_pages=str(data.get("bwPages", data.get("bw_pages", "")) or ""),
            color_pages=str(data.get("colorPages", data.get("color_pages", "")) or ""),
        )


@dataclass(frozen=True)
class PrintJob:
    """
    Pricing input for a single document.

    Numeric fields are expected to be sanitized by the caller; the pricing
    engine does not re-validate them.
    """

    total_pages: int
    """Page count of the source document (detected or entered manually)."""

    copies: int = 1
    """Number of duplicate sets."""

    color_mode: ColorMode = ColorMode.BLACK_AND_WHITE
    sides: Sides = Sides.SINGLE
    paper_size: PaperSize = PaperSize.A4

    spiral_binding_count: int = 0
    """Number of copies that get spiral binding (independent of copies)."""

    record_binding_count: int = 0
    """Number of copies that get record/tape binding (independent of copies)."""

    custom_pages: Optional[CustomPageSelection] = None
    """Only consulted when color_mode is CUSTOM."""

    def with_copies(self, copies: int) -> "PrintJob":
        """Return a copy of this job with a different copy count."""
        return replace(self, copies=copies)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for session storage."""
        data = {
            "total_pages": self.total_pages,
            "copies": self.copies,
            "color_mode": self.color_mode.value,
            "sides": self.sides.value,
            "paper_size": self.paper_size.value,
            "spiral_binding": self.spiral_binding_count,
            "record_binding": self.record_binding_count,
        }
        if self.custom_pages is not None:
            data["custom_pages_config"] = self.custom_pages.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PrintJob":
        """
        Create from dictionary (session data or JSON request body).

        Raises:
            ValueError: If color_mode, sides or paper_size is not a known value
        """
        return cls(
            total_pages=int(data.get("total_pages", 0)),
            copies=int(data.get("copies", 1)),
            color_mode=ColorMode.parse(data.get("color_mode", "bw")),
            sides=Sides(data.get("sides", "single")),
            paper_size=PaperSize(data.get("paper_size", "A4")),
            spiral_binding_count=int(data.get("spiral_binding", 0) or 0),
            record_binding_count=int(data.get("record_binding", 0) or 0),
            custom_pages=CustomPageSelection.from_dict(data.get("custom_pages_config")),
        )
