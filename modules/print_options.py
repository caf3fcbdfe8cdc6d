"""Turn submitted print-options fields into a PrintJob.

Used by the customize form and the JSON price-preview endpoint. Structural
problems (unknown color mode, copies that are not a number) raise
InvalidPrintOptionsError. Page-range text is only sanitized, never
validated: the pricing engine ignores what it cannot parse.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

import bleach

from core.exceptions import InvalidPrintOptionsError
from models.print_job import ColorMode, CustomPageSelection, PaperSize, PrintJob, Sides

MAX_PAGE_RANGE_LENGTH = 500


def sanitize_text(text: Optional[str], max_length: Optional[int] = None) -> str:
    """
    Sanitize user input text to prevent XSS and injection attacks.

    Args:
        text: Raw input text
        max_length: Optional maximum length to enforce

    Returns:
        Sanitized text safe for storage and display
    """
    if not text:
        return ""

    text = str(text).strip()
    text = bleach.clean(text, tags=[], strip=True)

    if max_length and len(text) > max_length:
        text = text[:max_length]

    return text


def _bounded_int(fields: Mapping[str, Any], name: str, default: int,
                 minimum: int, maximum: int) -> int:
    label = name.replace("_", " ").capitalize()
    raw = fields.get(name, default)
    if raw in (None, ""):
        raw = default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise InvalidPrintOptionsError(f"{label} must be a whole number.", name, raw)
    if value < minimum:
        raise InvalidPrintOptionsError(f"{label} must be at least {minimum}.", name, raw)
    if value > maximum:
        raise InvalidPrintOptionsError(f"{label} cannot exceed {maximum}.", name, raw)
    return value


def _choice(enum_parse, fields: Mapping[str, Any], name: str, default: str):
    raw = fields.get(name) or default
    try:
        return enum_parse(raw)
    except ValueError:
        raise InvalidPrintOptionsError(f"Unsupported {name.replace('_', ' ')}: {raw}", name, raw)


def parse_print_options(
    fields: Mapping[str, Any],
    total_pages: int,
    max_copies: int = 500,
    max_binding: int = 100,
) -> PrintJob:
    """
    Build a PrintJob from form or JSON fields.

    Expected fields: copies, color_mode, sides, paper_size, spiral_binding,
    record_binding, bw_pages, color_pages (the last two only for custom).

    Raises:
        InvalidPrintOptionsError: If a field has an unusable value
    """
    copies = _bounded_int(fields, "copies", 1, 1, max_copies)
    spiral = _bounded_int(fields, "spiral_binding", 0, 0, max_binding)
    record = _bounded_int(fields, "record_binding", 0, 0, max_binding)

    color_mode = _choice(ColorMode.parse, fields, "color_mode", ColorMode.BLACK_AND_WHITE.value)
    sides = _choice(Sides, fields, "sides", Sides.SINGLE.value)
    paper_size = _choice(PaperSize, fields, "paper_size", PaperSize.A4.value)

    custom_pages = None
    if color_mode is ColorMode.CUSTOM:
        custom_pages = CustomPageSelection(
            bw_pages=sanitize_text(fields.get("bw_pages"), MAX_PAGE_RANGE_LENGTH),
            color_pages=sanitize_text(fields.get("color_pages"), MAX_PAGE_RANGE_LENGTH),
        )

    return PrintJob(
        total_pages=total_pages,
        copies=copies,
        color_mode=color_mode,
        sides=sides,
        paper_size=paper_size,
        spiral_binding_count=spiral,
        record_binding_count=record,
        custom_pages=custom_pages,
    )
