"""Lenient page-range parsing for custom page selections.

Customers type selections such as ``"1-5, 8, 10-12"`` into the print options
form while the price preview updates live. Anything that cannot be
interpreted is skipped instead of raising, so half-typed input simply does
not count toward the price yet.
"""

from __future__ import annotations

import re
from typing import List, Optional

_INTEGER = re.compile(r"[0-9]+")

# Form fields default to "0" meaning "nothing selected here".
SKIP_TOKEN = "0"


def _to_page(text: str, max_pages: int) -> Optional[int]:
    """Integer value of a page token, or None when it is not a plain number.

    Digit runs too long to be a page of this document count as
    ``max_pages + 1`` and are never converted.
    """
    text = text.strip()
    if not _INTEGER.fullmatch(text):
        return None
    digits = text.lstrip("0")
    if len(digits) > len(str(max(max_pages, 0))):
        return max_pages + 1
    return int(digits or "0")


def parse_page_numbers(expression: Optional[str], max_pages: int) -> List[int]:
    """Parse a page-range expression into sorted, unique page numbers.

    Args:
        expression: Comma-separated page numbers and ``low-high`` ranges
        max_pages: Page count of the document; larger numbers are dropped

    Returns:
        Ascending list of pages within ``[1, max_pages]``. Empty when nothing
        valid was selected.
    """
    if not expression or not expression.strip():
        return []

    pages = set()
    for token in (part.strip() for part in expression.split(",")):
        if not token or token == SKIP_TOKEN:
            continue

        if "-" in token:
            bounds = token.split("-")
            if len(bounds) != 2:
                continue
            start, end = _to_page(bounds[0], max_pages), _to_page(bounds[1], max_pages)
            # A zero endpoint never selects anything, same as "0" alone.
            if not start or not end or start > end:
                continue
            pages.update(range(start, min(end, max_pages) + 1))
        else:
            page = _to_page(token, max_pages)
            if page is not None and 1 <= page <= max_pages:
                pages.add(page)

    return sorted(pages)
