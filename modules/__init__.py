"""Helper modules for the print storefront."""

__all__ = [
    "page_ranges",
    "pdf_analyzer",
    "pricing",
    "print_options",
]
