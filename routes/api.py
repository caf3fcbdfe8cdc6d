"""
API routes (AJAX endpoints).

Handles:
- /api/price-preview - Live price breakdown while the options form changes
- /api/parse-pages - Parsed page list for a custom page-range field
- /health - Health check endpoint
"""

from flask import Blueprint, current_app, request

from core.exceptions import InvalidPrintOptionsError
from logging_config import get_logger
from modules.page_ranges import parse_page_numbers
from modules.print_options import parse_print_options


# Module logger
logger = get_logger(__name__)

api_bp = Blueprint("api", __name__)


def _page_count(payload: dict, field: str = "total_pages") -> int:
    """
    Read a page count from a JSON payload.

    Bounded by MAX_MANUAL_PAGES, the same limit the upload form applies.

    Raises:
        InvalidPrintOptionsError: If it is missing, negative or too large
    """
    raw = payload.get(field)
    try:
        pages = int(raw)
    except (TypeError, ValueError):
        raise InvalidPrintOptionsError(f"{field} must be a whole number.", field, raw)
    if pages < 0:
        raise InvalidPrintOptionsError(f"{field} cannot be negative.", field, raw)
    maximum = current_app.config.get("MAX_MANUAL_PAGES", 2000)
    if pages > maximum:
        raise InvalidPrintOptionsError(f"{field} cannot exceed {maximum}.", field, raw)
    return pages


@api_bp.route("/api/price-preview", methods=["POST"])
def price_preview():
    """
    Price a job without adding it to the cart.

    Request JSON uses the same field names as the options form plus
    ``total_pages``. Unparseable page ranges simply price as zero pages.
    """
    payload = request.get_json(silent=True) or {}

    try:
        job = parse_print_options(
            payload,
            total_pages=_page_count(payload),
            max_copies=current_app.config.get("MAX_COPIES", 500),
            max_binding=current_app.config.get("MAX_BINDING_COUNT", 100),
        )
    except InvalidPrintOptionsError as e:
        return {"error": e.message, "field": e.field}, 400

    return current_app.config["PRICE_CALCULATOR"].breakdown(job)


@api_bp.route("/api/parse-pages", methods=["POST"])
def parse_pages():
    """Return the pages a range expression selects, for the '<n> pages selected' hint."""
    payload = request.get_json(silent=True) or {}

    try:
        max_pages = _page_count(payload, "max_pages")
    except InvalidPrintOptionsError as e:
        return {"error": e.message, "field": e.field}, 400

    pages = parse_page_numbers(str(payload.get("expression") or ""), max_pages)
    return {"pages": pages, "count": len(pages)}


@api_bp.route("/health", methods=["GET"])
def health():
    """Health check endpoint with service status."""
    health_status = {
        "status": "ok",
        "environment": current_app.config.get("ENVIRONMENT", "unknown"),
        "checks": {},
    }

    for key, name in (
        ("PRICE_CALCULATOR", "pricing"),
        ("ORDER_SERVICE", "orders"),
        ("PDF_ANALYZER", "pdf_analyzer"),
    ):
        if current_app.config.get(key) is not None:
            health_status["checks"][name] = "ok"
        else:
            health_status["checks"][name] = "not_available"
            health_status["status"] = "degraded"

    status_code = 200 if health_status["status"] == "ok" else 503
    return health_status, status_code
