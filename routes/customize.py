"""
Print options route.

Shows the options form for the uploaded document with a live price
preview, and commits the configured job to the cart.
"""

from flask import (
    Blueprint,
    current_app,
    flash,
    redirect,
    render_template,
    request,
    session,
    url_for,
)

from core.exceptions import CartItemNotFoundError, InvalidPrintOptionsError
from logging_config import get_logger
from models.print_job import ColorMode, PaperSize, PrintJob, Sides
from modules.print_options import parse_print_options
from routes.cart import get_cart
from routes.upload import DOCUMENT_SESSION_KEY


# Module logger
logger = get_logger(__name__)

customize_bp = Blueprint("customize", __name__)


def _current_job(document: dict) -> PrintJob:
    """Job to pre-fill the form with: the edited entry's job, or defaults."""
    item_id = document.get("editing_item_id")
    if item_id:
        try:
            return get_cart().get(item_id).job
        except CartItemNotFoundError:
            document.pop("editing_item_id", None)
            session.modified = True
    return PrintJob(total_pages=document.get("pages", 0))


@customize_bp.route("/customize", methods=["GET", "POST"])
def customize():
    """
    Handle print options.

    GET: Display options form with the current price
    POST: Validate options, add (or update) the cart entry, redirect to cart
    """
    document = session.get(DOCUMENT_SESSION_KEY)
    if not document:
        flash("Please upload a PDF before choosing print options.", "warning")
        return redirect(url_for("upload.upload"))

    calculator = current_app.config["PRICE_CALCULATOR"]

    if request.method == "POST":
        try:
            job = parse_print_options(
                request.form,
                total_pages=document.get("pages", 0),
                max_copies=current_app.config.get("MAX_COPIES", 500),
                max_binding=current_app.config.get("MAX_BINDING_COUNT", 100),
            )
        except InvalidPrintOptionsError as e:
            logger.warning(f"Invalid print options: {e}")
            flash(e.message, "error")
            return redirect(url_for("customize.customize"))

        cart_service = get_cart()
        item_id = document.get("editing_item_id")
        try:
            if item_id:
                entry = cart_service.update(item_id, job)
                flash(f"Updated {entry.document_name}.", "success")
            else:
                entry = cart_service.add(
                    document.get("document_name", ""),
                    document.get("stored_filename", ""),
                    job,
                )
                flash(f"Added {entry.document_name} to cart.", "success")
        except CartItemNotFoundError:
            flash("The item you were editing is no longer in your cart.", "warning")

        session.pop(DOCUMENT_SESSION_KEY, None)
        session.modified = True
        return redirect(url_for("cart.cart"))

    # GET request - display options form
    job = _current_job(document)
    return render_template(
        "customize.html",
        document=document,
        job=job,
        preview=calculator.breakdown(job),
        color_modes=list(ColorMode),
        sides_options=list(Sides),
        paper_sizes=list(PaperSize),
    )
