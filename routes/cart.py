"""
Cart routes.

Shows cart entries with checkout totals and handles per-item actions:
remove, change copies, and send back to the print options form for editing.
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

from core.exceptions import CartItemNotFoundError
from logging_config import get_logger
from routes.upload import DOCUMENT_SESSION_KEY
from services.cart_service import CartService


# Module logger
logger = get_logger(__name__)

cart_bp = Blueprint("cart", __name__)


def get_cart() -> CartService:
    """Cart for the current session, priced with the app's calculator."""
    return CartService(session, current_app.config["PRICE_CALCULATOR"])


@cart_bp.route("/cart", methods=["GET"])
def cart():
    """Display cart entries, subtotal, convenience fee and total."""
    cart_service = get_cart()
    entries = cart_service.entries()
    return render_template(
        "cart.html",
        entries=entries,
        totals=cart_service.totals(entries),
        pricing=current_app.config["PRICE_CALCULATOR"].table,
    )


@cart_bp.route("/cart/<item_id>/remove", methods=["POST"])
def remove_item(item_id: str):
    try:
        entry = get_cart().remove(item_id)
        flash(f"Removed {entry.document_name} from cart.", "success")
    except CartItemNotFoundError:
        flash("That item is no longer in your cart.", "warning")
    return redirect(url_for("cart.cart"))


@cart_bp.route("/cart/<item_id>/copies", methods=["POST"])
def change_copies(item_id: str):
    """Increment or decrement copies by the posted delta (minimum one copy)."""
    try:
        delta = int(request.form.get("delta", "0"))
    except ValueError:
        flash("Invalid quantity change.", "error")
        return redirect(url_for("cart.cart"))

    max_copies = current_app.config.get("MAX_COPIES", 500)
    try:
        cart_service = get_cart()
        entry = cart_service.get(item_id)
        if entry.job.copies + delta > max_copies:
            flash(f"Maximum is {max_copies} copies.", "error")
        else:
            cart_service.change_copies(item_id, delta)
    except CartItemNotFoundError:
        flash("That item is no longer in your cart.", "warning")
    return redirect(url_for("cart.cart"))


@cart_bp.route("/cart/<item_id>/edit", methods=["POST"])
def edit_item(item_id: str):
    """Load a cart entry back into the print options form."""
    try:
        entry = get_cart().get(item_id)
    except CartItemNotFoundError:
        flash("That item is no longer in your cart.", "warning")
        return redirect(url_for("cart.cart"))

    session[DOCUMENT_SESSION_KEY] = {
        "document_name": entry.document_name,
        "stored_filename": entry.stored_filename,
        "pages": entry.job.total_pages,
        "editing_item_id": entry.id,
    }
    session.modified = True
    logger.info(f"Editing cart item {item_id[:8]}")
    return redirect(url_for("customize.customize"))
