"""
Checkout and confirmation routes.

Guest checkout: the customer selects cart items, picks cash-on-delivery or
online payment, and leaves contact details. Payment collection itself
happens outside this application; online orders are recorded with a
pending payment status.
"""

import re

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

from core.exceptions import EmptyCheckoutError, OrderNotFoundError
from logging_config import get_logger
from models.order import GuestDetails, PaymentMethod
from modules.print_options import sanitize_text
from routes.cart import get_cart


# Module logger
logger = get_logger(__name__)

checkout_bp = Blueprint("checkout", __name__)

# Constants
MAX_NAME_LENGTH = 100
MAX_EMAIL_LENGTH = 254
PHONE_PATTERN = re.compile(r"\+?[0-9][0-9 -]{6,18}[0-9]")
LAST_ORDER_SESSION_KEY = "last_order"


def _guest_details(form) -> GuestDetails:
    """
    Read and sanitize guest contact fields.

    Raises:
        ValueError: With a user-facing message when a field is unusable
    """
    name = sanitize_text(form.get("name"), MAX_NAME_LENGTH)
    phone = sanitize_text(form.get("phone"), 20)
    email = sanitize_text(form.get("email"), MAX_EMAIL_LENGTH)

    if not name:
        raise ValueError("Please enter your name.")
    if not PHONE_PATTERN.fullmatch(phone):
        raise ValueError("Please enter a valid phone number.")
    if email and "@" not in email:
        raise ValueError("Please enter a valid email address.")
    return GuestDetails(name=name, phone=phone, email=email)


@checkout_bp.route("/checkout", methods=["POST"])
def checkout():
    """Place an order for the selected cart items."""
    cart_service = get_cart()
    order_service = current_app.config["ORDER_SERVICE"]

    try:
        payment_method = PaymentMethod(request.form.get("payment_method", ""))
    except ValueError:
        flash("Please choose a payment method.", "error")
        return redirect(url_for("cart.cart"))

    try:
        guest = _guest_details(request.form)
    except ValueError as e:
        flash(str(e), "error")
        return redirect(url_for("cart.cart"))

    selected = cart_service.selected(request.form.getlist("selected"))
    try:
        order = order_service.place_order(selected, payment_method, guest)
    except EmptyCheckoutError as e:
        flash(e.message, "error")
        return redirect(url_for("cart.cart"))

    cart_service.remove_many(entry.id for entry in selected)
    session[LAST_ORDER_SESSION_KEY] = order.order_number
    session.modified = True

    flash(f"Order {order.order_number} placed.", "success")
    return redirect(url_for("checkout.confirmation", order_number=order.order_number))


@checkout_bp.route("/confirmation/<order_number>", methods=["GET"])
def confirmation(order_number: str):
    """
    Display order confirmation.

    Only the session that placed the order may view it.
    """
    if session.get(LAST_ORDER_SESSION_KEY) != order_number:
        flash("Place an order to see the confirmation page.", "warning")
        return redirect(url_for("upload.upload"))

    try:
        order = current_app.config["ORDER_SERVICE"].get_order(order_number)
    except OrderNotFoundError as e:
        logger.error(f"Confirmation for unknown order: {e}")
        flash("We could not find that order.", "error")
        return redirect(url_for("upload.upload"))

    return render_template("confirmation.html", order=order)
