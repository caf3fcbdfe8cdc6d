"""
Main routes (home).

Simple landing redirect.
"""

from flask import Blueprint, redirect, url_for

main_bp = Blueprint("main", __name__)


@main_bp.route("/")
def index():
    """Redirect root to the upload page, where every order starts."""
    return redirect(url_for("upload.upload"))
