"""
Flask route blueprints for the print storefront.

This module contains all route handlers organized by functionality:
- main: Home redirect
- upload: PDF upload and page-count detection
- customize: Print options form
- cart: Cart display and per-item actions
- checkout: Guest checkout and order confirmation
- api: AJAX endpoints (price preview, page parsing, health)

Each blueprint is registered with the Flask app in create_app().
"""

from .main import main_bp
from .upload import upload_bp
from .customize import customize_bp
from .cart import cart_bp
from .checkout import checkout_bp
from .api import api_bp

__all__ = [
    "main_bp",
    "upload_bp",
    "customize_bp",
    "cart_bp",
    "checkout_bp",
    "api_bp",
]


def register_blueprints(app):
    """
    Register all blueprints with the Flask app.

    Args:
        app: Flask application instance
    """
    app.register_blueprint(main_bp)
    app.register_blueprint(upload_bp)
    app.register_blueprint(customize_bp)
    app.register_blueprint(cart_bp)
    app.register_blueprint(checkout_bp)
    app.register_blueprint(api_bp)
