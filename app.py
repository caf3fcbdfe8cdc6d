"""
Print storefront - Flask Application Entry Point.

This is a slim app factory that:
1. Loads configuration (.env + config classes)
2. Configures logging
3. Builds the pricing engine and services
4. Registers route blueprints
5. Sets up error handlers and template helpers

ARCHITECTURE:
    PriceCalculator (stateless, shared)
    ├── CartService (per request, over the cookie session)
    └── OrderService + OrderStore (shared, lock-guarded)
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, flash, redirect, session, url_for
from werkzeug.exceptions import RequestEntityTooLarge

from logging_config import setup_logging, get_logger
from modules.pdf_analyzer import PDFAnalyzer
from modules.pricing import PriceCalculator, format_price
from routes import register_blueprints
from services.cart_service import CART_SESSION_KEY
from services.order_service import OrderService, OrderStore


# Module logger (configured after setup_logging)
logger = get_logger(__name__)


def _get_base_path() -> Path:
    """
    Get the base path for the application.

    In PyInstaller bundle: Returns the directory containing the executable
    In development: Returns the directory containing app.py
    """
    if getattr(sys, 'frozen', False):
        return Path(sys.executable).parent
    else:
        return Path(__file__).parent


def create_app(config_object: Optional[str] = None) -> Flask:
    """
    Application factory - creates and configures Flask app.

    Args:
        config_object: Import path of the config class
            (default: "config.Config")

    Returns:
        Configured Flask application
    """
    # Load .env from base path (next to executable in production)
    base_path = _get_base_path()
    env_file = base_path / '.env'
    if env_file.exists():
        load_dotenv(env_file, override=True)
    else:
        load_dotenv(override=True)

    app = Flask(__name__)
    app.config.from_object(config_object or "config.Config")

    # Configure logging
    log_level = logging.DEBUG if app.config.get("DEBUG") else logging.INFO
    enable_file_logging = app.config.get("ENVIRONMENT") == "production"

    root_logger = setup_logging(log_level=log_level, enable_file_logging=enable_file_logging)

    # Set Flask's logger to use our configured logger
    app.logger.handlers = root_logger.handlers
    app.logger.setLevel(log_level)

    logger.info(f"Starting print storefront in {app.config.get('ENVIRONMENT')} mode")

    # Ensure upload folder exists
    upload_folder = Path(app.config["UPLOAD_FOLDER"])
    upload_folder.mkdir(parents=True, exist_ok=True)

    # =========================================================================
    # PRICING & SERVICES
    # =========================================================================

    calculator = PriceCalculator(app.config["PRICING_TABLE"])
    app.config["PRICE_CALCULATOR"] = calculator
    app.config["ORDER_SERVICE"] = OrderService(calculator, OrderStore())
    app.config["PDF_ANALYZER"] = PDFAnalyzer()

    # =========================================================================
    # REGISTER BLUEPRINTS
    # =========================================================================

    register_blueprints(app)

    # =========================================================================
    # TEMPLATE HELPERS
    # =========================================================================

    app.add_template_filter(format_price, "price")

    @app.context_processor
    def inject_cart_count():
        """Cart badge count for the header."""
        return {"cart_count": len(session.get(CART_SESSION_KEY, []))}

    # =========================================================================
    # ERROR HANDLERS
    # =========================================================================

    @app.errorhandler(RequestEntityTooLarge)
    def handle_file_too_large(e):
        max_mb = app.config.get("MAX_CONTENT_LENGTH", 16 * 1024 * 1024) / (1024 * 1024)
        flash(f"File too large. Maximum upload size is {max_mb:.0f} MB.", "error")
        return redirect(url_for("upload.upload"))

    @app.errorhandler(404)
    def handle_not_found(e):
        flash("Page not found.", "warning")
        return redirect(url_for("upload.upload"))

    @app.errorhandler(500)
    def handle_server_error(e):
        logger.error(f"500 error: {e}", exc_info=True)
        flash("An unexpected error occurred. Please try again.", "error")
        return redirect(url_for("upload.upload"))

    logger.info("Application initialized successfully")
    return app


if __name__ == "__main__":
    app = create_app()
    debug_mode = os.environ.get("FLASK_DEBUG", "1") == "1"
    app.run(debug=debug_mode)
