"""
Configuration for the print storefront.

Values come from the environment (a .env file is loaded first). The price
list itself is not environment-driven: PRICING_TABLE holds the immutable
PricingTable injected into the app's PriceCalculator.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from modules.pricing import DEFAULT_PRICING

# Load .env file early so environment variables are available for Config class
# This must happen before the Config class is defined
load_dotenv(override=True)

# Base directory (where this file lives)
BASE_DIR = Path(__file__).resolve().parent


class Config:
    """Default configuration for the Flask application."""

    # Flask settings
    SECRET_KEY = os.environ.get("FLASK_SECRET_KEY", "dev-secret-key")
    UPLOAD_FOLDER = os.environ.get(
        "UPLOAD_FOLDER", str(BASE_DIR / "static" / "uploads")
    )
    MAX_CONTENT_LENGTH = 16 * 1024 * 1024  # 16 MB uploads
    SESSION_COOKIE_NAME = "print_storefront_session"
    ENVIRONMENT = os.environ.get("FLASK_ENV", "development")

    # Debug mode
    DEBUG = os.environ.get("FLASK_DEBUG", "1") == "1"

    # ==========================================================================
    # Print options limits
    # ==========================================================================
    # Upper bounds enforced by the customize form. The pricing engine itself
    # accepts any integers.
    MAX_COPIES = int(os.environ.get("MAX_COPIES", "500"))
    MAX_BINDING_COUNT = int(os.environ.get("MAX_BINDING_COUNT", "100"))
    MAX_MANUAL_PAGES = int(os.environ.get("MAX_MANUAL_PAGES", "2000"))

    # Price list (see modules.pricing.PricingTable)
    PRICING_TABLE = DEFAULT_PRICING


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    PERMANENT_SESSION_LIFETIME = 3600  # 1 hour


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    TESTING = False


class TestingConfig(Config):
    """Testing configuration."""
    DEBUG = False
    TESTING = True
    SECRET_KEY = "testing-secret-key"
