"""
Tests for logging setup and the request context filter.
"""

import logging
import subprocess
import sys
from pathlib import Path

from flask import Flask

from logging_config import APP_LOGGER_NAME, RequestContextFilter, get_logger

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def _record() -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, __file__, 1, "message", None, None)


class TestRequestContextFilter:

    def test_outside_request(self):
        record = _record()
        assert RequestContextFilter().filter(record) is True
        assert record.request_line == "-"

    def test_inside_request(self):
        app = Flask(__name__)
        record = _record()
        with app.test_request_context("/cart", method="POST"):
            RequestContextFilter().filter(record)
        assert record.request_line == "POST /cart"


class TestGetLogger:

    def test_namespaced(self):
        assert get_logger("modules.pricing").name == f"{APP_LOGGER_NAME}.modules.pricing"

    def test_already_namespaced(self):
        assert get_logger(APP_LOGGER_NAME).name == APP_LOGGER_NAME


def test_pricing_engine_imports_without_flask():
    """The calculator and parser stay usable outside the web app."""
    code = (
        "import sys\n"
        "import modules.pricing, modules.page_ranges\n"
        "assert 'flask' not in sys.modules, 'flask imported'\n"
    )
    result = subprocess.run(
        [sys.executable, "-c", code], cwd=PROJECT_ROOT, capture_output=True, text=True
    )
    assert result.returncode == 0, result.stderr
