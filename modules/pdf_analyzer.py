"""Lightweight PDF analyzer for detecting the page count of uploads."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Any

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from logging_config import get_logger

logger = get_logger(__name__)


class PDFAnalyzer:
    """Extract minimal metadata, resilient to malformed PDFs."""

    def analyze(self, pdf_path: str | Path) -> Dict[str, Any]:
        path = Path(pdf_path)
        info: Dict[str, Any] = {
            "path": str(path),
            "pages": 0,
            "size_kb": round(path.stat().st_size / 1024, 2) if path.exists() else 0,
            "page_dimensions": [],
        }

        try:
            reader = PdfReader(str(path))
            info["pages"] = len(reader.pages)
            if reader.pages:
                page = reader.pages[0]
                width = round(float(page.mediabox.width) * 25.4 / 72, 1)
                height = round(float(page.mediabox.height) * 25.4 / 72, 1)
                info["page_dimensions"].append({"width_mm": width, "height_mm": height})
        except (PdfReadError, OSError, ValueError) as exc:
            # Page count falls back to manual entry on the upload form.
            logger.warning(f"PDF analysis failed for {path.name}: {exc}")
            info["error"] = f"PDF analysis failed: {exc}"

        return info
