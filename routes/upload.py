"""
PDF upload route.

Handles file upload, validation, and page-count detection.
Stores the document in session and redirects to the print options form.
"""

from datetime import datetime, timezone
from pathlib import Path

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
from werkzeug.utils import secure_filename

from core.exceptions import UploadError
from logging_config import get_logger
from modules.print_options import sanitize_text


# Module logger
logger = get_logger(__name__)

upload_bp = Blueprint("upload", __name__)

# Constants
ALLOWED_EXTENSIONS = {"pdf"}
MAX_FILENAME_LENGTH = 255
DOCUMENT_SESSION_KEY = "document"


def _allowed_file(filename: str) -> bool:
    """Check if file extension is allowed."""
    return "." in filename and filename.rsplit(".", 1)[1].lower() in ALLOWED_EXTENSIONS


def _manual_page_count(raw: str, maximum: int) -> int:
    """
    Parse the optional manual page count field.

    Returns 0 when the field is blank, meaning "use the detected count".

    Raises:
        UploadError: If the value is not a positive whole number within range
    """
    raw = (raw or "").strip()
    if not raw:
        return 0
    try:
        pages = int(raw)
    except ValueError:
        raise UploadError("Page count must be a whole number.")
    if pages < 1 or pages > maximum:
        raise UploadError(f"Page count must be between 1 and {maximum}.")
    return pages


def _save_and_count_pages(pdf_file, manual_pages: int) -> dict:
    """
    Validate, store and analyze an uploaded PDF.

    Returns:
        Document dict for session storage

    Raises:
        UploadError: If the upload is unusable
    """
    if not pdf_file or pdf_file.filename == "":
        raise UploadError("Please choose a PDF file to upload.")

    if not _allowed_file(pdf_file.filename):
        raise UploadError(
            "Unsupported file type. Please upload a PDF document.", pdf_file.filename
        )

    if len(pdf_file.filename) > MAX_FILENAME_LENGTH:
        raise UploadError(f"Filename too long. Maximum {MAX_FILENAME_LENGTH} characters.")

    upload_folder = Path(current_app.config["UPLOAD_FOLDER"])
    upload_folder.mkdir(parents=True, exist_ok=True)

    # Save file with timestamp prefix
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S")
    safe_name = secure_filename(pdf_file.filename)
    stored_name = f"{timestamp}_{safe_name}"
    stored_path = upload_folder / stored_name

    logger.info(f"Saving uploaded file: {stored_name}")
    pdf_file.save(stored_path)

    pdf_analyzer = current_app.config.get("PDF_ANALYZER")
    detected_pages = 0
    if pdf_analyzer:
        analysis = pdf_analyzer.analyze(stored_path)
        detected_pages = analysis.get("pages", 0)
        logger.info(f"PDF analysis complete: {detected_pages} pages")
    else:
        logger.warning("PDF analyzer not configured, page count must be entered manually")

    pages = manual_pages or detected_pages
    if pages < 1:
        raise UploadError(
            "Could not detect the page count. Please enter it manually.", safe_name
        )

    return {
        "document_name": sanitize_text(pdf_file.filename, MAX_FILENAME_LENGTH),
        "stored_filename": stored_name,
        "stored_path": str(stored_path),
        "uploaded_at": timestamp,
        "pages": pages,
        "detected_pages": detected_pages,
    }


@upload_bp.route("/upload", methods=["GET", "POST"])
def upload():
    """
    Handle PDF file upload.

    GET: Display upload form
    POST: Store the PDF, detect its page count, redirect to print options
    """
    if request.method == "POST":
        try:
            manual_pages = _manual_page_count(
                request.form.get("pages", ""),
                current_app.config.get("MAX_MANUAL_PAGES", 2000),
            )
            document = _save_and_count_pages(request.files.get("pdf"), manual_pages)

            # Replace any previous upload (and cancel an in-progress edit)
            session[DOCUMENT_SESSION_KEY] = document
            session.modified = True

            flash(f"PDF uploaded successfully ({document['pages']} pages).", "success")
            return redirect(url_for("customize.customize"))

        except UploadError as e:
            logger.warning(f"Upload rejected: {e}")
            flash(e.message, "error")
            return redirect(url_for("upload.upload"))

        except OSError as e:
            logger.error(f"Upload failed: {e}", exc_info=True)
            flash("Failed to store the uploaded file. Please try again.", "error")
            return redirect(url_for("upload.upload"))

    # GET request - display upload form
    return render_template("upload.html", document=session.get(DOCUMENT_SESSION_KEY))
