"""PDF text extraction for uploaded proposals."""

import io
import logging

from pypdf import PdfReader
from pypdf.errors import PyPdfError

from proposal_analyzer.core.exceptions import UnreadableDocument

logger = logging.getLogger(__name__)

PDF_SIGNATURE = b"%PDF"


def is_pdf(data: bytes) -> bool:
    """Check the PDF magic bytes."""
    return data.lstrip()[:4] == PDF_SIGNATURE


def extract_pdf_text(data: bytes) -> str:
    """
    Extract the text layer of a PDF.

    Args:
        data: Raw PDF bytes

    Returns:
        Page texts joined by newlines (empty when the PDF has no text layer)

    Raises:
        UnreadableDocument: When the bytes cannot be parsed as a PDF
    """
    try:
        reader = PdfReader(io.BytesIO(data))
        pages = [page.extract_text() or "" for page in reader.pages]
    except (PyPdfError, ValueError, KeyError) as e:
        logger.error(f"Failed to parse PDF: {e}")
        raise UnreadableDocument(f"Failed to read PDF document: {e}") from e

    text = "\n".join(page for page in pages if page.strip())
    logger.info(f"Extracted {len(text)} chars from {len(pages)} PDF pages")
    return text
