"""PDF upload text extraction."""
from __future__ import annotations

import io
import logging
from typing import List, Optional

import PyPDF2

from covergen.errors import PdfReadError

logger = logging.getLogger(__name__)


def extract_pdf_text(data: bytes, field: Optional[str] = None) -> Optional[str]:
    """
    Extract the plain text of every page of a PDF.

    Args:
        data: Raw bytes of the uploaded file
        field: Form field the bytes came from, carried on the error

    Returns:
        The trimmed text, or None when the document holds no extractable text

    Raises:
        PdfReadError: If the bytes cannot be parsed as a PDF
    """
    try:
        reader = PyPDF2.PdfReader(io.BytesIO(data))
        if reader.is_encrypted:
            # Owner-password-only PDFs open with an empty user password
            reader.decrypt("")
        parts: List[str] = []
        for page in reader.pages:
            parts.append(page.extract_text() or "")
    except Exception as e:
        logger.warning("PDF extraction failed for %s: %s: %s", field or "upload", type(e).__name__, e)
        raise PdfReadError(field=field) from e

    text = "\n".join(parts).strip()
    return text or None
