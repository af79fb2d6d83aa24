"""Resume document text extraction (PDF, DOCX, plain text)."""

from .exceptions import DocumentReadError, ExtractionError, UnsupportedFormatError
from .service import DOCX, PDF, TEXT, detect_content_type, extract_text

__all__ = [
    "extract_text",
    "detect_content_type",
    "PDF",
    "DOCX",
    "TEXT",
    "ExtractionError",
    "UnsupportedFormatError",
    "DocumentReadError",
]
