"""Plain-text extraction from uploaded resume documents.

Supports PDF (pdfplumber), DOCX (python-docx) and plain text. Extraction is
best effort: layout is discarded and pages/paragraphs are joined with newlines.
"""

from pathlib import Path
from typing import Optional, Union

import pdfplumber
from docx import Document

from app.logging import get_logger

from .exceptions import DocumentReadError, UnsupportedFormatError

logger = get_logger(__name__, component="extraction")

PDF = "application/pdf"
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TEXT = "text/plain"

EXTENSION_TYPES = {
    ".pdf": PDF,
    ".docx": DOCX,
    ".txt": TEXT,
    ".text": TEXT,
    ".md": TEXT,
}


def detect_content_type(path: Path, content_type: Optional[str] = None) -> str:
    """Resolve a document's content type from an explicit value or its extension.

    An explicit content type wins; parameters such as "; charset=utf-8" are ignored.
    """
    if content_type:
        return content_type.split(";", 1)[0].strip().lower()
    return EXTENSION_TYPES.get(path.suffix.lower(), "application/octet-stream")


def extract_text(path: Union[str, Path], content_type: Optional[str] = None) -> str:
    """Extract plain text from a resume document.

    Args:
        path: Path to the document
        content_type: Optional MIME type (otherwise inferred from the extension)

    Returns:
        Extracted text (possibly empty)

    Raises:
        UnsupportedFormatError: If the document type is not supported
        DocumentReadError: If the file is missing or cannot be parsed
    """
    path = Path(path)
    resolved_type = detect_content_type(path, content_type)

    if resolved_type not in (PDF, DOCX, TEXT):
        logger.warning(
            f"Unsupported file type: {resolved_type}",
            extra={
                "event": "extraction.unsupported_format",
                "file_name": path.name,
                "content_type": resolved_type,
            },
        )
        raise UnsupportedFormatError(resolved_type, path.name)

    if not path.is_file():
        raise DocumentReadError(f"File not found: {path}")

    try:
        if resolved_type == PDF:
            text = _read_pdf(path)
        elif resolved_type == DOCX:
            text = _read_docx(path)
        else:
            text = path.read_text(encoding="utf-8", errors="replace")
    except Exception as e:
        logger.error(
            f"Failed to extract text from {path.name}: {e}",
            extra={"event": "extraction.failed", "content_type": resolved_type},
            exc_info=True,
        )
        raise DocumentReadError(f"Could not read {path.name}: {e}") from e

    logger.info(
        "Extracted resume text",
        extra={
            "event": "extraction.completed",
            "file_name": path.name,
            "content_type": resolved_type,
            "char_count": len(text),
        },
    )
    return text


def _read_pdf(path: Path) -> str:
    with pdfplumber.open(path) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages)


def _read_docx(path: Path) -> str:
    document = Document(str(path))
    return "\n".join(paragraph.text for paragraph in document.paragraphs)
