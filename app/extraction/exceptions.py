"""Exceptions raised by resume text extraction."""


class ExtractionError(Exception):
    """Base exception for text extraction failures."""

    pass


class UnsupportedFormatError(ExtractionError):
    """Raised when a document is not PDF, DOCX or plain text."""

    def __init__(self, content_type: str, file_name: str = ""):
        self.content_type = content_type
        self.file_name = file_name
        label = file_name or "document"
        super().__init__(f"Unsupported file type for {label}: {content_type}")


class DocumentReadError(ExtractionError):
    """Raised when a supported document cannot be opened or parsed."""

    pass
