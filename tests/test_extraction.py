"""Unit tests for resume text extraction."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from docx import Document

from app.extraction import (
    DOCX,
    PDF,
    TEXT,
    DocumentReadError,
    UnsupportedFormatError,
    detect_content_type,
    extract_text,
)


@pytest.fixture
def mock_pdf():
    """Patch pdfplumber.open to return a three-page document (one page blank)."""
    pages = [MagicMock(), MagicMock(), MagicMock()]
    pages[0].extract_text.return_value = "Experienced in React"
    pages[1].extract_text.return_value = None
    pages[2].extract_text.return_value = "Node.js and SQL"

    pdf = MagicMock()
    pdf.pages = pages
    pdf.__enter__.return_value = pdf

    with patch("app.extraction.service.pdfplumber.open", return_value=pdf) as mock_open:
        yield mock_open


class TestDetectContentType:
    """Tests for content type detection."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("resume.pdf", PDF),
            ("resume.PDF", PDF),
            ("resume.docx", DOCX),
            ("resume.txt", TEXT),
            ("resume.md", TEXT),
            ("resume.doc", "application/octet-stream"),
            ("resume", "application/octet-stream"),
        ],
    )
    def test_from_extension(self, name, expected):
        assert detect_content_type(Path(name)) == expected

    def test_explicit_type_wins(self):
        assert detect_content_type(Path("upload.bin"), "Application/PDF") == PDF

    def test_parameters_ignored(self):
        assert detect_content_type(Path("upload"), "text/plain; charset=utf-8") == TEXT


class TestExtractText:
    """Tests for extract_text."""

    def test_plain_text(self, tmp_path):
        path = tmp_path / "resume.txt"
        path.write_text("React, Node.js, SQL", encoding="utf-8")

        assert extract_text(path) == "React, Node.js, SQL"

    def test_plain_text_with_invalid_bytes(self, tmp_path):
        path = tmp_path / "resume.txt"
        path.write_bytes(b"React \xff SQL")

        assert extract_text(path) == "React � SQL"

    def test_docx(self, tmp_path):
        path = tmp_path / "resume.docx"
        document = Document()
        document.add_paragraph("Experienced in React")
        document.add_paragraph("Node.js and SQL")
        document.save(str(path))

        assert extract_text(path) == "Experienced in React\nNode.js and SQL"

    def test_pdf(self, tmp_path, mock_pdf):
        path = tmp_path / "resume.pdf"
        path.write_bytes(b"%PDF-1.4")

        assert extract_text(path) == "Experienced in React\n\nNode.js and SQL"
        mock_pdf.assert_called_once_with(path)

    def test_content_type_overrides_extension(self, tmp_path, mock_pdf):
        path = tmp_path / "upload.bin"
        path.write_bytes(b"%PDF-1.4")

        assert "React" in extract_text(path, content_type=PDF)

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "resume.doc"
        path.write_bytes(b"\xd0\xcf\x11\xe0")

        with pytest.raises(UnsupportedFormatError) as exc_info:
            extract_text(path)

        assert exc_info.value.file_name == "resume.doc"
        assert exc_info.value.content_type == "application/octet-stream"

    def test_unsupported_checked_before_existence(self, tmp_path):
        with pytest.raises(UnsupportedFormatError):
            extract_text(tmp_path / "missing.png")

    def test_missing_file(self, tmp_path):
        with pytest.raises(DocumentReadError, match="not found"):
            extract_text(tmp_path / "missing.pdf")

    def test_corrupt_docx(self, tmp_path):
        path = tmp_path / "resume.docx"
        path.write_bytes(b"not a zip archive")

        with pytest.raises(DocumentReadError, match="resume.docx"):
            extract_text(path)

    def test_pdf_parse_error_wrapped(self, tmp_path):
        path = tmp_path / "resume.pdf"
        path.write_bytes(b"garbage")

        with patch("app.extraction.service.pdfplumber.open", side_effect=ValueError("bad pdf")):
            with pytest.raises(DocumentReadError, match="bad pdf"):
                extract_text(path)

    def test_accepts_string_path(self, tmp_path):
        path = tmp_path / "resume.txt"
        path.write_text("SQL")

        assert extract_text(str(path)) == "SQL"
