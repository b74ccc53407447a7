from pathlib import Path

import pytest

from invoice_harvest.input_handler.pdf_processor import PDFProcessor
from invoice_harvest.utils.exceptions import ParseError, StorageError


def _write(tmp_path: Path, data: bytes, name: str = "file_1.pdf") -> Path:
    path = tmp_path / name
    path.write_bytes(data)
    return path


class TestExtractText:
    def test_returns_document_text(self, tmp_path: Path, invoice_pdf_bytes: bytes) -> None:
        text = PDFProcessor().extract_text(_write(tmp_path, invoice_pdf_bytes))
        assert "Order Number: OD12345" in text
        assert "Buyer Address: 12 Main St, Springfield" in text

    def test_preserves_line_breaks(self, tmp_path: Path, invoice_pdf_bytes: bytes) -> None:
        text = PDFProcessor().extract_text(_write(tmp_path, invoice_pdf_bytes))
        lines = text.splitlines()
        assert "Order Number: OD12345" in lines
        assert "Invoice Number: INV987" in lines

    def test_extracts_every_page(self, tmp_path: Path, multi_page_pdf_bytes: bytes) -> None:
        text = PDFProcessor().extract_text(_write(tmp_path, multi_page_pdf_bytes))
        assert "Order Number: OD1" in text
        assert "Invoice Number: INV2" in text

    def test_blank_pdf_returns_empty_text(self, tmp_path: Path, empty_pdf_bytes: bytes) -> None:
        assert PDFProcessor().extract_text(_write(tmp_path, empty_pdf_bytes)).strip() == ""

    def test_accepts_junk_before_header(self, tmp_path: Path, invoice_pdf_bytes: bytes) -> None:
        data = b"\r\n\xef\xbb\xbfjunk\n" + invoice_pdf_bytes
        text = PDFProcessor().extract_text(_write(tmp_path, data))
        assert "Order Number: OD12345" in text


class TestExtractTextErrors:
    def test_html_error_page_raises_parse_error(self, tmp_path: Path) -> None:
        path = _write(tmp_path, b"<?xml version='1.0'?><Error>AccessDenied</Error>")
        with pytest.raises(ParseError, match="signature"):
            PDFProcessor().extract_text(path)

    def test_truncated_pdf_raises_parse_error(self, tmp_path: Path) -> None:
        path = _write(tmp_path, b"%PDF-1.4\n garbage without objects")
        with pytest.raises(ParseError):
            PDFProcessor().extract_text(path)

    def test_missing_file_raises_storage_error(self, tmp_path: Path) -> None:
        with pytest.raises(StorageError):
            PDFProcessor().extract_text(tmp_path / "missing.pdf")


class TestPageCount:
    def test_counts_pages(self, tmp_path: Path, multi_page_pdf_bytes: bytes) -> None:
        assert PDFProcessor().get_page_count(_write(tmp_path, multi_page_pdf_bytes)) == 2

    def test_non_pdf_raises_parse_error(self, tmp_path: Path) -> None:
        with pytest.raises(ParseError):
            PDFProcessor().get_page_count(_write(tmp_path, b"plain text"))

    def test_header_past_first_kilobyte_raises_parse_error(
        self, tmp_path: Path, invoice_pdf_bytes: bytes
    ) -> None:
        path = _write(tmp_path, b" " * 2048 + invoice_pdf_bytes)
        with pytest.raises(ParseError, match="signature"):
            PDFProcessor().get_page_count(path)
