"""
PDF Processor Module.

This module turns a downloaded invoice PDF into plain text:
    - PDF signature check (rejects HTML error pages and other non-PDF bodies)
    - Full-document text extraction, every page
    - Page counting

Uses pdfplumber for digital PDF text extraction. There is no OCR; scanned
pages simply contribute no text.

Author: ML Engineering Team
"""

import io
from pathlib import Path
from typing import Union, List

import pdfplumber

from invoice_harvest.utils.logger import get_logger
from invoice_harvest.utils.exceptions import ParseError, StorageError

# Initialize module logger
logger = get_logger(__name__)


class PDFProcessor:
    """
    Text extractor for PDF files.

    Pages are extracted in order and joined with newlines. Line breaks
    inside a page are kept as pdfplumber reports them.

    Example:
        >>> processor = PDFProcessor()
        >>> text = processor.extract_text("downloads/file_1.pdf")
        >>> print(text[:200])
    """

    PDF_SIGNATURE = b"%PDF"
    SIGNATURE_WINDOW = 1024

    def extract_text(self, filepath: Union[str, Path]) -> str:
        """
        Extract the full text content of a PDF file.

        Args:
            filepath: Path to the PDF file.

        Returns:
            Text of all pages joined by newlines.

        Raises:
            StorageError: If the file cannot be read.
            ParseError: If the file is not a well-formed PDF.
        """
        filepath = Path(filepath)
        logger.debug(f"Extracting text: {filepath.name}")

        data = self._read(filepath)
        pages = self._extract_pages(filepath, data)

        logger.info(f"Extracted text from {filepath.name} ({len(pages)} page(s))")
        return "\n".join(pages)

    def get_page_count(self, filepath: Union[str, Path]) -> int:
        """
        Get the total number of pages in a PDF.

        Args:
            filepath: Path to PDF file.

        Returns:
            Number of pages in the PDF.

        Raises:
            StorageError: If the file cannot be read.
            ParseError: If the file is not a well-formed PDF.
        """
        filepath = Path(filepath)
        data = self._read(filepath)
        self._check_signature(filepath, data)

        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                return len(pdf.pages)
        except Exception as e:
            raise ParseError(str(filepath), str(e)) from e

    def _read(self, filepath: Path) -> bytes:
        try:
            return filepath.read_bytes()
        except OSError as e:
            raise StorageError(str(filepath), str(e)) from e

    def _check_signature(self, filepath: Path, data: bytes) -> None:
        """
        Reject content without a PDF header in its first 1024 bytes.

        Servers sometimes answer with an HTML or XML error body; those
        bytes land on disk like any other download. Readers accept junk
        such as a BOM ahead of the header, so it need not be at offset 0.
        """
        if self.PDF_SIGNATURE not in data[:self.SIGNATURE_WINDOW]:
            raise ParseError(str(filepath), "missing %PDF signature")

    def _extract_pages(self, filepath: Path, data: bytes) -> List[str]:
        """
        Extract the text of every page.

        Args:
            filepath: Path of the document, used in error messages.
            data: Raw PDF bytes.

        Returns:
            List with one text string per page.
        """
        self._check_signature(filepath, data)

        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                return [page.extract_text() or "" for page in pdf.pages]
        except Exception as e:
            logger.error(f"PDF text extraction failed for {filepath.name}: {e}")
            raise ParseError(str(filepath), str(e)) from e
