"""
Custom Exceptions Module.

This module defines the exceptions raised by the invoice harvest pipeline.
Each pipeline stage raises its own kind so that the driver can record
which stage failed for a given source document.

Exception Hierarchy:
    InvoiceHarvestError (base)
    ├── NetworkError
    ├── StorageError
    ├── ParseError
    └── OutputError
        └── ExcelExportError
"""

from typing import Optional


class InvoiceHarvestError(Exception):
    """
    Base exception for all invoice harvest errors.

    Attributes:
        message: Human-readable error message.
        details: Optional dictionary with additional error details.
    """

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class NetworkError(InvoiceHarvestError):
    """
    Raised when a remote document cannot be retrieved.

    Covers transport failures (DNS, refused connection, timeout) as well
    as responses with a non-success status code.

    Example:
        >>> raise NetworkError("https://example.com/a.pdf", "404 Not Found", 404)
    """

    def __init__(self, location: str, reason: str = None, status_code: Optional[int] = None):
        message = f"Failed to download: {location}"
        details = {"location": location, "reason": reason}
        if status_code is not None:
            details["status_code"] = status_code
        self.location = location
        self.status_code = status_code
        super().__init__(message, details)


class StorageError(InvoiceHarvestError):
    """Raised when a local file or directory cannot be read, written or created."""

    def __init__(self, filepath: str, reason: str = None):
        message = f"File operation failed: {filepath}"
        details = {"filepath": filepath, "reason": reason}
        self.filepath = filepath
        super().__init__(message, details)


class ParseError(InvoiceHarvestError):
    """Raised when a local file is not a well-formed PDF document."""

    def __init__(self, filepath: str, reason: str = None):
        message = f"Malformed or unreadable document: {filepath}"
        details = {"filepath": filepath, "reason": reason}
        self.filepath = filepath
        super().__init__(message, details)


class OutputError(InvoiceHarvestError):
    """Base exception for output handling errors."""
    pass


class ExcelExportError(OutputError):
    """Raised when the Excel summary workbook cannot be written."""

    def __init__(self, filepath: str, reason: str = None):
        message = f"Failed to export Excel file: {filepath}"
        details = {"filepath": filepath, "reason": reason}
        super().__init__(message, details)


__all__ = [
    'InvoiceHarvestError',
    'NetworkError',
    'StorageError',
    'ParseError',
    'OutputError',
    'ExcelExportError',
]
