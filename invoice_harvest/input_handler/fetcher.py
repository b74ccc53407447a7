"""
Document Fetcher Module.

This module downloads remote invoice documents and stores them on the
local filesystem so the PDF processor can read them.

Uses requests for a single blocking GET per document. There is no
retry and no partial-content resume; a failed download is reported to
the caller as a NetworkError.

Author: ML Engineering Team
"""

from pathlib import Path
from typing import Optional, Union, Dict

import requests

from config import get_config
from invoice_harvest.utils.logger import get_logger
from invoice_harvest.utils.helpers import ensure_directory, format_file_size
from invoice_harvest.utils.exceptions import NetworkError, StorageError

# Initialize module logger
logger = get_logger(__name__)


class Fetcher:
    """
    Downloads a remote document and writes it verbatim to disk.

    Attributes:
        timeout: Request timeout in seconds, or None for the transport
                 default (no timeout).
        headers: Extra request headers.

    Example:
        >>> fetcher = Fetcher()
        >>> path = fetcher.fetch("https://example.com/invoice.pdf",
        ...                      "downloads/file_1.pdf")
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None
    ) -> None:
        """
        Initialize the fetcher.

        Args:
            timeout: Override config for the request timeout.
            user_agent: Override config for the User-Agent header.
            session: Optional requests session to send requests through.
        """
        self.timeout = timeout if timeout is not None else get_config("http.timeout")
        user_agent = user_agent or get_config("http.user_agent")

        self.headers: Dict[str, str] = {}
        if user_agent:
            self.headers['User-Agent'] = user_agent

        self._session = session

        logger.debug(f"Fetcher initialized (timeout={self.timeout})")

    def fetch(self, location: str, destination: Union[str, Path]) -> Path:
        """
        Download a document and write it to the destination path.

        Missing parent directories are created first. An existing file at
        the destination is overwritten.

        Args:
            location: Remote URL of the document.
            destination: Local path to write the document to.

        Returns:
            Path the document was written to.

        Raises:
            NetworkError: If the request fails or returns a non-success status.
            StorageError: If the directory or file cannot be written.
        """
        destination = Path(destination)
        logger.info(f"Downloading: {location}")

        content = self._download(location)

        try:
            ensure_directory(destination.parent)
            destination.write_bytes(content)
        except OSError as e:
            raise StorageError(str(destination), str(e)) from e

        logger.debug(f"Saved {format_file_size(len(content))} to {destination}")
        return destination

    def _download(self, location: str) -> bytes:
        """
        Perform the GET request and return the raw response body.

        Args:
            location: Remote URL of the document.

        Returns:
            Response body as bytes.

        Raises:
            NetworkError: On transport failure or non-success status.
        """
        requester = self._session if self._session is not None else requests

        try:
            response = requester.get(
                location,
                headers=self.headers,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            raise NetworkError(location, str(e)) from e

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise NetworkError(location, str(e), response.status_code) from e

        return response.content
