"""
Catalog client for listing and downloading marketplace visuals.

This module wraps the two HTTP operations the downloader needs: fetching one
page of catalog entries and streaming one visual package to disk. Neither
operation retries on its own; both raise on failure so the caller can decide.
"""

# Standard library imports
import logging
from types import TracebackType
from typing import Optional, Type

# Third-party imports
import httpx

# Local imports
from ..models.catalog import CatalogPage
from ..utils.constants import CATALOG_URL_TEMPLATE, DEFAULT_TIMEOUT, MAX_CHUNK_SIZE, MIN_CHUNK_SIZE
from ..utils.session import create_session


class CatalogClient:
    """Client for the paginated visuals catalog and its download links."""

    def __init__(
        self,
        catalog_url: str = CATALOG_URL_TEMPLATE,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[httpx.Client] = None,
    ) -> None:
        """Initialize the catalog client.

        Args:
            catalog_url: Endpoint template with a ``{page}`` placeholder
            timeout: Per-request timeout in seconds
            session: Optional preconfigured client; one is created otherwise
        """
        self.catalog_url = catalog_url
        self.timeout = timeout
        self.session = session if session is not None else create_session(timeout=timeout)

    def __enter__(self) -> "CatalogClient":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()
        logging.debug("Catalog client session closed")

    def page_url(self, page_number: int) -> str:
        """Build the URL of a catalog page.

        Example:
            >>> CatalogClient("https://example.com/tiles?page={page}").page_url(2)  # doctest: +SKIP
            'https://example.com/tiles?page=2'
        """
        return self.catalog_url.replace("{page}", str(page_number))

    def fetch_page(self, page_number: int) -> CatalogPage:
        """Fetch and parse one page of catalog entries.

        Args:
            page_number: 1-based page number

        Returns:
            CatalogPage with the entries in API order

        Raises:
            httpx.HTTPError: On network failures and non-2xx responses
            ValueError: If the body is not JSON or not shaped like a catalog page
        """
        url = self.page_url(page_number)
        logging.info("Fetching catalog page %d", page_number)
        logging.debug("Catalog page URL: %s", url)

        response = self.session.get(url)
        response.raise_for_status()

        page = CatalogPage.from_response(page_number, response.json())
        logging.info("Catalog page %d has %d entries", page_number, len(page.entries))
        return page

    def download(self, file_url: str, destination: str) -> str:
        """Stream a visual package to ``destination``, overwriting any existing file.

        Args:
            file_url: Download link from the catalog entry
            destination: Full path of the file to write

        Returns:
            The destination path

        Raises:
            httpx.HTTPError: On network failures and non-2xx responses
            OSError: If the file cannot be written
        """
        logging.info("Downloading %s", file_url)

        with self.session.stream("GET", file_url) as response:
            response.raise_for_status()

            # Larger chunks for bigger files, capped at 64KB
            chunk_size = MIN_CHUNK_SIZE
            content_length = response.headers.get("content-length")
            if content_length and content_length.isdigit():
                chunk_size = min(max(MIN_CHUNK_SIZE, int(content_length) // 100), MAX_CHUNK_SIZE)
            logging.debug("Writing %s with chunk size %d", destination, chunk_size)

            with open(destination, "wb") as f:
                for chunk in response.iter_bytes(chunk_size=chunk_size):
                    f.write(chunk)

        return destination


__all__ = ["CatalogClient"]
