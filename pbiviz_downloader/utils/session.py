"""
Session utilities for catalog operations.

This module creates the single HTTP client shared by every page fetch and
download of a run.
"""

import importlib.util
import logging
from typing import Dict, Optional

import httpx
from httpx import HTTPTransport

from .constants import CATALOG_ACCEPT_LANGUAGE, CONNECT_TIMEOUT, DEFAULT_TIMEOUT


def default_headers() -> Dict[str, str]:
    """Headers sent with every request; the catalog returns no entries without a language.

    ``Accept-Encoding`` is left to httpx, which only advertises the encodings
    it has a decoder for. Advertising one it cannot decode would leave
    compressed bytes in the saved visual.
    """
    return {"Accept-Language": CATALOG_ACCEPT_LANGUAGE}


def create_session(timeout: float = DEFAULT_TIMEOUT, transport: Optional[httpx.BaseTransport] = None) -> httpx.Client:
    """
    Create an httpx client for talking to the catalog.

    Args:
        timeout: Per-request timeout in seconds (default: 30)
        transport: Optional transport, mainly for tests; defaults to a pooled
            HTTP transport without transport-level retries

    Returns:
        Configured httpx.Client object with:
        - ``Accept-Language: en-US``, plus the compression encodings httpx can decode
        - HTTP/2 support when the ``h2`` package is installed
        - Redirect following (download links redirect to blob storage)
        - Timeout configuration

    Example:
        >>> client = create_session(timeout=60)
        >>> response = client.get("https://appsource.microsoft.com/view/tiledata/?page=1")  # doctest: +SKIP
    """
    timeout_config = httpx.Timeout(timeout, connect=CONNECT_TIMEOUT)

    use_http2 = importlib.util.find_spec("h2") is not None
    if not use_http2:
        logging.debug("HTTP/2 support not available (h2 package not installed)")

    if transport is None:
        # Attempts are counted by the retry executor, not by the transport
        transport = HTTPTransport(
            limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
            retries=0,
            http2=use_http2,
        )

    return httpx.Client(
        transport=transport,
        timeout=timeout_config,
        follow_redirects=True,
        headers=default_headers(),
    )


__all__ = ["default_headers", "create_session"]
