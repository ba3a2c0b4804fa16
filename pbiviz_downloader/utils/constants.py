"""
Central constants for the pbiviz-downloader package.

This module consolidates all constants used throughout the codebase
to eliminate magic numbers and strings.
"""

# ============================================================================
# Catalog API
# ============================================================================

# Paginated catalog endpoint, ``{page}`` is replaced by the 1-based page number
CATALOG_URL_TEMPLATE = (
    "https://appsource.microsoft.com/view/tiledata/"
    "?ReviewsMyCommentsFilter=true&country=US&entityType=App"
    "&product=power-bi-visuals&region=ALL&page={page}"
)

# The catalog answers with an empty list when no language is requested
CATALOG_ACCEPT_LANGUAGE = "en-US"

# First page requested by the pagination loop
FIRST_PAGE = 1

# ============================================================================
# Filtering
# ============================================================================

# Tag identifier carried by certified visuals
CERTIFIED_TAG_ID = "PowerBICertified"

# Publisher name matched by the Microsoft-only filter
MICROSOFT_PUBLISHER = "Microsoft Corporation"

# ============================================================================
# File and Path Constants
# ============================================================================

# Extension appended to every sanitized title
VISUAL_FILE_EXTENSION = "pbiviz"

# Destination folder, relative to the working directory
DEFAULT_DESTINATION = "downloads"

# Default configuration file path
DEFAULT_CONFIG_PATH = "~/.config/pbiviz-downloader/config.toml"

# Section of the configuration file read by the download command
CONFIG_SECTION = "downloader"

# ============================================================================
# API and Network Constants
# ============================================================================

# Per-request timeout (seconds)
DEFAULT_TIMEOUT = 30

# Connect timeout (seconds)
CONNECT_TIMEOUT = 10.0

# Retries after the first attempt of a page fetch or download
DEFAULT_RETRY_COUNT = 3

# Fixed pause between attempts (seconds)
DEFAULT_RETRY_DELAY = 5.0

# Streaming chunk bounds for downloads (bytes)
MIN_CHUNK_SIZE = 8192
MAX_CHUNK_SIZE = 65536

# ============================================================================
# Logging and Display Constants
# ============================================================================

# Width for separator lines in console output
SEPARATOR_WIDTH = 80

# ============================================================================
# Exit Codes
# ============================================================================

EXIT_SUCCESS = 0
EXIT_GENERAL_ERROR = 1
EXIT_USER_INTERRUPT = 130  # User pressed Ctrl+C


__all__ = [
    # Catalog API
    "CATALOG_URL_TEMPLATE",
    "CATALOG_ACCEPT_LANGUAGE",
    "FIRST_PAGE",
    # Filtering
    "CERTIFIED_TAG_ID",
    "MICROSOFT_PUBLISHER",
    # File and Path
    "VISUAL_FILE_EXTENSION",
    "DEFAULT_DESTINATION",
    "DEFAULT_CONFIG_PATH",
    "CONFIG_SECTION",
    # API and Network
    "DEFAULT_TIMEOUT",
    "CONNECT_TIMEOUT",
    "DEFAULT_RETRY_COUNT",
    "DEFAULT_RETRY_DELAY",
    "MIN_CHUNK_SIZE",
    "MAX_CHUNK_SIZE",
    # Logging and Display
    "SEPARATOR_WIDTH",
    # Exit Codes
    "EXIT_SUCCESS",
    "EXIT_GENERAL_ERROR",
    "EXIT_USER_INTERRUPT",
]
