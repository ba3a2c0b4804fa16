"""
Utility modules for pbiviz-downloader.
"""

from .logger import setup_logging, WrappingFormatter
from .session import create_session
from .retry import TRANSIENT_ERRORS, execute_with_retry
from .error_handling import RetryExhaustedError, FatalPaginationError
from .path_utils import get_visual_save_path, sanitize_title, visual_file_name
from .config_manager import ConfigManager

from . import constants
from . import error_handling
from . import path_utils
from . import predicates

__all__ = [
    "setup_logging",
    "WrappingFormatter",
    "create_session",
    "TRANSIENT_ERRORS",
    "execute_with_retry",
    "RetryExhaustedError",
    "FatalPaginationError",
    "get_visual_save_path",
    "sanitize_title",
    "visual_file_name",
    "ConfigManager",
    "constants",
    "error_handling",
    "path_utils",
    "predicates",
]
