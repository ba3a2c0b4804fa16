"""
File path handling for downloaded visuals.

Catalog titles become file names by dropping every non-word character;
nothing is substituted in their place and collisions are not resolved,
so two titles that reduce to the same name share one destination file.
"""

import os
import re
from typing import Optional

from .constants import DEFAULT_DESTINATION, VISUAL_FILE_EXTENSION

NON_WORD_PATTERN = re.compile(r"\W")


def sanitize_title(title: str) -> str:
    """
    Strip all non-word characters from a catalog title.

    Example:
        >>> sanitize_title("Gantt Chart! v2.0")
        'GanttChartv20'
    """
    return NON_WORD_PATTERN.sub("", title)


def visual_file_name(title: str, extension: str = VISUAL_FILE_EXTENSION) -> str:
    """
    Derive the file name a catalog entry is saved under.

    Example:
        >>> visual_file_name("Gantt Chart! v2.0")
        'GanttChartv20.pbiviz'
    """
    return f"{sanitize_title(title)}.{extension}"


def get_visual_save_path(title: str, base_dir: Optional[str] = None) -> str:
    """
    Determine the save path for a catalog entry.

    Args:
        title: Catalog title of the entry
        base_dir: Destination folder (defaults to ``downloads``)

    Returns:
        Full path where the visual should be saved

    Example:
        >>> get_visual_save_path("Gantt Chart! v2.0", "/tmp/visuals")
        '/tmp/visuals/GanttChartv20.pbiviz'
    """
    return os.path.join(base_dir or DEFAULT_DESTINATION, visual_file_name(title))


def ensure_directory_exists(directory: str) -> str:
    """
    Create ``directory`` (and its parents) if it does not exist yet.

    Returns:
        The directory path, unchanged
    """
    os.makedirs(directory, exist_ok=True)
    return directory


__all__ = [
    "sanitize_title",
    "visual_file_name",
    "get_visual_save_path",
    "ensure_directory_exists",
]
