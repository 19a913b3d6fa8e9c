"""Resolve a path or glob pattern to the files to sync."""

import glob
import logging
from typing import List

from .errors import NoFilesFoundError

logger = logging.getLogger(__name__)

# Only a star makes a path a glob pattern; brackets and question marks are
# valid in literal file names
WILDCARD = "*"


def is_pattern(path: str) -> bool:
    """Return True if the path contains a glob wildcard."""
    return WILDCARD in path


def resolve_files(pattern: str) -> List[str]:
    """Find all files for the given path.

    A literal path is returned as is; whether it exists is checked when the
    file is read. A glob pattern is expanded against the filesystem, with
    ``**`` matching nested directories.

    Args:
        pattern: File path or glob pattern (e.g. ``docs/**/*.md``)

    Returns:
        List of file paths, sorted when expanded from a pattern

    Raises:
        NoFilesFoundError: If nothing matches
    """
    logger.info(f"Finding files using path: \"{pattern}\"")

    if is_pattern(pattern):
        files = sorted(glob.glob(pattern, recursive=True))
    elif pattern:
        files = [pattern]
    else:
        files = []

    if not files:
        raise NoFilesFoundError(pattern)

    for file_path in files:
        logger.info(f"Found file: \"{file_path}\"")
    logger.info(f"Found {len(files)} file(s)")

    return files
