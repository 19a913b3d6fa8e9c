"""File mapper library for BookStack Markdown sync.

This package resolves local paths and glob patterns to Markdown files and
parses those files into pages (title from the first level-1 heading, body
from the rest of the file).
"""

from .errors import (
    FileMapperError,
    NoFilesFoundError,
    FileReadError,
)
from .file_discovery import resolve_files
from .page_parser import FileContent, PageParser

__all__ = [
    'FileMapperError',
    'NoFilesFoundError',
    'FileReadError',
    'resolve_files',
    'FileContent',
    'PageParser',
]
