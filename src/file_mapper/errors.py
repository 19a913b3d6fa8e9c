"""Typed exception hierarchy for file mapper errors.

This module defines all custom exceptions used when turning local Markdown
files into pages. All exceptions inherit from FileMapperError base class.
"""

from typing import Optional

from src.bookstack_client.errors import SyncError


class FileMapperError(SyncError):
    """Base exception for all file mapper errors."""
    pass


class NoFilesFoundError(FileMapperError):
    """Raised when a path or glob pattern resolves to no files."""

    def __init__(self, pattern: str):
        super().__init__(f"No files found matching path \"{pattern}\"")
        self.pattern = pattern


class FileReadError(FileMapperError):
    """Raised when a single file cannot be read.

    Never fatal for a batch: the parser logs it and skips the file.
    """

    def __init__(self, file_path: str, reason: Optional[str] = None):
        message = f"Could not read file \"{file_path}\""
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.reason = reason
