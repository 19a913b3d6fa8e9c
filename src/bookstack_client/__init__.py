"""BookStack client library for Markdown page sync.

This package provides Python abstractions over the BookStack REST API,
covering the book, chapter and page endpoints used by the sync.
"""

from .errors import (
    SyncError,
    BookStackError,
    InvalidCredentialsError,
    PageNotFoundError,
    APIUnreachableError,
    APIAccessError,
)

__all__ = [
    "SyncError",
    "BookStackError",
    "InvalidCredentialsError",
    "PageNotFoundError",
    "APIUnreachableError",
    "APIAccessError",
]
