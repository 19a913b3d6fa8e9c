"""Typed exception hierarchy for BookStack-related errors.

This module defines all custom exceptions used by the BookStack client library.
All exceptions inherit from BookStackError base class for easy catching and
include descriptive messages with context to help with debugging.
"""

from typing import Optional


class SyncError(Exception):
    """Base exception for all bookstack-sync errors.

    Use this to catch any application-level error from the sync tool.
    """
    pass


class BookStackError(SyncError):
    """Base exception for all BookStack-related errors."""
    pass


class InvalidCredentialsError(BookStackError):
    """Raised when API credentials are invalid or authentication fails."""

    def __init__(self, token_id: str, endpoint: str):
        super().__init__(
            f"API token is invalid (token id: {token_id}, endpoint: {endpoint})"
        )
        self.token_id = token_id
        self.endpoint = endpoint


class PageNotFoundError(BookStackError):
    """Raised when a requested book, chapter or page does not exist."""

    def __init__(self, resource: str):
        super().__init__(f"{resource} not found")
        self.resource = resource


class APIUnreachableError(BookStackError):
    """Raised when the BookStack API is not available or unreachable."""

    def __init__(self, endpoint: str):
        super().__init__(f"API is not available at {endpoint}")
        self.endpoint = endpoint


class APIAccessError(BookStackError):
    """Raised when an API call fails for any other reason."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
