"""Typed exception hierarchy for page sync errors.

Configuration problems are raised before any I/O. Fetch and create failures
abort the run; update failures are caught by the reconciler unless it runs
with strict updates.
"""

from typing import Optional

from src.bookstack_client.errors import SyncError


class PageSyncError(SyncError):
    """Base exception for all page sync errors."""
    pass


class ConfigurationError(PageSyncError):
    """Raised when required inputs are missing or contradictory."""

    def __init__(self, message: str, config_field: Optional[str] = None):
        if config_field:
            full_message = f"Configuration error in field '{config_field}': {message}"
        else:
            full_message = f"Configuration error: {message}"
        super().__init__(full_message)
        self.config_field = config_field
        self.original_message = message


class RemoteFetchError(PageSyncError):
    """Raised when the existing pages of a book or chapter cannot be retrieved."""

    def __init__(self, source: str, source_id: int, reason: str):
        super().__init__(
            f"Failed to retrieve pages from {source} {source_id}: {reason}"
        )
        self.source = source
        self.source_id = source_id
        self.reason = reason


class PageCreateError(PageSyncError):
    """Raised when a page cannot be created."""

    def __init__(self, page_name: str, reason: str):
        super().__init__(f"Failed to create page \"{page_name}\": {reason}")
        self.page_name = page_name
        self.reason = reason


class PageUpdateError(PageSyncError):
    """Raised when an existing page cannot be updated."""

    def __init__(self, page_name: str, page_id: int, reason: str):
        super().__init__(
            f"Failed to update page \"{page_name}\" (ID: {page_id}): {reason}"
        )
        self.page_name = page_name
        self.page_id = page_id
        self.reason = reason
