"""Page sync between parsed Markdown pages and a BookStack book or chapter.

This package reads the remote page inventory and creates or updates pages by
matching their names.
"""

from .errors import (
    PageSyncError,
    ConfigurationError,
    RemoteFetchError,
    PageCreateError,
    PageUpdateError,
)
from .inventory import InventoryFetcher
from .models import UpsertSummary
from .upsert import UpsertReconciler

__all__ = [
    'PageSyncError',
    'ConfigurationError',
    'RemoteFetchError',
    'PageCreateError',
    'PageUpdateError',
    'InventoryFetcher',
    'UpsertSummary',
    'UpsertReconciler',
]
