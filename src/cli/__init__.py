"""Command-line interface for BookStack Markdown sync.

This package provides the `bookstack-sync` CLI tool that resolves the
configuration, parses local Markdown files and upserts them as BookStack
pages, with colored output and error handling.
"""

from .sync_command import SyncCommand
from .models import ExitCode, SyncConfig
from .errors import (
    CLIError,
    ConfigNotFoundError,
)

__all__ = [
    'SyncCommand',
    'ExitCode',
    'SyncConfig',
    'CLIError',
    'ConfigNotFoundError',
]
