"""Data models for CLI operations.

This module defines all data models used by the CLI module.
All models use dataclasses for clean, type-safe data structures.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List

from src.models.sync_target import SyncTarget


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): Sync completed (individual update failures included)
    - GENERAL_ERROR (1): Configuration issues, no files found, failed page creation
    - AUTH_ERROR (3): Authentication or authorization failure
    - NETWORK_ERROR (4): BookStack unreachable or page inventory unavailable

    Example:
        >>> exit_code = ExitCode.SUCCESS
        >>> sys.exit(exit_code)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    AUTH_ERROR = 3
    NETWORK_ERROR = 4


@dataclass
class SyncConfig:
    """Fully resolved configuration for one sync run.

    Attributes:
        url: BookStack base URL
        token_id: API token id
        token_secret: API token secret
        target: Book and/or chapter to sync into
        path: File path or glob pattern of the Markdown files
        tags: Tags from the configuration (parsed, not sent to BookStack)

    Example:
        >>> config = SyncConfig(
        ...     url="https://wiki.example.com",
        ...     token_id="abc",
        ...     token_secret="def",
        ...     target=SyncTarget(book_id=3),
        ...     path="docs/*.md",
        ... )
    """
    url: str
    token_id: str
    token_secret: str
    target: SyncTarget
    path: str
    tags: List[str] = field(default_factory=list)

    def __repr__(self) -> str:
        return (
            f"SyncConfig(url={self.url!r}, token_id={self.token_id!r}, "
            f"token_secret='***', target={self.target!r}, path={self.path!r}, "
            f"tags={self.tags!r})"
        )
