"""Data models for page sync results."""

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass
class UpsertSummary:
    """Outcome of one upsert run.

    Attributes:
        created: Names of pages created
        updated: Names of pages updated
        failed_updates: (name, error message) for every update that failed
        planned_creates: Names that would be created (dry run only)
        planned_updates: Names that would be updated (dry run only)
        dry_run: True if no writes were issued
    """
    created: List[str] = field(default_factory=list)
    updated: List[str] = field(default_factory=list)
    failed_updates: List[Tuple[str, str]] = field(default_factory=list)
    planned_creates: List[str] = field(default_factory=list)
    planned_updates: List[str] = field(default_factory=list)
    dry_run: bool = False

    @property
    def has_failures(self) -> bool:
        return bool(self.failed_updates)
