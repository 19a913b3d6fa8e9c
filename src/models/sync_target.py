"""Sync target data model."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from src.models.page import Page


@dataclass(frozen=True)
class SyncTarget:
    """The BookStack container pages are synced into.

    The inventory is read from the chapter when ``chapter_id`` is set and from
    the book otherwise. Both ids, when set, are attached to page payloads.

    Attributes:
        book_id: Target book id (optional when chapter_id is set)
        chapter_id: Target chapter id (optional when book_id is set)
    """
    book_id: Optional[int] = None
    chapter_id: Optional[int] = None

    @property
    def is_configured(self) -> bool:
        return bool(self.book_id or self.chapter_id)

    @property
    def inventory_source(self) -> str:
        """``"chapter"`` or ``"book"``, whichever the inventory is read from."""
        return "chapter" if self.chapter_id else "book"

    def build_payload(self, page: Page) -> Dict[str, Any]:
        """Create the POST/PUT payload for a page."""
        payload: Dict[str, Any] = {
            'name': page.name,
            'markdown': page.content,
        }
        if self.book_id:
            payload['book_id'] = self.book_id
        if self.chapter_id:
            payload['chapter_id'] = self.chapter_id
        return payload
