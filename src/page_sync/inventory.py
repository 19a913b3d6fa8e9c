"""Retrieve the pages that already exist in the target book or chapter."""

import logging
from typing import Any, Dict, Iterable

from src.bookstack_client.api_wrapper import APIWrapper
from src.bookstack_client.errors import BookStackError
from src.models.sync_target import SyncTarget

from .errors import ConfigurationError, RemoteFetchError

logger = logging.getLogger(__name__)


class InventoryFetcher:
    """Builds the name to id mapping of remote pages for a sync target.

    Example:
        >>> fetcher = InventoryFetcher(api)
        >>> fetcher.fetch(SyncTarget(chapter_id=12))
        {'Introduction': 101, 'Setup': 102}
    """

    def __init__(self, api: APIWrapper):
        self.api = api

    def fetch(self, target: SyncTarget) -> Dict[str, int]:
        """Retrieve existing page names and ids.

        The chapter is used when the target has one, otherwise the book.
        Later entries with a duplicate name replace earlier ones.

        Raises:
            ConfigurationError: If the target has neither book nor chapter id
            RemoteFetchError: If the book or chapter could not be retrieved
        """
        logger.info("Retrieving existing pages from BookStack")

        if not target.is_configured:
            raise ConfigurationError(
                "Cannot pull existing pages as both book-id and chapter-id are missing"
            )

        if target.chapter_id:
            pages = self._fetch_from_chapter(target.chapter_id)
        else:
            pages = self._fetch_from_book(target.book_id)

        logger.info(f"Retrieved {len(pages)} existing page(s) from BookStack")
        return pages

    def _fetch_from_chapter(self, chapter_id: int) -> Dict[str, int]:
        try:
            chapter = self.api.get_chapter(chapter_id)
        except (BookStackError, ValueError) as e:
            logger.error(f"Failed to retrieve pages from chapter: {e}")
            raise RemoteFetchError("chapter", chapter_id, str(e)) from e

        try:
            return self._collect(chapter.get('pages') or [])
        except (KeyError, TypeError, AttributeError) as e:
            raise self._malformed("chapter", chapter_id, e) from e

    def _fetch_from_book(self, book_id: int) -> Dict[str, int]:
        try:
            book = self.api.get_book(book_id)
        except (BookStackError, ValueError) as e:
            logger.error(f"Failed to retrieve pages from book: {e}")
            raise RemoteFetchError("book", book_id, str(e)) from e

        try:
            # Book contents interleave chapters and pages
            entries = [
                entity for entity in book.get('contents') or []
                if entity.get('type') == 'page'
            ]
            return self._collect(entries)
        except (KeyError, TypeError, AttributeError) as e:
            raise self._malformed("book", book_id, e) from e

    def _collect(self, entries: Iterable[Dict[str, Any]]) -> Dict[str, int]:
        pages: Dict[str, int] = {}
        for entry in entries:
            pages[entry['name']] = entry['id']
            logger.debug(f"Retrieved page: {entry['name']} - {entry['id']}")
        return pages

    def _malformed(self, source: str, source_id: int, error: Exception) -> RemoteFetchError:
        logger.error(f"Unexpected {source} response from BookStack: {error!r}")
        return RemoteFetchError(source, source_id, f"unexpected response: {error!r}")
