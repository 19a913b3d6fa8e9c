"""Create or update BookStack pages from parsed Markdown pages.

Pages are matched to remote pages by name. The remote inventory is read once
before any write; then each page is created or updated in order, one request
at a time.

Failure policy: a failed create aborts the run. A failed update is logged and
recorded in the summary and the loop moves on, unless ``strict_updates`` is
set, in which case it aborts the run too. Pages written before an abort stay
written.
"""

import logging
from typing import Dict, Optional, Sequence

from src.bookstack_client.api_wrapper import APIWrapper
from src.bookstack_client.errors import BookStackError
from src.models.page import Page
from src.models.sync_target import SyncTarget

from .errors import PageCreateError, PageUpdateError
from .inventory import InventoryFetcher
from .models import UpsertSummary

logger = logging.getLogger(__name__)


class UpsertReconciler:
    """Upserts pages into the target book or chapter.

    Example:
        >>> reconciler = UpsertReconciler(api)
        >>> summary = reconciler.upsert(SyncTarget(book_id=3), pages)
        >>> summary.created, summary.updated
        (['New'], ['Intro'])
    """

    def __init__(
        self,
        api: APIWrapper,
        inventory_fetcher: Optional[InventoryFetcher] = None,
        strict_updates: bool = False,
        dry_run: bool = False,
    ):
        """Initialize the reconciler.

        Args:
            api: Client used for create and update calls
            inventory_fetcher: Fetcher for existing pages (defaults to one using ``api``)
            strict_updates: Abort on the first failed update
            dry_run: Fetch the inventory and plan, but write nothing
        """
        self.api = api
        self.inventory_fetcher = inventory_fetcher or InventoryFetcher(api)
        self.strict_updates = strict_updates
        self.dry_run = dry_run

    def upsert(self, target: SyncTarget, pages: Sequence[Page]) -> UpsertSummary:
        """Create or update every page in order.

        Raises:
            ConfigurationError: If the target has neither book nor chapter id
            RemoteFetchError: If the inventory cannot be retrieved (nothing is written)
            PageCreateError: If a page cannot be created
            PageUpdateError: If a page cannot be updated and strict_updates is set
        """
        existing_pages = self.inventory_fetcher.fetch(target)

        logger.info(f"Upserting {len(pages)} page(s) in BookStack")
        summary = UpsertSummary(dry_run=self.dry_run)

        for page in pages:
            page_id = existing_pages.get(page.name)

            if self.dry_run:
                if page_id:
                    summary.planned_updates.append(page.name)
                    logger.info(f"Would update page: {page.name} (ID: {page_id})")
                else:
                    summary.planned_creates.append(page.name)
                    logger.info(f"Would create page: {page.name}")
                continue

            if page_id:
                try:
                    self._update_page(target, page_id, page)
                except PageUpdateError as e:
                    if self.strict_updates:
                        raise
                    summary.failed_updates.append((page.name, str(e)))
                    continue
                summary.updated.append(page.name)
            else:
                self._create_page(target, page)
                summary.created.append(page.name)

        logger.info(
            f"Finished upserting pages to BookStack: {len(summary.created)} created, "
            f"{len(summary.updated)} updated, {len(summary.failed_updates)} failed"
        )
        return summary

    def _create_page(self, target: SyncTarget, page: Page) -> Dict:
        payload = target.build_payload(page)
        try:
            result = self.api.create_page(payload)
        except BookStackError as e:
            logger.error(f"Failed to create page: {page.name} - {e}")
            raise PageCreateError(page.name, str(e)) from e

        logger.info(f"Created page: {page.name}")
        return result

    def _update_page(self, target: SyncTarget, page_id: int, page: Page) -> Dict:
        payload = target.build_payload(page)
        try:
            result = self.api.update_page(page_id, payload)
        except (BookStackError, ValueError) as e:
            logger.error(f"Failed to update page: {page.name} - {e}")
            raise PageUpdateError(page.name, page_id, str(e)) from e

        logger.info(f"Updated page: {page.name}")
        return result
