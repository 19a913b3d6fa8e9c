"""Sync command orchestration for CLI.

This module provides the SyncCommand class that runs the whole sync:
configuration, file discovery, parsing, inventory retrieval and upsert. It
translates failures into exit codes and reports the result through the
OutputHandler.
"""

import logging
from typing import Any, Callable, Dict, Optional

from src.bookstack_client.api_wrapper import APIWrapper
from src.bookstack_client.auth import Authenticator
from src.bookstack_client.errors import (
    APIUnreachableError,
    InvalidCredentialsError,
    SyncError,
)
from src.cli.config import ConfigLoader
from src.cli.errors import ConfigNotFoundError
from src.cli.models import ExitCode
from src.cli.output import OutputHandler
from src.file_mapper.errors import NoFilesFoundError
from src.file_mapper.page_parser import PageParser
from src.page_sync.errors import ConfigurationError, RemoteFetchError
from src.page_sync.upsert import UpsertReconciler

logger = logging.getLogger(__name__)


class SyncCommand:
    """Orchestrates the one-shot sync of Markdown files into BookStack.

    The sync workflow:
        1. Resolve and validate configuration (before any I/O)
        2. Discover files and parse them into pages
        3. Create one API client for the run
        4. Retrieve the page inventory and upsert every page
        5. Print a summary and return an exit code

    Example:
        >>> output = OutputHandler(verbosity=1)
        >>> sync_cmd = SyncCommand(output_handler=output)
        >>> exit_code = sync_cmd.run({"url": "...", "path": "docs/*.md", ...})
        >>> sys.exit(exit_code)
    """

    def __init__(
        self,
        output_handler: Optional[OutputHandler] = None,
        page_parser: Optional[PageParser] = None,
        api_factory: Optional[Callable[[Authenticator], APIWrapper]] = None,
    ):
        """Initialize sync command with dependencies.

        Args:
            output_handler: OutputHandler for terminal output (optional)
            page_parser: PageParser for reading Markdown files (optional)
            api_factory: Builds the API client from an Authenticator (optional)
        """
        self.output_handler = output_handler or OutputHandler()
        self.page_parser = page_parser or PageParser()
        self.api_factory = api_factory or APIWrapper

    def run(
        self,
        cli_values: Dict[str, Any],
        config_path: Optional[str] = None,
        dry_run: bool = False,
        strict_updates: bool = False,
    ) -> ExitCode:
        """Execute the sync.

        Args:
            cli_values: Option values keyed by config field name
            config_path: Optional YAML configuration file
            dry_run: Plan creates and updates without writing
            strict_updates: Abort on the first failed update

        Returns:
            ExitCode indicating success or specific failure type
        """
        try:
            config = ConfigLoader.build(cli_values, config_path)
            logger.info(f"Loaded configuration: {config!r}")
            if config.tags:
                logger.debug(f"Tags configured (not applied to pages): {config.tags}")

            pages = self.page_parser.parse_pages_at_path(config.path)
            self.output_handler.info(f"Parsed {len(pages)} page(s) from \"{config.path}\"")
            if not pages:
                self.output_handler.warning("No file contained a level-1 heading")

            authenticator = Authenticator(
                url=config.url,
                token_id=config.token_id,
                token_secret=config.token_secret,
            )
            with self.api_factory(authenticator) as api:
                reconciler = UpsertReconciler(
                    api,
                    strict_updates=strict_updates,
                    dry_run=dry_run,
                )
                summary = reconciler.upsert(config.target, pages)

            self.output_handler.print_upsert_summary(summary)
            return ExitCode.SUCCESS

        except (ConfigurationError, ConfigNotFoundError) as e:
            logger.error(f"Configuration error: {e}")
            self.output_handler.error(str(e))
            return ExitCode.GENERAL_ERROR

        except NoFilesFoundError as e:
            logger.error(str(e))
            self.output_handler.error(str(e))
            return ExitCode.GENERAL_ERROR

        except SyncError as e:
            logger.error(f"Sync failed: {e}")
            self.output_handler.error(str(e))
            return self._exit_code_for(e)

        except Exception as e:
            logger.exception("Unexpected error during sync")
            self.output_handler.error(f"Unexpected error: {e}")
            return ExitCode.GENERAL_ERROR

    def _exit_code_for(self, error: SyncError) -> ExitCode:
        """Pick the exit code from the error and the client error behind it."""
        cause = error.__cause__ or error
        if isinstance(error, InvalidCredentialsError) or isinstance(cause, InvalidCredentialsError):
            self.output_handler.info("Check the BookStack token id and token secret")
            return ExitCode.AUTH_ERROR
        if isinstance(error, (RemoteFetchError, APIUnreachableError)) or isinstance(cause, APIUnreachableError):
            self.output_handler.info("Check the BookStack URL and your network connection")
            return ExitCode.NETWORK_ERROR
        return ExitCode.GENERAL_ERROR
