"""Unit tests for cli.sync_command.SyncCommand module."""

import pytest
from unittest.mock import MagicMock, Mock

from src.bookstack_client.errors import (
    APIAccessError,
    APIUnreachableError,
    InvalidCredentialsError,
)
from src.cli.models import ExitCode
from src.cli.sync_command import SyncCommand
from src.file_mapper.page_parser import PageParser


@pytest.fixture
def docs(tmp_path):
    """Markdown files: one existing page, one new page, one without a heading."""
    (tmp_path / "intro.md").write_text("# Intro\nWelcome", encoding="utf-8")
    (tmp_path / "new.md").write_text("# New\nFresh page", encoding="utf-8")
    (tmp_path / "draft.md").write_text("No heading here", encoding="utf-8")
    return tmp_path


def create_api(book_contents=None):
    """Mock API client usable as a context manager."""
    api = MagicMock()
    api.__enter__.return_value = api
    api.__exit__.return_value = False
    api.get_book.return_value = {'contents': book_contents or []}
    api.get_chapter.return_value = {'pages': []}
    return api


def cli_values(path, **overrides):
    values = {
        'url': 'https://wiki.example.com',
        'token_id': 'abc',
        'token_secret': 'def',
        'book_id': '3',
        'chapter_id': None,
        'path': path,
        'tags': None,
    }
    values.update(overrides)
    return values


def create_command(api):
    factory = Mock(return_value=api)
    return SyncCommand(output_handler=Mock(), api_factory=factory), factory


class TestSyncCommandInitialization:
    """Test cases for SyncCommand initialization."""

    def test_init_with_defaults(self):
        """Default dependencies are created."""
        sync_cmd = SyncCommand()

        assert sync_cmd.output_handler is not None
        assert isinstance(sync_cmd.page_parser, PageParser)
        assert sync_cmd.api_factory is not None


class TestSuccessfulSync:
    """Test cases for runs that complete."""

    def test_upserts_parsed_pages(self, docs):
        """Existing pages are updated, new ones created, headingless files skipped."""
        api = create_api([{'type': 'page', 'id': 5, 'name': 'Intro'}])
        sync_cmd, factory = create_command(api)

        exit_code = sync_cmd.run(cli_values(str(docs / "*.md")))

        assert exit_code == ExitCode.SUCCESS
        factory.assert_called_once()
        api.update_page.assert_called_once_with(
            5, {'name': 'Intro', 'markdown': 'Welcome', 'book_id': 3}
        )
        api.create_page.assert_called_once_with(
            {'name': 'New', 'markdown': 'Fresh page', 'book_id': 3}
        )
        api.__exit__.assert_called_once()
        sync_cmd.output_handler.print_upsert_summary.assert_called_once()

    def test_client_built_from_config_credentials(self, docs):
        """The API client receives an Authenticator with the configured values."""
        api = create_api()
        sync_cmd, factory = create_command(api)

        sync_cmd.run(cli_values(str(docs / "new.md")))

        authenticator = factory.call_args[0][0]
        creds = authenticator.get_credentials()
        assert creds.url == 'https://wiki.example.com'
        assert creds.authorization == 'Token abc:def'

    def test_update_failure_still_succeeds(self, docs):
        """A swallowed update failure keeps exit code SUCCESS and is reported."""
        api = create_api([{'type': 'page', 'id': 5, 'name': 'Intro'}])
        api.update_page.side_effect = APIAccessError("HTTP 500", status_code=500)
        sync_cmd, _ = create_command(api)

        exit_code = sync_cmd.run(cli_values(str(docs / "*.md")))

        assert exit_code == ExitCode.SUCCESS
        api.create_page.assert_called_once()
        summary = sync_cmd.output_handler.print_upsert_summary.call_args[0][0]
        assert [name for name, _ in summary.failed_updates] == ["Intro"]

    def test_dry_run_writes_nothing(self, docs):
        """Dry run reads the inventory but never writes."""
        api = create_api()
        sync_cmd, _ = create_command(api)

        exit_code = sync_cmd.run(cli_values(str(docs / "*.md")), dry_run=True)

        assert exit_code == ExitCode.SUCCESS
        api.get_book.assert_called_once_with(3)
        api.create_page.assert_not_called()
        api.update_page.assert_not_called()


class TestFailures:
    """Test cases for error to exit code translation."""

    def test_missing_target_fails_before_discovery(self, docs):
        """Missing book-id and chapter-id fails before any file is read."""
        api = create_api()
        parser = Mock()
        factory = Mock(return_value=api)
        sync_cmd = SyncCommand(output_handler=Mock(), page_parser=parser, api_factory=factory)

        exit_code = sync_cmd.run(cli_values(str(docs / "*.md"), book_id=None))

        assert exit_code == ExitCode.GENERAL_ERROR
        parser.parse_pages_at_path.assert_not_called()
        factory.assert_not_called()
        message = sync_cmd.output_handler.error.call_args[0][0]
        assert "book-id or chapter-id" in message

    def test_no_files_fails_before_network(self, tmp_path):
        """A glob matching nothing fails without creating a client."""
        api = create_api()
        sync_cmd, factory = create_command(api)

        exit_code = sync_cmd.run(cli_values(str(tmp_path / "*.md")))

        assert exit_code == ExitCode.GENERAL_ERROR
        factory.assert_not_called()
        assert "No files found" in sync_cmd.output_handler.error.call_args[0][0]

    def test_inventory_unreachable(self, docs):
        """An unreachable API during inventory gives NETWORK_ERROR and no writes."""
        api = create_api()
        api.get_chapter.side_effect = APIUnreachableError("https://wiki.example.com/api/")
        sync_cmd, _ = create_command(api)

        exit_code = sync_cmd.run(cli_values(str(docs / "*.md"), chapter_id='12'))

        assert exit_code == ExitCode.NETWORK_ERROR
        api.create_page.assert_not_called()
        api.update_page.assert_not_called()

    def test_inventory_unauthorized(self, docs):
        """Rejected credentials during inventory give AUTH_ERROR."""
        api = create_api()
        api.get_book.side_effect = InvalidCredentialsError("abc", "https://wiki.example.com/api/")
        sync_cmd, _ = create_command(api)

        exit_code = sync_cmd.run(cli_values(str(docs / "*.md")))

        assert exit_code == ExitCode.AUTH_ERROR

    def test_create_failure(self, docs):
        """A failed page creation fails the run with its message."""
        api = create_api()
        api.create_page.side_effect = APIAccessError("HTTP 422", status_code=422)
        sync_cmd, _ = create_command(api)

        exit_code = sync_cmd.run(cli_values(str(docs / "*.md")))

        assert exit_code == ExitCode.GENERAL_ERROR
        assert api.create_page.call_count == 1
        assert "Failed to create page" in sync_cmd.output_handler.error.call_args[0][0]

    def test_strict_update_failure(self, docs):
        """With strict updates a failed update fails the run."""
        api = create_api([{'type': 'page', 'id': 5, 'name': 'Intro'}])
        api.update_page.side_effect = APIAccessError("HTTP 500", status_code=500)
        sync_cmd, _ = create_command(api)

        exit_code = sync_cmd.run(cli_values(str(docs / "*.md")), strict_updates=True)

        assert exit_code == ExitCode.GENERAL_ERROR
        api.create_page.assert_not_called()

    def test_config_file_not_found(self, docs):
        """A missing --config file is a general error."""
        sync_cmd, factory = create_command(create_api())

        exit_code = sync_cmd.run(
            cli_values(str(docs / "*.md")), config_path=str(docs / "missing.yaml")
        )

        assert exit_code == ExitCode.GENERAL_ERROR
        factory.assert_not_called()

    def test_unexpected_error(self, docs):
        """Unexpected exceptions are caught and reported."""
        parser = Mock()
        parser.parse_pages_at_path.side_effect = RuntimeError("boom")
        sync_cmd = SyncCommand(output_handler=Mock(), page_parser=parser, api_factory=Mock())

        exit_code = sync_cmd.run(cli_values(str(docs / "*.md")))

        assert exit_code == ExitCode.GENERAL_ERROR
        assert "boom" in sync_cmd.output_handler.error.call_args[0][0]

    def test_malformed_inventory(self, docs):
        """An inventory entry without a name gives NETWORK_ERROR, not an unexpected error."""
        api = create_api()
        api.get_chapter.return_value = {'pages': [{'id': 1}]}
        sync_cmd, _ = create_command(api)

        exit_code = sync_cmd.run(cli_values(str(docs / "*.md"), chapter_id='12'))

        assert exit_code == ExitCode.NETWORK_ERROR
        api.create_page.assert_not_called()
        assert "Unexpected error" not in sync_cmd.output_handler.error.call_args[0][0]
