"""Unit tests for cli.config.ConfigLoader."""

import pytest

from src.cli.config import ConfigLoader
from src.cli.errors import ConfigNotFoundError
from src.models.sync_target import SyncTarget
from src.page_sync.errors import ConfigurationError


def cli_values(**overrides):
    """Complete set of option values, with overrides applied."""
    values = {
        'url': 'https://wiki.example.com',
        'token_id': 'abc',
        'token_secret': 'def',
        'book_id': '3',
        'chapter_id': None,
        'path': 'docs/*.md',
        'tags': None,
    }
    values.update(overrides)
    return values


class TestBuild:
    """Test cases for building SyncConfig from option values."""

    def test_complete_values(self):
        """All values resolve into a SyncConfig."""
        config = ConfigLoader.build(cli_values())

        assert config.url == 'https://wiki.example.com'
        assert config.token_id == 'abc'
        assert config.token_secret == 'def'
        assert config.target == SyncTarget(book_id=3)
        assert config.path == 'docs/*.md'
        assert config.tags == []

    def test_both_ids_kept(self):
        """Book and chapter ids can be set together."""
        config = ConfigLoader.build(cli_values(chapter_id='12'))
        assert config.target == SyncTarget(book_id=3, chapter_id=12)

    def test_missing_book_and_chapter(self):
        """Neither book-id nor chapter-id raises ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.build(cli_values(book_id=None, chapter_id=''))
        assert "book-id or chapter-id" in str(exc_info.value)

    @pytest.mark.parametrize("field", ['url', 'token_id', 'token_secret', 'path'])
    def test_missing_required_field(self, field):
        """Each required value is reported by name."""
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.build(cli_values(**{field: None}))
        assert exc_info.value.config_field == field

    def test_credentials_checked_before_target(self):
        """A missing url is reported even when the target is missing too."""
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.build(cli_values(url=None, book_id=None))
        assert exc_info.value.config_field == 'url'

    @pytest.mark.parametrize("bad_id", ['abc', '-1', '0', '1.5'])
    def test_invalid_ids(self, bad_id):
        """Ids must be positive integers."""
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.build(cli_values(book_id=bad_id))
        assert exc_info.value.config_field == 'book_id'

    def test_tags_split_and_trimmed(self):
        """Comma separated tags are split, trimmed and empties dropped."""
        config = ConfigLoader.build(cli_values(tags=' docs, generated ,,api '))
        assert config.tags == ['docs', 'generated', 'api']

    def test_repr_hides_secret(self):
        """The token secret never appears in the repr."""
        config = ConfigLoader.build(cli_values(token_secret='supersecret'))
        assert 'supersecret' not in repr(config)


class TestConfigFile:
    """Test cases for the optional YAML file."""

    def test_file_supplies_defaults(self, tmp_path):
        """Values missing on the command line come from the file."""
        config_file = tmp_path / "sync.yaml"
        config_file.write_text(
            "url: https://file.example.com\n"
            "chapter-id: 12\n"
            "tags: [a, b]\n",
            encoding="utf-8",
        )

        config = ConfigLoader.build(
            cli_values(url=None, book_id=None), str(config_file)
        )

        assert config.url == 'https://file.example.com'
        assert config.target == SyncTarget(chapter_id=12)
        assert config.tags == ['a', 'b']

    def test_command_line_wins(self, tmp_path):
        """Command line values override the file."""
        config_file = tmp_path / "sync.yaml"
        config_file.write_text("path: from-file/*.md\n", encoding="utf-8")

        config = ConfigLoader.build(cli_values(path='cli/*.md'), str(config_file))

        assert config.path == 'cli/*.md'

    def test_missing_file(self, tmp_path):
        """A named config file that does not exist raises ConfigNotFoundError."""
        with pytest.raises(ConfigNotFoundError):
            ConfigLoader.build(cli_values(), str(tmp_path / "missing.yaml"))

    def test_invalid_yaml(self, tmp_path):
        """Malformed YAML raises ConfigurationError."""
        config_file = tmp_path / "sync.yaml"
        config_file.write_text("url: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            ConfigLoader.load_file(str(config_file))

    def test_not_a_mapping(self, tmp_path):
        """A YAML list is rejected."""
        config_file = tmp_path / "sync.yaml"
        config_file.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            ConfigLoader.load_file(str(config_file))

    def test_unknown_field(self, tmp_path):
        """Unknown keys are rejected."""
        config_file = tmp_path / "sync.yaml"
        config_file.write_text("space_key: TEAM\n", encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.load_file(str(config_file))
        assert exc_info.value.config_field == 'space_key'

    def test_empty_file(self, tmp_path):
        """An empty file supplies nothing."""
        config_file = tmp_path / "sync.yaml"
        config_file.write_text("", encoding="utf-8")

        assert ConfigLoader.load_file(str(config_file)) == {}
