"""Sync configuration loading and validation.

This module merges the values given on the command line (or through
environment variables) with an optional YAML configuration file and
validates the result before any file or network access happens.

Configuration file structure (every key optional, command line wins):
    url: "https://wiki.example.com"
    token_id: "..."
    token_secret: "..."
    book_id: 3
    chapter_id: 12
    path: "docs/**/*.md"
    tags: "docs, generated"
"""

from typing import Any, Dict, List, Optional

import yaml

from src.models.sync_target import SyncTarget
from src.page_sync.errors import ConfigurationError

from .errors import ConfigNotFoundError
from .models import SyncConfig


class ConfigLoader:
    """Builds a validated SyncConfig.

    Credentials are checked first, then the target, then the path, so the
    first missing input is the one reported.
    """

    # Keys accepted in the YAML file (hyphens are normalized to underscores)
    KNOWN_FIELDS = {
        'url', 'token_id', 'token_secret', 'book_id', 'chapter_id', 'path', 'tags'
    }

    @classmethod
    def load_file(cls, config_path: str) -> Dict[str, Any]:
        """Load raw values from a YAML configuration file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            Dict of configuration values with normalized keys

        Raises:
            ConfigNotFoundError: If the file does not exist
            ConfigurationError: If the file cannot be read or is malformed
        """
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            raise ConfigNotFoundError(config_path)
        except OSError as e:
            raise ConfigurationError(f"Cannot read {config_path}: {e}")

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML syntax: {str(e)}"
            )

        if config_dict is None:
            return {}

        if not isinstance(config_dict, dict):
            raise ConfigurationError(
                f"Configuration must be a YAML dictionary, got {type(config_dict).__name__}"
            )

        values = {}
        for key, value in config_dict.items():
            normalized = str(key).replace('-', '_')
            if normalized not in cls.KNOWN_FIELDS:
                raise ConfigurationError(f"Unknown field '{key}'", str(key))
            values[normalized] = value
        return values

    @classmethod
    def build(
        cls,
        cli_values: Dict[str, Any],
        config_path: Optional[str] = None,
    ) -> SyncConfig:
        """Merge command line values over the config file and validate.

        Args:
            cli_values: Values from options/environment; None means "not given"
            config_path: Optional YAML configuration file

        Returns:
            Validated SyncConfig

        Raises:
            ConfigNotFoundError: If config_path does not exist
            ConfigurationError: If a required value is missing or invalid
        """
        values: Dict[str, Any] = {}
        if config_path:
            values.update(cls.load_file(config_path))
        for key, value in cli_values.items():
            if value is not None and value != "":
                values[key] = value

        url = cls._require_string(values, 'url')
        token_id = cls._require_string(values, 'token_id')
        token_secret = cls._require_string(values, 'token_secret')

        book_id = cls._parse_id(values.get('book_id'), 'book_id')
        chapter_id = cls._parse_id(values.get('chapter_id'), 'chapter_id')
        if not book_id and not chapter_id:
            raise ConfigurationError(
                "Missing input: book-id or chapter-id (at least one needs to be set)"
            )

        path = cls._require_string(values, 'path')

        return SyncConfig(
            url=url,
            token_id=token_id,
            token_secret=token_secret,
            target=SyncTarget(book_id=book_id, chapter_id=chapter_id),
            path=path,
            tags=cls._parse_tags(values.get('tags')),
        )

    @classmethod
    def _require_string(cls, values: Dict[str, Any], field: str) -> str:
        value = values.get(field)
        if value is None or not str(value).strip():
            raise ConfigurationError(
                f"Missing input: {field.replace('_', '-')}", field
            )
        return str(value).strip()

    @classmethod
    def _parse_id(cls, value: Any, field: str) -> Optional[int]:
        """Parse a book or chapter id; empty values mean "not set"."""
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        if isinstance(value, bool):
            raise ConfigurationError("Must be a positive integer", field)
        try:
            parsed = int(str(value).strip())
        except ValueError:
            raise ConfigurationError(
                f"Must be a positive integer, got '{value}'", field
            )
        if parsed <= 0:
            raise ConfigurationError(
                f"Must be a positive integer, got '{value}'", field
            )
        return parsed

    @classmethod
    def _parse_tags(cls, value: Any) -> List[str]:
        """Split a comma separated tag string (or YAML list) into tags."""
        if not value:
            return []
        if isinstance(value, str):
            raw_tags = value.split(',')
        elif isinstance(value, list):
            raw_tags = [str(tag) for tag in value]
        else:
            raise ConfigurationError(
                f"Must be a comma separated string or a list, got {type(value).__name__}",
                'tags'
            )
        return [tag.strip() for tag in raw_tags if tag.strip()]
