"""Main CLI entry point for bookstack-sync command.

This module provides the Typer application that serves as the entry point
for the bookstack-sync command-line tool. Every input can come from an option,
an environment variable (also the ``INPUT_*`` variables GitHub Actions sets
for action inputs) or a YAML configuration file.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from src.cli.models import ExitCode
from src.cli.output import OutputHandler
from src.cli.sync_command import SyncCommand

VERSION = "0.1.0"

app = typer.Typer(
    name="bookstack-sync",
    help="""Create or update BookStack pages from local Markdown files.

Each file becomes a page named after its first level-1 heading. Pages are
matched to existing pages of the target book or chapter by name.

EXAMPLE:
  bookstack-sync --url https://wiki.example.com --token-id ID --token-secret SECRET --book-id 3 --path "docs/*.md"
""",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=False,
)

logger = logging.getLogger(__name__)

CONSOLE_HANDLER_NAME = "bookstack-sync-console"
FILE_HANDLER_NAME = "bookstack-sync-file"


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'src' namespace logger to avoid affecting third-party
    libraries. The root logger is left unchanged. Handlers added by an earlier
    call are replaced, so calling it again does not duplicate log lines.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    app_logger = logging.getLogger("src")
    app_logger.setLevel(level)

    for handler in app_logger.handlers[:]:
        if handler.get_name() in (CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME):
            app_logger.removeHandler(handler)
            handler.close()

    log_format = "%(asctime)s [%(levelname)8s] %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"bookstack-sync_{timestamp}.log"

        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_formatter = logging.Formatter(file_format, datefmt=date_format)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


@app.command()
def main_command(
    url: Optional[str] = typer.Option(
        None,
        "--url",
        envvar=["BOOKSTACK_URL", "INPUT_URL"],
        help="BookStack base URL",
        metavar="URL",
    ),
    token_id: Optional[str] = typer.Option(
        None,
        "--token-id",
        envvar=["BOOKSTACK_TOKEN_ID", "INPUT_TOKEN-ID"],
        help="BookStack API token id",
    ),
    token_secret: Optional[str] = typer.Option(
        None,
        "--token-secret",
        envvar=["BOOKSTACK_TOKEN_SECRET", "INPUT_TOKEN-SECRET"],
        help="BookStack API token secret",
        show_default=False,
    ),
    book_id: Optional[str] = typer.Option(
        None,
        "--book-id",
        envvar=["BOOKSTACK_BOOK_ID", "INPUT_BOOK-ID"],
        help="ID of the book to sync pages into",
    ),
    chapter_id: Optional[str] = typer.Option(
        None,
        "--chapter-id",
        envvar=["BOOKSTACK_CHAPTER_ID", "INPUT_CHAPTER-ID"],
        help="ID of the chapter to sync pages into (takes precedence for existing page lookup)",
    ),
    path: Optional[str] = typer.Option(
        None,
        "--path",
        envvar=["BOOKSTACK_SYNC_PATH", "INPUT_PATH"],
        help="Markdown file path or glob pattern (e.g. 'docs/**/*.md')",
        metavar="PATH",
    ),
    tags: Optional[str] = typer.Option(
        None,
        "--tags",
        envvar=["BOOKSTACK_TAGS", "INPUT_TAGS"],
        help="Comma separated tags",
    ),
    config: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML file with default values for any of the options above",
        metavar="FILE",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "--dryrun",
        help="Show which pages would be created or updated without writing",
    ),
    strict_updates: bool = typer.Option(
        False,
        "--strict-updates",
        help="Fail the run when a page update fails (default: report and continue)",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    verbosity: int = typer.Option(
        1,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
    ),
) -> None:
    """Create or update BookStack pages from local Markdown files."""
    if version:
        typer.echo(f"bookstack-sync version {VERSION}")
        raise typer.Exit()

    _configure_logging(verbosity, logdir)
    output = OutputHandler(verbosity=verbosity, no_color=no_color)

    cli_values = {
        'url': url,
        'token_id': token_id,
        'token_secret': token_secret,
        'book_id': book_id,
        'chapter_id': chapter_id,
        'path': path,
        'tags': tags,
    }

    sync_cmd = SyncCommand(output_handler=output)
    exit_code = sync_cmd.run(
        cli_values,
        config_path=config,
        dry_run=dry_run,
        strict_updates=strict_updates,
    )

    raise typer.Exit(exit_code)


def main() -> None:
    """Main entry point for the CLI application.

    Loads a .env file first so its values are visible as option defaults.
    """
    load_dotenv()
    app()


if __name__ == "__main__":
    main()
