"""Parse local Markdown files into pages.

Files are read in parallel. Every read settles on its own: a missing or
unreadable file is logged and skipped without affecting the others. Each
readable file becomes a Page named after its first level-1 heading; files
without one are skipped.
"""

import logging
import re
from concurrent.futures import ThreadPoolExecutor
from typing import List, NamedTuple, Optional, Sequence

from src.models.page import Page

from .errors import FileReadError
from .file_discovery import resolve_files

logger = logging.getLogger(__name__)

# Maximum parallel threads for reading files
MAX_WORKERS = 10

# "# " at the start of a line, the rest of the line is the title
HEADING_PATTERN = re.compile(r'^# (.*)$', re.MULTILINE)


class FileContent(NamedTuple):
    """Raw content of a file that was read successfully."""
    file_path: str
    content: str


class PageParser:
    """Turns Markdown files into Page objects.

    Example:
        >>> parser = PageParser()
        >>> pages = parser.parse_all(["docs/intro.md", "docs/setup.md"])
        >>> [page.name for page in pages]
        ['Introduction', 'Setup']
    """

    def __init__(self, max_workers: int = MAX_WORKERS):
        self.max_workers = max_workers

    def _read_file(self, file_path: str) -> FileContent:
        """Read one file as UTF-8 text.

        Raises:
            FileNotFoundError: If the file does not exist
            FileReadError: If the file exists but cannot be read
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                return FileContent(file_path, f.read())
        except FileNotFoundError:
            raise
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(file_path, str(e)) from e

    def read_files(self, file_paths: Sequence[str]) -> List[FileContent]:
        """Read all files and return the content of those that could be read.

        Reads run concurrently and each outcome is collected separately, so
        one failing file never affects the others. Results keep input order.

        Args:
            file_paths: Paths to read

        Returns:
            FileContent for every readable file
        """
        logger.info(f"Reading {len(file_paths)} file(s)")

        if not file_paths:
            return []

        contents: List[FileContent] = []
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [executor.submit(self._read_file, path) for path in file_paths]

            for path, future in zip(file_paths, futures):
                try:
                    file_content = future.result()
                except FileNotFoundError:
                    logger.warning(f"File \"{path}\" does not exist, skipping")
                    continue
                except FileReadError as e:
                    logger.warning(f"{e}, skipping")
                    continue

                contents.append(file_content)
                logger.info(f"Read file: \"{path}\"")

        return contents

    def parse(self, file_path: str, content: str) -> Optional[Page]:
        """Extract the first level-1 heading and create a Page.

        Args:
            file_path: Path the content was read from (for log messages)
            content: Markdown text

        Returns:
            Page, or None if the content has no usable heading
        """
        match = HEADING_PATTERN.search(content)
        if not match:
            logger.warning(
                f"Page content of file \"{file_path}\" does not have a heading, skipping"
            )
            return None

        name = match.group(1).strip()
        if not name:
            logger.warning(
                f"Page content of file \"{file_path}\" has an empty heading, skipping"
            )
            return None

        body = (content[:match.start()] + content[match.end():]).strip()

        logger.info(f"Parsed page: \"{name}\"")
        return Page(name=name, content=body)

    def parse_contents(self, file_contents: Sequence[FileContent]) -> List[Page]:
        """Parse already read files, dropping those without a heading."""
        logger.info(f"Parsing {len(file_contents)} page(s)")

        pages = []
        for file_content in file_contents:
            page = self.parse(file_content.file_path, file_content.content)
            if page:
                pages.append(page)

        logger.info(f"Parsed {len(pages)} page(s)")
        return pages

    def parse_all(self, file_paths: Sequence[str]) -> List[Page]:
        """Read and parse the given files.

        Output order follows input order; skipped files leave no entry.
        """
        return self.parse_contents(self.read_files(file_paths))

    def parse_pages_at_path(self, pattern: str) -> List[Page]:
        """Resolve a path or glob pattern and parse every file found.

        Raises:
            NoFilesFoundError: If the pattern matches nothing
        """
        return self.parse_all(resolve_files(pattern))
