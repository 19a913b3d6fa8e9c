"""API wrapper for the BookStack REST API.

This module wraps a requests session configured for BookStack token
authentication and provides error translation from HTTP exceptions to our
typed exception hierarchy.
"""

import logging
import re
from typing import Any, Dict, Optional

import requests
from requests.exceptions import (
    ConnectionError,
    JSONDecodeError,
    RequestException,
    Timeout,
)

from .auth import Authenticator
from .errors import (
    APIAccessError,
    APIUnreachableError,
    InvalidCredentialsError,
    PageNotFoundError,
)

logger = logging.getLogger(__name__)

API_PATH = "/api/"
BOOKS_PATH = "books"
CHAPTERS_PATH = "chapters"
PAGES_PATH = "pages"

# Seconds before a request is abandoned
REQUEST_TIMEOUT = 30


class APIWrapper:
    """Thin client over the BookStack REST API with error translation.

    One instance owns one requests session. It is created once per run and
    passed to every component that talks to BookStack.

    Example:
        >>> auth = Authenticator(url="https://wiki.example.com", token_id="id", token_secret="secret")
        >>> with APIWrapper(auth) as api:
        ...     book = api.get_book(3)
    """

    def __init__(self, authenticator: Authenticator, session: Optional[requests.Session] = None):
        """Initialize the API wrapper.

        Args:
            authenticator: Authenticator providing url and API token
            session: Optional pre-built session (mostly for tests)
        """
        self._authenticator = authenticator
        self._session = session
        self._base_url: Optional[str] = None

    def __enter__(self) -> "APIWrapper":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def base_url(self) -> str:
        """API root, e.g. ``https://wiki.example.com/api/``."""
        if self._base_url is None:
            creds = self._authenticator.get_credentials()
            self._base_url = re.sub(r'/+$', '', creds.url) + API_PATH
        return self._base_url

    def _get_session(self) -> requests.Session:
        """Get or create the session carrying the BookStack auth headers.

        Raises:
            InvalidCredentialsError: If credentials are missing
        """
        if self._session is None:
            creds = self._authenticator.get_credentials()
            session = requests.Session()
            session.headers.update({
                "Authorization": creds.authorization,
                "Content-Type": "application/json",
            })
            self._session = session
        return self._session

    def close(self) -> None:
        """Close the underlying session if one was opened."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def _validate_id(self, entity_id: Any, kind: str) -> int:
        """Validate that an entity ID is a positive integer.

        Raises:
            ValueError: If the id is not numeric
        """
        id_str = str(entity_id).strip() if entity_id is not None else ""
        if not re.match(r'^\d+$', id_str) or int(id_str) == 0:
            raise ValueError(
                f"Invalid {kind} id: '{entity_id}'. "
                f"BookStack ids must be positive integers."
            )
        return int(id_str)

    def _sanitize_credentials(self, text: str) -> str:
        """Mask API tokens in error messages before they are logged.

        Example:
            >>> api._sanitize_credentials("Authorization: Token abc:def")
            "Authorization: ***REDACTED***"
        """
        if not text:
            return text

        sanitized = re.sub(
            r'Authorization:\s*[^\n\r]+',
            'Authorization: ***REDACTED***',
            text,
            flags=re.IGNORECASE
        )
        sanitized = re.sub(
            r'Token\s+[^\s:]+:[^\s\'"]+',
            'Token ***REDACTED***',
            sanitized
        )
        sanitized = re.sub(
            r'://([\w.-]+):([\w.-]+)@',
            r'://***:***@',
            sanitized
        )
        return sanitized

    def _translate_error(self, exception: Exception, operation: str) -> Exception:
        """Translate requests exceptions to typed BookStack exceptions.

        Args:
            exception: The original exception raised by requests
            operation: Description of the operation that failed

        Returns:
            Exception: Translated exception (one of our typed exceptions)
        """
        if isinstance(exception, (Timeout, ConnectionError)):
            return APIUnreachableError(endpoint=self.base_url)

        status_code = None
        response = getattr(exception, 'response', None)
        if response is not None:
            status_code = getattr(response, 'status_code', None)

        if status_code in (401, 403):
            creds = self._authenticator.get_credentials()
            return InvalidCredentialsError(
                token_id=creds.token_id,
                endpoint=self.base_url
            )

        if status_code == 404:
            return PageNotFoundError(resource=operation)

        safe_error_msg = self._sanitize_credentials(str(exception))
        logger.error(f"API operation failed: {operation} - {safe_error_msg}")
        if status_code is not None:
            return APIAccessError(
                f"BookStack API failure during {operation} (HTTP {status_code})",
                status_code=status_code,
            )
        return APIAccessError(f"BookStack API failure during {operation}: {safe_error_msg}")

    def _request(
        self,
        method: str,
        path: str,
        operation: str,
        payload: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Issue one request and decode the JSON body.

        Raises:
            InvalidCredentialsError: On 401/403
            PageNotFoundError: On 404
            APIUnreachableError: On connection errors and timeouts
            APIAccessError: On any other failure
        """
        url = self.base_url + path
        logger.debug(f"{method} {url}")
        try:
            response = self._get_session().request(
                method,
                url,
                json=payload,
                timeout=REQUEST_TIMEOUT,
            )
            response.raise_for_status()
            if not response.content:
                return {}
            return response.json()
        except JSONDecodeError as e:
            # Subclass of RequestException, so it must come first
            raise APIAccessError(
                f"BookStack API returned invalid JSON during {operation}"
            ) from e
        except RequestException as e:
            raise self._translate_error(e, operation) from e

    def get_book(self, book_id: Any) -> Dict[str, Any]:
        """Fetch a book including its ``contents`` list.

        The contents list mixes chapters and pages; each entry has ``type``,
        ``id`` and ``name``.
        """
        book_id = self._validate_id(book_id, "book")
        return self._request("GET", f"{BOOKS_PATH}/{book_id}", f"get_book({book_id})")

    def get_chapter(self, chapter_id: Any) -> Dict[str, Any]:
        """Fetch a chapter including its ``pages`` list."""
        chapter_id = self._validate_id(chapter_id, "chapter")
        return self._request("GET", f"{CHAPTERS_PATH}/{chapter_id}", f"get_chapter({chapter_id})")

    def create_page(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Create a new page.

        Args:
            payload: ``name``, ``markdown`` and ``book_id`` and/or ``chapter_id``

        Returns:
            Dict containing created page data
        """
        return self._request("POST", PAGES_PATH, f"create_page({payload.get('name')})", payload)

    def update_page(self, page_id: Any, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Update an existing page with the same payload shape as create_page."""
        page_id = self._validate_id(page_id, "page")
        return self._request("PUT", f"{PAGES_PATH}/{page_id}", f"update_page({page_id})", payload)
