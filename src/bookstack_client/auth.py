"""Authentication module for loading BookStack API credentials.

This module resolves the BookStack base URL and API token from explicit
values (command line options) with a fallback to environment variables loaded
via python-dotenv. It validates that all required credentials are present and
raises appropriate errors if any are missing.
"""

import os
from typing import NamedTuple, Optional

from dotenv import load_dotenv

from .errors import InvalidCredentialsError


class Credentials(NamedTuple):
    """BookStack API credentials."""
    url: str
    token_id: str
    token_secret: str

    @property
    def authorization(self) -> str:
        """Value of the Authorization header expected by BookStack."""
        return f"Token {self.token_id}:{self.token_secret}"


class Authenticator:
    """Resolves and validates BookStack credentials.

    Explicit values passed to the constructor win over the environment.
    Credentials are never cached or logged.

    Environment variables used as fallback:
        BOOKSTACK_URL: BookStack instance URL (e.g., https://wiki.example.com)
        BOOKSTACK_TOKEN_ID: API token id
        BOOKSTACK_TOKEN_SECRET: API token secret

    Raises:
        InvalidCredentialsError: If any required credential is missing

    Example:
        >>> auth = Authenticator(url="https://wiki.example.com", token_id="id", token_secret="secret")
        >>> creds = auth.get_credentials()
        >>> print(f"Connecting to {creds.url}")
    """

    def __init__(
        self,
        url: Optional[str] = None,
        token_id: Optional[str] = None,
        token_secret: Optional[str] = None,
    ):
        """Initialize the authenticator and load environment variables from .env file."""
        load_dotenv()
        self._url = url
        self._token_id = token_id
        self._token_secret = token_secret

    def get_credentials(self) -> Credentials:
        """Get BookStack credentials.

        Returns:
            Credentials: A named tuple containing url, token_id and token_secret

        Raises:
            InvalidCredentialsError: If any required credential is missing
        """
        url = self._url or os.getenv('BOOKSTACK_URL')
        token_id = self._token_id or os.getenv('BOOKSTACK_TOKEN_ID')
        token_secret = self._token_secret or os.getenv('BOOKSTACK_TOKEN_SECRET')

        if not url or not token_id or not token_secret:
            raise InvalidCredentialsError(
                token_id=token_id if token_id else "unknown",
                endpoint=url if url else "unknown"
            )

        return Credentials(url=url, token_id=token_id, token_secret=token_secret)
