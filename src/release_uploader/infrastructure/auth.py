"""GitHub authentication management.

Resolves the token used for API calls and applies it to request
headers. The token is looked up, in order, from the explicit run input,
the GITHUB_TOKEN environment variable and the system keyring.
"""

import os

import keyring
from keyring.errors import KeyringError

from release_uploader.constants import (
    ENV_GITHUB_TOKEN,
    GITHUB_ACCEPT,
    GITHUB_API_VERSION,
    KEYRING_SERVICE,
    KEYRING_USERNAME,
)
from release_uploader.logger import get_logger

logger = get_logger(__name__)


class GitHubAuthManager:
    """Manage the GitHub token for a run."""

    def __init__(self, token: str | None = None) -> None:
        """Initialize the auth manager.

        Args:
            token: Explicit token; other sources are only consulted when
                this is empty

        """
        self._explicit_token = token or None
        self._resolved = False
        self._token: str | None = None

    def _load_from_keyring(self) -> str | None:
        try:
            return keyring.get_password(KEYRING_SERVICE, KEYRING_USERNAME)
        except KeyringError as e:
            # Headless runners usually have no keyring backend
            logger.debug("Keyring unavailable: %s", e)
            return None

    def get_token(self) -> str | None:
        """Return the token, resolving it on first use.

        Returns:
            Token or None when no source provides one

        """
        if not self._resolved:
            self._token = (
                self._explicit_token
                or os.getenv(ENV_GITHUB_TOKEN)
                or self._load_from_keyring()
            )
            self._resolved = True
            if not self._token:
                logger.warning(
                    "No GitHub token configured. Creating releases and "
                    "uploading assets will be rejected by GitHub."
                )
        return self._token

    def apply_auth(self, headers: dict[str, str]) -> dict[str, str]:
        """Apply authentication and API headers.

        Args:
            headers: HTTP headers to update

        Returns:
            The same headers with Accept, API version and, when a token
            is available, Authorization set

        """
        headers.setdefault("Accept", GITHUB_ACCEPT)
        headers.setdefault("X-GitHub-Api-Version", GITHUB_API_VERSION)
        token = self.get_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers
