"""Low-level GitHub API client for release and asset endpoints.

This module handles direct HTTP communication with the GitHub REST API.
It implements the ReleaseRegistry protocol; every failure is raised as
GitHubAPIError except a 404 on the tag lookup, which means "no release
for this tag yet".
"""

from typing import Any
from urllib.parse import quote

import aiohttp
import orjson

from release_uploader.constants import (
    API_PAGE_SIZE,
    DEFAULT_API_URL,
    HTTP_BAD_REQUEST,
    HTTP_NOT_FOUND,
)
from release_uploader.domain.types import Asset, Release, RepoIdentity
from release_uploader.exceptions import GitHubAPIError
from release_uploader.infrastructure.auth import GitHubAuthManager
from release_uploader.logger import get_logger

logger = get_logger(__name__)


def strip_uri_template(upload_url: str) -> str:
    """Drop the RFC 6570 suffix GitHub appends to upload URLs.

    Args:
        upload_url: e.g. ``https://uploads.github.com/.../assets{?name,label}``

    Returns:
        URL without the template part

    """
    return upload_url.split("{", 1)[0]


class GitHubReleaseRegistry:
    """Release registry backed by the GitHub REST API."""

    def __init__(
        self,
        repo: RepoIdentity,
        session: aiohttp.ClientSession,
        auth_manager: GitHubAuthManager,
        api_url: str = DEFAULT_API_URL,
    ) -> None:
        """Initialize the API client.

        Args:
            repo: Repository the releases belong to
            session: aiohttp session for making requests
            auth_manager: GitHub authentication manager
            api_url: API root, overridable for GitHub Enterprise

        """
        self.repo = repo
        self.session = session
        self.auth_manager = auth_manager
        self.api_url = api_url.rstrip("/")

    @property
    def _repo_url(self) -> str:
        return f"{self.api_url}/repos/{self.repo.owner}/{self.repo.name}"

    async def _request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        body: bytes | None = None,
        headers: dict[str, str] | None = None,
        allow_not_found: bool = False,
    ) -> tuple[Any, str | None]:
        """Send one request and decode the JSON response.

        Args:
            method: HTTP method
            url: Absolute request URL
            params: Query parameters
            body: Raw request body
            headers: Extra headers (auth headers are added)
            allow_not_found: Return ``(None, None)`` on 404 instead of
                raising

        Returns:
            Tuple of decoded JSON payload (None for empty bodies) and the
            URL of the next page, if the response is paginated

        Raises:
            GitHubAPIError: On a connection failure or an error status

        """
        request_headers = self.auth_manager.apply_auth(dict(headers or {}))
        logger.debug("%s %s", method, url)
        try:
            async with self.session.request(
                method,
                url,
                params=params,
                data=body,
                headers=request_headers,
            ) as response:
                raw = await response.read()
                if allow_not_found and response.status == HTTP_NOT_FOUND:
                    return None, None
                if response.status >= HTTP_BAD_REQUEST:
                    raise GitHubAPIError(
                        _error_message(response.status, raw),
                        target=f"{method} {url}",
                        status=response.status,
                    )
                payload = orjson.loads(raw) if raw else None
                next_link = response.links.get("next")
                next_url = str(next_link["url"]) if next_link else None
                return payload, next_url
        except aiohttp.ClientError as e:
            raise GitHubAPIError(str(e), target=f"{method} {url}") from e
        except orjson.JSONDecodeError as e:
            msg = f"invalid JSON in response: {e}"
            raise GitHubAPIError(msg, target=f"{method} {url}") from e

    async def _get_all_pages(self, url: str) -> list[dict[str, Any]]:
        """Collect every item of a paginated list endpoint, in order."""
        items: list[dict[str, Any]] = []
        next_url: str | None = url
        params: dict[str, Any] | None = {"per_page": API_PAGE_SIZE}
        while next_url:
            payload, next_url = await self._request(
                "GET", next_url, params=params
            )
            # The next link already carries the query string
            params = None
            if not isinstance(payload, list):
                msg = f"expected a list, got {type(payload).__name__}"
                raise GitHubAPIError(msg, target=url)
            items.extend(payload)
        return items

    async def get_release_by_tag(self, tag: str) -> Release | None:
        """Fetch a published release by tag.

        Args:
            tag: Release tag

        Returns:
            Release, or None when GitHub answers 404

        """
        url = f"{self._repo_url}/releases/tags/{quote(tag, safe='')}"
        payload, _ = await self._request("GET", url, allow_not_found=True)
        if payload is None:
            return None
        return Release.from_api_response(payload)

    async def list_releases(self) -> list[Release]:
        """List all releases, drafts included, in GitHub's order."""
        items = await self._get_all_pages(f"{self._repo_url}/releases")
        return [Release.from_api_response(item) for item in items]

    async def create_release(
        self,
        tag: str,
        *,
        prerelease: bool,
        name: str,
        body: str,
    ) -> Release:
        """Create a release for a tag.

        Args:
            tag: Tag name; GitHub creates the tag if it does not exist
            prerelease: Prerelease flag
            name: Display name
            body: Release notes

        Returns:
            The created release

        """
        request_body = orjson.dumps(
            {
                "tag_name": tag,
                "prerelease": prerelease,
                "name": name,
                "body": body,
            }
        )
        payload, _ = await self._request(
            "POST",
            f"{self._repo_url}/releases",
            body=request_body,
            headers={"Content-Type": "application/json"},
        )
        return Release.from_api_response(payload)

    async def list_assets(self, release_id: int) -> list[Asset]:
        """List every asset attached to a release."""
        items = await self._get_all_pages(
            f"{self._repo_url}/releases/{release_id}/assets"
        )
        return [Asset.from_api_response(item) for item in items]

    async def delete_asset(self, asset_id: int) -> None:
        """Delete a release asset by id."""
        await self._request(
            "DELETE", f"{self._repo_url}/releases/assets/{asset_id}"
        )

    async def upload_asset(
        self,
        upload_url: str,
        name: str,
        data: bytes,
        *,
        content_type: str,
        content_length: int,
    ) -> Asset:
        """Upload bytes as a new release asset.

        Args:
            upload_url: Release upload URL, template suffix allowed
            name: Asset name
            data: File contents
            content_type: Declared Content-Type
            content_length: Declared Content-Length

        Returns:
            The uploaded asset

        """
        payload, _ = await self._request(
            "POST",
            strip_uri_template(upload_url),
            params={"name": name},
            body=data,
            headers={
                "Content-Type": content_type,
                "Content-Length": str(content_length),
            },
        )
        return Asset.from_api_response(payload)


def _error_message(status: int, raw: bytes) -> str:
    """Extract GitHub's ``message`` field from an error body."""
    try:
        payload = orjson.loads(raw) if raw else {}
    except orjson.JSONDecodeError:
        payload = {}
    message = payload.get("message") if isinstance(payload, dict) else None
    return f"HTTP {status}: {message or 'no error message'}"
