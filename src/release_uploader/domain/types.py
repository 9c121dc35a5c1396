"""Domain types for business logic.

This module contains pure domain types used by the resolver and the
uploader without any IO or infrastructure dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any


@dataclass(slots=True, frozen=True)
class Asset:
    """Represents a GitHub release asset.

    Attributes:
        id: Asset id, unique within the repository
        name: Asset filename, unique within its release
        size: Asset size in bytes
        browser_download_url: Public download URL for the asset

    """

    id: int
    name: str
    size: int
    browser_download_url: str

    @classmethod
    def from_api_response(cls, asset_data: dict[str, Any]) -> Asset:
        """Create Asset from GitHub API response data.

        Args:
            asset_data: Raw asset data from GitHub API

        Returns:
            Asset instance

        Raises:
            KeyError: If ``id`` or ``name`` is missing

        """
        return cls(
            id=int(asset_data["id"]),
            name=asset_data["name"],
            size=int(asset_data.get("size") or 0),
            browser_download_url=asset_data.get("browser_download_url", ""),
        )


@dataclass(slots=True, frozen=True)
class Release:
    """Represents a GitHub release, published or draft.

    Attributes:
        id: Release id
        tag_name: Git tag the release points at
        upload_url: Upload endpoint, may be a URI template
        draft: Whether the release is unpublished
        prerelease: Whether the release is flagged as a prerelease
        name: Display name
        body: Release notes
        html_url: Web page of the release

    """

    id: int
    tag_name: str
    upload_url: str
    draft: bool = False
    prerelease: bool = False
    name: str = ""
    body: str = ""
    html_url: str = ""

    @classmethod
    def from_api_response(cls, api_data: dict[str, Any]) -> Release:
        """Create Release from GitHub API response data.

        Args:
            api_data: Raw release data from GitHub API

        Returns:
            Release instance

        Raises:
            KeyError: If ``id`` or ``tag_name`` is missing

        """
        return cls(
            id=int(api_data["id"]),
            tag_name=api_data["tag_name"],
            upload_url=api_data.get("upload_url", ""),
            draft=bool(api_data.get("draft", False)),
            prerelease=bool(api_data.get("prerelease", False)),
            # GitHub returns null for unnamed releases and empty bodies
            name=api_data.get("name") or "",
            body=api_data.get("body") or "",
            html_url=api_data.get("html_url", ""),
        )


@dataclass(slots=True, frozen=True)
class RepoIdentity:
    """Repository an upload run targets."""

    owner: str
    name: str

    def __str__(self) -> str:
        """Return the ``owner/name`` form."""
        return f"{self.owner}/{self.name}"


@dataclass(slots=True, frozen=True)
class LocalFile:
    """Local file contents read before any network interaction."""

    path: Path
    size: int
    data: bytes


class UploadStatus(Enum):
    """Outcome of uploading a single file."""

    UPLOADED = "uploaded"
    DUPLICATE = "duplicate"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(slots=True, frozen=True)
class UploadResult:
    """Result of processing one file.

    ``browser_download_url`` is set for uploaded assets and also for
    duplicates, where it points at the asset that was already there.
    """

    status: UploadStatus
    path: Path
    asset_name: str = ""
    browser_download_url: str = ""
    error: Exception | None = None

    @property
    def failed(self) -> bool:
        """Whether this result should mark the run as failed."""
        return self.status in (UploadStatus.DUPLICATE, UploadStatus.FAILED)


@dataclass(slots=True)
class RunResult:
    """Accumulated outcome of a whole upload run."""

    release: Release | None = None
    results: list[UploadResult] = field(default_factory=list)
    failures: list[str] = field(default_factory=list)
    browser_download_url: str = ""

    @property
    def succeeded(self) -> bool:
        """Whether no failure was signalled during the run."""
        return not self.failures
