"""Pytest configuration and fixtures for core module tests.

Provides an in-memory ReleaseRegistry that records every call, plus
factories for releases and assets.
"""

from pathlib import Path

import pytest

from release_uploader.domain.types import Asset, Release

# =============================================================================
# Test Data Factories
# =============================================================================


def make_release(release_id: int, tag: str, *, draft: bool = False) -> Release:
    """Build a release with a GitHub style upload URL."""
    return Release(
        id=release_id,
        tag_name=tag,
        upload_url=(
            "https://uploads.github.com/repos/octo/app/releases/"
            f"{release_id}/assets{{?name,label}}"
        ),
        draft=draft,
    )


def make_asset(asset_id: int, name: str) -> Asset:
    """Build an asset with a GitHub style download URL."""
    return Asset(
        id=asset_id,
        name=name,
        size=10,
        browser_download_url=(
            f"https://github.com/octo/app/releases/download/old/{name}"
        ),
    )


# =============================================================================
# In-memory Registry
# =============================================================================


class FakeRegistry:
    """ReleaseRegistry double backed by in-memory lists.

    ``published`` are visible to tag lookups, ``releases`` is the full
    listing (drafts included). Set ``fail_on`` to make a method raise.
    """

    def __init__(self) -> None:
        """Initialize empty registry state."""
        self.published: dict[str, Release] = {}
        self.releases: list[Release] = []
        self.assets: dict[int, list[Asset]] = {}
        self.calls: list[tuple] = []
        self.fail_on: dict[str, Exception] = {}
        self._next_id = 1000

    def _record(self, name: str, *args) -> None:
        self.calls.append((name, *args))
        if name in self.fail_on:
            raise self.fail_on[name]

    def calls_to(self, name: str) -> list[tuple]:
        """Return recorded calls of one method."""
        return [call for call in self.calls if call[0] == name]

    async def get_release_by_tag(self, tag: str) -> Release | None:
        self._record("get_release_by_tag", tag)
        return self.published.get(tag)

    async def list_releases(self) -> list[Release]:
        self._record("list_releases")
        return list(self.releases)

    async def create_release(
        self, tag: str, *, prerelease: bool, name: str, body: str
    ) -> Release:
        self._record("create_release", tag, prerelease, name, body)
        self._next_id += 1
        release = Release(
            id=self._next_id,
            tag_name=tag,
            upload_url=f"https://uploads.example/{self._next_id}/assets",
            prerelease=prerelease,
            name=name,
            body=body,
        )
        self.published[tag] = release
        self.releases.insert(0, release)
        return release

    async def list_assets(self, release_id: int) -> list[Asset]:
        self._record("list_assets", release_id)
        return list(self.assets.get(release_id, []))

    async def delete_asset(self, asset_id: int) -> None:
        self._record("delete_asset", asset_id)
        for assets in self.assets.values():
            assets[:] = [a for a in assets if a.id != asset_id]

    async def upload_asset(
        self,
        upload_url: str,
        name: str,
        data: bytes,
        *,
        content_type: str,
        content_length: int,
    ) -> Asset:
        self._record(
            "upload_asset", upload_url, name, data, content_type, content_length
        )
        self._next_id += 1
        return Asset(
            id=self._next_id,
            name=name,
            size=content_length,
            browser_download_url=(
                f"https://github.com/octo/app/releases/download/new/{name}"
            ),
        )


@pytest.fixture
def registry() -> FakeRegistry:
    """Provide an empty in-memory registry."""
    return FakeRegistry()


@pytest.fixture
def release() -> Release:
    """Provide a resolved release."""
    return make_release(7, "v1.0.0")


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """Provide a 200 byte file at build/out.bin."""
    path = tmp_path / "build" / "out.bin"
    path.parent.mkdir()
    path.write_bytes(b"\x01" * 200)
    return path


@pytest.fixture
def release_factory():
    """Provide the make_release factory."""
    return make_release


@pytest.fixture
def asset_factory():
    """Provide the make_asset factory."""
    return make_asset
