"""Registry protocol the core services depend on.

The resolver and the uploader talk to an abstract ReleaseRegistry
rather than to the GitHub client, so tests can substitute in-memory
state for network calls.

Usage::

    from release_uploader.core.protocols import ReleaseRegistry

    class ReleaseResolver:
        def __init__(self, registry: ReleaseRegistry) -> None:
            self.registry = registry

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from release_uploader.domain.types import Asset, Release


@runtime_checkable
class ReleaseRegistry(Protocol):
    """Remote store of releases and their assets for one repository.

    Implementations raise an exception for any failure; only
    get_release_by_tag signals "not found", by returning None.
    """

    async def get_release_by_tag(self, tag: str) -> Release | None:
        """Look up a published release by tag, None when absent."""
        ...

    async def list_releases(self) -> list[Release]:
        """List every release, drafts included, in registry order."""
        ...

    async def create_release(
        self,
        tag: str,
        *,
        prerelease: bool,
        name: str,
        body: str,
    ) -> Release:
        """Create a release for a tag."""
        ...

    async def list_assets(self, release_id: int) -> list[Asset]:
        """List the assets attached to a release."""
        ...

    async def delete_asset(self, asset_id: int) -> None:
        """Delete an asset by id."""
        ...

    async def upload_asset(
        self,
        upload_url: str,
        name: str,
        data: bytes,
        *,
        content_type: str,
        content_length: int,
    ) -> Asset:
        """Upload bytes as a named asset and return it."""
        ...
