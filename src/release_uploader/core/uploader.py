"""Asset upload with duplicate handling.

Per file:
    read locally -> list assets -> (duplicate? refuse | delete) -> upload

The local file is read before any registry call so a read failure
never leaves a half-applied remote change behind.
"""

from pathlib import Path

from release_uploader.constants import OCTET_STREAM
from release_uploader.core.protocols import ReleaseRegistry
from release_uploader.domain.asset import index_assets_by_name
from release_uploader.domain.types import (
    LocalFile,
    Release,
    UploadResult,
    UploadStatus,
)
from release_uploader.exceptions import (
    DuplicateAssetError,
    UploadError,
    error_message,
)
from release_uploader.infrastructure.file_ops import read_local_file
from release_uploader.logger import get_logger

logger = get_logger(__name__)


class AssetUploader:
    """Ensures a named asset in a release holds a local file's bytes."""

    def __init__(self, registry: ReleaseRegistry) -> None:
        """Initialize uploader.

        Args:
            registry: Release registry of the target repository

        """
        self.registry = registry

    async def _read(self, path: Path, asset_name: str) -> LocalFile | None:
        try:
            return await read_local_file(path)
        except OSError as e:
            raise UploadError(error_message(e), target=asset_name) from e

    async def upload(
        self,
        release: Release,
        path: Path,
        asset_name: str,
        *,
        overwrite: bool = False,
    ) -> UploadResult:
        """Upload ``path`` to ``release`` as ``asset_name``.

        Args:
            release: Resolved release
            path: Local file to upload
            asset_name: Asset name within the release
            overwrite: Replace an existing asset of the same name

        Returns:
            SKIPPED for non-files, DUPLICATE (with the existing asset's
            URL and a DuplicateAssetError) when the name is taken and
            overwrite is off, UPLOADED otherwise

        Raises:
            UploadError: If reading the file or any registry call fails

        """
        local_file = await self._read(path, asset_name)
        if local_file is None:
            logger.info("Skipping %s, since its not a file", path)
            return UploadResult(
                status=UploadStatus.SKIPPED, path=path, asset_name=asset_name
            )

        try:
            assets = await self.registry.list_assets(release.id)
        except Exception as e:
            raise UploadError(error_message(e), target=asset_name) from e

        duplicate = index_assets_by_name(assets).get(asset_name)
        if duplicate is not None and not overwrite:
            error = DuplicateAssetError(
                f"An asset called {asset_name} already exists.",
                target=asset_name,
                browser_download_url=duplicate.browser_download_url,
            )
            return UploadResult(
                status=UploadStatus.DUPLICATE,
                path=path,
                asset_name=asset_name,
                browser_download_url=duplicate.browser_download_url,
                error=error,
            )

        if duplicate is not None:
            logger.info(
                "An asset called %s already exists in release %s so we'll "
                "overwrite it.",
                asset_name,
                release.tag_name,
            )
            try:
                await self.registry.delete_asset(duplicate.id)
            except Exception as e:
                raise UploadError(error_message(e), target=asset_name) from e
        else:
            logger.info(
                "No pre-existing asset called %s found in release %s. All good.",
                asset_name,
                release.tag_name,
            )

        logger.info(
            "Uploading %s to %s in release %s.",
            path,
            asset_name,
            release.tag_name,
        )
        try:
            asset = await self.registry.upload_asset(
                release.upload_url,
                asset_name,
                local_file.data,
                content_type=OCTET_STREAM,
                content_length=local_file.size,
            )
        except Exception as e:
            raise UploadError(error_message(e), target=asset_name) from e

        return UploadResult(
            status=UploadStatus.UPLOADED,
            path=path,
            asset_name=asset_name,
            browser_download_url=asset.browser_download_url,
        )
