"""Upload workflow orchestrating one run.

Resolves the release once, then uploads each file strictly in sequence.
A failing file is recorded and the next file is still attempted.
"""

from pathlib import Path

from release_uploader.config.settings import UploadSettings
from release_uploader.core.protocols import ReleaseRegistry
from release_uploader.core.resolver import ReleaseResolver
from release_uploader.core.uploader import AssetUploader
from release_uploader.domain.asset import render_asset_name
from release_uploader.domain.types import (
    RunResult,
    UploadResult,
    UploadStatus,
)
from release_uploader.exceptions import UploadError
from release_uploader.infrastructure.file_ops import expand_glob
from release_uploader.logger import get_logger

logger = get_logger(__name__)

NO_GLOB_MATCH_MESSAGE = "No files matching the glob pattern found."


class UploadWorkflow:
    """Runs resolve-then-upload for a set of settings."""

    def __init__(
        self,
        registry: ReleaseRegistry,
        resolver: ReleaseResolver | None = None,
        uploader: AssetUploader | None = None,
    ) -> None:
        """Initialize workflow.

        Args:
            registry: Release registry of the target repository
            resolver: Optional resolver (built from registry if omitted)
            uploader: Optional uploader (built from registry if omitted)

        """
        self.registry = registry
        self.resolver = resolver or ReleaseResolver(registry)
        self.uploader = uploader or AssetUploader(registry)

    def _plan(self, settings: UploadSettings) -> list[tuple[Path, str]]:
        """Pair each file to upload with its asset name."""
        if settings.file_glob:
            return [(path, path.name) for path in expand_glob(settings.file)]
        asset_name = render_asset_name(
            settings.asset_name, settings.file, settings.tag
        )
        return [(Path(settings.file), asset_name)]

    async def run(self, settings: UploadSettings) -> RunResult:
        """Execute the run.

        Args:
            settings: Inputs of the run

        Returns:
            Per-file results, failure messages and the last download URL

        Raises:
            ReleaseLookupError: If the release cannot be resolved

        """
        result = RunResult()
        result.release = await self.resolver.resolve(
            settings.tag,
            prerelease=settings.prerelease,
            name=settings.release_name,
            body=settings.body,
        )

        plan = self._plan(settings)
        if not plan:
            logger.error("No files match %s", settings.file)
            result.failures.append(NO_GLOB_MATCH_MESSAGE)
            return result

        for path, asset_name in plan:
            upload_result = await self._upload_one(
                result, path, asset_name, overwrite=settings.overwrite
            )
            result.results.append(upload_result)

        return result

    async def _upload_one(
        self,
        result: RunResult,
        path: Path,
        asset_name: str,
        *,
        overwrite: bool,
    ) -> UploadResult:
        release = result.release
        try:
            upload_result = await self.uploader.upload(
                release, path, asset_name, overwrite=overwrite
            )
        except UploadError as e:
            logger.error("%s", e)
            result.failures.append(str(e))
            return UploadResult(
                status=UploadStatus.FAILED,
                path=path,
                asset_name=asset_name,
                error=e,
            )

        if upload_result.browser_download_url:
            result.browser_download_url = upload_result.browser_download_url
        if upload_result.status is UploadStatus.DUPLICATE:
            message = getattr(upload_result.error, "message", "")
            logger.error("%s", message)
            result.failures.append(message)
        return upload_result
