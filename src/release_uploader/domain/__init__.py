"""Domain layer - pure types and selection logic."""

from release_uploader.domain.asset import (
    index_assets_by_name,
    render_asset_name,
)
from release_uploader.domain.release import (
    normalize_tag,
    select_release_for_tag,
)
from release_uploader.domain.repo import (
    parse_repo_identity,
    resolve_repo_identity,
)
from release_uploader.domain.types import (
    Asset,
    LocalFile,
    Release,
    RepoIdentity,
    RunResult,
    UploadResult,
    UploadStatus,
)

__all__ = [
    "Asset",
    "LocalFile",
    "Release",
    "RepoIdentity",
    "RunResult",
    "UploadResult",
    "UploadStatus",
    "index_assets_by_name",
    "normalize_tag",
    "parse_repo_identity",
    "render_asset_name",
    "resolve_repo_identity",
    "select_release_for_tag",
]
