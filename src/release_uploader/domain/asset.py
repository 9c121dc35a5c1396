"""Asset lookup and naming logic.

Pure business logic for matching local files against the assets already
attached to a release.
"""

from collections.abc import Iterable
from pathlib import PurePath

from release_uploader.constants import ASSET_NAME_TAG_TOKEN
from release_uploader.domain.types import Asset


def index_assets_by_name(assets: Iterable[Asset]) -> dict[str, Asset]:
    """Build a name to asset map.

    Asset names are unique within a release. Should a listing ever
    contain the same name twice, the first entry is kept.

    Args:
        assets: Assets attached to a release

    Returns:
        Mapping of asset name to asset

    """
    index: dict[str, Asset] = {}
    for asset in assets:
        index.setdefault(asset.name, asset)
    return index


def render_asset_name(template: str | None, file_path: str, tag: str) -> str:
    """Compute the asset name for a single uploaded file.

    Args:
        template: Optional name template; every ``$tag`` is replaced
        file_path: Local path of the file being uploaded
        tag: Release tag

    Returns:
        Rendered template, or the file's basename without a template

    """
    if template:
        return template.replace(ASSET_NAME_TAG_TOKEN, tag)
    return PurePath(file_path).name
