"""Release selection logic.

Pure business logic for picking the release that matches a tag out of a
registry listing. Kept free of IO so it can be exercised against
synthetic release lists.
"""

from collections.abc import Iterable

from release_uploader.constants import TAG_REF_PREFIXES
from release_uploader.domain.types import Release


def select_release_for_tag(
    tag: str, releases: Iterable[Release]
) -> Release | None:
    """Select the first release whose tag matches exactly.

    Listing order is preserved, so when several releases share a tag
    the one the registry lists first wins. Releases with other tags are
    never matched, even when they are the only drafts available.

    Args:
        tag: Tag name to match
        releases: Releases in registry listing order

    Returns:
        Matching release, or None when a new release must be created

    """
    for release in releases:
        if release.tag_name == tag:
            return release
    return None


def normalize_tag(raw_tag: str) -> str:
    """Remove git ref prefixes from a tag input.

    Args:
        raw_tag: Tag as given, e.g. ``refs/tags/v1.0.0``

    Returns:
        Bare tag name, e.g. ``v1.0.0``

    """
    tag = raw_tag
    for prefix in TAG_REF_PREFIXES:
        tag = tag.replace(prefix, "", 1)
    return tag
