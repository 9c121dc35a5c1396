"""Release resolution: lookup, draft scan, create."""

from release_uploader.core.protocols import ReleaseRegistry
from release_uploader.domain.release import select_release_for_tag
from release_uploader.domain.types import Release
from release_uploader.exceptions import ReleaseLookupError, error_message
from release_uploader.logger import get_logger

logger = get_logger(__name__)


class ReleaseResolver:
    """Finds the release for a tag, creating it when none exists."""

    def __init__(self, registry: ReleaseRegistry) -> None:
        """Initialize resolver.

        Args:
            registry: Release registry of the target repository

        """
        self.registry = registry

    async def resolve(
        self,
        tag: str,
        *,
        prerelease: bool = False,
        name: str = "",
        body: str = "",
    ) -> Release:
        """Return the release for ``tag``.

        Tried in order: direct lookup by tag, a scan of the full release
        listing (tag lookups do not see drafts), and finally creation.
        Only an exact tag match counts during the scan.

        Args:
            tag: Release tag
            prerelease: Prerelease flag for a created release
            name: Display name for a created release
            body: Release notes for a created release

        Returns:
            Existing or newly created release

        Raises:
            ReleaseLookupError: If any registry call fails; "not found"
                from the lookup is not a failure

        """
        logger.debug("Getting release by tag %s", tag)
        try:
            release = await self.registry.get_release_by_tag(tag)
        except Exception as e:
            raise ReleaseLookupError(error_message(e), target=tag) from e
        if release is not None:
            return release

        logger.debug("Checking for a release draft with tag %s", tag)
        try:
            releases = await self.registry.list_releases()
        except Exception as e:
            raise ReleaseLookupError(error_message(e), target=tag) from e

        draft = select_release_for_tag(tag, releases)
        if draft is not None:
            logger.debug("Found release draft %s for tag %s", draft.id, tag)
            return draft

        logger.info(
            "Release for tag %s doesn't exist yet so we'll create it now.", tag
        )
        try:
            return await self.registry.create_release(
                tag, prerelease=prerelease, name=name, body=body
            )
        except Exception as e:
            raise ReleaseLookupError(error_message(e), target=tag) from e
