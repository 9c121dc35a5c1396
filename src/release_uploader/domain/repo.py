"""Repository identity helpers."""

from collections.abc import Mapping

from release_uploader.constants import ENV_GITHUB_REPOSITORY
from release_uploader.domain.types import RepoIdentity
from release_uploader.exceptions import InvalidRepoIdentityError


def parse_repo_identity(repo_name: str) -> RepoIdentity:
    """Split an ``owner/name`` string at its first slash.

    Args:
        repo_name: Repository in ``owner/name`` form

    Returns:
        Parsed repository identity

    Raises:
        InvalidRepoIdentityError: If the owner or the name part is empty

    """
    owner, _, name = repo_name.partition("/")
    if not owner:
        msg = "could not extract 'owner'"
        raise InvalidRepoIdentityError(msg, target=repo_name)
    if not name:
        msg = "could not extract 'repo'"
        raise InvalidRepoIdentityError(msg, target=repo_name)
    return RepoIdentity(owner=owner, name=name)


def resolve_repo_identity(
    override: str | None, environ: Mapping[str, str]
) -> RepoIdentity:
    """Resolve the target repository for this run.

    Args:
        override: Optional ``owner/name`` for a foreign repository
        environ: Process environment, read for ``GITHUB_REPOSITORY``

    Returns:
        The override when given, else the repository running the workflow

    Raises:
        InvalidRepoIdentityError: If neither source yields a repository

    """
    if override:
        return parse_repo_identity(override)

    ambient = environ.get(ENV_GITHUB_REPOSITORY, "")
    if not ambient:
        msg = f"no repository given and {ENV_GITHUB_REPOSITORY} is not set"
        raise InvalidRepoIdentityError(msg)
    return parse_repo_identity(ambient)
