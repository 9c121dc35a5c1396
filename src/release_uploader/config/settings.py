"""Run inputs for a single upload invocation.

Inputs come from command line arguments first and from GitHub Actions
``INPUT_*`` environment variables second, so the same entry point works
both as a CLI and as an action step.
"""

from argparse import Namespace
from collections.abc import Mapping
from dataclasses import dataclass

from release_uploader.constants import INPUT_PREFIX
from release_uploader.domain.release import normalize_tag
from release_uploader.exceptions import ConfigurationError


def get_input(
    name: str, environ: Mapping[str, str], *, required: bool = False
) -> str:
    """Read a GitHub Actions input from the environment.

    Args:
        name: Input name as declared in action.yml, e.g. ``repo_token``
        environ: Process environment
        required: Raise when the input is missing or blank

    Returns:
        Input value with surrounding whitespace removed

    Raises:
        ConfigurationError: If a required input is missing

    """
    key = f"{INPUT_PREFIX}{name.replace(' ', '_').upper()}"
    value = environ.get(key, "").strip()
    if required and not value:
        msg = f"Input required and not supplied: {name}"
        raise ConfigurationError(msg)
    return value


def _pick(cli_value: str | None, name: str, environ: Mapping[str, str]) -> str:
    if cli_value:
        return cli_value.strip()
    return get_input(name, environ)


def _flag(cli_value: bool | None, name: str, environ: Mapping[str, str]) -> bool:
    # Action inputs are true only for the literal string "true"
    if cli_value:
        return True
    return get_input(name, environ) == "true"


@dataclass(frozen=True)
class UploadSettings:
    """Validated inputs for one run.

    Attributes:
        token: GitHub token, empty when it should be resolved elsewhere
        file: Local path, or glob pattern when ``file_glob`` is set
        tag: Release tag with ref prefixes removed
        file_glob: Treat ``file`` as a glob pattern
        overwrite: Replace an asset that already has the target name
        prerelease: Mark a newly created release as prerelease
        release_name: Display name for a newly created release
        body: Release notes for a newly created release
        asset_name: Asset name template (``$tag`` is substituted)
        repo_name: Optional ``owner/name`` of a foreign repository

    """

    token: str
    file: str
    tag: str
    file_glob: bool = False
    overwrite: bool = False
    prerelease: bool = False
    release_name: str = ""
    body: str = ""
    asset_name: str = ""
    repo_name: str = ""

    @classmethod
    def from_sources(
        cls, args: Namespace, environ: Mapping[str, str]
    ) -> "UploadSettings":
        """Build settings from parsed CLI args and the environment.

        Args:
            args: Namespace from CLIParser
            environ: Process environment

        Returns:
            Settings for the run

        Raises:
            ConfigurationError: If ``file`` or ``tag`` is missing

        """
        file = _pick(getattr(args, "file", None), "file", environ)
        raw_tag = _pick(getattr(args, "tag", None), "tag", environ)
        if not file:
            msg = "Input required and not supplied: file"
            raise ConfigurationError(msg)
        if not raw_tag:
            msg = "Input required and not supplied: tag"
            raise ConfigurationError(msg)

        tag = normalize_tag(raw_tag)

        return cls(
            token=_pick(getattr(args, "token", None), "repo_token", environ),
            file=file,
            tag=tag,
            file_glob=_flag(getattr(args, "file_glob", None), "file_glob", environ),
            overwrite=_flag(getattr(args, "overwrite", None), "overwrite", environ),
            prerelease=_flag(
                getattr(args, "prerelease", None), "prerelease", environ
            ),
            release_name=_pick(
                getattr(args, "release_name", None), "release_name", environ
            ),
            body=_pick(getattr(args, "body", None), "body", environ),
            asset_name=_pick(
                getattr(args, "asset_name", None), "asset_name", environ
            ),
            repo_name=_pick(getattr(args, "repo_name", None), "repo_name", environ),
        )
