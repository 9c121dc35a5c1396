"""GitHub infrastructure - REST client for releases and assets."""

from release_uploader.infrastructure.github.client import (
    GitHubReleaseRegistry,
    strip_uri_template,
)

__all__ = [
    "GitHubReleaseRegistry",
    "strip_uri_template",
]
