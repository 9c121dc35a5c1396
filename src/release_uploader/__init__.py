"""Top-level package for release-uploader."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("release-uploader")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
