"""Command-line interface for release-uploader."""

from release_uploader.cli.parser import CLIParser
from release_uploader.cli.runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]
