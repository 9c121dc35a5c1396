"""CLI argument parser for release-uploader.

Every option can also be supplied as a GitHub Actions input
(``INPUT_<NAME>`` environment variable); options given on the command
line take precedence.
"""

import argparse
from argparse import Namespace
from collections.abc import Sequence


class CLIParser:
    """Command-line argument parser for release-uploader."""

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse (defaults to sys.argv[1:])

        Returns:
            Namespace: Parsed arguments namespace.

        """
        parser = self._create_main_parser()
        self._add_global_options(parser)
        self._add_upload_options(parser)
        return parser.parse_args(argv)

    def _create_main_parser(self) -> argparse.ArgumentParser:
        return argparse.ArgumentParser(
            prog="release-uploader",
            description="Upload files to a GitHub release, creating it if needed",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Upload one file under a templated name
  %(prog)s --file target/app --tag refs/tags/v1.0.0 --asset-name 'app-$tag'

  # Upload every wheel, replacing assets that already exist
  %(prog)s --file 'dist/*.whl' --file-glob --tag v1.0.0 --overwrite

  # Upload to another repository
  %(prog)s --file out.bin --tag v1.0.0 --repo-name owner/other-repo

Inside a GitHub Actions step the same values are read from the
INPUT_REPO_TOKEN, INPUT_FILE, INPUT_TAG, ... environment variables.
            """,
        )

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show release-uploader version and exit",
        )

    def _add_upload_options(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--token",
            help="GitHub token (default: INPUT_REPO_TOKEN, GITHUB_TOKEN, keyring)",
        )
        parser.add_argument(
            "--file", help="Local file to upload, or a glob with --file-glob"
        )
        parser.add_argument(
            "--tag",
            help="Release tag; refs/tags/ and refs/heads/ prefixes are removed",
        )
        parser.add_argument(
            "--file-glob",
            action="store_true",
            default=None,
            help="Treat --file as a glob pattern",
        )
        parser.add_argument(
            "--overwrite",
            action="store_true",
            default=None,
            help="Replace assets that already have the same name",
        )
        parser.add_argument(
            "--prerelease",
            action="store_true",
            default=None,
            help="Mark a newly created release as prerelease",
        )
        parser.add_argument(
            "--release-name", help="Display name for a newly created release"
        )
        parser.add_argument(
            "--body", help="Release notes for a newly created release"
        )
        parser.add_argument(
            "--asset-name",
            help="Asset name for a single file; $tag is replaced by the tag",
        )
        parser.add_argument(
            "--repo-name",
            help="Target repository as owner/name (default: GITHUB_REPOSITORY)",
        )
