"""CLI runner for release-uploader.

Composition root: loads settings, builds the GitHub registry and runs
the upload workflow, then reports outputs and failures to the step.
"""

import os
from argparse import Namespace
from collections.abc import Mapping

from release_uploader import __version__
from release_uploader.config import SettingsManager, UploadSettings
from release_uploader.constants import OUTPUT_DOWNLOAD_URL
from release_uploader.core.workflow import UploadWorkflow
from release_uploader.domain.repo import resolve_repo_identity
from release_uploader.domain.types import RunResult
from release_uploader.exceptions import ReleaseUploaderError
from release_uploader.infrastructure.actions import ActionsReporter
from release_uploader.infrastructure.auth import GitHubAuthManager
from release_uploader.infrastructure.github import GitHubReleaseRegistry
from release_uploader.infrastructure.http_session import create_http_session
from release_uploader.logger import get_logger, update_logger_levels

logger = get_logger(__name__)


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(
        self,
        args: Namespace,
        environ: Mapping[str, str] | None = None,
        settings_manager: SettingsManager | None = None,
        reporter: ActionsReporter | None = None,
    ) -> None:
        """Initialize CLI runner with shared dependencies.

        Args:
            args: Parsed command line arguments
            environ: Process environment (defaults to os.environ)
            settings_manager: settings.conf loader
            reporter: Step output reporter

        """
        self.args = args
        self.environ = os.environ if environ is None else environ
        self.settings_manager = settings_manager or SettingsManager()
        self.reporter = reporter or ActionsReporter(self.environ)

    async def run(self) -> int:
        """Run the upload and report the outcome.

        Returns:
            Process exit code

        """
        if getattr(self.args, "version", False):
            print(f"release-uploader {__version__}")
            return 0

        try:
            result = await self._execute()
        except ReleaseUploaderError as e:
            logger.error("%s", e)
            self.reporter.set_failed(str(e))
            return self.reporter.exit_code

        self._report(result)
        return self.reporter.exit_code

    async def _execute(self) -> RunResult:
        global_config = self.settings_manager.load_global_config()
        update_logger_levels(
            global_config["console_log_level"], global_config["log_level"]
        )

        settings = UploadSettings.from_sources(self.args, self.environ)
        repo = resolve_repo_identity(settings.repo_name, self.environ)
        logger.debug("Uploading to %s, tag %s", repo, settings.tag)

        auth_manager = GitHubAuthManager(settings.token)
        async with create_http_session(global_config) as session:
            registry = GitHubReleaseRegistry(
                repo,
                session,
                auth_manager,
                api_url=global_config["network"]["api_url"],
            )
            return await UploadWorkflow(registry).run(settings)

    def _report(self, result: RunResult) -> None:
        if result.browser_download_url:
            self.reporter.set_output(
                OUTPUT_DOWNLOAD_URL, result.browser_download_url
            )
        for message in result.failures:
            self.reporter.set_failed(message)
