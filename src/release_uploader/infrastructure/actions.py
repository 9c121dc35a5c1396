"""GitHub Actions step reporting.

Writes step outputs to the GITHUB_OUTPUT file and failure annotations
to stdout. Outside of Actions, outputs are printed instead.
"""

import os
import sys
import uuid
from collections.abc import Mapping
from pathlib import Path
from typing import TextIO

from release_uploader.constants import ENV_GITHUB_OUTPUT
from release_uploader.logger import get_logger

logger = get_logger(__name__)


class ActionsReporter:
    """Collects step outputs and the failed state of a run."""

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        stream: TextIO | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            environ: Environment to read GITHUB_OUTPUT from
                (defaults to os.environ)
            stream: Where annotations and fallback outputs go
                (defaults to sys.stdout)

        """
        self.environ = os.environ if environ is None else environ
        self.stream = stream or sys.stdout
        self.failed = False
        self.outputs: dict[str, str] = {}

    def set_output(self, name: str, value: str) -> None:
        """Set a step output.

        Multi-line values use the heredoc form GitHub expects.

        Args:
            name: Output name
            value: Output value

        """
        self.outputs[name] = value
        output_file = self.environ.get(ENV_GITHUB_OUTPUT)
        if not output_file:
            print(f"{name}={value}", file=self.stream)
            return

        if "\n" in value:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            line = f"{name}<<{delimiter}\n{value}\n{delimiter}\n"
        else:
            line = f"{name}={value}\n"
        with Path(output_file).open("a", encoding="utf-8") as f:
            f.write(line)

    def set_failed(self, message: str) -> None:
        """Mark the run failed and emit an error annotation.

        Args:
            message: Failure message shown in the workflow log

        """
        self.failed = True
        logger.debug("Run marked failed: %s", message)
        escaped = (
            message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
        )
        print(f"::error::{escaped}", file=self.stream)

    @property
    def exit_code(self) -> int:
        """Process exit code for the run."""
        return 1 if self.failed else 0
