"""Main CLI entry point for release-uploader."""

import sys

import uvloop

from release_uploader.cli import CLIParser, CLIRunner
from release_uploader.logger import flush_all_handlers, get_logger

logger = get_logger(__name__)


async def async_main() -> int:
    """Parse arguments and run the upload.

    Returns:
        Process exit code

    """
    args = CLIParser().parse_args()
    runner = CLIRunner(args)
    try:
        return await runner.run()
    except Exception:
        logger.exception("Run encountered an error")
        raise


def main() -> None:
    """Run the CLI application under uvloop."""
    try:
        exit_code = uvloop.run(async_main())
    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        exit_code = 1
    except Exception as e:
        # The message is the run's failure text in the workflow log
        print(f"::error::{e}")
        exit_code = 1
    flush_all_handlers()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
