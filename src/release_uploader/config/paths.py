"""Path constants and utilities for release-uploader configuration."""

import os
from pathlib import Path

from release_uploader.constants import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    DEFAULT_CONFIG_SUBDIR,
    ENV_CONFIG_DIR,
)


class Paths:
    """Application paths and directory structure."""

    HOME_DIR = Path.home()
    CONFIG_DIR = HOME_DIR / CONFIG_DIR_NAME / DEFAULT_CONFIG_SUBDIR

    @classmethod
    def config_dir(cls) -> Path:
        """Return the settings directory.

        RELEASE_UPLOADER_CONFIG_DIR overrides the default location.
        """
        override = os.getenv(ENV_CONFIG_DIR)
        if override:
            return Path(override).expanduser()
        return cls.CONFIG_DIR

    @classmethod
    def settings_file(cls) -> Path:
        """Return the path of settings.conf."""
        return cls.config_dir() / CONFIG_FILE_NAME
