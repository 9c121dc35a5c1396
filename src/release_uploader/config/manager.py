"""Global configuration manager for INI settings."""

import configparser
from pathlib import Path
from typing import TypedDict

from release_uploader.config.paths import Paths
from release_uploader.constants import (
    DEFAULT_API_URL,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TIMEOUT_SECONDS,
    KEY_API_URL,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_LOG_LEVEL,
    KEY_TIMEOUT_SECONDS,
    SECTION_DEFAULT,
    SECTION_NETWORK,
)
from release_uploader.exceptions import ConfigurationError
from release_uploader.logger import get_logger

logger = get_logger(__name__)


class NetworkConfig(TypedDict):
    """Network configuration options."""

    timeout_seconds: int
    api_url: str


class GlobalConfig(TypedDict):
    """Global application configuration."""

    log_level: str
    console_log_level: str
    network: NetworkConfig


class SettingsManager:
    """Loads settings.conf, falling back to defaults for missing keys.

    Example settings.conf::

        [DEFAULT]
        log_level = DEBUG
        console_log_level = INFO

        [network]
        timeout_seconds = 60
        api_url = https://github.example.com/api/v3

    """

    def __init__(self, settings_file: Path | None = None) -> None:
        """Initialize settings manager.

        Args:
            settings_file: settings.conf path (defaults to Paths)

        """
        self.settings_file = settings_file or Paths.settings_file()

    def get_default_config(self) -> GlobalConfig:
        """Get default configuration values.

        Returns:
            Default configuration dictionary

        """
        return {
            KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
            KEY_CONSOLE_LOG_LEVEL: DEFAULT_CONSOLE_LOG_LEVEL,
            SECTION_NETWORK: {
                KEY_TIMEOUT_SECONDS: DEFAULT_TIMEOUT_SECONDS,
                KEY_API_URL: DEFAULT_API_URL,
            },
        }

    def _read_parser(self) -> configparser.ConfigParser:
        parser = configparser.ConfigParser(
            inline_comment_prefixes=("#", ";"),
            interpolation=None,
        )
        try:
            parser.read(self.settings_file, encoding="utf-8")
        except (configparser.Error, UnicodeDecodeError) as e:
            msg = f"cannot parse settings: {e}"
            raise ConfigurationError(msg, target=str(self.settings_file)) from e
        return parser

    def load_global_config(self) -> GlobalConfig:
        """Load global configuration from the INI file.

        Returns:
            Loaded configuration, defaults where the file is silent

        Raises:
            ConfigurationError: If the file exists but cannot be parsed

        """
        config = self.get_default_config()
        if not self.settings_file.exists():
            logger.debug("No settings file at %s", self.settings_file)
            return config

        parser = self._read_parser()
        defaults = parser[SECTION_DEFAULT]
        config[KEY_LOG_LEVEL] = defaults.get(
            KEY_LOG_LEVEL, config[KEY_LOG_LEVEL]
        ).upper()
        config[KEY_CONSOLE_LOG_LEVEL] = defaults.get(
            KEY_CONSOLE_LOG_LEVEL, config[KEY_CONSOLE_LOG_LEVEL]
        ).upper()

        if parser.has_section(SECTION_NETWORK):
            network = parser[SECTION_NETWORK]
            raw_timeout = network.get(KEY_TIMEOUT_SECONDS)
            if raw_timeout is not None:
                try:
                    config[SECTION_NETWORK][KEY_TIMEOUT_SECONDS] = int(
                        raw_timeout
                    )
                except ValueError:
                    logger.warning(
                        "Invalid %s %r in %s, using %s",
                        KEY_TIMEOUT_SECONDS,
                        raw_timeout,
                        self.settings_file,
                        DEFAULT_TIMEOUT_SECONDS,
                    )
            config[SECTION_NETWORK][KEY_API_URL] = network.get(
                KEY_API_URL, DEFAULT_API_URL
            ).rstrip("/")

        return config
