"""Configuration management.

- SettingsManager: settings.conf (INI) loading
- UploadSettings: inputs of a single run
- Paths: settings locations
"""

from release_uploader.config.manager import (
    GlobalConfig,
    NetworkConfig,
    SettingsManager,
)
from release_uploader.config.paths import Paths
from release_uploader.config.settings import UploadSettings, get_input

__all__ = [
    "GlobalConfig",
    "NetworkConfig",
    "Paths",
    "SettingsManager",
    "UploadSettings",
    "get_input",
]
