"""Centralized constants module for release-uploader.

Constants are grouped by concern and use typing.Final annotations.

Usage:
    from release_uploader.constants import OCTET_STREAM
"""

from typing import Final

# =============================================================================
# Configuration Constants
# =============================================================================

CONFIG_FILE_NAME: Final[str] = "settings.conf"
CONFIG_DIR_NAME: Final[str] = ".config"
DEFAULT_CONFIG_SUBDIR: Final[str] = "release-uploader"

# Environment override for the settings directory (used by tests and CI)
ENV_CONFIG_DIR: Final[str] = "RELEASE_UPLOADER_CONFIG_DIR"

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_TIMEOUT_SECONDS: Final[int] = 30
DEFAULT_API_URL: Final[str] = "https://api.github.com"

SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_NETWORK: Final[str] = "network"

KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_TIMEOUT_SECONDS: Final[str] = "timeout_seconds"
KEY_API_URL: Final[str] = "api_url"

# =============================================================================
# GitHub Actions Inputs
# =============================================================================

INPUT_PREFIX: Final[str] = "INPUT_"
ENV_GITHUB_REPOSITORY: Final[str] = "GITHUB_REPOSITORY"
ENV_GITHUB_TOKEN: Final[str] = "GITHUB_TOKEN"
ENV_GITHUB_OUTPUT: Final[str] = "GITHUB_OUTPUT"

# Ref prefixes removed from the tag input, in order
TAG_REF_PREFIXES: Final[tuple[str, ...]] = ("refs/tags/", "refs/heads/")

# Substitution token for the asset name template
ASSET_NAME_TAG_TOKEN: Final[str] = "$tag"

OUTPUT_DOWNLOAD_URL: Final[str] = "browser_download_url"

# =============================================================================
# GitHub API Constants
# =============================================================================

HTTP_BAD_REQUEST: Final[int] = 400
HTTP_NOT_FOUND: Final[int] = 404
API_PAGE_SIZE: Final[int] = 100
GITHUB_ACCEPT: Final[str] = "application/vnd.github+json"
GITHUB_API_VERSION: Final[str] = "2022-11-28"
OCTET_STREAM: Final[str] = "binary/octet-stream"

KEYRING_SERVICE: Final[str] = "release-uploader"
KEYRING_USERNAME: Final[str] = "github-token"

# =============================================================================
# Logging Constants
# =============================================================================

LOG_FILE_NAME: Final[str] = "release-uploader.log"
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}
