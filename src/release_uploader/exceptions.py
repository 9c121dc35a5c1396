"""Exception classes for release-uploader operations."""


class ReleaseUploaderError(Exception):
    """Base exception for release-uploader operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional name of the target that failed
                (a tag, an asset name or a file path).

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class ReleaseLookupError(ReleaseUploaderError):
    """Raised when fetching, listing or creating a release fails."""

    error_prefix = "Release lookup failed"


class UploadError(ReleaseUploaderError):
    """Raised when reading, listing, deleting or uploading an asset fails."""

    error_prefix = "Upload failed"


class DuplicateAssetError(ReleaseUploaderError):
    """Raised when an asset name is taken and overwrite is disabled.

    Carries the download URL of the asset already occupying the name so
    callers can still report it.
    """

    error_prefix = "Duplicate asset"

    def __init__(
        self,
        message: str,
        target: str | None = None,
        browser_download_url: str = "",
    ) -> None:
        """Initialize error with the existing asset's download URL.

        Args:
            message: Error message describing the conflict.
            target: Name of the conflicting asset.
            browser_download_url: Download URL of the existing asset.

        """
        super().__init__(message, target)
        self.browser_download_url = browser_download_url


class InvalidRepoIdentityError(ReleaseUploaderError):
    """Raised when an ``owner/name`` string cannot be split."""

    error_prefix = "Invalid repository"


class ConfigurationError(ReleaseUploaderError):
    """Raised when required inputs are missing or settings are unreadable."""

    error_prefix = "Configuration error"


class GitHubAPIError(ReleaseUploaderError):
    """Raised by the GitHub client when a request fails.

    Attributes:
        status: HTTP status code, or None for connection level failures.

    """

    error_prefix = "GitHub API error"

    def __init__(
        self,
        message: str,
        target: str | None = None,
        status: int | None = None,
    ) -> None:
        """Initialize error with the HTTP status of the failed request.

        Args:
            message: Error message, usually GitHub's ``message`` field.
            target: Request URL.
            status: HTTP status code if a response was received.

        """
        super().__init__(message, target)
        self.status = status


def error_message(error: Exception) -> str:
    """Return an error's own message without any prefix.

    Errors of this package carry their raw text in ``message``; other
    exceptions fall back to ``str()``.
    """
    return getattr(error, "message", None) or str(error)
