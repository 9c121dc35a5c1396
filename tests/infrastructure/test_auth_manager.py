"""Tests for GitHubAuthManager token resolution."""

from unittest.mock import MagicMock

import pytest
from keyring.errors import KeyringError

from release_uploader.infrastructure.auth import GitHubAuthManager


@pytest.fixture
def mock_keyring(monkeypatch):
    """Replace keyring lookups with a mock returning no token."""
    get_password = MagicMock(return_value=None)
    monkeypatch.setattr(
        "release_uploader.infrastructure.auth.keyring.get_password",
        get_password,
    )
    return get_password


def test_explicit_token_wins(monkeypatch, mock_keyring):
    """Test the explicit token is preferred over the environment."""
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")

    assert GitHubAuthManager(token="explicit").get_token() == "explicit"
    mock_keyring.assert_not_called()


def test_environment_token(monkeypatch, mock_keyring):
    """Test GITHUB_TOKEN is used without an explicit token."""
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")

    assert GitHubAuthManager(token="").get_token() == "env-token"


def test_keyring_token(mock_keyring):
    """Test the keyring is the last source."""
    mock_keyring.return_value = "stored"

    manager = GitHubAuthManager()

    assert manager.get_token() == "stored"
    assert manager.get_token() == "stored"
    mock_keyring.assert_called_once_with("release-uploader", "github-token")


def test_keyring_error_means_no_token(mock_keyring, caplog):
    """Test a broken keyring backend is tolerated."""
    mock_keyring.side_effect = KeyringError("no backend")

    assert GitHubAuthManager().get_token() is None
    assert "No GitHub token configured" in caplog.text


def test_apply_auth_headers(mock_keyring):
    """Test API headers are set and existing ones kept."""
    headers = GitHubAuthManager(token="abc").apply_auth(
        {"Accept": "application/octet-stream"}
    )

    assert headers["Authorization"] == "Bearer abc"
    assert headers["Accept"] == "application/octet-stream"
    assert headers["X-GitHub-Api-Version"] == "2022-11-28"


def test_apply_auth_without_token(mock_keyring):
    """Test no Authorization header is sent without a token."""
    headers = GitHubAuthManager().apply_auth({})

    assert "Authorization" not in headers
    assert headers["Accept"] == "application/vnd.github+json"
