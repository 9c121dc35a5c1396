"""Infrastructure - GitHub API, auth, local files and Actions reporting."""
