"""Test configuration and fixtures."""

import os
from collections.abc import Generator
from unittest.mock import Mock

import pytest

# Set environment variables immediately when this module is imported
# This ensures they're available before any other modules try to load Settings
test_env_vars = {
    "GITHUB_TOKEN": "test_github_token_123",
    "GITHUB_API_BASE_URL": "https://api.github.com",
    "GITHUB_REPOSITORY": "phpmyadmin/phpmyadmin",
    "GITHUB_REQUEST_DELAY": "0",
    "APP_NAME": "GitHub Commit Checker Test",
    "APP_VERSION": "1.0.0-test",
    "DEBUG": "true",
    "HOST": "127.0.0.1",
    "PORT": "8000",
    "LOG_LEVEL": "DEBUG",
}

for key, value in test_env_vars.items():
    os.environ[key] = value


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> Generator[None, None, None]:
    """Set up test environment variables."""
    # Environment variables are already set at module level
    yield

    # Clean up environment variables after tests
    for key in test_env_vars:
        os.environ.pop(key, None)


@pytest.fixture
def settings():
    """Settings with explicit values, independent of the environment."""
    from github_commit_checker.config import Settings

    test_token = "test_token"
    return Settings(
        github_token=test_token,
        github_api_base_url="https://api.github.com",
        github_repository="phpmyadmin/phpmyadmin",
        github_request_delay=0,
        webhook_secret=None,
        max_commits=50,
        tab_check_exclusions=["libraries/advisory_rules.txt"],
        contributing_url="https://example.com/CONTRIBUTING.md",
        guidelines_url="https://example.com/guidelines",
        app_name="Test App",
        app_version="1.0.0",
        log_level="DEBUG",
    )


@pytest.fixture
def mock_github_client() -> Mock:
    """GitHub client mock with no commits and no comments."""
    client = Mock()
    client.list_pull_commits.return_value = []
    client.list_commit_comments.return_value = []
    client.list_pull_comments.return_value = []
    client.post_commit_comment.return_value = {"id": 1}
    client.post_pull_comment.return_value = {"id": 1}
    return client


def make_commit_data(sha: str, message: str, parents: int = 1) -> dict:
    """Build a pull request commit as returned by the GitHub API."""
    return {
        "sha": sha,
        "commit": {"message": message, "author": {"name": "Jane"}},
        "parents": [{"sha": f"{sha}-parent{index}"} for index in range(parents)],
    }


def make_pull_request_payload(action: str = "opened", commits: int = 1, number: int = 42) -> dict:
    """Build a pull_request webhook payload."""
    return {
        "action": action,
        "number": number,
        "pull_request": {
            "number": number,
            "commits": commits,
            "head": {"repo": {"full_name": "contributor/phpmyadmin"}},
            "base": {"repo": {"full_name": "phpmyadmin/phpmyadmin"}},
        },
        "repository": {"full_name": "phpmyadmin/phpmyadmin"},
    }
