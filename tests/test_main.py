"""Tests for main application setup."""

from fastapi.testclient import TestClient

from github_commit_checker.config import Settings, get_settings
from github_commit_checker.main import app, create_app

client = TestClient(app)


def test_health_check() -> None:
    """Test the health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "app" in data
    assert "version" in data


def test_settings_from_environment() -> None:
    """Test the module level app is built from environment settings."""
    settings = get_settings()

    assert app.state.settings is settings
    assert settings.github_token == "test_github_token_123"
    assert settings.github_request_delay == 0
    assert settings.max_commits == 50
    assert settings.tab_check_exclusions == ["libraries/advisory_rules.txt"]


def test_create_app_uses_given_settings() -> None:
    """Test explicit settings are attached to the app."""
    settings = Settings(github_token="other", app_name="Custom")
    custom_app = create_app(settings)

    assert custom_app.state.settings is settings
    response = TestClient(custom_app).get("/health")
    assert response.json()["app"] == "Custom"


def test_api_docs() -> None:
    """Test that API docs are accessible."""
    response = client.get("/docs")
    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
