"""
Application configuration management
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # GitHub API Configuration
    github_token: str | None = None
    github_username: str | None = None
    github_password: str | None = None
    github_api_base_url: str = "https://api.github.com"
    github_repository: str | None = None
    github_timeout: float = 30.0
    github_request_delay: float = Field(0.1, ge=0)

    # Webhook Configuration
    webhook_secret: str | None = None

    # Rule Configuration
    max_commits: int = Field(50, ge=1)
    tab_check_exclusions: list[str] = Field(default_factory=lambda: ["libraries/advisory_rules.txt"])
    contributing_url: str = "https://github.com/phpmyadmin/phpmyadmin/blob/master/CONTRIBUTING.md"
    guidelines_url: str = "https://wiki.phpmyadmin.net/pma/Developer_guidelines"

    # Application Configuration
    app_name: str = "GitHub Commit Checker"
    app_version: str = "1.0.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000

    # Logging Configuration
    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT

    @property
    def user_agent(self) -> str:
        return f"{self.app_name.replace(' ', '-')}/{self.app_version}"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
