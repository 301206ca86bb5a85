"""Environment-driven defaults for the release notes CLI."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Defaults read from the environment or a local .env file.

    CLI options take precedence over every value here.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    DEBUG: bool = False

    # Repository host access; anonymous when no token is set
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_PAT_TOKEN: str | None = None

    # Resolution
    RELEASE_NOTES_FETCHERS: str = Field(
        default="local,remote_changelog,releases_api",
        description="Comma-separated fetcher names, tried in order until one finds release notes.",
    )
    INCLUDE_PRERELEASE: bool = Field(default=False, description="Keep alpha, beta, rc and dev versions.")


settings = Settings()
