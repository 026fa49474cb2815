"""
Configuration settings using Pydantic Settings.

All sensitive configuration must be loaded from environment variables.
Never hardcode API keys or credentials in the code.
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from smurfscan.core.errors import MissingConfigurationError

# Riot caps match-v5 id listings at 100 per request
MIN_MATCH_COUNT = 1
MAX_MATCH_COUNT = 100


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Riot API Configuration
    riot_api_key: str | None = Field(
        None, validation_alias=AliasChoices("RIOT_API_KEY", "riot_api_key")
    )
    riot_region: str = Field(
        "americas",
        validation_alias=AliasChoices("RIOT_REGION", "riot_region"),
        description="Regional routing host for account-v1 and match-v5",
    )
    riot_platform: str = Field(
        "na1",
        validation_alias=AliasChoices("RIOT_PLATFORM", "riot_platform"),
        description="Platform host for league-v4 ranked entries",
    )
    request_timeout_seconds: float = Field(
        15.0,
        gt=0,
        validation_alias=AliasChoices("RIOT_API_TIMEOUT_SECONDS", "request_timeout_seconds"),
    )

    # Scan Configuration
    match_count: int = Field(
        10,
        ge=MIN_MATCH_COUNT,
        le=MAX_MATCH_COUNT,
        validation_alias=AliasChoices("SMURFSCAN_MATCH_COUNT", "match_count"),
    )
    match_queue: int | None = Field(
        None,
        validation_alias=AliasChoices("SMURFSCAN_MATCH_QUEUE", "match_queue"),
        description="Optional queue id filter for the match list (e.g. 420 ranked solo)",
    )

    # Application Configuration
    app_env: str = Field("development", validation_alias=AliasChoices("APP_ENV", "app_env"))
    app_log_level: str = Field(
        "INFO", validation_alias=AliasChoices("APP_LOG_LEVEL", "app_log_level")
    )

    # HTTP server
    server_host: str = Field("0.0.0.0", validation_alias=AliasChoices("SERVER_HOST", "server_host"))
    server_port: int = Field(3000, validation_alias=AliasChoices("SERVER_PORT", "server_port"))

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None


def require_api_key(settings: Settings) -> str:
    """Return the Riot API key or fail before any request is attempted."""
    key = (settings.riot_api_key or "").strip()
    if not key:
        raise MissingConfigurationError(
            "RIOT_API_KEY not found. Set it in your shell or .env file before running."
        )
    return key
