"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BackendSettings(BaseModel):
    """Backing store configuration."""

    # "memory" keeps everything in process (tests, demos)
    # "http" talks to the forum REST backend at base_url
    kind: Literal["memory", "http"] = "memory"
    base_url: str = "http://localhost:5000"
    timeout_seconds: float = Field(default=10.0, gt=0)

    # Bearer token for the backend session (issued elsewhere)
    auth_token: str | None = None

    @computed_field
    @property
    def api_url(self) -> str:
        """Base URL without a trailing slash."""
        return self.base_url.rstrip("/")


class ListingSettings(BaseModel):
    """Question listing configuration."""

    items_per_page: int = Field(default=10, ge=1, le=100)

    # Pages shown on each side of the current page in pagination controls
    sibling_count: int = Field(default=1, ge=0)

    # Characters of the description kept in list snippets
    snippet_length: int = Field(default=200, ge=1)


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested values:

        ENVIRONMENT=production
        BACKEND__KIND=http
        BACKEND__BASE_URL=https://forum.example.com/api
        LISTING__ITEMS_PER_PAGE=20
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows BACKEND__BASE_URL syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Nested settings
    backend: BackendSettings = BackendSettings()
    listing: ListingSettings = ListingSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
