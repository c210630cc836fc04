"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Edu Profiles API")
    app_version: str = Field(default="1.0.0")
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Database
    database_url: str = Field(
        default="sqlite+aiosqlite:///./edu_profiles.db",
        description="Async SQLAlchemy URL of the key-value storage database",
    )

    # Storage
    storage_key_prefix: str = Field(
        default="edu",
        description="Prefix of the storage keys holding the profile and notification blobs",
    )

    # Profiles
    bio_max_length: int = Field(default=300)

    # Notifications
    notification_poll_seconds: int = Field(
        default=30,
        description="Suggested client polling interval for the notification feed",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def async_database_url(self) -> str:
        """Ensure a PostgreSQL URL uses the asyncpg driver scheme.

        Hosting providers supply a standard ``postgresql://`` URL.
        SQLAlchemy's async engine requires ``postgresql+asyncpg://``.
        """
        url = self.database_url
        if url.startswith("postgresql://"):
            url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return url

    @computed_field  # type: ignore[prop-decorator]
    @property
    def profiles_key(self) -> str:
        """Storage key of the profile collection."""
        return f"{self.storage_key_prefix}_profiles"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def current_user_key(self) -> str:
        """Storage key of the default session's current-user pointer."""
        return f"{self.storage_key_prefix}_current_user"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def notifications_key(self) -> str:
        """Storage key of the notification collection."""
        return f"{self.storage_key_prefix}_notifications"

    # Rate Limiting
    rate_limit_enabled: bool = Field(
        default=True,
        description="Enable/disable rate limiting (disable for tests)",
    )

    # CORS
    cors_origins: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        description="Comma-separated list of allowed origins",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
