"""Application settings and configuration."""

from functools import lru_cache
from typing import ClassVar

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="PIPO Tags API", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")
    testing: bool = Field(default=False, description="Testing mode")
    host: str = Field(default="0.0.0.0", description="Host to bind to")
    port: int = Field(default=8000, description="Port to bind to")
    log_level: str = Field(default="INFO", description="Root log level")

    # CORS
    allowed_origins: list[str] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:5173",
        ],
        description="Allowed CORS origins",
    )

    # Public URLs
    public_base_url: str = Field(
        default="http://localhost:3000",
        description="Base URL embedded in printed tags ({base}/pet/{code})",
    )
    login_path: str = Field(
        default="/login", description="Sign-in page finders are redirected to"
    )

    # Security
    secret_key: str = Field(
        default="your-secret-key-change-in-production",
        description="Secret key for JWT tokens",
    )
    algorithm: str = Field(default="HS256", description="JWT algorithm")
    access_token_expire_minutes: int = Field(
        default=30, description="Access token expiration time in minutes"
    )
    refresh_token_expire_days: int = Field(
        default=30, description="Refresh token expiration time in days"
    )

    # PostgreSQL Database
    postgres_user: str = Field(default="pipo", description="PostgreSQL user")
    postgres_password: str = Field(
        default="supersecretpassword", description="PostgreSQL password"
    )
    postgres_host: str = Field(default="localhost", description="PostgreSQL host")
    postgres_port: int = Field(default=5432, description="PostgreSQL port")
    postgres_db: str = Field(default="pipo", description="PostgreSQL database name")
    test_postgres_db: str = Field(
        default="pipo_test", description="PostgreSQL test database name"
    )
    database_url_override: str | None = Field(
        default=None,
        description="Full SQLAlchemy URL, e.g. sqlite+aiosqlite:///./pipo.db",
    )

    # Database URL (computed property)
    @property
    def database_url(self) -> str:
        """Construct database URL from individual components."""
        if self.database_url_override:
            return self.database_url_override
        db_name = self.test_postgres_db if self.testing else self.postgres_db
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{db_name}"
        )

    # Photo uploads
    upload_dir: str = Field(
        default="uploads", description="Directory where pet photos are stored"
    )
    upload_url_prefix: str = Field(
        default="/uploads/pets", description="Public URL prefix for pet photos"
    )
    max_photo_bytes: int = Field(
        default=5 * 1024 * 1024, description="Maximum accepted photo size in bytes"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
