"""Configuration management for AR Product Preview."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ARP_",
        extra="ignore",
    )

    # Paths
    data_dir: Path = Field(default=Path("data"), description="Data directory for databases and stored credentials")

    # Database
    database_url: str = Field(
        default="sqlite+aiosqlite:///./data/arpreview.db",
        description="Database connection URL",
    )
    db_echo: bool = Field(default=False, description="Echo SQL statements")

    # Tokens
    jwt_secret_key: str = Field(default="dev-secret-key-change-in-production", description="JWT signing key")
    jwt_algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    access_token_expire_days: int = Field(default=7, description="Access token lifetime in days")

    # API server
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=3000, description="API server port")
    cors_origins: str = Field(default="*", description="Comma separated list of allowed CORS origins")

    # Client
    api_base_url: str = Field(default="http://localhost:3000/api", description="Base URL the client talks to")
    request_timeout: float = Field(default=15.0, description="Client request timeout in seconds")

    log_level: str = Field(default="INFO", description="Log level")


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def configure(settings: Optional[Settings]) -> None:
    """Override global settings (None reloads from the environment on next use)."""
    global _settings
    _settings = settings
