"""
Application settings with environment-based configuration.

Priority (highest to lowest):
1. Dotenv file passed to load_config() (overrides the process)
2. Environment variables
3. .env in the working directory
4. Pydantic defaults
"""

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Secrets (database URL, Redis password) should come from environment
    variables, never from files committed to the repository.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow",
    )

    # Application
    APP_NAME: str = "Concierge"
    APP_VERSION: str = "0.1.0"
    ENV: str = Field(default="development", description="Environment name")
    DEBUG: bool = Field(default=False, description="Debug mode")

    # API Server
    API_HOST: str = Field(default="0.0.0.0")
    API_PORT: int = Field(default=8080, ge=1, le=65535)

    # Static assets (development only)
    ASSETS_BUILD_DIR: str = Field(
        default="assets/build",
        description="Directory served by serve_static_files()",
    )
    SERVE_STATIC_FILES: bool = Field(
        default=False,
        description="Mount ASSETS_BUILD_DIR at / on startup",
    )

    # Database (from environment - REQUIRED)
    DATABASE_URL: str = Field(..., description="Database connection URL")
    DATABASE_ECHO: bool = Field(default=False)
    DATABASE_POOL_SIZE: int = Field(default=20, ge=1)
    DATABASE_MAX_OVERFLOW: int = Field(default=10, ge=0)
    DATABASE_REQUIRED: bool = Field(
        default=False,
        description="Abort startup when the database cannot be reached",
    )

    # Redis
    REDIS_ENABLED: bool = Field(default=True)
    REDIS_HOST: str = Field(default="localhost")
    REDIS_PORT: int = Field(default=6379, ge=1, le=65535)
    REDIS_DB: int = Field(default=0, ge=0, le=15)
    REDIS_PASSWORD: Optional[str] = Field(default=None)

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    # Observability - Metrics
    METRICS_ENABLED: bool = Field(
        default=True,
        description="Expose Prometheus metrics at /metrics",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"Invalid LOG_LEVEL. Must be one of: {allowed}")
        return v_upper

    @field_validator("ENV")
    @classmethod
    def validate_env(cls, v: str) -> str:
        """Validate environment name."""
        allowed = ["development", "test", "production"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"Invalid ENV. Must be one of: {allowed}")
        return v_lower

    @property
    def address(self) -> str:
        """Listener address in host:port form."""
        return f"{self.API_HOST}:{self.API_PORT}"


def load_config(env_file: Optional[str] = None) -> Settings:
    """
    Load configuration from an optional dotenv file and the environment.

    Args:
        env_file: Optional dotenv path (e.g., ".env.production")

    Returns:
        Settings instance

    Raises:
        ValidationError: If required fields are missing
    """
    if env_file is not None:
        env_file_path = Path(env_file)
        if env_file_path.exists():
            load_dotenv(env_file_path, override=True)

    return Settings()


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or initialize global settings singleton."""
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def override_settings(new_settings: Settings) -> None:
    """Override global settings (for testing)."""
    global _settings
    _settings = new_settings


def reset_settings() -> None:
    """Reset settings to force re-initialization (for testing)."""
    global _settings
    _settings = None
