"""
Application settings with environment-based configuration.

Priority (highest to lowest):
1. Environment variables (from .env or system)
2. Environment-specific YAML config file (development.yaml, production.yaml)
3. Default YAML config file (default.yaml)
4. Pydantic defaults
"""

import os
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    The identity store API key must come from environment variables,
    not from YAML files.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow",
    )

    # Application
    APP_NAME: str = "Serrurier"
    APP_VERSION: str = "0.1.0"
    ENV: str = Field(default="development", description="Environment name")
    DEBUG: bool = Field(default=False, description="Debug mode")

    # API Server
    API_HOST: str = Field(default="0.0.0.0")
    API_PORT: int = Field(default=8000, ge=1024, le=65535)
    API_RELOAD: bool = Field(default=False)

    # CORS Configuration
    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins",
    )

    # Identity store (from environment - REQUIRED)
    IDENTITY_STORE_ENDPOINT: str = Field(
        ..., description="Appwrite API endpoint, e.g. https://cloud.appwrite.io/v1"
    )
    IDENTITY_STORE_PROJECT_ID: str = Field(..., description="Appwrite project id")
    IDENTITY_STORE_API_KEY: str = Field(..., description="Appwrite server API key")
    IDENTITY_STORE_TIMEOUT: float = Field(
        default=10.0,
        gt=0,
        description="Identity store request timeout in seconds",
    )

    # Wallet authentication
    SIGNABLE_MESSAGE_PREFIX: str = Field(
        default="Sign this message to authenticate: ",
        description="Fixed text the wallet signs in front of the nonce",
    )
    CALLER_AUTH_MODE: str = Field(
        default="jwt",
        description="How connect/disconnect callers are identified",
    )

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

    @field_validator("CALLER_AUTH_MODE")
    @classmethod
    def validate_caller_auth_mode(cls, v: str) -> str:
        """Validate caller auth mode."""
        allowed = ["jwt", "user_id"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"Invalid CALLER_AUTH_MODE. Must be one of: {allowed}")
        return v_lower

    @field_validator("IDENTITY_STORE_ENDPOINT")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        """Validate identity store endpoint."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("IDENTITY_STORE_ENDPOINT must be an http(s) URL")
        return v.rstrip("/")


def load_config(
    config_file: Optional[str] = None,
    env_file: Optional[str] = None,
    env: Optional[str] = None,
) -> Settings:
    """
    Load configuration from YAML files and environment variables.

    Priority: ENV vars > environment-specific YAML > default YAML > defaults

    Args:
        config_file: Optional YAML config filename override
        env_file: Optional .env filename (e.g., ".env.development")
        env: Optional environment name override (e.g., "development", "test")

    Returns:
        Settings instance

    Raises:
        pydantic.ValidationError: If required fields are missing
    """
    current_file = Path(__file__).resolve()
    project_root = current_file.parent.parent.parent.parent
    config_dir = project_root / "config"

    environment = env or os.getenv("ENV", "production")

    env_map = {
        "production": (".env.production", "production.yaml"),
        "development": (".env.development", "development.yaml"),
        "test": (".env.test", "test.yaml"),
    }

    if env_file is None:
        default_env_file, default_config_file = env_map.get(
            environment, (".env.production", "production.yaml")
        )
        env_file = default_env_file
        if config_file is None:
            config_file = default_config_file

    env_file_path = project_root / env_file
    if env_file_path.exists():
        load_dotenv(env_file_path, override=True)

    default_config_path = config_dir / "default.yaml"
    merged_config = {}

    if default_config_path.exists():
        with open(default_config_path, "r") as f:
            loaded = yaml.safe_load(f)
            if loaded:
                merged_config = loaded

    if config_file:
        env_config_path = config_dir / config_file
        if env_config_path.exists():
            with open(env_config_path, "r") as f:
                loaded = yaml.safe_load(f)
                if loaded:
                    merged_config.update(loaded)

    # Init kwargs beat env vars in pydantic-settings; keep env on top
    yaml_values = {
        key: value for key, value in merged_config.items() if key not in os.environ
    }

    return Settings(**yaml_values)


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
