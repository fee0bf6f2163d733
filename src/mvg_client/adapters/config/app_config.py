"""12-factor configuration adapter using environment variables."""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientConfig(BaseSettings):
    """MVG client configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_prefix="MVG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field(
        default="https://www.mvg.de",
        description="Base URL of the MVG API; all endpoint paths are resolved against it",
    )
    user_agent: str = Field(
        default="mvg-client",
        description="User-Agent header sent with every request",
    )
    log_requests: bool = Field(
        default=False,
        description="Log every outgoing API request at INFO level",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL is http(s) and strip the trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with 'http://' or 'https://'")
        return v.rstrip("/")

    @classmethod
    def for_testing(cls, **overrides: Any) -> "ClientConfig":
        """Create a config that ignores the .env file."""
        return cls(_env_file=None, **overrides)
