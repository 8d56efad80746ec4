"""Application configuration using Pydantic Settings."""

from typing import Literal, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from momo_collect.domain.exceptions import ConfigurationException

DEFAULT_BASE_URL = "https://demo.campay.net/api"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables
    or a .env file. API_KEY has no default.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Gateway
    api_key: str = Field(min_length=1)
    base_url: str = DEFAULT_BASE_URL
    request_timeout: float = Field(default=10.0, gt=0)
    max_retries: int = Field(default=2, ge=0)
    retry_wait: float = Field(default=1.0, ge=0)

    # Polling
    poll_interval: float = Field(default=3.0, gt=0)
    max_poll_attempts: int = Field(default=40, ge=1)

    # Logging
    log_level: str = "WARNING"
    log_format: Literal["console", "json"] = "console"

    # Metrics
    metrics_file: Optional[str] = None

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def poll_budget_seconds(self) -> float:
        """Total time allowed for status polling."""
        return self.max_poll_attempts * self.poll_interval


def load_settings(**overrides) -> Settings:
    """
    Build settings from the environment.

    Raises:
        ConfigurationException: If API_KEY is missing or a value is invalid
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        fields = {str(err["loc"][0]) for err in e.errors() if err.get("loc")}
        if "api_key" in fields:
            raise ConfigurationException(
                "API_KEY environment variable is required"
            ) from e
        raise ConfigurationException(
            f"Invalid configuration: {', '.join(sorted(fields))}"
        ) from e
