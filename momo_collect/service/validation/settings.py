"""
Validation Settings for payment request input rules.

Environment variables use the VALIDATION_ prefix:
    VALIDATION_MIN_PHONE_LENGTH=9
    VALIDATION_PHONE_PREFIXES='["237", "6"]'
    VALIDATION_MAX_DESCRIPTION_LENGTH=200

Usage:
    from momo_collect.service.validation.settings import validation_settings

    # Or create custom settings for testing
    custom = ValidationSettings(min_phone_length=12)
"""

from functools import lru_cache
from typing import Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ValidationSettings(BaseSettings):
    """
    Configurable parameters for payment request validation.

    The defaults accept Cameroon mobile numbers, either with the
    237 country code or in the local 6XXXXXXXX form.
    """

    model_config = SettingsConfigDict(
        env_prefix="VALIDATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    min_phone_length: int = Field(
        default=9,
        ge=1,
        description="Minimum digits in a phone number after formatting is removed",
    )
    phone_prefixes: Tuple[str, ...] = Field(
        default=("237", "6"),
        description="Accepted leading digits of a normalized phone number",
    )
    min_amount: float = Field(
        default=0.0,
        description="Amounts must be strictly greater than this value",
    )
    max_description_length: int = Field(
        default=200,
        ge=1,
        description="Maximum description length in characters",
    )

    @field_validator("phone_prefixes")
    @classmethod
    def prefixes_not_empty(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if not v:
            raise ValueError("at least one phone prefix is required")
        return v


@lru_cache
def get_validation_settings() -> ValidationSettings:
    """Get cached validation settings instance."""
    return ValidationSettings()


validation_settings = get_validation_settings()
