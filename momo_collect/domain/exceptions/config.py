"""Configuration-related domain exceptions."""

from .base import DomainException


class ConfigurationException(DomainException):
    """Raised when required configuration is missing or invalid."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="CONFIG_ERROR",
        )
