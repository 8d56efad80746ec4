"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .config import ConfigurationException
from .validation import ValidationException
from .gateway import (
    GatewayException,
    GatewayUnavailableException,
    MalformedGatewayResponseException,
)
from .poll import (
    PollException,
    PollTimeoutException,
    PollCancelledException,
)

__all__ = [
    "DomainException",
    "ConfigurationException",
    "ValidationException",
    "GatewayException",
    "GatewayUnavailableException",
    "MalformedGatewayResponseException",
    "PollException",
    "PollTimeoutException",
    "PollCancelledException",
]
