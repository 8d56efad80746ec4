"""External API client implementations."""

from .gateway_client import HttpPaymentGatewayClient
from .http import create_http_client

__all__ = [
    "HttpPaymentGatewayClient",
    "create_http_client",
]
