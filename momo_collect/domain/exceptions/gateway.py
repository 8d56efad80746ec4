"""Payment gateway-related domain exceptions."""

from .base import DomainException


class GatewayException(DomainException):
    """Raised when the payment gateway returns an error response."""

    def __init__(self, message: str, status_code: int | None = None):
        if status_code is not None:
            text = f"Gateway error (status {status_code}): {message}"
        else:
            text = f"Gateway error: {message}"
        super().__init__(
            message=text,
            code="GATEWAY_ERROR",
        )
        self.status_code = status_code
        self.detail = message


class GatewayUnavailableException(GatewayException):
    """Raised when the gateway cannot be reached after all retries."""

    def __init__(self, detail: str, attempts: int):
        super().__init__(
            message=f"gateway unreachable after {attempts} attempt(s): {detail}",
            status_code=None,
        )
        self.code = "GATEWAY_UNAVAILABLE"
        self.attempts = attempts


class MalformedGatewayResponseException(GatewayException):
    """Raised when a successful response does not match the gateway contract."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message=message, status_code=status_code)
        self.code = "GATEWAY_MALFORMED_RESPONSE"
