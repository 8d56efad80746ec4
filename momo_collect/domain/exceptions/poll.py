"""Transaction polling exceptions."""

from .base import DomainException


class PollException(DomainException):
    """Base class for polls that end without a terminal status."""

    def __init__(self, message: str, code: str, reference: str, attempts: int):
        super().__init__(message=message, code=code)
        self.reference = reference
        self.attempts = attempts


class PollTimeoutException(PollException):
    """Raised when the attempt or time budget is exhausted."""

    def __init__(self, reference: str, attempts: int):
        super().__init__(
            message=f"Transaction {reference} still pending after {attempts} attempt(s)",
            code="POLL_TIMEOUT",
            reference=reference,
            attempts=attempts,
        )


class PollCancelledException(PollException):
    """Raised when the poll is cancelled from outside."""

    def __init__(self, reference: str, attempts: int):
        super().__init__(
            message=f"Status check for transaction {reference} was cancelled",
            code="POLL_CANCELLED",
            reference=reference,
            attempts=attempts,
        )
