"""Payment request validation exceptions."""

from typing import List

from .base import DomainException


class ValidationException(DomainException):
    """Raised when a payment request fails one or more input rules."""

    def __init__(self, errors: List[str]):
        super().__init__(
            message="; ".join(errors),
            code="VALIDATION_ERROR",
        )
        self.errors = list(errors)
