"""Data Transfer Objects."""

from .payment import PaymentResult

__all__ = [
    "PaymentResult",
]
