"""Domain Entities - Core business objects."""

from .payment import PaymentRequest, strip_phone_formatting
from .transaction import TerminalOutcome, TransactionStatus

__all__ = [
    "PaymentRequest",
    "strip_phone_formatting",
    "TerminalOutcome",
    "TransactionStatus",
]
