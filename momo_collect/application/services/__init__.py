"""Application services."""

from .poller import PollSession, TransactionPoller
from .payment_service import PaymentListener, PaymentService

__all__ = [
    "PollSession",
    "TransactionPoller",
    "PaymentListener",
    "PaymentService",
]
