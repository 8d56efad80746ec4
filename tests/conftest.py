"""
Shared fixtures.

Provides:
- An in-memory payment gateway that scripts status sequences
- A valid payment request
"""

import logging
from typing import List, Optional, Sequence

import pytest
import structlog

from momo_collect.domain.entities import PaymentRequest, TransactionStatus
from momo_collect.domain.interfaces import PaymentGatewayClient


# =============================================================================
# Fake Clients
# =============================================================================

class FakePaymentGatewayClient(PaymentGatewayClient):
    """
    Gateway double that returns scripted statuses.

    The last status in the script repeats once the script runs out;
    an empty script means the transaction stays pending forever.
    """

    def __init__(
        self,
        statuses: Sequence[TransactionStatus] = (),
        reference: str = "abc123",
        initiate_error: Optional[Exception] = None,
        status_error: Optional[Exception] = None,
    ):
        self.statuses = list(statuses)
        self.reference = reference
        self.initiate_error = initiate_error
        self.status_error = status_error
        self.initiated: List[PaymentRequest] = []
        self.checked: List[str] = []

    @property
    def check_count(self) -> int:
        return len(self.checked)

    async def initiate(self, request: PaymentRequest) -> str:
        self.initiated.append(request)
        if self.initiate_error is not None:
            raise self.initiate_error
        return self.reference

    async def check_status(self, reference: str) -> TransactionStatus:
        self.checked.append(reference)
        if self.status_error is not None:
            raise self.status_error
        if not self.statuses:
            return TransactionStatus.PENDING
        index = min(len(self.checked), len(self.statuses)) - 1
        return self.statuses[index]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def valid_request() -> PaymentRequest:
    """A request every default rule accepts."""
    return PaymentRequest(
        amount="500",
        from_number="677123456",
        description="Payment test",
    )


@pytest.fixture
def pending_gateway() -> FakePaymentGatewayClient:
    """A gateway whose transaction never settles."""
    return FakePaymentGatewayClient()


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo logging configuration made by the command line under test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)
