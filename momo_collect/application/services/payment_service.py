"""Payment service - orchestrates the collect-and-wait use case."""

import asyncio
from typing import Optional, Protocol

import structlog

from momo_collect.core.metrics import record_payment_outcome
from momo_collect.domain.entities import PaymentRequest
from momo_collect.domain.exceptions import (
    DomainException,
    PollCancelledException,
    PollTimeoutException,
)
from momo_collect.domain.interfaces import PaymentGatewayClient
from momo_collect.application.dto import PaymentResult
from momo_collect.service.validation import (
    ValidationSettings,
    validation_settings,
    validate_payment_request,
)

from .poller import TransactionPoller

logger = structlog.get_logger(__name__)


class PaymentListener(Protocol):
    """Receives progress notifications during a payment run."""

    def on_submitting(self, request: PaymentRequest) -> None: ...

    def on_initiated(self, reference: str) -> None: ...


class PaymentService:
    """
    Application service for a single mobile-money collection.

    Validates the request, submits it, then waits for the gateway to
    report a terminal status. Any failure ends the run; nothing is
    retried or resubmitted at this level.
    """

    def __init__(
        self,
        gateway: PaymentGatewayClient,
        poller: TransactionPoller,
        listener: Optional[PaymentListener] = None,
        rules: ValidationSettings = validation_settings,
    ):
        self._gateway = gateway
        self._poller = poller
        self._listener = listener
        self._rules = rules

    async def process(
        self,
        request: PaymentRequest,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> PaymentResult:
        """
        Run a payment from validation to terminal status.

        Args:
            request: The payment request as entered by the user
            cancel_event: Optional event that stops status polling when set

        Returns:
            PaymentResult with the reference, terminal outcome and attempt count

        Raises:
            ValidationException: If the request breaks an input rule
            GatewayException: If initiation or a status check fails
            PollTimeoutException: If the transaction does not settle in time
            PollCancelledException: If cancel_event is set while polling
        """
        try:
            validate_payment_request(request, self._rules)
        except DomainException:
            record_payment_outcome("invalid")
            raise

        request = request.normalized()
        log = logger.bind(amount=request.amount)
        log.info("payment_requested")

        try:
            if self._listener is not None:
                self._listener.on_submitting(request)

            reference = await self._gateway.initiate(request)
            log = log.bind(reference=reference)
            if self._listener is not None:
                self._listener.on_initiated(reference)

            session = await self._poller.run(reference, cancel_event=cancel_event)

        except PollTimeoutException:
            record_payment_outcome("timeout")
            raise
        except PollCancelledException:
            record_payment_outcome("cancelled")
            raise
        except DomainException as e:
            record_payment_outcome("error")
            log.error("payment_failed", error=e.message, code=e.code)
            raise

        outcome = session.outcome
        record_payment_outcome(outcome.value)
        log.info(
            "payment_completed",
            outcome=outcome.value,
            attempts=session.attempts,
        )
        return PaymentResult(
            reference=reference,
            outcome=outcome,
            attempts=session.attempts,
        )
