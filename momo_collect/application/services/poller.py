"""Transaction poller - waits for a submitted payment to settle."""

import asyncio
from dataclasses import dataclass
from typing import Callable, Optional

import structlog

from momo_collect.core.metrics import record_poll_attempt
from momo_collect.domain.entities import TerminalOutcome
from momo_collect.domain.exceptions import (
    PollCancelledException,
    PollTimeoutException,
)
from momo_collect.domain.interfaces import PaymentGatewayClient

logger = structlog.get_logger(__name__)

AttemptCallback = Callable[[int, int], None]


@dataclass
class PollSession:
    """
    State of a single polling loop.

    Attributes:
        reference: Transaction being polled
        deadline: Absolute event-loop time after which polling stops
        max_attempts: Maximum number of status checks
        attempts: Status checks so far that returned a non-terminal status
        outcome: Terminal outcome, once the transaction has settled
    """

    reference: str
    deadline: float
    max_attempts: int
    attempts: int = 0
    outcome: Optional[TerminalOutcome] = None

    def remaining(self, now: float) -> float:
        """Seconds left before the deadline."""
        return max(0.0, self.deadline - now)

    @property
    def exhausted(self) -> bool:
        return self.attempts >= self.max_attempts


class TransactionPoller:
    """
    Polls the gateway until a transaction reaches a terminal status.

    Polling stops at the first SUCCESSFUL or FAILED status, after
    max_attempts pending responses, when the time budget runs out, or
    when the cancellation event is set, whichever comes first.
    """

    def __init__(
        self,
        gateway: PaymentGatewayClient,
        interval: float = 3.0,
        max_attempts: int = 40,
        budget: Optional[float] = None,
        on_attempt: Optional[AttemptCallback] = None,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if interval < 0:
            raise ValueError("interval must not be negative")

        self._gateway = gateway
        self._interval = interval
        self._max_attempts = max_attempts
        self._budget = budget if budget is not None else max_attempts * interval
        self._on_attempt = on_attempt

    async def poll(
        self,
        reference: str,
        cancel_event: Optional[asyncio.Event] = None,
        deadline: Optional[float] = None,
    ) -> TerminalOutcome:
        """
        Poll a transaction until it settles.

        Args:
            reference: The reference returned when the payment was initiated
            cancel_event: Optional event that stops polling when set
            deadline: Optional absolute deadline on the running loop's clock

        Returns:
            The terminal outcome of the transaction

        Raises:
            PollTimeoutException: If the attempt or time budget is exhausted
            PollCancelledException: If cancel_event is set
            GatewayException: If a status check fails
        """
        session = await self.run(reference, cancel_event, deadline)
        return session.outcome

    async def run(
        self,
        reference: str,
        cancel_event: Optional[asyncio.Event] = None,
        deadline: Optional[float] = None,
    ) -> PollSession:
        """Like poll(), but return the settled session with its attempt count."""
        loop = asyncio.get_running_loop()
        session_deadline = loop.time() + self._budget
        if deadline is not None:
            session_deadline = min(session_deadline, deadline)

        session = PollSession(
            reference=reference,
            deadline=session_deadline,
            max_attempts=self._max_attempts,
        )
        if cancel_event is None:
            cancel_event = asyncio.Event()
        log = logger.bind(reference=reference, max_attempts=session.max_attempts)

        while True:
            self._raise_if_stopped(session, cancel_event, loop.time())

            status = await self._gateway.check_status(reference)

            if status.is_terminal:
                outcome = TerminalOutcome.from_status(status)
                log.info(
                    "transaction_settled",
                    outcome=outcome.value,
                    attempts=session.attempts,
                )
                session.outcome = outcome
                return session

            session.attempts += 1
            record_poll_attempt()
            log.info("transaction_pending", attempt=session.attempts)
            if self._on_attempt is not None:
                self._on_attempt(session.attempts, session.max_attempts)

            if session.exhausted:
                log.warning("poll_attempts_exhausted", attempts=session.attempts)
                raise PollTimeoutException(reference, session.attempts)

            await self._wait(session, cancel_event, loop.time())

    def _raise_if_stopped(
        self,
        session: PollSession,
        cancel_event: asyncio.Event,
        now: float,
    ) -> None:
        if cancel_event.is_set():
            logger.info(
                "poll_cancelled",
                reference=session.reference,
                attempts=session.attempts,
            )
            raise PollCancelledException(session.reference, session.attempts)

        if now >= session.deadline:
            self._raise_deadline_reached(session)

    def _raise_deadline_reached(self, session: PollSession) -> None:
        logger.warning(
            "poll_deadline_reached",
            reference=session.reference,
            attempts=session.attempts,
        )
        raise PollTimeoutException(session.reference, session.attempts)

    async def _wait(
        self,
        session: PollSession,
        cancel_event: asyncio.Event,
        now: float,
    ) -> None:
        """Sleep until the next attempt, waking early on cancellation."""
        remaining = session.remaining(now)
        timeout = min(self._interval, remaining)
        try:
            await asyncio.wait_for(cancel_event.wait(), timeout=timeout)
        except asyncio.TimeoutError:
            if timeout >= remaining:
                # The wait ran into the deadline rather than the interval.
                self._raise_deadline_reached(session)
