"""
momo-collect - Main Application Entry Point

Loads configuration, prompts for payment details, submits the payment
and waits for the gateway to confirm it.
"""

import asyncio
import signal
import sys
from typing import List, Optional

import httpx
import structlog

from momo_collect import __version__
from momo_collect.application.dto import PaymentResult
from momo_collect.application.services import PaymentService, TransactionPoller
from momo_collect.core.config import Settings, load_settings
from momo_collect.core.logging import setup_logging
from momo_collect.core.metrics import write_metrics
from momo_collect.domain.entities import PaymentRequest
from momo_collect.domain.exceptions import ConfigurationException, DomainException
from momo_collect.infrastructure.clients import (
    HttpPaymentGatewayClient,
    create_http_client,
)
from momo_collect.presentation.cli import (
    ConsoleReporter,
    Reader,
    parse_args,
    prompt_payment_request,
)

logger = structlog.get_logger(__name__)


async def run_payment(
    settings: Settings,
    request: PaymentRequest,
    reporter: ConsoleReporter,
    cancel_event: Optional[asyncio.Event] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> PaymentResult:
    """
    Wire the gateway client, poller and payment service, then run them.

    The HTTP client lives for exactly one run and is closed afterwards.
    """
    async with create_http_client(settings, transport=transport) as http_client:
        gateway = HttpPaymentGatewayClient(
            http_client,
            max_retries=settings.max_retries,
            retry_wait=settings.retry_wait,
        )
        poller = TransactionPoller(
            gateway,
            interval=settings.poll_interval,
            max_attempts=settings.max_poll_attempts,
            budget=settings.poll_budget_seconds,
            on_attempt=reporter.on_poll_attempt,
        )
        service = PaymentService(gateway, poller, listener=reporter)
        return await service.process(request, cancel_event=cancel_event)


async def _run_interruptible(
    settings: Settings,
    request: PaymentRequest,
    reporter: ConsoleReporter,
    transport: Optional[httpx.AsyncBaseTransport],
) -> PaymentResult:
    """Run a payment with Ctrl-C mapped to polling cancellation."""
    cancel_event = asyncio.Event()
    loop = asyncio.get_running_loop()

    # Signal handlers are only supported by the POSIX event loops.
    handle_sigint = sys.platform != "win32"
    if handle_sigint:
        loop.add_signal_handler(signal.SIGINT, cancel_event.set)

    try:
        return await run_payment(
            settings, request, reporter,
            cancel_event=cancel_event,
            transport=transport,
        )
    finally:
        if handle_sigint:
            loop.remove_signal_handler(signal.SIGINT)


def main(
    argv: Optional[List[str]] = None,
    read: Reader = input,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> int:
    """
    Command-line entry point.

    Returns 0 when the transaction reached a terminal status (successful
    or failed) and 1 for any error.
    """
    args = parse_args(argv)
    reporter = ConsoleReporter()

    try:
        settings = load_settings()
    except ConfigurationException as e:
        reporter.report_error(e, stage="failed to load configuration")
        return 1

    setup_logging(
        level="DEBUG" if args.verbose else settings.log_level,
        fmt=settings.log_format,
    )
    logger.info("client_started", version=__version__, base_url=settings.base_url)

    metrics_file = args.metrics_file or settings.metrics_file

    try:
        request = prompt_payment_request(read)
    except (EOFError, KeyboardInterrupt) as e:
        reporter.report_error(e, stage="failed to get user input")
        return 1

    try:
        result = asyncio.run(
            _run_interruptible(settings, request, reporter, transport)
        )
    except DomainException as e:
        logger.error("payment_run_failed", code=e.code, error=e.message)
        reporter.report_error(e)
        return 1
    finally:
        if metrics_file:
            write_metrics(metrics_file)

    reporter.report_result(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
