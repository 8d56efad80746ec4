"""Interactive prompts and console reporting."""

import argparse
import sys
from typing import Callable, List, Optional, TextIO

from momo_collect import __version__
from momo_collect.application.dto import PaymentResult
from momo_collect.domain.entities import PaymentRequest, TerminalOutcome
from momo_collect.domain.exceptions import (
    DomainException,
    GatewayException,
    PollException,
    ValidationException,
)

Reader = Callable[[str], str]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line options. Payment details are always prompted for."""
    parser = argparse.ArgumentParser(
        prog="momo-collect",
        description="Request a mobile money payment and wait for confirmation.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="log debug output to stderr",
    )
    parser.add_argument(
        "--metrics-file",
        default=None,
        help="write Prometheus metrics to this file on exit",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def prompt_payment_request(read: Reader = input) -> PaymentRequest:
    """
    Ask the user for the payment details.

    Raises:
        EOFError: If input ends before all fields are read
    """
    from_number = read("Enter mobile money number: ").strip()
    amount = read("Enter amount: ").strip()
    description = read("Enter description: ").strip()

    return PaymentRequest(
        amount=amount,
        from_number=from_number,
        description=description,
    )


class ConsoleReporter:
    """Prints payment progress for a person watching the terminal."""

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None):
        self._out = out
        self._err = err
        self.reference: Optional[str] = None

    def _print(self, *lines: str) -> None:
        for line in lines:
            print(line, file=self._out or sys.stdout, flush=True)

    def on_submitting(self, request: PaymentRequest) -> None:
        self._print(
            "",
            "=== Payment Details ===",
            f"Number: {request.from_number}",
            f"Amount: {request.amount}",
            f"Description: {request.description}",
            "",
            "Sending payment request...",
        )

    def on_initiated(self, reference: str) -> None:
        self.reference = reference
        self._print(
            "",
            "✓ Transaction initialized",
            f"Reference: {reference}",
            "Waiting for Mobile Money confirmation...",
        )

    def on_poll_attempt(self, attempt: int, max_attempts: int) -> None:
        self._print(f"Status: PENDING... (attempt {attempt}/{max_attempts})")

    def report_result(self, result: PaymentResult) -> None:
        mark = "✓" if result.outcome is TerminalOutcome.SUCCESSFUL else "✗"
        self._print(
            "",
            "=== FINAL TRANSACTION STATUS ===",
            f"{mark} {result.outcome.message}",
        )

    def report_error(self, exc: BaseException, stage: Optional[str] = None) -> None:
        stage = stage or self.stage_for(exc)
        if isinstance(exc, DomainException):
            message = exc.message
        else:
            message = str(exc) or type(exc).__name__
        print(f"Error: {stage}: {message}", file=self._err or sys.stderr, flush=True)

    def stage_for(self, exc: BaseException) -> str:
        """Describe which step of the run an error ended."""
        if isinstance(exc, ValidationException):
            return "validation error"
        if isinstance(exc, PollException):
            return "failed to get transaction status"
        if isinstance(exc, GatewayException):
            if self.reference is None:
                return "failed to initiate payment"
            return "failed to get transaction status"
        return "payment failed"
