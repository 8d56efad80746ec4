"""Data transfer objects for payment operations."""

from dataclasses import dataclass

from momo_collect.domain.entities import TerminalOutcome


@dataclass(frozen=True)
class PaymentResult:
    """
    Result of a payment run that reached a terminal status.

    attempts counts the status checks that came back pending before
    the transaction settled.
    """

    reference: str
    outcome: TerminalOutcome
    attempts: int = 0

    @property
    def succeeded(self) -> bool:
        return self.outcome is TerminalOutcome.SUCCESSFUL
