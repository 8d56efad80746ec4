"""Transaction status values reported by the gateway."""

from enum import Enum
from typing import Optional


class TransactionStatus(str, Enum):
    """Status of a collection as reported by the gateway."""

    PENDING = "PENDING"  # Waiting for the payer to confirm
    SUCCESSFUL = "SUCCESSFUL"
    FAILED = "FAILED"

    @property
    def is_terminal(self) -> bool:
        """Check if no further status change is expected."""
        return self is not TransactionStatus.PENDING

    @classmethod
    def parse(cls, raw: Optional[str]) -> Optional["TransactionStatus"]:
        """Map a raw status string to a member, or None if unrecognized."""
        if not raw:
            return None
        try:
            return cls(raw.strip().upper())
        except ValueError:
            return None


class TerminalOutcome(str, Enum):
    """Final result of a polled transaction."""

    SUCCESSFUL = "SUCCESSFUL"
    FAILED = "FAILED"

    @classmethod
    def from_status(cls, status: TransactionStatus) -> "TerminalOutcome":
        if not status.is_terminal:
            raise ValueError(f"{status.value} is not a terminal status")
        return cls(status.value)

    @property
    def message(self) -> str:
        if self is TerminalOutcome.SUCCESSFUL:
            return "Transaction Successful"
        return "Transaction Failed"
