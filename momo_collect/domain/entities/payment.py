"""Payment request entity submitted to the gateway."""

from dataclasses import dataclass, replace
from typing import Dict

PHONE_FORMATTING_CHARS = (" ", "-", "+")


def strip_phone_formatting(phone: str) -> str:
    """Remove spaces, hyphens and plus signs from a phone number."""
    for char in PHONE_FORMATTING_CHARS:
        phone = phone.replace(char, "")
    return phone


@dataclass(frozen=True)
class PaymentRequest:
    """
    Immutable mobile-money collection request.

    Attributes:
        amount: Amount to collect, kept as the decimal string the user typed
        from_number: Mobile money number that will be debited
        description: Free-text description shown to the payer
    """

    amount: str
    from_number: str
    description: str

    def normalized(self) -> "PaymentRequest":
        """Return a copy with the phone number stripped of formatting."""
        return replace(self, from_number=strip_phone_formatting(self.from_number))

    def to_payload(self) -> Dict[str, str]:
        """Convert to the gateway's collect request body."""
        return {
            "amount": self.amount,
            "from": self.from_number,
            "description": self.description,
        }
