"""
Input rules for payment requests.

Each rule returns a human-readable error message, or None if the
value is acceptable. Rules never touch the network.
"""

import math
import re
from typing import List, Optional

from momo_collect.domain.entities import PaymentRequest, strip_phone_formatting
from momo_collect.domain.exceptions import ValidationException

from .settings import ValidationSettings, validation_settings

# Plain ASCII decimal literal, optionally signed, with an optional exponent.
AMOUNT_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def validate_phone_number(
    phone: str,
    settings: ValidationSettings = validation_settings,
) -> Optional[str]:
    """
    Check a mobile money number.

    Spaces, hyphens and plus signs are ignored, so "+237 677-123-456"
    and "677123456" are both accepted.
    """
    if not phone:
        return "phone number cannot be empty"

    normalized = strip_phone_formatting(phone)

    if len(normalized) < settings.min_phone_length:
        return (
            f"phone number too short "
            f"(minimum {settings.min_phone_length} digits)"
        )

    if not normalized.startswith(settings.phone_prefixes):
        allowed = " or ".join(settings.phone_prefixes)
        return f"invalid phone number format (should start with {allowed})"

    return None


def validate_amount(
    amount: str,
    settings: ValidationSettings = validation_settings,
) -> Optional[str]:
    """Check that an amount is a finite number above the minimum."""
    if not amount:
        return "amount cannot be empty"

    if not AMOUNT_PATTERN.fullmatch(amount):
        return "invalid amount format: must be a number"

    value = float(amount)
    if not math.isfinite(value):
        return "invalid amount format: must be a number"

    if value <= settings.min_amount:
        return f"amount must be greater than {settings.min_amount:.2f}"

    return None


def validate_description(
    description: str,
    settings: ValidationSettings = validation_settings,
) -> Optional[str]:
    """Check that a description is present and not too long."""
    if not description:
        return "description cannot be empty"

    if len(description) > settings.max_description_length:
        return (
            f"description too long "
            f"(maximum {settings.max_description_length} characters)"
        )

    return None


def collect_validation_errors(
    request: PaymentRequest,
    settings: ValidationSettings = validation_settings,
) -> List[str]:
    """Run every rule and return all error messages."""
    results = [
        validate_phone_number(request.from_number, settings),
        validate_amount(request.amount, settings),
        validate_description(request.description, settings),
    ]
    return [error for error in results if error is not None]


def validate_payment_request(
    request: PaymentRequest,
    settings: ValidationSettings = validation_settings,
) -> None:
    """
    Validate a payment request before it is sent to the gateway.

    Raises:
        ValidationException: Listing every rule the request breaks
    """
    errors = collect_validation_errors(request, settings)
    if errors:
        raise ValidationException(errors)
