"""
Payment Request Validation Module
"""

from .settings import ValidationSettings, validation_settings
from .rules import (
    validate_phone_number,
    validate_amount,
    validate_description,
    collect_validation_errors,
    validate_payment_request,
)

__all__ = [
    # Settings
    "ValidationSettings",
    "validation_settings",
    # Rules
    "validate_phone_number",
    "validate_amount",
    "validate_description",
    "collect_validation_errors",
    "validate_payment_request",
]
