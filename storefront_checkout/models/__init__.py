"""Value records and client-side validators for checkout data."""
from .schema import Address, Card, CheckoutStep, ContactInfo, PaymentState, ValidationResult
from .validation import validate_address, validate_card, validate_coupon_code

__all__ = [
    "Address",
    "Card",
    "CheckoutStep",
    "ContactInfo",
    "PaymentState",
    "ValidationResult",
    "validate_address",
    "validate_card",
    "validate_coupon_code",
]
