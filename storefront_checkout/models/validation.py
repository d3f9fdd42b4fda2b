"""Client-side shape checks for addresses, cards and coupon codes.

These never raise: they return a ValidationResult so the caller can decide
whether to abort before touching the browser. The storefront stays the
authority on what it actually accepts.
"""
import re

from .schema import Address, Card, ValidationResult

_EXPIRY_PATTERN = re.compile(r"^(0[1-9]|1[0-2])/\d{2}$")
_CVC_PATTERN = re.compile(r"^\d{3,4}$")

REQUIRED_ADDRESS_FIELDS = ("first_name", "last_name", "address1", "city", "zipcode")

MIN_CARD_DIGITS = 13
MIN_COUPON_LENGTH = 3


def validate_address(address: Address) -> ValidationResult:
    errors = []
    for field in REQUIRED_ADDRESS_FIELDS:
        value = getattr(address, field)
        if not value or not value.strip():
            errors.append(f"{field.replace('_', ' ').capitalize()} is required")
    return ValidationResult(is_valid=not errors, errors=errors)


def validate_card(card: Card) -> ValidationResult:
    """One error entry per failed rule; the order of checks is stable."""
    errors = []

    digits = re.sub(r"[\s-]", "", card.number or "")
    if len(digits) < MIN_CARD_DIGITS or not digits.isdigit():
        errors.append(f"Card number must be at least {MIN_CARD_DIGITS} digits")

    if not card.expiry or not _EXPIRY_PATTERN.match(card.expiry):
        errors.append("Expiry must be in MM/YY format")

    if not card.cvc or not _CVC_PATTERN.match(card.cvc):
        errors.append("CVC must be 3-4 digits")

    if not card.name or len(card.name.strip()) < 2:
        errors.append("Cardholder name must be at least 2 characters")

    return ValidationResult(is_valid=not errors, errors=errors)


def validate_coupon_code(code: str) -> ValidationResult:
    if not code or not code.strip():
        return ValidationResult(is_valid=False, errors=["Coupon code cannot be empty"])
    if len(code.strip()) < MIN_COUPON_LENGTH:
        return ValidationResult(
            is_valid=False,
            errors=[f"Coupon code must be at least {MIN_COUPON_LENGTH} characters"],
        )
    return ValidationResult(is_valid=True)
