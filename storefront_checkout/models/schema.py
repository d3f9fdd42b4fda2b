"""Pydantic models for checkout data."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Address(BaseModel):
    """Postal address used for shipping or billing.

    ``state_value``/``country_value`` are option values of the dropdowns and
    take priority over the human-readable ``state``/``country`` when both are
    given.
    """
    model_config = ConfigDict(frozen=True)

    first_name: str
    last_name: str
    address1: str
    address2: Optional[str] = None
    city: str
    state: Optional[str] = None
    state_value: Optional[str] = None
    zipcode: str
    phone: Optional[str] = None
    country: Optional[str] = None
    country_value: Optional[str] = None


class Card(BaseModel):
    """Payment card as typed into the processor's iframe."""
    model_config = ConfigDict(frozen=True)

    number: str
    name: str = ""
    expiry: str  # MM/YY
    cvc: str


class ContactInfo(BaseModel):
    """Contact block of the address step. ``None`` flags leave the checkbox alone."""
    model_config = ConfigDict(frozen=True)

    email: str
    accept_marketing: Optional[bool] = None
    create_account: Optional[bool] = None


class ValidationResult(BaseModel):
    """Outcome of a client-side shape check. Advisory only."""
    is_valid: bool
    errors: list[str] = Field(default_factory=list)


class CheckoutStep(str, Enum):
    ADDRESS = "address"
    DELIVERY = "delivery"
    PAYMENT = "payment"
    CONFIRMATION = "confirmation"


class PaymentState(str, Enum):
    AWAITING_CARD_ENTRY = "awaiting_card_entry"
    SUBMITTING = "submitting"
    CONFIRMED = "confirmed"
    FAILED = "failed"
