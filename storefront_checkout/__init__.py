"""Page objects and purchase-journey tests for the Spree demo storefront."""
from .errors import (
    CheckoutError,
    CheckoutStepError,
    FieldInteractionError,
    OptionNotFoundError,
    ShippingMethodNotFoundError,
    StepTimeoutError,
)
from .models import Address, Card, ContactInfo, ValidationResult

__all__ = [
    "Address",
    "Card",
    "ContactInfo",
    "ValidationResult",
    "CheckoutError",
    "CheckoutStepError",
    "FieldInteractionError",
    "OptionNotFoundError",
    "ShippingMethodNotFoundError",
    "StepTimeoutError",
]
