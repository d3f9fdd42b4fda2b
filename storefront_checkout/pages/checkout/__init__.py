"""Multi-step checkout page objects."""
from .address_form import AddressFormHandler, MatchStrategy, select_first_match
from .checkout_page import CheckoutPage
from .delivery_step import DeliveryStep
from .locators import BILLING_ADDRESS, SHIPPING_ADDRESS, AddressLocators
from .order_summary import OrderSummary
from .payment_step import PaymentFrame, PaymentStep
from .shipping_step import ShippingStep

__all__ = [
    "AddressFormHandler",
    "AddressLocators",
    "BILLING_ADDRESS",
    "CheckoutPage",
    "DeliveryStep",
    "MatchStrategy",
    "OrderSummary",
    "PaymentFrame",
    "PaymentStep",
    "SHIPPING_ADDRESS",
    "ShippingStep",
    "select_first_match",
]
