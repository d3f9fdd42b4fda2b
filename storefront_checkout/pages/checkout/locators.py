"""
Selectors for the Spree checkout.

Address forms are described by an AddressLocators bundle; fields are resolved
against a scope root so the shipping and billing forms never collide. Nothing
here touches the browser until an action is awaited on the returned Locator.
"""
import re
from dataclasses import dataclass, fields

from playwright.async_api import Locator

SUGGESTIONS_BOX = '[data-address-autocomplete-target="suggestionsBoxContainer"]'
FIRST_SUGGESTION = "#suggestions-option-0"


@dataclass(frozen=True)
class AddressLocators:
    """CSS selectors of one address form, relative to its root."""
    root: str
    country: str
    first_name: str
    last_name: str
    address1: str
    address2: str
    city: str
    state_select: str
    state_text: str
    zipcode: str
    phone: str
    suggestions_box: str = SUGGESTIONS_BOX
    first_suggestion: str = FIRST_SUGGESTION

    def resolve(self, scope: Locator, field: str) -> Locator:
        """Resolve a semantic field name ("billing first name", "zipcode") under scope."""
        return scope.locator(getattr(self, field_attribute(field)))


_FIELD_ATTRIBUTES = {f.name for f in fields(AddressLocators)} - {"root"}

# Human wording -> dataclass attribute
_FIELD_ALIASES = {
    "firstname": "first_name",
    "lastname": "last_name",
    "address": "address1",
    "address line 1": "address1",
    "address line 2": "address2",
    "state": "state_select",
    "state name": "state_text",
    "zip": "zipcode",
    "zip code": "zipcode",
    "postal code": "zipcode",
    "phone number": "phone",
}


def field_attribute(name: str) -> str:
    """Map a semantic field name to an AddressLocators attribute.

    Accepts the attribute itself, spaced wording and an optional
    "shipping"/"billing" prefix. Raises KeyError for unknown names.
    """
    key = re.sub(r"^(shipping|billing)\s+", "", name.strip().lower())
    if key in _FIELD_ALIASES:
        return _FIELD_ALIASES[key]
    attribute = key.replace(" ", "_")
    if attribute not in _FIELD_ATTRIBUTES:
        raise KeyError(f"Unknown address field: {name!r}")
    return attribute


def _address_locators(root: str, prefix: str, state_select: str, state_text: str) -> AddressLocators:
    return AddressLocators(
        root=root,
        country=f"#{prefix}_country_id",
        first_name=f"#{prefix}_firstname",
        last_name=f"#{prefix}_lastname",
        address1=f"#{prefix}_address1",
        address2=f"#{prefix}_address2",
        city=f"#{prefix}_city",
        state_select=state_select,
        state_text=state_text,
        zipcode=f"#{prefix}_zipcode",
        phone=f"#{prefix}_phone",
    )


SHIPPING_ADDRESS = _address_locators(
    root="#checkout_form_address",
    prefix="order_ship_address_attributes",
    state_select="#address_state_id",
    state_text="#address_state_name",
)

BILLING_ADDRESS = _address_locators(
    root="#billing-address",
    prefix="order_bill_address_attributes",
    state_select="#order_bill_address_attributes_state_id",
    state_text="#order_bill_address_attributes_state_name",
)

# Address step
CHECKOUT_ROOT = "#checkout-page"
CONTACT_EMAIL = '#order_ship_address_attributes_email, input[name="order[email]"]'
ACCEPT_MARKETING = "#order_accept_marketing"
CREATE_ACCOUNT = "#order_signup_for_an_account"
SAVE_AND_CONTINUE_NAME = re.compile(r"save and continue", re.IGNORECASE)

# Delivery step
DELIVERY_FORM = 'form[action*="/update/delivery"]'
SHIPPING_METHODS_LIST = '[data-checkout-delivery-target="shippingList"]'
SHIPPING_RATE_ITEMS = '[data-checkout-delivery-target="shippingRate"]'
DELIVERY_SUBMIT = 'button[data-checkout-delivery-target="submit"]'
RATE_RADIO = 'input[type="radio"]'

# Payment step
PAYMENT_FORM = 'form#checkout_form_payment, form[action*="/update/payment"]'
PAYMENT_METHODS_FRAME = "turbo-frame#checkout_payment_methods"
PAYMENT_SUBMIT = "#checkout-payment-submit"
PAYMENT_MESSAGE = '[data-checkout-stripe-target="messageContainer"]'
ADD_NEW_CARD = 'input[name="order[existing_card]"][id="order_existing_card_"]'
USE_SHIPPING_ADDRESS = "#order_use_shipping"

# Third-party card iframe and the inputs inside it
PAYMENT_IFRAME = 'iframe[title="Secure payment input frame"]'
CARD_NUMBER = 'input[name="number"]'
CARD_EXPIRY = 'input[name="expiry"]'
CARD_CVC = 'input[name="cvc"]'
CARD_NAME = 'input[name="name"]'

# Payment review
REVIEW_CONTACT = '.border.text-sm .flex:has-text("Contact")'
REVIEW_SHIPPING = '.border.text-sm .flex:has-text("Ship Address")'
REVIEW_DELIVERY = '.border.text-sm .flex:has-text("Delivery method")'
EDIT_LINK_NAME = re.compile(r"edit", re.IGNORECASE)

# Confirmation
CONFIRMATION_HEADING = "Your order is confirmed!"
ORDER_NUMBER = 'p:has-text("Order") strong'

# Order summary
TOGGLE_ORDER_SUMMARY = "#toggle-order-summary"
ORDER_TOTAL = "#summary-order-total"
COUPON_CODE_INPUT = "#coupon_code"
COUPON_FRAME = "turbo-frame#checkout_coupon_code"
APPLY_BUTTON_NAME = re.compile(r"apply", re.IGNORECASE)
