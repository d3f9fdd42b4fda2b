"""
Checkout page object for the Spree storefront.

CheckoutPage is the single interface scenarios use. It hides which step
controller backs each phase:

    fill_shipping_address -> save_and_continue
    -> select_shipping_method_by_label -> save_and_continue_delivery
    -> wait_for_payment_form_ready -> fill_payment_details -> submit_payment
    -> expect_order_confirmation

Which step is current is never stored here; the storefront is authoritative
and the expect_on_* methods only check what is rendered.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional, Union

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from ...errors import CheckoutError, CheckoutStepError
from ...models import Address, Card, CheckoutStep, ContactInfo, ValidationResult, validate_card
from ..base import TextMatcher
from .address_form import AddressFormHandler
from .delivery_step import DeliveryStep
from .order_summary import OrderSummary
from .payment_step import PaymentStep
from .shipping_step import ShippingStep

logger = logging.getLogger(__name__)

# Coupon entry is not tied to a step; failures there are reported under this name.
ORDER_SUMMARY = "order summary"


@asynccontextmanager
async def _step(step: Union[CheckoutStep, str], operation: str):
    """Attach the step name to anything but assertion failures."""
    name = step.value if isinstance(step, CheckoutStep) else step
    try:
        yield
    except CheckoutStepError:
        raise
    except (CheckoutError, PlaywrightError) as e:
        logger.error("Checkout %s failed during %s: %s", name, operation, type(e).__name__)
        raise CheckoutStepError(name, cause=e, operation=operation) from e


class CheckoutPage:
    """Composite page object over the address, delivery and payment steps."""

    def __init__(self, page: Page, address_form: Optional[AddressFormHandler] = None):
        self.page = page
        address_form = address_form or AddressFormHandler()
        self.shipping = ShippingStep(page, address_form)
        self.delivery = DeliveryStep(page)
        self.payment = PaymentStep(page, address_form)
        self.summary = OrderSummary(page)

    # ===== Address step =====

    async def expect_on_address_step(self) -> None:
        await self.shipping.expect_on_step()

    async def wait_for_checkout_page_load(self, timeout: int = 10000) -> None:
        async with _step(CheckoutStep.ADDRESS, "wait for checkout page"):
            await self.shipping.wait_for_load(timeout)

    async def fill_contact_information(
        self,
        email: str,
        accept_marketing: Optional[bool] = None,
        create_account: Optional[bool] = None,
    ) -> None:
        async with _step(CheckoutStep.ADDRESS, "fill contact information"):
            await self.shipping.fill_contact_information(email, accept_marketing, create_account)

    async def fill_shipping_address(self, address: Address) -> None:
        async with _step(CheckoutStep.ADDRESS, "fill shipping address"):
            await self.shipping.fill_shipping_address(address)

    async def fill_shipping_form(self, contact: ContactInfo, address: Address) -> None:
        async with _step(CheckoutStep.ADDRESS, "fill shipping form"):
            await self.shipping.fill_shipping_form(contact, address)

    async def save_and_continue(self) -> None:
        async with _step(CheckoutStep.ADDRESS, "save and continue"):
            await self.shipping.save_and_continue()

    # ===== Delivery step =====

    async def expect_on_delivery_step(self) -> None:
        await self.delivery.expect_on_step()

    async def select_shipping_method(
        self,
        *,
        rate_id: Optional[Union[str, int]] = None,
        label: Optional[TextMatcher] = None,
        price: Optional[str] = None,
    ) -> None:
        async with _step(CheckoutStep.DELIVERY, "select shipping method"):
            await self.delivery.select_shipping_method(rate_id=rate_id, label=label, price=price)

    async def select_shipping_method_by_id(self, rate_id: Union[str, int]) -> None:
        await self.select_shipping_method(rate_id=rate_id)

    async def select_shipping_method_by_label(self, label: TextMatcher) -> None:
        await self.select_shipping_method(label=label)

    async def select_shipping_method_by_price(self, price_text: str) -> None:
        await self.select_shipping_method(price=price_text)

    async def get_available_shipping_methods(self) -> list[str]:
        return await self.delivery.get_available_shipping_methods()

    async def save_and_continue_delivery(self) -> None:
        async with _step(CheckoutStep.DELIVERY, "save and continue"):
            await self.delivery.save_and_continue()

    # ===== Payment step =====

    async def expect_on_payment_step(self) -> None:
        await self.payment.expect_on_step()

    async def wait_for_payment_form_ready(self, timeout: Optional[int] = None) -> None:
        async with _step(CheckoutStep.PAYMENT, "wait for payment form"):
            await self.payment.wait_for_ready(timeout)

    async def select_add_new_card(self) -> None:
        async with _step(CheckoutStep.PAYMENT, "select new card"):
            await self.payment.select_add_new_card()

    async def toggle_use_shipping_address(self, use_shipping: bool) -> None:
        async with _step(CheckoutStep.PAYMENT, "toggle use shipping address"):
            await self.payment.toggle_use_shipping_address(use_shipping)

    async def fill_billing_address(self, address: Address) -> None:
        async with _step(CheckoutStep.PAYMENT, "fill billing address"):
            await self.payment.fill_billing_address(address)

    async def fill_payment_details(self, card: Card) -> None:
        async with _step(CheckoutStep.PAYMENT, "fill payment details"):
            await self.payment.fill_payment_details(card)

    async def submit_payment(self) -> None:
        async with _step(CheckoutStep.PAYMENT, "submit payment"):
            await self.payment.submit_payment()

    async def expect_payment_review_info(
        self,
        email: Optional[TextMatcher] = None,
        shipping_address: Optional[TextMatcher] = None,
        delivery_method: Optional[TextMatcher] = None,
    ) -> None:
        await self.payment.expect_payment_review_info(email, shipping_address, delivery_method)

    async def edit_contact_from_payment(self) -> None:
        async with _step(CheckoutStep.PAYMENT, "edit contact"):
            await self.payment.edit_contact_from_payment()

    async def edit_shipping_from_payment(self) -> None:
        async with _step(CheckoutStep.PAYMENT, "edit shipping address"):
            await self.payment.edit_shipping_from_payment()

    async def edit_delivery_from_payment(self) -> None:
        async with _step(CheckoutStep.PAYMENT, "edit delivery method"):
            await self.payment.edit_delivery_from_payment()

    # ===== Confirmation =====

    async def expect_order_confirmation(self) -> None:
        await self.payment.expect_order_confirmation()

    async def get_order_number(self) -> Optional[str]:
        return await self.payment.get_order_number()

    # ===== Order summary =====

    async def apply_coupon(self, code: str) -> None:
        async with _step(ORDER_SUMMARY, "apply coupon"):
            await self.summary.apply_coupon(code)

    async def toggle_order_summary(self) -> None:
        await self.summary.toggle_order_summary()

    async def get_displayed_total(self) -> str:
        return await self.summary.get_displayed_total()

    @staticmethod
    def validate_card(card: Card) -> ValidationResult:
        return validate_card(card)

    @staticmethod
    def validate_coupon_code(code: str) -> ValidationResult:
        return OrderSummary.validate_coupon_code(code)

    # ===== Whole journey =====

    async def complete_checkout(
        self,
        address: Address,
        card: Card,
        *,
        contact: Optional[ContactInfo] = None,
        delivery_label: TextMatcher = "Standard",
        billing_address: Optional[Address] = None,
    ) -> Optional[str]:
        """Run address -> delivery -> payment -> confirmation and return the order number."""
        if contact is not None:
            await self.fill_contact_information(
                contact.email, contact.accept_marketing, contact.create_account,
            )
        await self.fill_shipping_address(address)
        await self.save_and_continue()

        await self.select_shipping_method_by_label(delivery_label)
        await self.save_and_continue_delivery()

        await self.wait_for_payment_form_ready()
        if billing_address is not None:
            await self.fill_billing_address(billing_address)
        await self.fill_payment_details(card)
        await self.submit_payment()

        await self.expect_order_confirmation()
        order_number = await self.get_order_number()
        logger.info("Order %s confirmed", order_number)
        return order_number
