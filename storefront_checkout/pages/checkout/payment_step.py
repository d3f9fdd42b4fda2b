"""
Payment step: billing address, the processor's card iframe, review and confirmation.

Card inputs live in a cross-origin iframe the host page cannot introspect.
PaymentFrame always waits in two phases (iframe attached, then the card
number input visible) before it writes anything.
"""
import logging
from typing import Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from ...errors import StepTimeoutError
from ...models import Address, Card, PaymentState
from ...output_sanitizer import redact_card_number
from ...settings import get_settings
from ..base import BasePage, TextMatcher, expect_text, expect_visible, set_checkbox
from . import locators
from .address_form import AddressFormHandler

logger = logging.getLogger(__name__)

FRAME_ATTACH_TIMEOUT_MS = 10000
CARD_INPUT_TIMEOUT_MS = 10000


class PaymentFrame:
    """Adapter for the third-party card-entry iframe."""

    def __init__(self, page: Page, iframe_selector: str = locators.PAYMENT_IFRAME):
        self.page = page
        self.iframe = page.locator(iframe_selector)
        self.frame = page.frame_locator(iframe_selector)
        self.card_number_input = self.frame.locator(locators.CARD_NUMBER)
        self.card_expiry_input = self.frame.locator(locators.CARD_EXPIRY)
        self.card_cvc_input = self.frame.locator(locators.CARD_CVC)
        self.card_name_input = self.frame.locator(locators.CARD_NAME)

    async def wait_until_attached(self, timeout: int = FRAME_ATTACH_TIMEOUT_MS) -> None:
        try:
            await self.iframe.wait_for(state="attached", timeout=timeout)
        except PlaywrightError as e:
            raise StepTimeoutError(
                "payment iframe was not attached",
                timeout_ms=timeout,
                operation="wait for payment iframe",
                cause=e,
            ) from e

    async def wait_until_interactive(self, timeout: int = CARD_INPUT_TIMEOUT_MS) -> None:
        try:
            await self.card_number_input.wait_for(state="visible", timeout=timeout)
        except PlaywrightError as e:
            raise StepTimeoutError(
                "card number input never became visible",
                timeout_ms=timeout,
                operation="wait for card input",
                cause=e,
            ) from e

    async def fill_card(self, card: Card) -> None:
        await self.wait_until_attached()
        await self.wait_until_interactive()

        logger.info("Filling card %s", redact_card_number(card.number))
        await self.card_number_input.fill(card.number)
        await self.card_expiry_input.fill(card.expiry)
        await self.card_cvc_input.fill(card.cvc)

        # The processor only renders a name input for some payment methods.
        if card.name and await self.card_name_input.count():
            await self.card_name_input.fill(card.name)


class PaymentStep(BasePage):
    """Payment/billing step, including the review panel and the confirmation page."""

    def __init__(self, page: Page, address_form: Optional[AddressFormHandler] = None):
        super().__init__(page)
        self.form = page.locator(locators.PAYMENT_FORM)
        self.payment_methods_frame = page.locator(locators.PAYMENT_METHODS_FRAME)
        self.submit_button = page.locator(locators.PAYMENT_SUBMIT)
        self.message_container = page.locator(locators.PAYMENT_MESSAGE)
        self.add_new_card_radio = page.locator(locators.ADD_NEW_CARD)
        self.card_frame = PaymentFrame(page)

        # Billing
        self.billing_locators = locators.BILLING_ADDRESS
        self.use_shipping_address_checkbox = page.locator(locators.USE_SHIPPING_ADDRESS)
        self.billing_address_section = page.locator(self.billing_locators.root)
        self._address_form = address_form or AddressFormHandler()

        # Review of the earlier steps
        self.review_contact = page.locator(locators.REVIEW_CONTACT)
        self.review_shipping_address = page.locator(locators.REVIEW_SHIPPING)
        self.review_delivery_method = page.locator(locators.REVIEW_DELIVERY)
        self.edit_contact_link = self.review_contact.get_by_role("link", name=locators.EDIT_LINK_NAME)
        self.edit_shipping_link = self.review_shipping_address.get_by_role("link", name=locators.EDIT_LINK_NAME)
        self.edit_delivery_link = self.review_delivery_method.get_by_role("link", name=locators.EDIT_LINK_NAME)

        # Confirmation
        self.confirmation_heading = page.get_by_role("heading", name=locators.CONFIRMATION_HEADING)
        self.order_number = page.locator(locators.ORDER_NUMBER)

        self.state: Optional[PaymentState] = None
        self.ready = False

    async def expect_on_step(self) -> None:
        await expect_visible(self.form, "payment form")
        await expect_visible(self.payment_methods_frame, "payment methods")
        await expect_visible(self.submit_button, "payment submit button")

    async def wait_for_ready(self, timeout: Optional[int] = None) -> None:
        """Wait for the payment form and the card iframe. Defaults to the network timeout setting."""
        timeout = timeout or get_settings().network_timeout_ms
        try:
            await self.form.wait_for(state="visible", timeout=timeout)
        except PlaywrightError as e:
            raise StepTimeoutError(
                f"Payment form failed to load within {timeout}ms",
                timeout_ms=timeout,
                operation="wait for payment form",
                cause=e,
            ) from e
        await self.card_frame.wait_until_attached()
        self.ready = True
        self.state = PaymentState.AWAITING_CARD_ENTRY

    async def select_add_new_card(self) -> None:
        """Switch from a saved card to a new one; only rendered for returning customers."""
        if not await self.add_new_card_radio.count():
            logger.debug("No saved cards offered, new card form already active")
            return
        await self.add_new_card_radio.check(force=True)

    # ---- billing address ----

    async def toggle_use_shipping_address(self, use_shipping: bool) -> None:
        await set_checkbox(self.use_shipping_address_checkbox, use_shipping, "use shipping address")

    async def use_shipping_address_for_billing(self) -> None:
        await self.toggle_use_shipping_address(True)

    async def fill_billing_address(self, address: Address) -> None:
        await self.toggle_use_shipping_address(False)
        await self.expect_billing_section_visible()
        await self._address_form.fill_address(self.billing_address_section, address, self.billing_locators)

    async def expect_billing_section_visible(self) -> None:
        await expect_visible(self.billing_address_section, "billing address section")

    # ---- card entry and submission ----

    async def fill_payment_details(self, card: Card) -> None:
        if not self.ready:
            await self.wait_for_ready()
        await self.card_frame.fill_card(card)
        self.state = PaymentState.AWAITING_CARD_ENTRY

    async def submit_payment(self) -> None:
        """Click "Pay". Does not wait for the navigation that follows."""
        await self.submit_button.click()
        self.state = PaymentState.SUBMITTING

    async def get_payment_message(self) -> Optional[str]:
        """Error/status text the processor shows under the card form, if any."""
        if not await self.message_container.count():
            return None
        return await self.read_text(self.message_container) or None

    # ---- review panel ----

    async def expect_payment_review_info(
        self,
        email: Optional[TextMatcher] = None,
        shipping_address: Optional[TextMatcher] = None,
        delivery_method: Optional[TextMatcher] = None,
    ) -> None:
        if email:
            await expect_text(self.review_contact, email, "contact review")
        if shipping_address:
            await expect_text(self.review_shipping_address, shipping_address, "shipping address review")
        if delivery_method:
            await expect_text(self.review_delivery_method, delivery_method, "delivery method review")

    async def edit_contact_from_payment(self) -> None:
        await self._leave_for_earlier_step(self.edit_contact_link)

    async def edit_shipping_from_payment(self) -> None:
        await self._leave_for_earlier_step(self.edit_shipping_link)

    async def edit_delivery_from_payment(self) -> None:
        await self._leave_for_earlier_step(self.edit_delivery_link)

    async def _leave_for_earlier_step(self, link) -> None:
        await link.click()
        # Whatever we knew about the payment form no longer holds.
        self.ready = False
        self.state = None

    # ---- confirmation ----

    async def expect_order_confirmation(self, timeout: Optional[int] = None) -> None:
        timeout = timeout or get_settings().network_timeout_ms
        try:
            await expect_visible(self.confirmation_heading, "order confirmation heading", timeout)
            await expect_visible(self.order_number, "order number")
        except AssertionError:
            self.state = PaymentState.FAILED
            raise
        self.state = PaymentState.CONFIRMED

    async def get_order_number(self) -> Optional[str]:
        return await self.read_text(self.order_number)
