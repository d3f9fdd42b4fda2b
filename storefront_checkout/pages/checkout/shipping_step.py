"""Address step: contact details and the shipping address."""
import logging
from typing import Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from ...errors import StepTimeoutError
from ...models import Address, ContactInfo
from ...output_sanitizer import redact_email
from ..base import BasePage, expect_visible, set_checkbox
from . import locators
from .address_form import AddressFormHandler, fill_required

logger = logging.getLogger(__name__)


class ShippingStep(BasePage):
    """Contact information plus shipping address, ending in "Save and continue"."""

    def __init__(self, page: Page, address_form: Optional[AddressFormHandler] = None):
        super().__init__(page)
        self.locators = locators.SHIPPING_ADDRESS
        self.checkout_root = page.locator(locators.CHECKOUT_ROOT)
        self.form = page.locator(self.locators.root)
        self.email_input = self.form.locator(locators.CONTACT_EMAIL)
        self.accept_marketing_checkbox = self.form.locator(locators.ACCEPT_MARKETING)
        self.create_account_checkbox = self.form.locator(locators.CREATE_ACCOUNT)
        self.save_and_continue_button = self.form.get_by_role(
            "button", name=locators.SAVE_AND_CONTINUE_NAME,
        )
        self._address_form = address_form or AddressFormHandler()

    async def expect_on_step(self) -> None:
        await expect_visible(self.checkout_root, "checkout page")
        await expect_visible(self.form, "address form")
        await expect_visible(self.save_and_continue_button, "save and continue button")

    async def wait_for_load(self, timeout: int = 10000) -> None:
        try:
            await self.checkout_root.wait_for(state="visible", timeout=timeout)
            await self.form.wait_for(state="visible", timeout=5000)
        except PlaywrightError as e:
            raise StepTimeoutError(
                f"Checkout page failed to load within {timeout}ms",
                timeout_ms=timeout,
                operation="wait for checkout page",
                cause=e,
            ) from e

    async def fill_contact_information(
        self,
        email: str,
        accept_marketing: Optional[bool] = None,
        create_account: Optional[bool] = None,
    ) -> None:
        """Fill the email and optionally set the marketing/account checkboxes.

        A flag is a no-op when its checkbox is not rendered (e.g. for a
        signed-in customer there is no "create account" option).
        """
        await fill_required(self.email_input, email, "email")
        logger.info("Contact email set to %s", redact_email(email))
        if accept_marketing is not None:
            await set_checkbox(self.accept_marketing_checkbox, accept_marketing, "accept marketing")
        if create_account is not None:
            await set_checkbox(self.create_account_checkbox, create_account, "create account")

    async def fill_shipping_address(self, address: Address) -> None:
        await self._address_form.fill_address(self.form, address, self.locators)

    async def fill_shipping_form(self, contact: ContactInfo, address: Address) -> None:
        await self.fill_contact_information(
            contact.email, contact.accept_marketing, contact.create_account,
        )
        await self.fill_shipping_address(address)

    async def save_and_continue(self) -> None:
        await self.save_and_continue_button.click()
