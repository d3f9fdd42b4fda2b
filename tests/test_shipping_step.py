"""Tests for the address step controller."""
import pytest
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from storefront_checkout.errors import FieldInteractionError, StepTimeoutError
from storefront_checkout.pages.checkout import locators
from storefront_checkout.pages.checkout.shipping_step import ShippingStep


@pytest.fixture
def step(page):
    return ShippingStep(page)


class TestReadiness:
    @pytest.mark.asyncio
    async def test_expect_on_step(self, step):
        await step.expect_on_step()
        step.checkout_root.wait_for.assert_awaited_once_with(state="visible", timeout=5000)
        step.save_and_continue_button.wait_for.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_expect_on_step_fails_as_assertion(self, step):
        step.form.wait_for.side_effect = PlaywrightTimeoutError("Timeout 5000ms exceeded")
        with pytest.raises(AssertionError, match="address form"):
            await step.expect_on_step()

    @pytest.mark.asyncio
    async def test_wait_for_load_timeout(self, step):
        step.checkout_root.wait_for.side_effect = PlaywrightTimeoutError("Timeout 10000ms exceeded")
        with pytest.raises(StepTimeoutError) as exc:
            await step.wait_for_load()
        assert exc.value.timeout_ms == 10000
        step.form.wait_for.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_wait_for_load_custom_timeout(self, step):
        await step.wait_for_load(timeout=2500)
        step.checkout_root.wait_for.assert_awaited_once_with(state="visible", timeout=2500)


class TestContactInformation:
    @pytest.mark.asyncio
    async def test_email_only(self, step):
        await step.fill_contact_information("jane.doe@example.com")
        step.email_input.fill.assert_awaited_once_with("jane.doe@example.com")
        step.accept_marketing_checkbox.count.assert_not_awaited()
        step.create_account_checkbox.count.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_flags_drive_checkboxes(self, step):
        step.create_account_checkbox.is_checked.return_value = True
        await step.fill_contact_information("a@b.co", accept_marketing=True, create_account=False)
        step.accept_marketing_checkbox.check.assert_awaited_once_with(force=True)
        step.create_account_checkbox.uncheck.assert_awaited_once_with(force=True)

    @pytest.mark.asyncio
    async def test_checkbox_already_in_state_not_clicked(self, step):
        step.accept_marketing_checkbox.is_checked.return_value = True
        await step.fill_contact_information("a@b.co", accept_marketing=True)
        step.accept_marketing_checkbox.check.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_absent_checkbox_is_noop(self, step):
        step.create_account_checkbox.count.return_value = 0
        await step.fill_contact_information("a@b.co", create_account=True)
        step.create_account_checkbox.check.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_email_input_is_fatal(self, step):
        step.email_input.fill.side_effect = PlaywrightError("element is not attached")
        with pytest.raises(FieldInteractionError) as exc:
            await step.fill_contact_information("a@b.co")
        assert exc.value.operation == "fill email"


class TestShippingForm:
    @pytest.mark.asyncio
    async def test_address_scoped_to_shipping_form(self, step, sample_address):
        await step.fill_shipping_address(sample_address)
        zipcode = step.form.locator(locators.SHIPPING_ADDRESS.zipcode)
        zipcode.fill.assert_awaited_once_with("10001")
        assert zipcode.selector.startswith(locators.SHIPPING_ADDRESS.root)

    @pytest.mark.asyncio
    async def test_fill_shipping_form(self, step, sample_contact, sample_address):
        await step.fill_shipping_form(sample_contact, sample_address)
        step.email_input.fill.assert_awaited_once_with(sample_contact.email)
        step.accept_marketing_checkbox.check.assert_awaited_once_with(force=True)
        step.form.locator(locators.SHIPPING_ADDRESS.city).fill.assert_awaited_once_with("New York")

    @pytest.mark.asyncio
    async def test_save_and_continue(self, step, page):
        await step.save_and_continue()
        button = page.locator(locators.SHIPPING_ADDRESS.root).get_by_role(
            "button", name=locators.SAVE_AND_CONTINUE_NAME,
        )
        button.click.assert_awaited_once()
