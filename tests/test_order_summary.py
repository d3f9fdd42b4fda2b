"""Tests for the order summary panel and coupon entry."""
import pytest
from playwright.async_api import Error as PlaywrightError

from storefront_checkout.pages.checkout import locators
from storefront_checkout.pages.checkout.order_summary import OrderSummary


@pytest.fixture
def summary(page):
    return OrderSummary(page)


@pytest.mark.asyncio
async def test_apply_coupon(summary, page):
    await summary.apply_coupon("SAVE10")
    summary.coupon_code_input.fill.assert_awaited_once_with("SAVE10")
    apply = page.locator(locators.COUPON_FRAME).get_by_role("button", name=locators.APPLY_BUTTON_NAME)
    apply.click.assert_awaited_once()


@pytest.mark.asyncio
async def test_displayed_total(summary):
    summary.order_total.inner_text.return_value = " $105.00\n"
    assert await summary.get_displayed_total() == "$105.00"


@pytest.mark.asyncio
async def test_toggle_only_when_rendered(summary):
    summary.toggle_button.is_visible.return_value = False
    await summary.toggle_order_summary()
    summary.toggle_button.click.assert_not_awaited()

    summary.toggle_button.is_visible.return_value = True
    await summary.toggle_order_summary()
    summary.toggle_button.click.assert_awaited_once()


@pytest.mark.asyncio
async def test_toggle_detached(summary):
    summary.toggle_button.is_visible.side_effect = PlaywrightError("Target closed")
    await summary.toggle_order_summary()
    summary.toggle_button.click.assert_not_awaited()


@pytest.mark.asyncio
async def test_expect_visible(summary):
    await summary.expect_order_summary_visible()
    summary.order_total.wait_for.assert_awaited_once_with(state="visible", timeout=5000)


def test_coupon_validation_is_local(summary):
    result = summary.validate_coupon_code("AB")
    assert not result.is_valid
    summary.coupon_code_input.fill.assert_not_called()
