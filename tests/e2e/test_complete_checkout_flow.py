"""
Live purchase journeys against the demo storefront.

Skipped unless STOREFRONT_E2E=1; STOREFRONT_BASE_URL and STOREFRONT_HEADLESS
pick the target and the browser mode.
"""
import re
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from playwright.async_api import Page, expect

from storefront_checkout.browser import BrowserManager
from storefront_checkout.pages import Pages
from storefront_checkout.settings import get_settings
from storefront_checkout.test_data import TEST_ADDRESS, TEST_CARD, TEST_PASSWORD, generate_random_email

pytestmark = [
    pytest.mark.e2e,
    pytest.mark.skipif(not get_settings().run_e2e, reason="set STOREFRONT_E2E=1 to run live checkout tests"),
]


@pytest_asyncio.fixture
async def browser_manager() -> AsyncIterator[BrowserManager]:
    async with BrowserManager() as manager:
        yield manager


@pytest_asyncio.fixture
async def pages(browser_manager: BrowserManager) -> Pages:
    page: Page = await browser_manager.new_page("/")
    await browser_manager.dismiss_banners(page)
    return Pages(page)


async def _register_and_fill_cart(pages: Pages) -> None:
    await pages.home.open_account_menu()
    await pages.login_pane.click_sign_up_link()
    await pages.sign_up_pane.expect_form_visible()
    await pages.sign_up_pane.sign_up(generate_random_email(), TEST_PASSWORD)
    await pages.sign_up_pane.expect_signed_up()

    await pages.home.navigate_to_shop_all()
    await pages.shop_all.expect_loaded()
    await pages.shop_all.click_first_product()
    await pages.product_detail.select_first_available_size()
    await pages.product_detail.add_to_cart()
    await pages.cart_pane.proceed_to_checkout()
    await expect(pages.page).to_have_url(re.compile(r".*/checkout"))


@pytest.mark.asyncio
async def test_registered_customer_completes_purchase(pages: Pages):
    await _register_and_fill_cart(pages)

    checkout = pages.checkout
    await checkout.wait_for_checkout_page_load()
    order_number = await checkout.complete_checkout(TEST_ADDRESS, TEST_CARD, delivery_label="Standard")

    assert order_number
    assert re.match(r"^R\d+", order_number)


@pytest.mark.asyncio
async def test_edit_shipping_from_payment_returns_to_address_step(pages: Pages):
    await _register_and_fill_cart(pages)

    checkout = pages.checkout
    await checkout.wait_for_checkout_page_load()
    await checkout.fill_shipping_address(TEST_ADDRESS)
    await checkout.save_and_continue()
    await checkout.expect_on_delivery_step()
    await checkout.select_shipping_method_by_label("Standard")
    await checkout.save_and_continue_delivery()

    await checkout.wait_for_payment_form_ready()
    await checkout.expect_payment_review_info(shipping_address=TEST_ADDRESS.address1)
    await checkout.edit_shipping_from_payment()
    await checkout.expect_on_address_step()

    await checkout.fill_shipping_address(TEST_ADDRESS.model_copy(update={"address2": "Suite 5"}))
    await checkout.save_and_continue()
    await checkout.expect_on_delivery_step()
    assert await checkout.get_available_shipping_methods()
