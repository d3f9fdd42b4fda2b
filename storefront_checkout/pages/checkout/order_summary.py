"""Order summary panel and coupon entry, available on every checkout step."""
from playwright.async_api import Page

from ...models import ValidationResult, validate_coupon_code
from ..base import BasePage, expect_visible
from .address_form import is_visible
from . import locators


class OrderSummary(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        self.toggle_button = page.locator(locators.TOGGLE_ORDER_SUMMARY)
        self.order_total = page.locator(locators.ORDER_TOTAL).first
        self.coupon_code_input = page.locator(locators.COUPON_CODE_INPUT)
        self.coupon_apply_button = page.locator(locators.COUPON_FRAME).get_by_role(
            "button", name=locators.APPLY_BUTTON_NAME,
        )

    async def toggle_order_summary(self) -> None:
        """Expand/collapse the summary; the toggle only exists on narrow layouts."""
        if await is_visible(self.toggle_button):
            await self.toggle_button.click()

    async def get_displayed_total(self) -> str:
        return (await self.order_total.inner_text()).strip()

    async def apply_coupon(self, code: str) -> None:
        await self.coupon_code_input.fill(code)
        await self.coupon_apply_button.click()

    async def expect_order_summary_visible(self) -> None:
        await expect_visible(self.order_total, "order total")

    @staticmethod
    def validate_coupon_code(code: str) -> ValidationResult:
        return validate_coupon_code(code)
