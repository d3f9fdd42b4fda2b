"""Cart slide-over shown after adding a product."""
import re

from playwright.async_api import Page

from .base import BasePage


class CartPane(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        self.pane = page.locator("#slideover-cart")
        self.counter = self.pane.locator(".cart-counter")
        self.line_items = self.pane.locator('li[id^="line_item_"]')
        self.checkout_button = self.pane.get_by_role("link", name=re.compile(r"checkout", re.IGNORECASE))

    async def get_counter(self) -> int:
        """Number shown on the cart badge; 0 when the badge is not rendered."""
        if not await self.counter.count():
            return 0
        digits = re.sub(r"\D", "", await self.counter.first.inner_text())
        return int(digits) if digits else 0

    async def line_item_count(self) -> int:
        return await self.line_items.count()

    async def proceed_to_checkout(self) -> None:
        await self.checkout_button.click()
