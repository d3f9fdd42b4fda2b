"""Product detail page: variant selection and add to cart."""
import logging
import re

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from .base import BasePage, expect_text

logger = logging.getLogger(__name__)

AVAILABLE_SIZE = (
    '[data-dropdown-target="menu"] label[for^="product-option-"]'
    ":not(.cursor-not-allowed):not(.opacity-50)"
)


class ProductDetailPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        self.size_dropdown_button = page.locator('[data-dropdown-target="button"]')
        self.description_section = page.locator('[data-editor-name="Description"]')
        self.add_to_cart_button = page.locator(".add-to-cart-button:visible").first

    async def select_first_available_size(self) -> bool:
        """Pick the first in-stock size. Products without sizes are left alone."""
        try:
            await self.size_dropdown_button.click()
        except PlaywrightError:
            logger.debug("No size dropdown on this product")
        label = self.page.locator(AVAILABLE_SIZE).first
        if not await label.count():
            return False
        await label.click()
        return True

    async def add_to_cart(self) -> None:
        await expect_text(self.add_to_cart_button, re.compile(r"add to cart", re.IGNORECASE), "add to cart button")
        await self.add_to_cart_button.click()
