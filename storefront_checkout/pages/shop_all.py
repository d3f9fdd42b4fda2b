from playwright.async_api import Page

from .base import BasePage, expect_visible


class ShopAllPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        self.page_title = page.locator('.section-page-title:has-text("Shop All")')
        self.first_product_link = page.locator(".product-card a").first

    async def expect_loaded(self) -> None:
        await expect_visible(self.page_title, "Shop All title")

    async def click_first_product(self) -> None:
        await self.first_product_link.click()
