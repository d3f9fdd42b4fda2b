"""Storefront home page: header account menu and navigation."""
from playwright.async_api import Page

from .base import BasePage


class HomePage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        self.account_button = page.locator('button:has(svg[viewBox="0 0 25 24"]):not(#mobile-menu)')
        self.shop_all_link = page.locator('a[data-title="shop all"]').first
        self.logo = page.get_by_label("Top").get_by_role("link", name="Spree Commerce DEMO logo")

    async def goto(self) -> None:
        await self.page.goto("/")

    async def open_account_menu(self) -> None:
        await self.account_button.click()

    async def navigate_to_shop_all(self) -> None:
        await self.shop_all_link.click()
