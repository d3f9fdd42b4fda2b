"""Account slide-over in its sign-in state."""
from playwright.async_api import Page

from .base import BasePage


class LoginPane(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        self.sign_up_link = page.locator('a[href="/user/sign_up"]')

    async def click_sign_up_link(self) -> None:
        await self.sign_up_link.click()
