"""Account slide-over in its registration state."""
from typing import Optional

from playwright.async_api import Page

from .base import BasePage, expect_visible


class SignUpPane(BasePage):
    """Registration form inside the account slide-over."""

    def __init__(self, page: Page):
        super().__init__(page)
        self.overlay = page.locator("#account-pane")
        self.panel = page.locator("#slideover-account")
        self.close_button = self.panel.locator('button[data-action="slideover-account#toggle"]')
        self.sign_up_form = page.locator("form#new_user, form.new_user")
        self.email_input = page.locator("#user_email")
        self.password_input = page.locator("#user_password")
        self.password_confirmation_input = page.locator("#user_password_confirmation")
        self.sign_up_button = page.locator('input[type="submit"][value="Sign Up"]')
        self.login_link = page.locator('a[href="/user/sign_in"]')
        self.welcome_flash = page.locator(
            '#flashes .flash-message:has-text("Welcome! You have signed up successfully.")',
        )

    async def expect_form_visible(self) -> None:
        await expect_visible(self.sign_up_form, "sign up form")

    async def expect_signed_up(self) -> None:
        await expect_visible(self.welcome_flash, "sign up welcome message", timeout=10000)

    async def close(self) -> None:
        await self.close_button.click()

    async def fill_sign_up_form(
        self, email: str, password: str, password_confirmation: Optional[str] = None,
    ) -> None:
        """Fill the form; the confirmation defaults to the password."""
        await self.email_input.fill(email)
        await self.password_input.fill(password)
        await self.password_confirmation_input.fill(password_confirmation or password)

    async def submit_sign_up_form(self) -> None:
        await self.sign_up_button.click()

    async def sign_up(self, email: str, password: str, password_confirmation: Optional[str] = None) -> None:
        await self.fill_sign_up_form(email, password, password_confirmation)
        await self.submit_sign_up_form()

    async def click_login_link(self) -> None:
        await self.login_link.click()

    async def clear_form(self) -> None:
        await self.email_input.clear()
        await self.password_input.clear()
        await self.password_confirmation_input.clear()

    async def get_email_value(self) -> str:
        return await self.email_input.input_value()

    async def get_password_value(self) -> str:
        return await self.password_input.input_value()

    async def get_password_confirmation_value(self) -> str:
        return await self.password_confirmation_input.input_value()
