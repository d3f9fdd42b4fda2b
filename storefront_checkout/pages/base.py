"""Shared plumbing for page objects."""
import logging
import re
from typing import Optional, Pattern, Union

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator, Page, expect

logger = logging.getLogger(__name__)

TextMatcher = Union[str, Pattern[str]]

DEFAULT_EXPECT_TIMEOUT_MS = 5000


async def expect_visible(locator: Locator, description: str, timeout: int = DEFAULT_EXPECT_TIMEOUT_MS) -> None:
    """Web-first visibility assertion naming what was expected."""
    await expect(locator, f"Expected {description} to be visible").to_be_visible(timeout=timeout)


async def expect_text(
    locator: Locator,
    expected: TextMatcher,
    description: str,
    timeout: int = DEFAULT_EXPECT_TIMEOUT_MS,
) -> None:
    """Retrying assertion that locator's text contains expected (substring or regex)."""
    shown = expected.pattern if isinstance(expected, re.Pattern) else expected
    await expect(locator, f"Expected {description} to contain {shown!r}").to_contain_text(
        expected, timeout=timeout,
    )


async def set_checkbox(checkbox: Locator, checked: bool, description: str) -> bool:
    """Drive a checkbox to the desired state. Returns False if it is not rendered."""
    if not await checkbox.count():
        logger.debug("%s checkbox not rendered, ignoring", description)
        return False
    try:
        current = await checkbox.is_checked()
    except PlaywrightError:
        current = False
    if current == checked:
        return True
    try:
        if checked:
            await checkbox.check(force=True)
        else:
            await checkbox.uncheck(force=True)
    except PlaywrightError as e:
        logger.warning("Could not set %s to %s: %s", description, checked, e)
        return False
    return True


class BasePage:
    """A page object bound to one Playwright page."""

    def __init__(self, page: Page):
        self.page = page

    async def read_text(self, locator: Locator) -> Optional[str]:
        text = await locator.text_content()
        return text.strip() if text is not None else None
