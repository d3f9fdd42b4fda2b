"""
Browser manager: Playwright lifecycle for one test scenario.

Each scenario owns its own manager, so scenarios can run concurrently against
independent browser sessions.
"""
import logging
from typing import Optional

from playwright.async_api import async_playwright, Browser, BrowserContext, Page, Playwright
from playwright.async_api import Error as PlaywrightError

from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Cookie/consent banners seen on the demo store; tried in order, first hit wins.
BANNER_DISMISS_SELECTORS = [
    "#onetrust-accept-btn-handler",
    '[id*="cookie"] button:has-text("Accept")',
    '[class*="cookie"] button:has-text("Accept")',
    '[class*="consent"] button:has-text("Accept")',
    'button:has-text("Accept All")',
    'button:has-text("Got it")',
]


class BrowserManager:
    """Launches Chromium and hands out pages bound to the storefront base URL."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._pages: list[Page] = []

    @property
    def headless(self) -> bool:
        return self.settings.headless

    async def _ensure_browser(self) -> Browser:
        """Launch browser if not already running."""
        if self._browser and self._browser.is_connected():
            return self._browser

        self._playwright = await async_playwright().start()
        self._browser = await self._playwright.chromium.launch(
            headless=self.headless,
            args=["--disable-dev-shm-usage", "--no-sandbox"],
        )
        logger.info("Browser launched (headless=%s)", self.headless)
        return self._browser

    async def _ensure_context(self) -> BrowserContext:
        if self._context:
            return self._context

        browser = await self._ensure_browser()
        self._context = await browser.new_context(
            base_url=self.settings.base_url,
            viewport={"width": 1920, "height": 1080},
        )
        self._context.set_default_timeout(self.settings.element_timeout_ms)
        self._context.set_default_navigation_timeout(self.settings.page_load_timeout_ms)
        return self._context

    async def new_page(self, path: Optional[str] = None) -> Page:
        """Open a new page, optionally navigating to a path under the base URL."""
        context = await self._ensure_context()
        page = await context.new_page()
        self._pages.append(page)
        if path is not None:
            await page.goto(path, wait_until="domcontentloaded")
            logger.info("Opened %s", page.url)
        return page

    async def dismiss_banners(self, page: Page) -> bool:
        """Best effort: click away a cookie/consent banner. Never raises."""
        for selector in BANNER_DISMISS_SELECTORS:
            try:
                button = page.locator(selector).first
                if await button.count() and await button.is_visible():
                    await button.click(timeout=2000)
                    logger.info("Dismissed banner via %s", selector)
                    return True
            except PlaywrightError as e:
                logger.debug("Banner dismissal via %s failed: %s", selector, e)
        return False

    async def close(self) -> None:
        """Shut down pages, context, browser and Playwright."""
        for page in self._pages:
            try:
                await page.close()
            except PlaywrightError:
                pass
        self._pages.clear()

        if self._context:
            try:
                await self._context.close()
            except PlaywrightError:
                pass
            self._context = None

        if self._browser:
            try:
                await self._browser.close()
            except PlaywrightError:
                pass
            self._browser = None

        if self._playwright:
            try:
                await self._playwright.stop()
            except PlaywrightError:
                pass
            self._playwright = None

        logger.info("Browser closed")

    async def __aenter__(self) -> "BrowserManager":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
