"""Delivery step: pick one of the rendered shipping rates."""
import logging
from typing import Optional, Union

from playwright.async_api import Locator, Page

from ...errors import ShippingMethodNotFoundError
from ..base import BasePage, TextMatcher, expect_visible
from . import locators

logger = logging.getLogger(__name__)


class DeliveryStep(BasePage):
    """Shipping rate selection.

    Rates are matched against whatever is rendered at call time, in rendered
    order; the first match wins.
    """

    def __init__(self, page: Page):
        super().__init__(page)
        self.form = page.locator(locators.DELIVERY_FORM)
        self.shipping_methods_list = page.locator(locators.SHIPPING_METHODS_LIST)
        self.shipping_rate_items = page.locator(locators.SHIPPING_RATE_ITEMS)
        self.save_and_continue_button = page.locator(locators.DELIVERY_SUBMIT)

    async def expect_on_step(self) -> None:
        await expect_visible(self.form, "delivery form")
        await expect_visible(self.shipping_methods_list, "shipping methods list")
        await expect_visible(self.shipping_rate_items.first, "first shipping rate")

    async def select_shipping_method(
        self,
        *,
        rate_id: Optional[Union[str, int]] = None,
        label: Optional[TextMatcher] = None,
        price: Optional[str] = None,
    ) -> None:
        """Select a rate by exactly one of id, label text or price text."""
        given = [k for k, v in (("rate_id", rate_id), ("label", label), ("price", price)) if v is not None]
        if len(given) != 1:
            raise ValueError(f"Pass exactly one of rate_id, label, price (got {given or 'none'})")
        if rate_id is not None:
            await self.select_shipping_method_by_id(rate_id)
        elif label is not None:
            await self.select_shipping_method_by_label(label)
        else:
            await self.select_shipping_method_by_price(price)

    async def select_shipping_method_by_id(self, rate_id: Union[str, int]) -> None:
        rate_id = str(rate_id)
        radio = self.page.locator(f"#shipping-rate-{rate_id}")
        if await radio.count():
            await radio.first.check(force=True)
            logger.info("Selected shipping rate #%s", rate_id)
            return

        item = self.shipping_rate_items.filter(
            has=self.page.locator(f'{locators.RATE_RADIO}[value="{rate_id}"]'),
        )
        await self._check_rate(item, f"id {rate_id}")

    async def select_shipping_method_by_label(self, label: TextMatcher) -> None:
        await self._check_rate(self.shipping_rate_items.filter(has_text=label), f"label {label!r}")

    async def select_shipping_method_by_price(self, price_text: str) -> None:
        await self._check_rate(self.shipping_rate_items.filter(has_text=price_text), f"price {price_text!r}")

    async def _check_rate(self, items: Locator, key: str) -> None:
        if not await items.count():
            available = await self.get_available_shipping_methods()
            raise ShippingMethodNotFoundError(
                f"no shipping rate matches {key}; available: {available}",
                available=available,
                operation="select shipping method",
            )
        await items.first.locator(locators.RATE_RADIO).check(force=True)
        logger.info("Selected shipping rate by %s", key)

    async def get_available_shipping_methods(self) -> list[str]:
        methods = []
        for index in range(await self.shipping_rate_items.count()):
            text = await self.shipping_rate_items.nth(index).text_content()
            if text:
                methods.append(" ".join(text.split()))
        return methods

    async def rate_count(self) -> int:
        return await self.shipping_rate_items.count()

    async def save_and_continue(self) -> None:
        await self.save_and_continue_button.click()
