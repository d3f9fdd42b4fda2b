"""
Address sub-form handler shared by the shipping and billing forms.

Dropdowns are resolved through ordered fallback chains: each MatchStrategy is
tried in turn and the first one that selects an option wins. A chain that runs
dry only raises when the control was rendered and the caller asked for it.
"""
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Sequence

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator

from ...errors import FieldInteractionError, OptionNotFoundError
from ...models import Address
from .locators import AddressLocators

logger = logging.getLogger(__name__)

SUGGESTION_TIMEOUT_MS = 3000
# A missing <option> makes select_option wait for the full timeout; keep it short.
OPTION_TIMEOUT_MS = 2000


@dataclass(frozen=True)
class MatchStrategy:
    """One way of picking an option out of a <select>."""
    name: str
    apply: Callable[[Locator], Awaitable[bool]]


def by_value(value: str) -> MatchStrategy:
    async def apply(select: Locator) -> bool:
        await select.select_option(value=value, timeout=OPTION_TIMEOUT_MS)
        return True
    return MatchStrategy(f"value={value!r}", apply)


def by_label(label: str) -> MatchStrategy:
    async def apply(select: Locator) -> bool:
        await select.select_option(label=label, timeout=OPTION_TIMEOUT_MS)
        return True
    return MatchStrategy(f"label={label!r}", apply)


def by_option_attribute(attribute: str, value: str) -> MatchStrategy:
    """Find the <option> carrying attribute=value and select it by its own value."""
    async def apply(select: Locator) -> bool:
        option = select.locator(f'option[{attribute}="{value}"]').first
        if not await option.count():
            return False
        option_value = await option.get_attribute("value")
        if not option_value:
            return False
        await select.select_option(value=option_value, timeout=OPTION_TIMEOUT_MS)
        return True
    return MatchStrategy(f"{attribute}={value!r}", apply)


async def select_first_match(
    select: Locator,
    strategies: Sequence[MatchStrategy],
    *,
    field: str,
    mandatory: bool,
) -> Optional[str]:
    """Try strategies in order. Returns the name of the one that matched.

    Individual misses are swallowed; exhaustion raises OptionNotFoundError when
    mandatory, otherwise logs and returns None.
    """
    for strategy in strategies:
        try:
            if await strategy.apply(select):
                logger.debug("%s selected by %s", field, strategy.name)
                return strategy.name
        except PlaywrightError as e:
            logger.debug("%s: %s did not match: %s", field, strategy.name, e)

    tried = ", ".join(s.name for s in strategies)
    if mandatory:
        raise OptionNotFoundError(f"no option matched ({tried})", operation=f"select {field}")
    logger.warning("Could not select %s (tried %s), leaving as is", field, tried)
    return None


async def is_visible(locator: Locator) -> bool:
    """Visibility probe that treats a detached or missing element as hidden."""
    try:
        return await locator.is_visible()
    except PlaywrightError:
        return False


async def fill_required(locator: Locator, value: str, field: str) -> None:
    try:
        await locator.fill(value)
    except PlaywrightError as e:
        raise FieldInteractionError(
            f"could not fill required field {field}", operation=f"fill {field}", cause=e,
        ) from e


class AddressFormHandler:
    """Fills a postal address into a form described by an AddressLocators bundle."""

    def __init__(self, suggestion_timeout: int = SUGGESTION_TIMEOUT_MS):
        self._suggestion_timeout = suggestion_timeout

    async def fill_address(self, scope: Locator, address: Address, locators: AddressLocators) -> bool:
        """Fill every field of ``address`` under ``scope``, in on-screen order."""
        def field(name: str) -> Locator:
            return locators.resolve(scope, name)

        await self.select_country(field("country"), address.country, address.country_value)

        await fill_required(field("first_name"), address.first_name, "first_name")
        await fill_required(field("last_name"), address.last_name, "last_name")

        await fill_required(field("address1"), address.address1, "address1")
        await self.accept_first_suggestion(field("suggestions_box"), field("first_suggestion"))
        if address.address2:
            await field("address2").fill(address.address2)

        await fill_required(field("city"), address.city, "city")
        await self.select_state(
            field("state_select"), field("state_text"), address.state, address.state_value,
        )
        await fill_required(field("zipcode"), address.zipcode, "zipcode")

        if address.phone:
            await field("phone").fill(address.phone)

        logger.info("Filled address for %s %s in %s", address.first_name, address.last_name[:1], locators.root)
        return True

    async def select_country(
        self,
        select: Locator,
        country: Optional[str],
        country_value: Optional[str],
    ) -> Optional[str]:
        if country_value:
            # Country forms differ; a missing selector must not abort the fill.
            return await select_first_match(
                select, [by_value(country_value)], field="country", mandatory=False,
            )
        if not country:
            return None
        if not await select.count():
            logger.info("No country selector rendered, skipping country %r", country)
            return None
        return await select_first_match(
            select,
            [by_option_attribute("data-iso", country), by_label(country), by_value(country)],
            field="country",
            mandatory=True,
        )

    async def select_state(
        self,
        select: Locator,
        text_input: Locator,
        state: Optional[str],
        state_value: Optional[str],
    ) -> Optional[str]:
        if not state and not state_value:
            return None

        dropdown = await is_visible(select)
        if dropdown and state_value:
            return await select_first_match(
                select, [by_value(state_value)], field="state", mandatory=False,
            )
        if dropdown:
            return await select_first_match(
                select,
                [by_label(state), by_value(state), by_option_attribute("data-abbr", state)],
                field="state",
                mandatory=True,
            )
        if state and await is_visible(text_input):
            await text_input.fill(state)
            return "text"

        logger.info("No state control rendered, skipping state")
        return None

    async def accept_first_suggestion(self, suggestions_box: Locator, first_suggestion: Locator) -> bool:
        """Click the first autocomplete suggestion if the widget shows up in time."""
        try:
            await suggestions_box.wait_for(state="visible", timeout=self._suggestion_timeout)
            await first_suggestion.click()
            return True
        except PlaywrightError:
            logger.info("No address suggestions found, continuing without selection")
            return False
