"""SauceDemo cart and checkout pages."""

from typing import Iterable

from ..core.interactive import InteractivePage
from ..core.logging import get_logger
from ..core.pricing import calculate_checkout_values
from .selectors import (
    CONTINUE_BUTTON,
    FIRST_NAME_INPUT,
    LAST_NAME_INPUT,
    POSTAL_CODE_INPUT,
    css_class_selector,
)

logger = get_logger(__name__)


class CartPage:
    """Page object for the cart, checkout form and overview."""

    def __init__(self, page: InteractivePage):
        self.page = page

    async def click_on(self, short_name: str) -> None:
        """Click the element carrying CSS class ``short_name``."""
        await self.page.click(css_class_selector(short_name))

    async def fill_checkout_info(self, first_name: str, last_name: str, postal_code: str) -> None:
        """
        Fill the "Your Information" form and press Continue.

        Any field may be empty to trigger the form's validation errors.
        """
        logger.info(
            "Filling checkout info",
            first_name=first_name or "<empty>",
            last_name=last_name or "<empty>",
            postal_code=postal_code or "<empty>",
        )
        await self.page.fill(FIRST_NAME_INPUT, first_name)
        await self.page.fill(LAST_NAME_INPUT, last_name)
        await self.page.fill(POSTAL_CODE_INPUT, postal_code)
        await self.page.click(CONTINUE_BUTTON)

    async def calculate_checkout_values(self, prices: Iterable[str]) -> list[str]:
        """
        Expected overview labels for the given item prices.

        Returns:
            [subtotal, tax, total] as two-decimal strings
        """
        totals = calculate_checkout_values(prices)
        logger.info("Calculated checkout values", **totals._asdict())
        return list(totals)
