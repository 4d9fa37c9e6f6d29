"""SauceDemo inventory (home) page."""

from ..core.interactive import InteractivePage
from ..core.logging import get_logger
from .selectors import (
    SORT_DROPDOWN,
    add_to_cart_selector,
    product_image_selector,
    remove_from_cart_selector,
)
from .sorting import InventorySort

logger = get_logger(__name__)


class HomePage:
    """Page object for the product inventory."""

    def __init__(self, page: InteractivePage):
        self.page = page

    async def add_to_cart(self, product_key: str) -> None:
        logger.info("Adding product to cart", product=product_key)
        await self.page.click(add_to_cart_selector(product_key))

    async def remove_from_cart(self, product_key: str) -> None:
        logger.info("Removing product from cart", product=product_key)
        await self.page.click(remove_from_cart_selector(product_key))

    async def view_product(self, image_key: str) -> None:
        """Open a product's detail view by clicking its image."""
        logger.info("Opening product view", image=image_key)
        await self.page.click(product_image_selector(image_key))

    async def sort_by(self, order: InventorySort) -> None:
        """Pick a sort order in the product dropdown."""
        order = InventorySort(order)
        logger.info("Sorting inventory", order=order.value)
        await self.page.click(SORT_DROPDOWN)
        await self.page.select_option(SORT_DROPDOWN, order.value)
