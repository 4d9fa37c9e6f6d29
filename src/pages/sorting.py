"""Inventory sort orders and the catalog order each one should produce."""

from enum import Enum
from typing import Iterable

from ..core.pricing import parse_price
from ..core.suite_data import Product


class InventorySort(str, Enum):
    """Values of the product sort dropdown."""
    NAME_ASC = "az"
    NAME_DESC = "za"
    PRICE_ASC = "lohi"
    PRICE_DESC = "hilo"


def expected_order(products: Iterable[Product], order: InventorySort) -> list[str]:
    """
    Product names in the order the inventory should list them.

    Price ties keep catalog order in both directions, as the shop does,
    so hilo is not the exact reverse of lohi when two prices are equal.

    Args:
        products: Catalog entries from fixture data
        order: Sort order selected in the dropdown

    Returns:
        List of product names
    """
    order = InventorySort(order)
    items = list(products)

    if order in (InventorySort.NAME_ASC, InventorySort.NAME_DESC):
        names = sorted(item.name for item in items)
        return names[::-1] if order == InventorySort.NAME_DESC else names

    by_price = sorted(
        items,
        key=lambda item: parse_price(item.price),
        reverse=order == InventorySort.PRICE_DESC,
    )
    return [item.name for item in by_price]
