"""Map logical product and element keys to SauceDemo locators.

Keys are interpolated without escaping, so they are checked against a
plain identifier pattern first. Whether the element exists is left to the
browser.
"""

import re

from ..core.errors import InvalidSelectorKeyError

_KEY_PATTERN = re.compile(r"[A-Za-z0-9_-]+")

# Static locators
USERNAME_INPUT = "#user-name"
PASSWORD_INPUT = "#password"
LOGIN_BUTTON = "#login-button"
FIRST_NAME_INPUT = "#first-name"
LAST_NAME_INPUT = "#last-name"
POSTAL_CODE_INPUT = "#postal-code"
CONTINUE_BUTTON = "#continue"
SORT_DROPDOWN = '[data-test="product-sort-container"]'

# Locators checked by scenarios
BURGER_MENU = "#react-burger-menu-btn"
APP_LOGO = ".app_logo"
CART_LINK = '[data-test="shopping-cart-link"]'
CART_BADGE = '[data-test="shopping-cart-badge"]'
FOOTER_COPY = '[data-test="footer-copy"]'
SOCIAL_LINKS = (
    '[data-test="social-twitter"]',
    '[data-test="social-facebook"]',
    '[data-test="social-linkedin"]',
)
MENU_ALL_ITEMS = '[data-test="inventory-sidebar-link"]'
MENU_ABOUT = '[data-test="about-sidebar-link"]'
MENU_LOGOUT = '[data-test="logout-sidebar-link"]'
MENU_RESET = '[data-test="reset-sidebar-link"]'
LOGIN_USERNAME = '[data-test="username"]'
ERROR_MESSAGE = '[data-test="error"]'
ERROR_BUTTON = '[data-test="error-button"]'
INVENTORY_ITEM = '[data-test="inventory-item"]'
INVENTORY_ITEM_NAME = '[data-test="inventory-item-name"]'
INVENTORY_ITEM_DESC = '[data-test="inventory-item-desc"]'
INVENTORY_ITEM_PRICE = '[data-test="inventory-item-price"]'
BACKPACK_IMAGE = '[data-test="inventory-item-sauce-labs-backpack-img"]'
CONTINUE_SHOPPING = '[data-test="continue-shopping"]'
CHECKOUT_BUTTON = '[data-test="checkout"]'
PAGE_TITLE = '[data-test="title"]'
SUBTOTAL_LABEL = '[data-test="subtotal-label"]'
TAX_LABEL = '[data-test="tax-label"]'
TOTAL_LABEL = '[data-test="total-label"]'
FINISH_BUTTON = '[data-test="finish"]'
COMPLETE_HEADER = '[data-test="complete-header"]'
BACK_TO_PRODUCTS = '[data-test="back-to-products"]'


def _checked(key: str) -> str:
    if not isinstance(key, str) or not _KEY_PATTERN.fullmatch(key):
        raise InvalidSelectorKeyError(f"Unsafe selector key: {key!r}")
    return key


def add_to_cart_selector(product_key: str) -> str:
    """'sauce-labs-onesie' -> '#add-to-cart-sauce-labs-onesie'"""
    return f"#add-to-cart-{_checked(product_key)}"


def remove_from_cart_selector(product_key: str) -> str:
    """'sauce-labs-onesie' -> '#remove-sauce-labs-onesie'"""
    return f"#remove-{_checked(product_key)}"


def product_image_selector(image_key: str) -> str:
    """'backpack-img' -> 'img[data-test=inventory-item-sauce-labs-backpack-img]'"""
    return f"img[data-test=inventory-item-sauce-labs-{_checked(image_key)}]"


def css_class_selector(short_name: str) -> str:
    """'shopping_cart_link' -> '.shopping_cart_link'"""
    return f".{_checked(short_name)}"
