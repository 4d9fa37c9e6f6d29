"""Shared pytest fixtures for all tests."""

import pytest
from playwright.async_api import expect

from src.core.browser import managed_browser
from src.core.errors import SelectorNotFoundError
from src.core.interactive import InteractivePage, PlaywrightInteractivePage
from src.core.logging import setup_logging
from src.core.suite_data import get_suite_data
from src.pages.cart_page import CartPage
from src.pages.home_page import HomePage
from src.pages.login_page import LoginPage
from src.pages.selectors import BURGER_MENU

setup_logging()


class RecordingPage(InteractivePage):
    """InteractivePage that records calls instead of driving a browser."""

    def __init__(self, missing=()):
        self.calls = []
        self.missing = set(missing)

    async def _record(self, *call):
        self.calls.append(call)

    async def navigate_to(self, url):
        await self._record("navigate_to", url)

    async def click(self, selector):
        if selector in self.missing:
            raise SelectorNotFoundError(selector, "click")
        await self._record("click", selector)

    async def fill(self, selector, value):
        await self._record("fill", selector, value)

    async def select_option(self, selector, value):
        await self._record("select_option", selector, value)


@pytest.fixture
def recording_page():
    """Fake interactive page for page object unit tests."""
    return RecordingPage()


@pytest.fixture
def data():
    """Process-wide fixture data."""
    return get_suite_data()


@pytest.fixture
async def browser():
    """Browser fixture for live scenarios."""
    async with managed_browser() as manager:
        yield manager


@pytest.fixture
async def page(browser):
    """Fresh isolated session for each scenario."""
    page = await browser.new_session()
    yield page
    await browser.close_session(page)


@pytest.fixture
def login_page(page):
    return LoginPage(PlaywrightInteractivePage(page))


@pytest.fixture
def home_page(page):
    return HomePage(PlaywrightInteractivePage(page))


@pytest.fixture
def cart_page(page):
    return CartPage(PlaywrightInteractivePage(page))


@pytest.fixture
async def opened_login(page, login_page, data):
    """Page sitting on the login screen."""
    await login_page.open(data.url)
    return page


@pytest.fixture
async def logged_in_page(opened_login, login_page, data):
    """Page logged in as the standard user."""
    page = opened_login
    await login_page.login(data.users.standard, data.users.password)
    await expect(page.locator(BURGER_MENU)).to_be_visible()
    return page


@pytest.fixture
async def problem_user_page(opened_login, login_page, data):
    """Page logged in as the problem user."""
    page = opened_login
    await login_page.login(data.users.problem, data.users.password)
    await expect(page.locator(BURGER_MENU)).to_be_visible()
    return page
