"""Unit tests for the Playwright interactive page binding."""

import pytest
from unittest.mock import AsyncMock, MagicMock
from playwright.async_api import TimeoutError as PlaywrightTimeout

from src.core.errors import SelectorNotFoundError
from src.core.interactive import InteractivePage, PlaywrightInteractivePage


@pytest.fixture
def mock_page():
    """Mock Playwright page."""
    page = MagicMock()
    page.goto = AsyncMock()
    page.click = AsyncMock()
    page.fill = AsyncMock()
    page.select_option = AsyncMock()
    return page


def test_interactive_page_is_abstract():
    with pytest.raises(TypeError):
        InteractivePage()


async def test_navigate_to(mock_page):
    await PlaywrightInteractivePage(mock_page).navigate_to("https://www.saucedemo.com/")

    mock_page.goto.assert_awaited_once_with("https://www.saucedemo.com/", wait_until="domcontentloaded")


async def test_click_and_fill(mock_page):
    interactive = PlaywrightInteractivePage(mock_page)

    await interactive.fill("#user-name", "standard_user")
    await interactive.click("#login-button")

    mock_page.fill.assert_awaited_once_with("#user-name", "standard_user")
    mock_page.click.assert_awaited_once_with("#login-button")


async def test_select_option(mock_page):
    await PlaywrightInteractivePage(mock_page).select_option('[data-test="product-sort-container"]', "lohi")

    mock_page.select_option.assert_awaited_once_with('[data-test="product-sort-container"]', value="lohi")


async def test_click_timeout_becomes_selector_not_found(mock_page):
    """Test Playwright timeouts surface as selector-not-found failures."""
    mock_page.click.side_effect = PlaywrightTimeout("Timeout 15000ms exceeded.")

    with pytest.raises(SelectorNotFoundError) as exc_info:
        await PlaywrightInteractivePage(mock_page).click("#add-to-cart-sauce-labs-unicorn")

    assert exc_info.value.selector == "#add-to-cart-sauce-labs-unicorn"
    assert isinstance(exc_info.value.__cause__, PlaywrightTimeout)


async def test_fill_timeout_becomes_selector_not_found(mock_page):
    mock_page.fill.side_effect = PlaywrightTimeout("Timeout 15000ms exceeded.")

    with pytest.raises(SelectorNotFoundError, match="#first-name"):
        await PlaywrightInteractivePage(mock_page).fill("#first-name", "Andy")


async def test_other_errors_propagate(mock_page):
    """Test non-timeout errors are not rewritten."""
    mock_page.click.side_effect = RuntimeError("Target page, context or browser has been closed")

    with pytest.raises(RuntimeError, match="has been closed"):
        await PlaywrightInteractivePage(mock_page).click("#login-button")
