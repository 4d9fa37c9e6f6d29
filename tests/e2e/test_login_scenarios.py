"""Live login scenarios for SauceDemo."""

import pytest
from playwright.async_api import expect

from src.core.assertions import soft_expect
from src.pages.selectors import BURGER_MENU, ERROR_BUTTON, ERROR_MESSAGE


@pytest.mark.integration
async def test_login_standard_user(opened_login, login_page, data):
    """Test successful login as the standard user."""
    page = opened_login

    await login_page.login(data.users.standard, data.users.password)

    await expect(page.locator(BURGER_MENU)).to_be_visible()


@pytest.mark.integration
@pytest.mark.slow
async def test_login_performance_glitch_user(opened_login, login_page, data):
    """Test the slow account still logs in within the navigation timeout."""
    page = opened_login

    await login_page.login(data.users.performance_glitch, data.users.password)

    await expect(page.locator(BURGER_MENU)).to_be_visible(timeout=10000)


@pytest.mark.integration
async def test_login_locked_out_user(opened_login, login_page, data):
    page = opened_login

    await login_page.login(data.users.locked_out, data.users.password)

    await expect(page.locator(ERROR_MESSAGE)).to_contain_text(data.locked_out_user_error)


@pytest.mark.integration
async def test_login_wrong_password(opened_login, login_page, data):
    """Test mismatch error; the burger menu check is best-effort only."""
    page = opened_login

    await login_page.login(data.users.standard, "public_sauce")

    await expect(page.locator(ERROR_MESSAGE)).to_contain_text(data.user_and_pass_mismatch)
    result = await soft_expect(
        "burger menu after failed login",
        expect(page.locator(BURGER_MENU)).to_be_visible(),
    )
    assert result.passed is False


@pytest.mark.integration
async def test_login_unknown_user(opened_login, login_page, data):
    page = opened_login

    await login_page.login("apple", data.users.password)

    await expect(page.locator(ERROR_MESSAGE)).to_contain_text(data.user_and_pass_mismatch)
    await expect(page.locator(BURGER_MENU)).not_to_be_visible()


@pytest.mark.integration
async def test_login_empty_password(opened_login, login_page, data):
    page = opened_login

    await login_page.login(data.users.standard, "")

    await expect(page.locator(ERROR_MESSAGE)).to_contain_text(data.password_required)
    await expect(page.locator(BURGER_MENU)).not_to_be_visible()


@pytest.mark.integration
async def test_login_empty_username(opened_login, login_page, data):
    page = opened_login

    await login_page.login("", "public_sauce")

    await expect(page.locator(ERROR_MESSAGE)).to_contain_text(data.username_required)
    await expect(page.locator(BURGER_MENU)).not_to_be_visible()


@pytest.mark.integration
async def test_login_empty_username_and_password(opened_login, login_page, data):
    """Test the username check wins when both fields are empty, then dismiss the error."""
    page = opened_login

    await login_page.login("", "")

    await expect(page.locator(ERROR_MESSAGE)).to_contain_text(data.username_required)
    await expect(page.locator(ERROR_BUTTON)).to_be_visible()
    await expect(page.locator(BURGER_MENU)).not_to_be_visible()

    await page.locator(ERROR_BUTTON).click()
    await expect(page.locator(ERROR_BUTTON)).not_to_be_visible()
