"""Playwright browser harness for managing browser lifecycle."""

import asyncio
from contextlib import asynccontextmanager
from typing import Optional

from playwright.async_api import (
    Browser,
    BrowserContext,
    Page,
    Playwright,
    async_playwright,
    expect,
)

from .config import get_settings
from .logging import get_logger

logger = get_logger(__name__)


class BrowserManager:
    """Manages Playwright browser lifecycle.

    One browser is shared by a test session; every scenario gets its own
    context (cookies, storage, cart state) and page from new_session().
    """

    def __init__(self):
        """Initialize browser manager."""
        self.settings = get_settings()
        self.playwright: Optional[Playwright] = None
        self.browser: Optional[Browser] = None
        self.contexts: list[BrowserContext] = []
        self._start_lock = asyncio.Lock()

    async def start(self) -> None:
        """Start Playwright and launch browser."""
        async with self._start_lock:
            if self.browser:
                logger.warning("Browser already started")
                return

            logger.info("Starting Playwright browser", headless=self.settings.headless)

            self.playwright = await async_playwright().start()
            self.browser = await self.playwright.chromium.launch(
                headless=self.settings.headless,
                timeout=self.settings.browser_launch_timeout,
            )

            expect.set_options(timeout=self.settings.expect_timeout)

            logger.info("Browser started successfully")

    async def stop(self) -> None:
        """Stop browser and cleanup resources."""
        if not self.browser:
            logger.warning("Browser not running")
            return

        logger.info("Stopping browser")

        for context in self.contexts:
            await context.close()
        self.contexts = []

        await self.browser.close()
        self.browser = None

        if self.playwright:
            await self.playwright.stop()
            self.playwright = None

        logger.info("Browser stopped")

    async def new_session(self) -> Page:
        """
        Create an isolated context and return its page.

        Returns:
            New page in a fresh browser context

        Raises:
            RuntimeError: If browser not started
        """
        if not self.browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context = await self.browser.new_context(viewport={'width': 1280, 'height': 720})
        context.set_default_timeout(self.settings.browser_timeout)
        context.set_default_navigation_timeout(self.settings.navigation_timeout)
        self.contexts.append(context)

        page = await context.new_page()
        logger.debug("Created new session", contexts=len(self.contexts))
        return page

    async def close_session(self, page: Page) -> None:
        """Close a page's context and forget it."""
        context = page.context
        if context in self.contexts:
            self.contexts.remove(context)
        await context.close()


@asynccontextmanager
async def managed_browser():
    """
    Context manager for browser lifecycle.

    Usage:
        async with managed_browser() as browser:
            page = await browser.new_session()
            # ... use page
    """
    browser = BrowserManager()
    try:
        await browser.start()
        yield browser
    finally:
        await browser.stop()
