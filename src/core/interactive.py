"""Interactive page capability used by the page objects."""

from abc import ABC, abstractmethod

from playwright.async_api import Page, TimeoutError as PlaywrightTimeout

from .errors import SelectorNotFoundError
from .logging import get_logger

logger = get_logger(__name__)


class InteractivePage(ABC):
    """Abstract capability set over one browser page.

    Every method suspends the caller until the automation engine reports
    completion or gives up; the engine owns the timeout policy.
    """

    @abstractmethod
    async def navigate_to(self, url: str) -> None:
        pass

    @abstractmethod
    async def click(self, selector: str) -> None:
        pass

    @abstractmethod
    async def fill(self, selector: str, value: str) -> None:
        pass

    @abstractmethod
    async def select_option(self, selector: str, value: str) -> None:
        pass


class PlaywrightInteractivePage(InteractivePage):
    """InteractivePage backed by a Playwright page."""

    def __init__(self, page: Page):
        self.page = page

    async def navigate_to(self, url: str) -> None:
        logger.debug("Navigating", url=url)
        await self.page.goto(url, wait_until="domcontentloaded")

    async def click(self, selector: str) -> None:
        logger.debug("Clicking", selector=selector)
        try:
            await self.page.click(selector)
        except PlaywrightTimeout as e:
            raise SelectorNotFoundError(selector, "click") from e

    async def fill(self, selector: str, value: str) -> None:
        logger.debug("Filling", selector=selector)
        try:
            await self.page.fill(selector, value)
        except PlaywrightTimeout as e:
            raise SelectorNotFoundError(selector, "fill") from e

    async def select_option(self, selector: str, value: str) -> None:
        logger.debug("Selecting option", selector=selector, value=value)
        try:
            await self.page.select_option(selector, value=value)
        except PlaywrightTimeout as e:
            raise SelectorNotFoundError(selector, "select option in") from e
