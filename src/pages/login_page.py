"""SauceDemo login screen."""

from ..core.interactive import InteractivePage
from ..core.logging import get_logger
from .selectors import LOGIN_BUTTON, PASSWORD_INPUT, USERNAME_INPUT

logger = get_logger(__name__)


class LoginPage:
    """Page object for the login form."""

    def __init__(self, page: InteractivePage):
        self.page = page

    async def open(self, url: str) -> None:
        """Navigate to the login screen."""
        await self.page.navigate_to(url)

    async def login(self, username: str, password: str) -> None:
        """
        Fill both fields and submit.

        Empty strings are sent as-is so negative paths can leave a field
        blank. Failures propagate to the scenario.
        """
        logger.info("Logging in", username=username or "<empty>")
        await self.page.fill(USERNAME_INPUT, username)
        await self.page.fill(PASSWORD_INPUT, password)
        await self.page.click(LOGIN_BUTTON)
