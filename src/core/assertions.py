"""Named scenario steps and soft assertions."""

from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Awaitable, Optional

import structlog

from .logging import get_logger

logger = get_logger(__name__)


@dataclass
class SoftAssertionResult:
    """Outcome of a non-fatal expectation."""
    description: str
    passed: bool
    error: Optional[AssertionError] = None


async def soft_expect(description: str, check: Awaitable) -> SoftAssertionResult:
    """
    Await an expectation without letting its failure abort the scenario.

    Only for conditions known to be flaky in the system under test (an
    optional popup, a page the problem user renders wrongly). Anything
    other than an AssertionError still propagates.

    Args:
        description: What is being checked, for the log
        check: Awaitable expectation, e.g. ``expect(locator).to_be_visible()``

    Returns:
        SoftAssertionResult with the observed error when the check failed
    """
    try:
        await check
    except AssertionError as e:
        logger.warning("Soft assertion failed", check=description, error=str(e))
        return SoftAssertionResult(description=description, passed=False, error=e)

    return SoftAssertionResult(description=description, passed=True)


@asynccontextmanager
async def step(description: str):
    """
    Group scenario actions under a description.

    The description is logged and attached to any exception that escapes
    the block, so the failure report names the step that broke.

    Usage:
        async with step("add products to cart"):
            await home_page.add_to_cart("sauce-labs-onesie")
    """
    with structlog.contextvars.bound_contextvars(step=description):
        logger.info("Step started")
        try:
            yield
        except Exception as e:
            logger.error("Step failed", error=str(e))
            e.add_note(f"Failed step: {description}")
            raise
        logger.info("Step passed")
