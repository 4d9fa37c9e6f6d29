"""Custom exceptions for the SauceDemo / Restful-Booker end-to-end suite."""

from typing import Optional


class SuiteError(Exception):
    """Base exception for suite errors."""
    pass


class ConfigurationError(SuiteError):
    """Configuration error."""
    pass


class FixtureDataError(SuiteError):
    """Fixture data file missing or malformed."""
    pass


class SelectorError(SuiteError):
    """Error resolving a UI selector."""
    pass


class InvalidSelectorKeyError(SelectorError, ValueError):
    """Key cannot be turned into a safe selector."""
    pass


class SelectorNotFoundError(SelectorError):
    """Selector matched nothing before the engine timed out."""

    def __init__(self, selector: str, action: str):
        self.selector = selector
        self.action = action
        super().__init__(f"Could not {action} '{selector}': selector not found")


class PricingError(SuiteError):
    """Error computing checkout totals."""
    pass


class InvalidPriceError(PricingError, ValueError):
    """Price is not a finite, non-negative decimal literal."""
    pass


class BookingApiError(SuiteError):
    """Error talking to the booking API."""
    pass


class AuthenticationError(BookingApiError):
    """No token returned by the auth endpoint."""
    pass


class BookingCreationError(BookingApiError):
    """Create endpoint returned no usable booking.

    booking_id is set when the server issued an id but the rest of the
    response was unusable, so the caller can still delete it.
    """

    def __init__(self, message: str, booking_id: Optional[int] = None):
        self.booking_id = booking_id
        super().__init__(message)


class UnexpectedStatusError(BookingApiError):
    """HTTP status differs from the one a step requires."""

    def __init__(self, step: str, expected: int, actual: int, body: Optional[str] = None):
        self.step = step
        self.expected = expected
        self.actual = actual
        self.body = body
        message = f"{step}: expected HTTP {expected}, got {actual}"
        if body:
            message += f" ({body[:200]})"
        super().__init__(message)
