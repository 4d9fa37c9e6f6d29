"""Fixture data shared by every scenario.

The data lives in ``src/data/suite_data.json`` and is loaded once per
process into frozen models. Scenarios only ever read it.
"""

import json
from datetime import date
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .config import get_settings
from .errors import FixtureDataError
from .logging import get_logger

logger = get_logger(__name__)

DEFAULT_SUITE_DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "suite_data.json"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Credentials(_Frozen):
    """Username/password pair. Empty strings are valid input."""
    username: str = ""
    password: str = ""


class CheckoutInfo(_Frozen):
    """Checkout form values. Empty strings are valid input."""
    first_name: str = ""
    last_name: str = ""
    postal_code: str = ""


class BookingDates(_Frozen):
    checkin: date
    checkout: date


class BookingRecord(_Frozen):
    """Restful-Booker reservation payload."""
    firstname: str
    lastname: str
    totalprice: int
    depositpaid: bool
    bookingdates: BookingDates
    additionalneeds: str = ""

    def to_payload(self) -> dict:
        """JSON-ready dict with ISO dates."""
        return self.model_dump(mode="json")


class Product(_Frozen):
    """Inventory item as listed on the home page."""
    name: str
    key: str
    price: str


class Users(_Frozen):
    standard: str = "standard_user"
    locked_out: str = "locked_out_user"
    problem: str = "problem_user"
    performance_glitch: str = "performance_glitch_user"
    password: str = "secret_sauce"


class SuiteData(_Frozen):
    """Everything the scenarios need to know about the systems under test."""

    url: str = Field(alias="URL")
    about_url: str
    booking_api_url: str

    users: Users = Field(default_factory=Users)

    backpack_price: str
    bike_light_price: str
    bolt_tshirt_price: str
    fleece_price: str
    onesie_price: str
    red_tshirt_price: str
    products: tuple[Product, ...]

    backpack_description: str
    locked_out_user_error: str
    user_and_pass_mismatch: str
    password_required: str
    username_required: str
    first_name_required: str
    last_name_required: str
    postal_code_required: str
    footer_text: str
    checkout_info_title: str
    order_thanks: str

    checkout_info: CheckoutInfo

    auth_data: Credentials = Field(alias="authData")
    booking_data: BookingRecord = Field(alias="bookingData")
    first_update_data: BookingRecord = Field(alias="firstUpdateData")
    second_update_data: BookingRecord = Field(alias="secondUpdateData")

    def product(self, key: str) -> Product:
        """Look up a catalog product by its key."""
        for item in self.products:
            if item.key == key:
                return item
        raise KeyError(key)


def load_suite_data(path: Optional[Path] = None) -> SuiteData:
    """
    Load and validate fixture data.

    Args:
        path: JSON file to read (defaults to the packaged file)

    Returns:
        Frozen SuiteData

    Raises:
        FixtureDataError: If the file is missing or does not validate
    """
    path = Path(path) if path else DEFAULT_SUITE_DATA_PATH

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise FixtureDataError(f"Fixture data not found: {path}") from e
    except json.JSONDecodeError as e:
        raise FixtureDataError(f"Fixture data is not valid JSON: {path}: {e}") from e

    try:
        data = SuiteData.model_validate(raw)
    except ValidationError as e:
        raise FixtureDataError(f"Fixture data failed validation: {path}: {e}") from e

    logger.debug("Loaded fixture data", path=str(path), products=len(data.products))
    return data


# Global fixture data instance
_suite_data: Optional[SuiteData] = None


def get_suite_data() -> SuiteData:
    """Get or load the process-wide fixture data, applying URL overrides from settings."""
    global _suite_data
    if _suite_data is None:
        settings = get_settings()
        data = load_suite_data(settings.suite_data_path)

        overrides = {}
        if settings.base_url:
            overrides["url"] = settings.base_url
        if settings.booking_api_url:
            overrides["booking_api_url"] = settings.booking_api_url
        if overrides:
            data = data.model_copy(update=overrides)

        _suite_data = data
    return _suite_data


def reload_suite_data() -> SuiteData:
    """Reload fixture data (useful for testing)."""
    global _suite_data
    _suite_data = None
    return get_suite_data()
