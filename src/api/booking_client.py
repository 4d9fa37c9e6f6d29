"""HTTP client for the Restful-Booker API."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from ..core.config import get_settings
from ..core.errors import AuthenticationError, BookingCreationError
from ..core.logging import get_logger
from ..core.suite_data import BookingRecord, Credentials, get_suite_data

logger = get_logger(__name__)

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


@dataclass
class CreatedBooking:
    """Server-issued id plus the booking as the server stored it."""
    booking_id: int
    booking: BookingRecord


def _token_cookie(token: str) -> Dict[str, str]:
    return {"Cookie": f"token={token}"}


def _json_or_none(resp: httpx.Response) -> Optional[Dict[str, Any]]:
    """Decode a JSON object body, or None when the body is not one."""
    try:
        data = resp.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


class BookingClient:
    """
    Async client for the booking endpoints.

    Usage:
        async with BookingClient() as client:
            token = await client.authenticate(credentials)
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        """
        Args:
            base_url: API root (defaults to booking_api_url from fixture data)
            timeout: Request timeout in seconds (defaults to settings.api_timeout)
        """
        settings = get_settings()
        self.base_url = (base_url or get_suite_data().booking_api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.api_timeout
        self._client: Optional[httpx.AsyncClient] = None
        self._owner: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "BookingClient":
        client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers=JSON_HEADERS,
        )
        self._client = await client.__aenter__()
        self._owner = client
        return self

    async def __aexit__(self, *exc_info) -> None:
        owner, self._owner, self._client = self._owner, None, None
        if owner is not None:
            await owner.__aexit__(*exc_info)

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("BookingClient not opened. Use 'async with BookingClient()'.")
        return self._client

    async def authenticate(self, credentials: Credentials) -> str:
        """
        Obtain an auth token.

        Raises:
            AuthenticationError: If the response carries no token
        """
        logger.info("Requesting auth token", username=credentials.username)
        resp = await self.client.post("/auth", json=credentials.model_dump())

        data = _json_or_none(resp)
        token = data.get("token") if data else None
        if not token:
            reason = (data or {}).get("reason") or resp.text
            raise AuthenticationError(f"No token in auth response (HTTP {resp.status_code}): {reason}")

        logger.info("Auth token received", token=token)
        return token

    async def create_booking(self, record: BookingRecord) -> CreatedBooking:
        """
        Create a booking.

        Raises:
            BookingCreationError: If the response carries no integer booking id,
                or a body that does not validate (booking_id is then set)
        """
        resp = await self.client.post("/booking", json=record.to_payload())

        data = _json_or_none(resp)
        booking_id = data.get("bookingid") if data else None
        if booking_id is None:
            raise BookingCreationError(
                f"No booking id in create response (HTTP {resp.status_code}): {resp.text[:200]}"
            )

        try:
            booking_id = int(booking_id)
        except (TypeError, ValueError) as e:
            raise BookingCreationError(f"Booking id is not an integer: {booking_id!r}") from e

        logger.info("Booking created", booking_id=booking_id)
        try:
            booking = BookingRecord.model_validate(data.get("booking") or record.to_payload())
        except ValidationError as e:
            raise BookingCreationError(
                f"Booking {booking_id} created but its body is invalid: {e}",
                booking_id=booking_id,
            ) from e
        return CreatedBooking(booking_id=booking_id, booking=booking)

    async def get_booking(self, booking_id: int) -> httpx.Response:
        """Fetch a booking. The caller decides what the status means."""
        return await self.client.get(f"/booking/{booking_id}")

    async def update_booking(self, booking_id: int, record: BookingRecord, token: str) -> httpx.Response:
        """Replace a booking in full (PUT). The caller checks the status."""
        logger.info("Updating booking", booking_id=booking_id)
        return await self.client.put(
            f"/booking/{booking_id}",
            json=record.to_payload(),
            headers=_token_cookie(token),
        )

    async def delete_booking(self, booking_id: int, token: str) -> int:
        """Delete a booking and return the HTTP status."""
        resp = await self.client.delete(f"/booking/{booking_id}", headers=_token_cookie(token))
        logger.info("Delete response", booking_id=booking_id, status=resp.status_code)
        return resp.status_code
