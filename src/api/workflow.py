"""
Booking update workflow.

Five strictly sequential steps against the booking API:
1. Authenticate and keep the token
2. Create a booking and keep its id
3. First full update (PUT), must return 200
4. Second full update (PUT), must return 200
5. Delete the booking

Once the booking exists, step 5 runs on every exit path. Its status is
recorded but never asserted, and a transport error during the delete is
logged instead of raised, so cleanup cannot hide the real result.
"""

from contextlib import AsyncExitStack, asynccontextmanager
from dataclasses import dataclass
from typing import Optional

import httpx

from ..core.assertions import step
from ..core.errors import BookingCreationError, UnexpectedStatusError
from ..core.logging import get_logger
from ..core.suite_data import BookingRecord, SuiteData, get_suite_data
from .booking_client import BookingClient

logger = get_logger(__name__)

UPDATE_OK = 200


@dataclass
class BookingHandle:
    """A booking that will be deleted when its scope exits."""
    booking_id: int
    booking: BookingRecord
    delete_status: Optional[int] = None


@dataclass
class WorkflowResult:
    """Everything observed during one workflow run."""
    booking_id: int
    created: BookingRecord
    first_update: BookingRecord
    second_update: BookingRecord
    delete_status: Optional[int] = None


async def cleanup_booking(client: BookingClient, booking_id: int, token: str) -> Optional[int]:
    """Best-effort delete. Returns the status, or None if the request itself failed."""
    try:
        return await client.delete_booking(booking_id, token)
    except httpx.HTTPError as e:
        logger.warning("Cleanup delete failed", booking_id=booking_id, error=str(e))
        return None


@asynccontextmanager
async def created_booking(client: BookingClient, record: BookingRecord, token: str):
    """
    Create a booking and guarantee its deletion.

    Usage:
        async with created_booking(client, record, token) as handle:
            await client.update_booking(handle.booking_id, other, token)
    """
    try:
        created = await client.create_booking(record)
    except BookingCreationError as e:
        if e.booking_id is not None:
            await cleanup_booking(client, e.booking_id, token)
        raise

    handle = BookingHandle(booking_id=created.booking_id, booking=created.booking)
    try:
        yield handle
    finally:
        handle.delete_status = await cleanup_booking(client, handle.booking_id, token)


async def update_booking_step(
    client: BookingClient,
    step_name: str,
    booking_id: int,
    record: BookingRecord,
    token: str,
) -> BookingRecord:
    """
    Run one PUT and require HTTP 200.

    Raises:
        UnexpectedStatusError: If the status is not 200
    """
    resp = await client.update_booking(booking_id, record, token)
    if resp.status_code != UPDATE_OK:
        raise UnexpectedStatusError(step_name, UPDATE_OK, resp.status_code, resp.text)

    updated = BookingRecord.model_validate(resp.json())
    logger.info(f"{step_name} response", booking_id=booking_id, booking=updated.to_payload())
    return updated


async def run_update_workflow(client: BookingClient, data: Optional[SuiteData] = None) -> WorkflowResult:
    """
    Run auth -> create -> update -> update -> delete.

    Args:
        client: Opened BookingClient
        data: Fixture data with the payloads (defaults to the process-wide data)

    Returns:
        WorkflowResult; delete_status is filled in after cleanup

    Raises:
        AuthenticationError: No token from step 1
        BookingCreationError: No booking id from step 2
        UnexpectedStatusError: Step 3 or 4 did not return 200
    """
    data = data or get_suite_data()

    async with step("Generate authentication token"):
        token = await client.authenticate(data.auth_data)

    async with AsyncExitStack() as stack:
        async with step("Create a new booking"):
            handle = await stack.enter_async_context(
                created_booking(client, data.booking_data, token)
            )

        async with step("First update (PUT)"):
            first = await update_booking_step(
                client, "First update", handle.booking_id, data.first_update_data, token
            )

        async with step("Second update (PUT)"):
            second = await update_booking_step(
                client, "Second update", handle.booking_id, data.second_update_data, token
            )

    # delete_status is only known once the exit stack has run cleanup
    return WorkflowResult(
        booking_id=handle.booking_id,
        created=handle.booking,
        first_update=first,
        second_update=second,
        delete_status=handle.delete_status,
    )
