"""Booking record operations."""

import logging
from typing import Any, List, Mapping

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import ReferentialError, RecordNotFoundError, ValidationError
from ..models.base import utcnow
from ..models.booking import Booking
from ..models.event import Event
from ..validation import BookingFields, prepare_booking

logger = logging.getLogger(__name__)

BOOKING_FIELDS = ('event_id', 'email')

async def ensure_event_exists(session: AsyncSession, event_id: int) -> None:
    """
    Referential check run before a booking is written.

    Raises:
        ReferentialError: If no event has the given id
    """
    result = await session.execute(select(Event.id).where(Event.id == event_id).limit(1))
    if result.scalar_one_or_none() is None:
        logger.warning(f"Rejected booking: event {event_id} does not exist")
        raise ReferentialError(event_id)

async def create_booking(session: AsyncSession, event_id: Any, email: str) -> Booking:
    """
    Validate and insert a booking.

    Args:
        session: Open session from Database.session()
        event_id: Id of the event being booked
        email: Attendee email, trimmed and lowercased before storage

    Returns:
        The persisted Booking

    Raises:
        ValidationError: If the email or event id is malformed
        ReferentialError: If the event does not exist
    """
    prepared = prepare_booking(BookingFields(event_id=event_id, email=email))
    await ensure_event_exists(session, prepared.event_id)

    booking = Booking(event_id=prepared.event_id, email=prepared.email)
    session.add(booking)
    await session.flush()

    logger.info(f"Created booking {booking.id} for event {booking.event_id}")
    return booking

async def update_booking(session: AsyncSession, booking_id: int, changes: Mapping[str, Any]) -> Booking:
    """
    Apply changed fields to an existing booking.

    The referential check only runs when event_id is among the changes.

    Raises:
        RecordNotFoundError: If the booking does not exist
        ValidationError: If a field is unknown or invalid
        ReferentialError: If the new event id does not exist
    """
    for name in changes:
        if name not in BOOKING_FIELDS:
            raise ValidationError(f'Unknown booking field "{name}".', field=name)

    booking = await get_booking(session, booking_id)
    proposed = BookingFields(
        event_id=changes.get('event_id', booking.event_id),
        email=changes.get('email', booking.email),
    )
    prepared = prepare_booking(proposed)

    if 'event_id' in changes:
        await ensure_event_exists(session, prepared.event_id)

    booking.event_id = prepared.event_id
    booking.email = prepared.email
    booking.updated_at = utcnow()
    await session.flush()

    logger.info(f"Updated booking {booking.id}: {sorted(changes)}")
    return booking

async def get_booking(session: AsyncSession, booking_id: int) -> Booking:
    booking = await session.get(Booking, booking_id)
    if booking is None:
        raise RecordNotFoundError('Booking', booking_id)
    return booking

async def list_bookings_for_event(session: AsyncSession, event_id: int) -> List[Booking]:
    """Bookings for one event, oldest first."""
    result = await session.execute(
        select(Booking).where(Booking.event_id == event_id).order_by(Booking.created_at, Booking.id)
    )
    return list(result.scalars().all())

async def delete_booking(session: AsyncSession, booking_id: int) -> None:
    booking = await get_booking(session, booking_id)
    await session.delete(booking)
    await session.flush()
    logger.info(f"Deleted booking {booking_id}")
