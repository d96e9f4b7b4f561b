"""Event record operations.

Every write goes through prepare_event before it reaches the session, so a
rejected save never leaves a partial row behind.
"""

import logging
from typing import Any, List, Mapping

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import ConstraintError, RecordNotFoundError
from ..models.base import utcnow
from ..models.event import Event
from ..validation import EventFields, prepare_event

logger = logging.getLogger(__name__)

async def _flush_event(session: AsyncSession, slug: str) -> None:
    """Flush pending changes, translating a slug collision into ConstraintError."""
    try:
        await session.flush()
    except IntegrityError as e:
        logger.warning(f"Rejected event write: slug '{slug}' already exists")
        raise ConstraintError(f'An event with slug "{slug}" already exists.', field='slug') from e

def _current_fields(event: Event) -> EventFields:
    return EventFields.from_mapping(
        {name: getattr(event, name) for name in EventFields.field_names()}
    )

async def create_event(session: AsyncSession, fields: EventFields) -> Event:
    """
    Validate, normalize and insert a new event.

    Args:
        session: Open session from Database.session()
        fields: Submitted event fields

    Returns:
        The persisted Event with id and slug assigned

    Raises:
        ValidationError: If any field fails normalization or is empty
        ConstraintError: If another event already has the derived slug
    """
    prepared = prepare_event(fields)

    event = Event(**prepared.to_record_values())
    session.add(event)
    await _flush_event(session, prepared.slug)

    logger.info(f"Created event '{event.slug}' (id={event.id})")
    return event

async def update_event(session: AsyncSession, event_id: int, changes: Mapping[str, Any]) -> Event:
    """
    Apply changed fields to an existing event.

    Only the fields present in changes are replaced. The slug is re-derived
    only when the title is among them; date and time are renormalized on
    every update.

    Raises:
        RecordNotFoundError: If the event does not exist
        ValidationError: If a field is unknown or fails validation
        ConstraintError: If the new title collides with another event's slug
    """
    event = await get_event(session, event_id)

    proposed = _current_fields(event).with_changes(changes)
    current_slug = None if 'title' in changes else event.slug
    prepared = prepare_event(proposed, current_slug=current_slug)

    for name, value in prepared.to_record_values().items():
        setattr(event, name, value)
    event.updated_at = utcnow()
    await _flush_event(session, prepared.slug)

    logger.info(f"Updated event '{event.slug}' (id={event.id}): {sorted(changes)}")
    return event

async def get_event(session: AsyncSession, event_id: int) -> Event:
    """Get a single event by id."""
    event = await session.get(Event, event_id)
    if event is None:
        raise RecordNotFoundError('Event', event_id)
    return event

async def get_event_by_slug(session: AsyncSession, slug: str) -> Event:
    """Get a single event by slug."""
    result = await session.execute(select(Event).where(Event.slug == slug))
    event = result.scalar_one_or_none()
    if event is None:
        raise RecordNotFoundError('Event', slug)
    return event

async def list_events(session: AsyncSession) -> List[Event]:
    """All events, soonest first. ISO-8601 UTC dates sort chronologically as strings."""
    result = await session.execute(select(Event).order_by(Event.date, Event.id))
    return list(result.scalars().all())

async def delete_event(session: AsyncSession, event_id: int) -> None:
    """Delete an event. Bookings that reference it are left untouched."""
    event = await get_event(session, event_id)
    await session.delete(event)
    await session.flush()
    logger.info(f"Deleted event '{event.slug}' (id={event_id})")
