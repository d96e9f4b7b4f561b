"""Events router module."""

from fastapi import APIRouter, Depends, Response
from typing import List, Dict

from ...db import Database
from ...services import events as event_service
from ...services.bookings import list_bookings_for_event
from ...validation import EventFields
from ..dependencies import get_database
from ..schemas import EventCreate, EventUpdate

router = APIRouter(tags=["events"])

@router.get("/events", response_model=List[Dict])
async def get_events(database: Database = Depends(get_database)):
    """Get all events, soonest first."""
    async with database.session() as session:
        events = await event_service.list_events(session)
        return [event.to_dict() for event in events]

@router.get("/events/{slug}", response_model=Dict)
async def get_event(slug: str, database: Database = Depends(get_database)):
    """Get a single event by slug."""
    async with database.session() as session:
        event = await event_service.get_event_by_slug(session, slug)
        return event.to_dict()

@router.post("/events", response_model=Dict, status_code=201)
async def create_event(body: EventCreate, database: Database = Depends(get_database)):
    """Create an event. The slug is derived from the title."""
    fields = EventFields.from_mapping(body.model_dump())
    async with database.session() as session:
        event = await event_service.create_event(session, fields)
        return event.to_dict()

@router.patch("/events/{event_id}", response_model=Dict)
async def update_event(event_id: int, body: EventUpdate, database: Database = Depends(get_database)):
    """Update only the fields present in the request body."""
    changes = body.model_dump(exclude_unset=True)
    async with database.session() as session:
        event = await event_service.update_event(session, event_id, changes)
        return event.to_dict()

@router.delete("/events/{event_id}", status_code=204)
async def delete_event(event_id: int, database: Database = Depends(get_database)):
    """Delete an event. Its bookings are kept."""
    async with database.session() as session:
        await event_service.delete_event(session, event_id)
    return Response(status_code=204)

@router.get("/events/{event_id}/bookings", response_model=List[Dict])
async def get_event_bookings(event_id: int, database: Database = Depends(get_database)):
    """List bookings for an event."""
    async with database.session() as session:
        await event_service.get_event(session, event_id)
        bookings = await list_bookings_for_event(session, event_id)
        return [booking.to_dict() for booking in bookings]
