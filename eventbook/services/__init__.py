"""Record services: the validated write path for events and bookings."""

from .events import (
    create_event,
    update_event,
    get_event,
    get_event_by_slug,
    list_events,
    delete_event,
)
from .bookings import (
    create_booking,
    update_booking,
    get_booking,
    list_bookings_for_event,
    delete_booking,
)

__all__ = [
    'create_event',
    'update_event',
    'get_event',
    'get_event_by_slug',
    'list_events',
    'delete_event',
    'create_booking',
    'update_booking',
    'get_booking',
    'list_bookings_for_event',
    'delete_booking',
]
