"""Routes package initialization."""

from . import (
    bookings,
    events,
    health
)

__all__ = [
    'bookings',
    'events',
    'health'
]
