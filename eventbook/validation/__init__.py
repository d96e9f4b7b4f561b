"""Validation and normalization of event and booking input."""

from .normalizers import (
    slugify_title,
    normalize_date,
    normalize_single_time,
    normalize_time,
    normalize_email,
)
from .pipeline import (
    EventFields,
    PreparedEvent,
    BookingFields,
    prepare_event,
    prepare_booking,
)

__all__ = [
    'slugify_title',
    'normalize_date',
    'normalize_single_time',
    'normalize_time',
    'normalize_email',
    'EventFields',
    'PreparedEvent',
    'BookingFields',
    'prepare_event',
    'prepare_booking',
]
