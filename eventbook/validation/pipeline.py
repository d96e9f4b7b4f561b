"""Pre-commit pipelines for event and booking writes.

The write path hands an immutable input struct to a pipeline and gets back
either a normalized struct ready to persist or a ValidationError. The input
is never mutated, so a rejected save leaves the caller free to fix and retry.
"""

from dataclasses import dataclass, fields, replace, asdict
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from ..errors import ValidationError
from .normalizers import (
    slugify_title,
    normalize_date,
    normalize_time,
    normalize_email,
)

REQUIRED_STRING_FIELDS = (
    'title',
    'description',
    'overview',
    'image',
    'venue',
    'location',
    'date',
    'time',
    'mode',
    'audience',
    'organizer',
)

LIST_FIELDS = ('agenda', 'tags')


@dataclass(frozen=True)
class EventFields:
    """User-editable event fields, as submitted."""

    title: str
    description: str
    overview: str
    image: str
    venue: str
    location: str
    date: str
    time: str
    mode: str
    audience: str
    agenda: Tuple[str, ...]
    organizer: str
    tags: Tuple[str, ...]

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'EventFields':
        """Build from a plain mapping; missing fields become None and fail validation."""
        check_known_fields(data)
        values = {name: data.get(name) for name in cls.field_names()}
        for name in LIST_FIELDS:
            values[name] = _as_tuple(values[name])
        return cls(**values)

    def with_changes(self, changes: Mapping[str, Any]) -> 'EventFields':
        """Return a copy with only the given fields replaced."""
        check_known_fields(changes)
        updates = dict(changes)
        for name in LIST_FIELDS:
            if name in updates:
                updates[name] = _as_tuple(updates[name])
        return replace(self, **updates)


@dataclass(frozen=True)
class PreparedEvent(EventFields):
    """Normalized event fields plus the derived slug."""

    slug: str = ''

    def to_record_values(self) -> Dict[str, Any]:
        values = asdict(self)
        for name in LIST_FIELDS:
            values[name] = list(values[name])
        return values


def _as_tuple(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return value


def check_known_fields(data: Mapping[str, Any]) -> None:
    known = set(EventFields.field_names())
    for name in data:
        if name not in known:
            raise ValidationError(f'Unknown event field "{name}".', field=name)


def _trim_text(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ValidationError(f'Field "{name}" is required.', field=name)
    return value.strip()


def _trim_items(name: str, items: Any) -> Tuple[str, ...]:
    if not isinstance(items, tuple):
        raise ValidationError(f'Field "{name}" must be a list of strings.', field=name)
    return tuple(_trim_text(name, item) for item in items)


def _require_items(name: str, label: str, items: Iterable[str]) -> None:
    items = tuple(items)
    if not items:
        raise ValidationError(f'{label} must have at least one item.', field=name)
    for item in items:
        if not item:
            raise ValidationError(f'{label} items cannot be empty.', field=name)


def prepare_event(event: EventFields, *, current_slug: Optional[str] = None) -> PreparedEvent:
    """
    Run the event pre-commit pipeline.

    Steps, in order:
        1. trim every string and list item
        2. derive the slug from the title (skipped when current_slug is given)
        3. normalize the date to ISO-8601
        4. normalize the time to HH:mm or HH:mm-HH:mm
        5. reject empty required fields, agenda items and tags

    Args:
        event: Submitted fields; not modified
        current_slug: Stored slug to keep. Pass None when the title changed
                      or the event is new.

    Raises:
        ValidationError: On the first failing step
    """
    values: Dict[str, Any] = {}
    for name in REQUIRED_STRING_FIELDS:
        values[name] = _trim_text(name, getattr(event, name))
    for name in LIST_FIELDS:
        values[name] = _trim_items(name, getattr(event, name))

    slug = slugify_title(values['title']) if current_slug is None else current_slug

    values['date'] = normalize_date(values['date'])
    values['time'] = normalize_time(values['time'])

    for name in REQUIRED_STRING_FIELDS:
        if not values[name]:
            raise ValidationError(f'Field "{name}" cannot be empty.', field=name)

    _require_items('agenda', 'Agenda', values['agenda'])
    _require_items('tags', 'Tags', values['tags'])

    return PreparedEvent(slug=slug, **values)


@dataclass(frozen=True)
class BookingFields:
    """Submitted booking fields."""

    event_id: Any
    email: str


def prepare_booking(booking: BookingFields) -> BookingFields:
    """
    Validate a booking before the referential check.

    Returns a copy with the event id coerced to int and the email trimmed
    and lowercased. Existence of the event is checked against storage by
    the booking service, not here.
    """
    return replace(
        booking,
        event_id=normalize_event_id(booking.event_id),
        email=normalize_email(booking.email),
    )


def normalize_event_id(value: Any) -> int:
    """Coerce an event reference to an integer primary key."""
    if value is None:
        raise ValidationError('Field "eventId" is required.', field='eventId')
    if isinstance(value, bool):
        raise ValidationError(f'Invalid event id: "{value}".', field='eventId', value=value)
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f'Invalid event id: "{value}".', field='eventId', value=value) from e
