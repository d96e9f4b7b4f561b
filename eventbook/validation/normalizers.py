"""Field normalizers.

Each function takes a raw user-submitted value and returns its canonical
storage form, or raises ValidationError naming the rejected value.
"""

import re
from datetime import timezone

from dateutil import parser as date_parser

from ..errors import ValidationError

_NON_SLUG_CHARS = re.compile(r'[^a-z0-9]+')
_REPEATED_HYPHENS = re.compile(r'-{2,}')

# H:mm / HH:mm, 24-hour
_TIME_24H = re.compile(r'^([01]?[0-9]|2[0-3]):([0-5][0-9])$')
# h:mm AM/PM, 12-hour
_TIME_12H = re.compile(r'^(1[0-2]|0?[1-9]):([0-5][0-9])\s*([AaPp][Mm])$')

# Basic local@domain.tld shape, not full RFC 5322
EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')


def slugify_title(title: str) -> str:
    """
    Derive a URL-safe slug from an event title.

    'My Big Event!!' -> 'my-big-event'. Returns an empty string when the
    title has no ASCII letters or digits.
    """
    slug = _NON_SLUG_CHARS.sub('-', title.strip().lower())
    slug = slug.strip('-')
    return _REPEATED_HYPHENS.sub('-', slug)


def normalize_date(value: str) -> str:
    """
    Parse a free-form date and return it as an ISO-8601 UTC string.

    Naive values are taken to be UTC. The output has millisecond precision
    and a 'Z' suffix, e.g. '2025-11-07T00:00:00.000Z', and parses back to
    itself.
    """
    try:
        parsed = date_parser.parse(value.strip())
    except (ValueError, OverflowError, TypeError, AttributeError) as e:
        raise ValidationError(f'Invalid date: "{value}".', field='date', value=value) from e

    try:
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        parsed = parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError) as e:
        raise ValidationError(f'Invalid date: "{value}".', field='date', value=value) from e

    # Years below 1000 keep four digits
    return (
        f'{parsed.year:04d}-{parsed.month:02d}-{parsed.day:02d}'
        f'T{parsed.hour:02d}:{parsed.minute:02d}:{parsed.second:02d}'
        f'.{parsed.microsecond // 1000:03d}Z'
    )


def normalize_single_time(value: str) -> str:
    """Convert one time token ('2:30 PM', '9:05', '14:30') to zero-padded 'HH:mm'."""
    token = value.strip()

    match = _TIME_24H.match(token)
    if match:
        return f'{int(match.group(1)):02d}:{match.group(2)}'

    match = _TIME_12H.match(token)
    if match:
        hour12 = int(match.group(1))
        minute = match.group(2)
        meridiem = match.group(3).upper()

        if meridiem == 'AM':
            hour24 = 0 if hour12 == 12 else hour12
        else:
            hour24 = 12 if hour12 == 12 else hour12 + 12

        return f'{hour24:02d}:{minute}'

    raise ValidationError(
        f'Invalid time format: "{value}". Use HH:mm or h:mm AM/PM.',
        field='time',
        value=value,
    )


def normalize_time(value: str) -> str:
    """
    Normalize a single time or a 'start - end' range.

    '10:00 AM - 12:30 PM' -> '10:00-12:30'
    """
    parts = [part.strip() for part in value.split('-')]
    parts = [part for part in parts if part]

    if len(parts) == 1:
        return normalize_single_time(parts[0])
    if len(parts) == 2:
        return f'{normalize_single_time(parts[0])}-{normalize_single_time(parts[1])}'

    raise ValidationError(f'Invalid time range: "{value}".', field='time', value=value)


def normalize_email(value: str) -> str:
    """Trim and lowercase an email address, then check its basic shape."""
    if not isinstance(value, str):
        raise ValidationError('Invalid email address.', field='email', value=value)

    email = value.strip().lower()
    if not EMAIL_PATTERN.match(email):
        raise ValidationError('Invalid email address.', field='email', value=value)
    return email
