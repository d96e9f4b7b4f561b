"""Event model definition."""

from typing import Dict, Any
from sqlalchemy import Column, Integer, String, Text, DateTime, JSON

from .base import Base, utcnow

def _isoformat(value):
    return value.isoformat() if value is not None else None

class Event(Base):
    """
    A schedulable public event.

    Rows are only written through eventbook.services.events, which runs the
    normalization pipeline first, so stored values are always canonical.

    Fields:
        id: Unique identifier (auto-generated)
        title: Event title
        slug: URL-safe identifier derived from the title (unique)
        description: Long description
        overview: Short summary
        image: Image reference (URL or path)
        venue: Venue name
        location: City or address
        date: ISO-8601 UTC string, e.g. '2025-11-07T00:00:00.000Z'
        time: 'HH:mm' or 'HH:mm-HH:mm', 24-hour
        mode: e.g. 'online', 'offline', 'hybrid'
        audience: Intended audience
        agenda: Ordered list of agenda items (at least one)
        organizer: Organizer name
        tags: List of tags (at least one)
        created_at: When the row was inserted
        updated_at: When the row was last written
    """
    __tablename__ = 'events'

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=False)
    slug = Column(String, nullable=False, unique=True, index=True)
    description = Column(Text, nullable=False)
    overview = Column(Text, nullable=False)
    image = Column(String, nullable=False)
    venue = Column(String, nullable=False)
    location = Column(String, nullable=False)
    date = Column(String, nullable=False)
    time = Column(String, nullable=False)
    mode = Column(String, nullable=False)
    audience = Column(String, nullable=False)
    agenda = Column(JSON, nullable=False)
    organizer = Column(String, nullable=False)
    tags = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the public JSON shape."""
        return {
            'id': self.id,
            'title': self.title,
            'slug': self.slug,
            'description': self.description,
            'overview': self.overview,
            'image': self.image,
            'venue': self.venue,
            'location': self.location,
            'date': self.date,
            'time': self.time,
            'mode': self.mode,
            'audience': self.audience,
            'agenda': list(self.agenda or []),
            'organizer': self.organizer,
            'tags': list(self.tags or []),
            'createdAt': _isoformat(self.created_at),
            'updatedAt': _isoformat(self.updated_at),
        }

    def __str__(self) -> str:
        """String representation."""
        return f"Event(id={self.id}, slug={self.slug}, date={self.date}, time={self.time})"
