"""Booking model definition."""

from typing import Dict, Any
from sqlalchemy import Column, Integer, String, DateTime

from .base import Base, utcnow

class Booking(Base):
    """
    A reservation of one email address against one event.

    event_id is a non-owning reference to events.id. It carries no
    database-level constraint or cascade: existence is checked by the
    booking service when the reference is set, and deleting an event
    leaves its bookings in place.

    Fields:
        id: Unique identifier (auto-generated)
        event_id: Id of the booked event
        email: Trimmed, lowercased email address
        created_at: When the row was inserted
        updated_at: When the row was last written
    """
    __tablename__ = 'bookings'

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(Integer, nullable=False, index=True)
    email = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the public JSON shape."""
        return {
            'id': self.id,
            'eventId': self.event_id,
            'email': self.email,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
            'updatedAt': self.updated_at.isoformat() if self.updated_at else None,
        }

    def __str__(self) -> str:
        """String representation."""
        return f"Booking(id={self.id}, event_id={self.event_id}, email={self.email})"
