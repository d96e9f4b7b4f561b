"""Shared fixtures for the eventbook test suite."""

import pytest
import pytest_asyncio

from eventbook.db import Database, DatabaseConfig

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def database():
    """A fresh in-memory database, disposed after the test."""
    db = Database(DatabaseConfig(TEST_DATABASE_URL))
    yield db
    await db.dispose()


@pytest.fixture
def event_data() -> dict:
    """Raw event fields as a client would submit them."""
    return {
        "title": "My Big Event!!",
        "description": "  A full day of talks and workshops.  ",
        "overview": "Talks and workshops",
        "image": "/images/big-event.png",
        "venue": "Main Hall",
        "location": "Oslo, Norway",
        "date": "November 7, 2025",
        "time": "10:00 AM - 12:30 PM",
        "mode": "offline",
        "audience": "Developers",
        "agenda": ["Opening keynote", " Workshops "],
        "organizer": "Eventbook Team",
        "tags": ["python", "web"],
    }
