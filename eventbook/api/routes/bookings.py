"""Bookings router module."""

from fastapi import APIRouter, Depends, Response
from typing import Dict

from ...db import Database
from ...services import bookings as booking_service
from ..dependencies import get_database
from ..schemas import BookingCreate

router = APIRouter(tags=["bookings"])

@router.post("/bookings", response_model=Dict, status_code=201)
async def create_booking(body: BookingCreate, database: Database = Depends(get_database)):
    """Book an email address onto an existing event."""
    async with database.session() as session:
        booking = await booking_service.create_booking(session, body.event_id, body.email)
        return booking.to_dict()

@router.delete("/bookings/{booking_id}", status_code=204)
async def delete_booking(booking_id: int, database: Database = Depends(get_database)):
    async with database.session() as session:
        await booking_service.delete_booking(session, booking_id)
    return Response(status_code=204)
