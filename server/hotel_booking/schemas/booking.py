"""Booking-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, Field, StrictInt
from pydantic.alias_generators import to_camel


class BookingRoomRequest(BaseModel):
    """Request body for creating a booking or moving it to another room."""

    room_id: StrictInt = Field(..., alias="roomId", ge=1, description="Room to book")

    model_config = {"populate_by_name": True}


class BookingIdResponse(BaseModel):
    """Response carrying the id of the created or changed booking."""

    booking_id: int = Field(..., alias="bookingId", description="Booking ID")

    model_config = {"populate_by_name": True}


class Room(BaseModel):
    """Room response schema."""

    id: int = Field(..., description="Room ID")
    name: str = Field(..., description="Room name")
    capacity: int = Field(..., ge=0, description="Number of bookings the room can hold")
    hotel_id: int = Field(..., description="Hotel the room belongs to")
    created_at: datetime = Field(..., description="Creation time (ISO 8601)")
    updated_at: datetime = Field(..., description="Last update time (ISO 8601)")

    model_config = {
        "from_attributes": True,
        "populate_by_name": True,
        "alias_generator": to_camel,
    }


class Booking(BaseModel):
    """Booking response schema, the room is exposed under ``Room``."""

    id: int = Field(..., description="Booking ID")
    room: Room = Field(..., alias="Room", description="Booked room")

    model_config = {"from_attributes": True, "populate_by_name": True}
