from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

class BookingRequest(BaseModel):
    """Body of booking creation and room change requests"""
    room_id: Optional[int] = Field(None, alias="roomId")

    class Config:
        populate_by_name = True

class BookingRoom(BaseModel):
    """Public room fields exposed with a booking"""
    id: int
    name: str
    capacity: int
    hotel_id: int = Field(alias="hotelId")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    class Config:
        populate_by_name = True
        from_attributes = True

class BookingWithRoom(BaseModel):
    """A user's current booking"""
    id: int
    room: BookingRoom = Field(alias="Room")

    class Config:
        populate_by_name = True

class BookingCreated(BaseModel):
    booking_id: int = Field(alias="bookingId")

    class Config:
        populate_by_name = True
