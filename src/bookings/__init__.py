"""
Hotel Booking Module

Lets an enrolled user holding a paid, in-person ticket with hotel
accommodation reserve a room, view the reservation and move to another room.

Key Components:
- repository.py: Booking and room lookups and inserts
- booking_service.py: Eligibility checks and response shaping
- dependencies.py: Per-request service construction
- router.py: FastAPI endpoints under /booking
- schemas.py: Pydantic models for booking payloads
"""

from .router import router
from .booking_service import BookingService
from .repository import BookingRepository
from .schemas import BookingRequest, BookingRoom, BookingWithRoom, BookingCreated

__all__ = [
    "router",
    "BookingService",
    "BookingRepository",
    "BookingRequest",
    "BookingRoom",
    "BookingWithRoom",
    "BookingCreated"
]
