from fastapi import Depends
from sqlalchemy.orm import Session
from src.config import Settings, get_settings
from src.database import get_db
from src.bookings.booking_service import BookingService
from src.bookings.repository import BookingRepository
from src.enrollments.repository import EnrollmentRepository
from src.tickets.repository import TicketRepository

def get_booking_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
) -> BookingService:
    """Build a booking service bound to the request's session"""
    return BookingService(
        booking_repository=BookingRepository(db),
        enrollment_repository=EnrollmentRepository(db),
        ticket_repository=TicketRepository(db),
        change_room_in_place=settings.BOOKING_CHANGE_ROOM_IN_PLACE
    )
