from sqlalchemy.orm import Session, joinedload
from typing import Optional
from src.models import Booking, Room

class BookingRepository:
    """Data access for bookings and the rooms they reference"""

    def __init__(self, db: Session):
        self.db = db

    def find_booking_by_user_id(self, user_id: int) -> Optional[Booking]:
        """Get a user's booking with its room"""
        return self.db.query(Booking).options(
            joinedload(Booking.room)
        ).filter(Booking.user_id == user_id).first()

    def find_booking_by_room_id(self, room_id: int) -> Optional[Booking]:
        """Get the booking holding a room, if any"""
        return self.db.query(Booking).options(
            joinedload(Booking.room)
        ).filter(Booking.room_id == room_id).first()

    def find_room_by_id(self, room_id: int) -> Optional[Room]:
        return self.db.query(Room).filter(Room.id == room_id).first()

    def create_booking(self, user_id: int, room_id: int) -> Booking:
        booking = Booking(user_id=user_id, room_id=room_id)
        self.db.add(booking)
        self.db.commit()
        self.db.refresh(booking)
        return booking

    def update_booking_room(self, booking_id: int, user_id: int, room_id: int) -> Optional[Booking]:
        """Move a user's booking to another room"""
        booking = self.db.query(Booking).filter(
            Booking.id == booking_id,
            Booking.user_id == user_id
        ).first()
        if not booking:
            return None

        booking.room_id = room_id
        self.db.commit()
        self.db.refresh(booking)
        return booking
