from typing import Optional

from src.bookings.repository import BookingRepository
from src.bookings.schemas import BookingCreated, BookingRoom, BookingWithRoom
from src.enrollments.repository import EnrollmentRepository
from src.errors import BusinessRuleError, NotFoundError
from src.models import TicketStatus
from src.tickets.repository import TicketRepository
from src.utils.logger import get_logger

logger = get_logger(__name__)

class BookingService:
    """Hotel room bookings for ticket holders.

    Creating or changing a booking runs the same eligibility pipeline, in
    this order:

    1. the room id is a positive integer
    2. the user has an enrollment
    3. the enrollment holds a paid, in-person ticket that includes hotel
    4. nobody has booked the room yet
    5. the room exists

    A failed check raises ``BusinessRuleError`` (1, 3, 4) or
    ``NotFoundError`` (2, 5). Checks 4 and 5 are not atomic with the insert
    that follows them.
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        enrollment_repository: EnrollmentRepository,
        ticket_repository: TicketRepository,
        change_room_in_place: bool = False
    ):
        self.booking_repository = booking_repository
        self.enrollment_repository = enrollment_repository
        self.ticket_repository = ticket_repository
        self.change_room_in_place = change_room_in_place

    def get_booking(self, user_id: int) -> BookingWithRoom:
        """Get the user's booking and the room it holds"""

        booking = self.booking_repository.find_booking_by_user_id(user_id)
        if not booking:
            raise NotFoundError(user_id=user_id)

        return BookingWithRoom(
            id=booking.id,
            room=BookingRoom(
                id=booking.room_id,
                name=booking.room.name,
                capacity=booking.room.capacity,
                hotel_id=booking.room.hotel_id,
                created_at=booking.room.created_at,
                updated_at=booking.room.updated_at
            )
        )

    def post_booking(self, user_id: int, room_id: Optional[int]) -> BookingCreated:
        """Book a room for the user"""

        self._check_eligibility(user_id, room_id)

        booking = self.booking_repository.create_booking(user_id, room_id)
        if not booking:
            raise NotFoundError(user_id=user_id, room_id=room_id)

        logger.info("Booking %s created for user %s in room %s", booking.id, user_id, room_id)
        return BookingCreated(booking_id=booking.id)

    def put_booking(self, user_id: int, room_id: Optional[int], booking_id: int) -> BookingCreated:
        """Move the user into another room.

        By default this inserts a new booking row and leaves the one named by
        ``booking_id`` untouched. With ``change_room_in_place`` the named
        booking is updated instead and must belong to the user.
        """

        self._check_room(room_id)
        self._check_eligibility(user_id, room_id)

        if self.change_room_in_place:
            booking = self.booking_repository.update_booking_room(booking_id, user_id, room_id)
            if not booking:
                raise NotFoundError(booking_id=booking_id, user_id=user_id)
        else:
            booking = self.booking_repository.create_booking(user_id, room_id)

        logger.info("Booking %s for user %s now holds room %s", booking.id, user_id, room_id)
        return BookingCreated(booking_id=booking.id)

    def _check_room(self, room_id: Optional[int]) -> None:
        """Room id is valid and the room exists, regardless of occupancy"""

        self._check_room_id(room_id)

        room = self.booking_repository.find_room_by_id(room_id)
        if not room:
            raise NotFoundError(room_id=room_id)

    def _check_eligibility(self, user_id: int, room_id: Optional[int]) -> None:
        self._check_room_id(room_id)

        enrollment = self.enrollment_repository.find_with_address_by_user_id(user_id)
        if not enrollment:
            raise NotFoundError(user_id=user_id)

        ticket = self.ticket_repository.find_ticket_by_enrollment_id(enrollment.id)
        if (
            not ticket
            or ticket.status == TicketStatus.RESERVED.value
            or ticket.ticket_type.is_remote
            or not ticket.ticket_type.includes_hotel
        ):
            logger.info("User %s holds no ticket eligible for hotel booking", user_id)
            raise BusinessRuleError(rule="ticket_not_eligible", user_id=user_id)

        if self.booking_repository.find_booking_by_room_id(room_id):
            logger.info("Room %s is already booked, rejecting user %s", room_id, user_id)
            raise BusinessRuleError(rule="room_occupied", room_id=room_id)

        room = self.booking_repository.find_room_by_id(room_id)
        if not room:
            raise NotFoundError(room_id=room_id)

    def _check_room_id(self, room_id: Optional[int]) -> None:
        if room_id is None or room_id < 1:
            raise BusinessRuleError(rule="invalid_room_id", room_id=room_id)
