from fastapi import APIRouter, Body, Depends, HTTPException, status
from typing import Optional

from src.auth.dependencies import get_current_user_id
from src.bookings.booking_service import BookingService
from src.bookings.dependencies import get_booking_service
from src.bookings.schemas import BookingCreated, BookingRequest, BookingWithRoom
from src.errors import BusinessRuleError, NotFoundError
from src.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()

@router.get("", response_model=BookingWithRoom)
def get_booking(
    user_id: int = Depends(get_current_user_id),
    booking_service: BookingService = Depends(get_booking_service)
):
    """Get the current user's booking"""

    try:
        return booking_service.get_booking(user_id)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )

@router.post("", response_model=BookingCreated)
def post_booking(
    request: Optional[BookingRequest] = Body(None),
    user_id: int = Depends(get_current_user_id),
    booking_service: BookingService = Depends(get_booking_service)
):
    """Book a hotel room"""

    room_id = request.room_id if request else None

    try:
        return booking_service.post_booking(user_id, room_id)
    except BusinessRuleError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=e.message
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )

@router.put("/{booking_id}", response_model=BookingCreated)
def put_booking(
    booking_id: int,
    request: Optional[BookingRequest] = Body(None),
    user_id: int = Depends(get_current_user_id),
    booking_service: BookingService = Depends(get_booking_service)
):
    """Change the room of the current user's booking.

    Only rule violations are mapped here. NotFoundError is left to the
    generic server error handler.
    """

    room_id = request.room_id if request else None

    try:
        return booking_service.put_booking(user_id, room_id, booking_id)
    except BusinessRuleError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=e.message
        )
    except NotFoundError:
        logger.exception("Unmapped failure changing booking %s for user %s", booking_id, user_id)
        raise
