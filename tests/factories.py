"""Row builders for tests; every helper commits and returns the refreshed row."""

import uuid
from datetime import datetime

from src.auth.service import UserService
from src.auth.utils import create_access_token
from src.models import (
    Address, Booking, Enrollment, Hotel, Room, Ticket, TicketStatus, TicketType, User
)


def _save(db, row):
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def create_user(db, email=None):
    return _save(db, User(
        email=email or f"{uuid.uuid4().hex}@example.com",
        password="hashed-password",
    ))


def generate_valid_token(db, user):
    token = create_access_token(user.id)
    UserService.create_session(db, user.id, token)
    return token


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}


def create_enrollment_with_address(db, user):
    enrollment = _save(db, Enrollment(
        name="Ada Lovelace",
        cpf="12345678909",
        birthday=datetime(1990, 12, 10),
        phone="(21) 98999-9999",
        user_id=user.id,
    ))
    _save(db, Address(
        cep="20000-000",
        street="Rua das Flores",
        city="Rio de Janeiro",
        state="RJ",
        number="42",
        neighborhood="Centro",
        address_detail="Apto 101",
        enrollment_id=enrollment.id,
    ))
    return enrollment


def create_ticket_type(db, is_remote=False, includes_hotel=False):
    return _save(db, TicketType(
        name=uuid.uuid4().hex[:12],
        price=250,
        is_remote=is_remote,
        includes_hotel=includes_hotel,
    ))


def create_ticket_type_remote(db):
    return create_ticket_type(db, is_remote=True, includes_hotel=False)


def create_ticket_type_with_hotel(db):
    return create_ticket_type(db, is_remote=False, includes_hotel=True)


def create_ticket(db, enrollment_id, ticket_type_id, status):
    return _save(db, Ticket(
        enrollment_id=enrollment_id,
        ticket_type_id=ticket_type_id,
        status=status.value,
    ))


def create_hotel(db):
    return _save(db, Hotel(
        name=f"Hotel {uuid.uuid4().hex[:6]}",
        image="https://images.example.com/hotel.jpg",
    ))


def create_room_with_hotel_id(db, hotel_id, capacity=3):
    return _save(db, Room(
        name=uuid.uuid4().hex[:4],
        capacity=capacity,
        hotel_id=hotel_id,
    ))


def create_booking(db, user_id, room_id):
    return _save(db, Booking(user_id=user_id, room_id=room_id))


def create_eligible_user(db):
    """A user with an enrollment and a paid in-person ticket that includes hotel"""
    user = create_user(db)
    enrollment = create_enrollment_with_address(db, user)
    ticket_type = create_ticket_type_with_hotel(db)
    create_ticket(db, enrollment.id, ticket_type.id, TicketStatus.PAID)
    return user
