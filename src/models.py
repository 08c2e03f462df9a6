from enum import Enum
from sqlalchemy import Column, Integer, BigInteger, String, Boolean, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from src.database import Base

# SQLite only autoincrements INTEGER primary keys
PrimaryKey = BigInteger().with_variant(Integer(), "sqlite")

class TicketStatus(str, Enum):
    """Ticket payment status"""
    RESERVED = "RESERVED"
    PAID = "PAID"

# ================================
# Users & Sessions
# ================================
class User(Base):
    __tablename__ = "users"

    id = Column(PrimaryKey, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    sessions = relationship("UserSession", back_populates="user")
    enrollment = relationship("Enrollment", back_populates="user", uselist=False)
    bookings = relationship("Booking", back_populates="user")

class UserSession(Base):
    __tablename__ = "sessions"

    id = Column(PrimaryKey, primary_key=True, index=True)
    user_id = Column(BigInteger, ForeignKey("users.id"), nullable=False, index=True)
    token = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    user = relationship("User", back_populates="sessions")

# ================================
# Enrollments
# ================================
class Enrollment(Base):
    __tablename__ = "enrollments"

    id = Column(PrimaryKey, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    cpf = Column(String(11), nullable=False)
    birthday = Column(DateTime(timezone=True), nullable=False)
    phone = Column(String(20), nullable=False)
    user_id = Column(BigInteger, ForeignKey("users.id"), unique=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    user = relationship("User", back_populates="enrollment")
    address = relationship("Address", back_populates="enrollment", uselist=False)
    tickets = relationship("Ticket", back_populates="enrollment")

class Address(Base):
    __tablename__ = "addresses"

    id = Column(PrimaryKey, primary_key=True, index=True)
    cep = Column(String(9), nullable=False)
    street = Column(String(255), nullable=False)
    city = Column(String(255), nullable=False)
    state = Column(String(2), nullable=False)
    number = Column(String(20), nullable=False)
    neighborhood = Column(String(255), nullable=False)
    address_detail = Column(String(255))
    enrollment_id = Column(BigInteger, ForeignKey("enrollments.id"), unique=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    enrollment = relationship("Enrollment", back_populates="address")

# ================================
# Tickets
# ================================
class TicketType(Base):
    __tablename__ = "ticket_types"

    id = Column(PrimaryKey, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    price = Column(Integer, nullable=False)
    is_remote = Column(Boolean, nullable=False, default=False)
    includes_hotel = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    tickets = relationship("Ticket", back_populates="ticket_type")

class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(PrimaryKey, primary_key=True, index=True)
    ticket_type_id = Column(BigInteger, ForeignKey("ticket_types.id"), nullable=False)
    enrollment_id = Column(BigInteger, ForeignKey("enrollments.id"), nullable=False, index=True)
    status = Column(String(50), nullable=False, default=TicketStatus.RESERVED.value, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    ticket_type = relationship("TicketType", back_populates="tickets")
    enrollment = relationship("Enrollment", back_populates="tickets")

# ================================
# Hotels, Rooms & Bookings
# ================================
class Hotel(Base):
    __tablename__ = "hotels"

    id = Column(PrimaryKey, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    image = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    rooms = relationship("Room", back_populates="hotel")

class Room(Base):
    __tablename__ = "rooms"

    id = Column(PrimaryKey, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    capacity = Column(Integer, nullable=False)
    hotel_id = Column(BigInteger, ForeignKey("hotels.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    hotel = relationship("Hotel", back_populates="rooms")
    bookings = relationship("Booking", back_populates="room")

class Booking(Base):
    __tablename__ = "bookings"

    id = Column(PrimaryKey, primary_key=True, index=True)
    user_id = Column(BigInteger, ForeignKey("users.id"), nullable=False, index=True)
    room_id = Column(BigInteger, ForeignKey("rooms.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    user = relationship("User", back_populates="bookings")
    room = relationship("Room", back_populates="bookings")
