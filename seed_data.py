#!/usr/bin/env python3

from sqlalchemy.orm import sessionmaker
from src.database import Base, engine
from src.models import TicketType, Hotel, Room, Booking, Ticket
from src.utils.logger import get_logger

logger = get_logger("seed_data")

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

HOTELS = [
    {
        "name": "Driven Resort",
        "image": "https://images.example.com/hotels/driven-resort.jpg",
        "rooms": [("101", 1), ("102", 2), ("103", 3), ("201", 2), ("202", 3)],
    },
    {
        "name": "Driven Palace",
        "image": "https://images.example.com/hotels/driven-palace.jpg",
        "rooms": [("1A", 1), ("1B", 2), ("2A", 2), ("2B", 3)],
    },
    {
        "name": "Driven World",
        "image": "https://images.example.com/hotels/driven-world.jpg",
        "rooms": [("Suite 1", 3), ("Suite 2", 3), ("Single", 1)],
    },
]

def create_seed_data():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()

    try:
        logger.info("Creating seed data for the event hotel booking system")

        # Clear existing data (in reverse dependency order)
        logger.info("Clearing existing data")
        db.query(Booking).delete()
        db.query(Ticket).delete()
        db.query(Room).delete()
        db.query(Hotel).delete()
        db.query(TicketType).delete()

        # 1. Create Ticket Types
        logger.info("Creating ticket types")
        ticket_types = [
            TicketType(name="Online", price=100, is_remote=True, includes_hotel=False),
            TicketType(name="In person", price=250, is_remote=False, includes_hotel=False),
            TicketType(name="In person + Hotel", price=600, is_remote=False, includes_hotel=True),
        ]
        db.add_all(ticket_types)
        db.flush()

        # 2. Create Hotels and Rooms
        logger.info("Creating hotels and rooms")
        room_count = 0
        for hotel_data in HOTELS:
            hotel = Hotel(name=hotel_data["name"], image=hotel_data["image"])
            db.add(hotel)
            db.flush()

            for room_name, capacity in hotel_data["rooms"]:
                db.add(Room(name=room_name, capacity=capacity, hotel_id=hotel.id))
                room_count += 1

        db.commit()
        logger.info(
            "Seed data created: %d ticket types, %d hotels, %d rooms",
            len(ticket_types), len(HOTELS), room_count
        )

    except Exception:
        logger.exception("Error creating seed data")
        db.rollback()
        raise
    finally:
        db.close()

if __name__ == "__main__":
    create_seed_data()
