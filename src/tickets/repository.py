from sqlalchemy.orm import Session, joinedload
from typing import Optional
from src.models import Ticket

class TicketRepository:
    """Read access to tickets and their types"""

    def __init__(self, db: Session):
        self.db = db

    def find_ticket_by_enrollment_id(self, enrollment_id: int) -> Optional[Ticket]:
        """Get the ticket held by an enrollment, with its ticket type"""
        return self.db.query(Ticket).options(
            joinedload(Ticket.ticket_type)
        ).filter(Ticket.enrollment_id == enrollment_id).first()
