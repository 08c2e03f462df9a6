from sqlalchemy.orm import Session, joinedload
from typing import Optional
from src.models import Enrollment

class EnrollmentRepository:
    """Read access to user enrollments"""

    def __init__(self, db: Session):
        self.db = db

    def find_with_address_by_user_id(self, user_id: int) -> Optional[Enrollment]:
        """Get a user's enrollment together with its address"""
        return self.db.query(Enrollment).options(
            joinedload(Enrollment.address)
        ).filter(Enrollment.user_id == user_id).first()
