from sqlalchemy.orm import Session
from src.models import User, UserSession
from typing import Optional

class UserService:
    @staticmethod
    def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
        """Get user by ID"""
        return db.query(User).filter(User.id == user_id).first()

    @staticmethod
    def get_session_by_token(db: Session, token: str) -> Optional[UserSession]:
        """Get the session that issued a token"""
        return db.query(UserSession).filter(UserSession.token == token).first()

    @staticmethod
    def create_session(db: Session, user_id: int, token: str) -> UserSession:
        """Persist a session for a freshly issued token"""
        session = UserSession(user_id=user_id, token=token)
        db.add(session)
        db.commit()
        db.refresh(session)
        return session
