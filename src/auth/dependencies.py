from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from typing import Optional
from src.database import get_db
from src.auth.utils import verify_token
from src.auth.service import UserService

bearer_scheme = HTTPBearer(auto_error=False)

def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db)
) -> int:
    """Resolve the bearer token to the authenticated user id"""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        raise credentials_exception

    token = credentials.credentials
    token_data = verify_token(token, credentials_exception)

    # A signed token is only valid while its session exists
    session = UserService.get_session_by_token(db, token)
    if session is None or session.user_id != token_data["user_id"]:
        raise credentials_exception

    user = UserService.get_user_by_id(db, user_id=session.user_id)
    if user is None:
        raise credentials_exception

    return user.id
