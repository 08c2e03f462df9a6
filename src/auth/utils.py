from datetime import datetime, timedelta, timezone
from typing import Optional
import jwt
from fastapi import HTTPException
from src.config import settings

def create_access_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    """Sign a token carrying the user id"""
    payload = {"userId": user_id}
    if expires_delta:
        payload["exp"] = datetime.now(timezone.utc) + expires_delta
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def verify_token(token: str, credentials_exception: HTTPException) -> dict:
    """Decode a token or raise the supplied credentials exception"""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.PyJWTError:
        raise credentials_exception

    user_id = payload.get("userId")
    if not isinstance(user_id, int):
        raise credentials_exception

    return {"user_id": user_id}
