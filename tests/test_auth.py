import logging
from datetime import timedelta

import jwt

from src.auth.service import UserService
from src.auth.utils import create_access_token
from src.config import Settings, settings
from src.main import create_app
from src.models import User
from src.utils.logger import get_logger
from tests.factories import auth_header, create_user, generate_valid_token


def test_responds_401_when_session_user_was_deleted(client, db):
    user = create_user(db)
    token = generate_valid_token(db, user)
    db.query(User).filter(User.id == user.id).delete()
    db.commit()

    response = client.get("/booking", headers=auth_header(token))

    assert response.status_code == 401


def test_expiring_token_carries_exp_and_is_accepted(client, db):
    user = create_user(db)
    token = create_access_token(user.id, expires_delta=timedelta(minutes=30))
    UserService.create_session(db, user.id, token)

    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    response = client.get("/booking", headers=auth_header(token))

    assert payload["userId"] == user.id
    assert "exp" in payload
    assert response.status_code == 404


def test_expired_token_is_rejected(client, db):
    user = create_user(db)
    token = create_access_token(user.id, expires_delta=timedelta(minutes=-5))
    UserService.create_session(db, user.id, token)

    response = client.get("/booking", headers=auth_header(token))

    assert response.status_code == 401


def test_app_debug_follows_settings():
    assert create_app(Settings(DEBUG=False)).debug is False
    assert create_app(Settings(DEBUG=True)).debug is True


def test_get_logger_returns_named_logger():
    logger = get_logger("src.bookings")

    assert isinstance(logger, logging.Logger)
    assert logger.name == "src.bookings"
