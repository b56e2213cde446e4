"""Account registration and login."""
import logging
from datetime import timedelta

from sqlalchemy.orm import Session

from taskboard import auth
from taskboard.exceptions import EmailTakenException, InvalidCredentialsException, UsernameTakenException
from taskboard.models import User
from taskboard.schemas import Token, UserCreate, UserLogin

logger = logging.getLogger(__name__)


def register_user(db: Session, user_in: UserCreate) -> User:
    if db.query(User).filter(User.username == user_in.username).first():
        raise UsernameTakenException()
    if db.query(User).filter(User.email == user_in.email).first():
        raise EmailTakenException()
    user = User(
        username=user_in.username,
        email=user_in.email,
        first_name=user_in.first_name,
        last_name=user_in.last_name,
        hashed_password=auth.get_password_hash(user_in.password),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered user %s", user.username)
    return user


def authenticate(db: Session, credentials: UserLogin) -> Token:
    user = db.query(User).filter(User.username == credentials.username).first()
    if not user or not auth.verify_password(credentials.password, user.hashed_password):
        raise InvalidCredentialsException()
    access_token = auth.create_access_token(
        data={"sub": user.username},
        expires_delta=timedelta(minutes=auth.ACCESS_TOKEN_EXPIRE_MINUTES),
    )
    return Token(access_token=access_token, username=user.username)
