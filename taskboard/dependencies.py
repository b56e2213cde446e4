"""Request-scoped dependencies: the database session and the caller's identity."""
from typing import Optional

from fastapi import Cookie, Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from taskboard import auth
from taskboard.database import get_db
from taskboard.exceptions import NotAuthenticatedException
from taskboard.models import User

ACCESS_TOKEN_COOKIE = "access_token"

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/users/login", auto_error=False)


def _user_from_token(token: Optional[str], db: Session) -> User:
    if not token:
        raise NotAuthenticatedException()
    username = auth.decode_access_token(token)
    if username is None:
        raise NotAuthenticatedException("Invalid or expired access token")
    user = db.query(User).filter(User.username == username).first()
    if user is None:
        raise NotAuthenticatedException("Unknown user")
    return user


def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the caller of a JSON API request from its bearer token."""
    return _user_from_token(token, db)


def get_current_web_user(
    access_token: Optional[str] = Cookie(default=None),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the caller of a page request from the access token cookie."""
    return _user_from_token(access_token, db)
