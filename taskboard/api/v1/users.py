"""User endpoints"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from taskboard.database import get_db
from taskboard.dependencies import get_current_user
from taskboard.models import User
from taskboard.schemas import Token, UserCreate, UserLogin, UserSummary
from taskboard.services import users as user_service

router = APIRouter()


@router.post("/register", response_model=UserSummary, status_code=status.HTTP_201_CREATED)
def register(user_in: UserCreate, db: Session = Depends(get_db)):
    user = user_service.register_user(db, user_in)
    return UserSummary.model_validate(user)


@router.post("/login", response_model=Token)
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    return user_service.authenticate(db, credentials)


@router.get("/me", response_model=UserSummary)
def read_current_user(current_user: User = Depends(get_current_user)):
    return UserSummary.model_validate(current_user)
