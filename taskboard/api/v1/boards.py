"""Board endpoints"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from taskboard.database import get_db
from taskboard.dependencies import get_current_user
from taskboard.models import User
from taskboard.schemas import BoardListing
from taskboard.services.boards import list_boards as load_boards

router = APIRouter()


@router.get("", response_model=List[BoardListing])
def list_boards(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """List all boards together with their tasks."""
    return [BoardListing.model_validate(board) for board in load_boards(db)]
