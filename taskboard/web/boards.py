"""Boards page."""
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from taskboard.database import get_db
from taskboard.dependencies import get_current_web_user
from taskboard.models import User
from taskboard.services.boards import list_boards
from taskboard.web.pages import render_boards

router = APIRouter()


@router.get("/boards", response_class=HTMLResponse)
def all_boards(
    current_user: User = Depends(get_current_web_user),
    db: Session = Depends(get_db),
):
    return HTMLResponse(render_boards(list_boards(db), current_user))
