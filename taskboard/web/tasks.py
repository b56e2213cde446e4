"""Task pages: details, create, delete and search."""
from typing import List, Optional

from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.orm import Session

from taskboard.config import settings
from taskboard.database import get_db
from taskboard.dependencies import get_current_web_user
from taskboard.exceptions import BoardNotFoundException
from taskboard.models import User
from taskboard.services import TaskService
from taskboard.services.boards import list_boards
from taskboard.web.pages import render_search, render_task_details, render_task_form

router = APIRouter(prefix="/tasks")


def _parse_board_id(raw: str) -> Optional[int]:
    raw = (raw or "").strip()
    return int(raw) if raw.isdigit() else None


@router.get("/details/{task_id}", response_class=HTMLResponse)
def details(
    task_id: int,
    current_user: User = Depends(get_current_web_user),
    db: Session = Depends(get_db),
):
    task = TaskService(db).get_task(task_id)
    return HTMLResponse(render_task_details(task, current_user))


@router.get("/create", response_class=HTMLResponse)
def create_form(
    current_user: User = Depends(get_current_web_user),
    db: Session = Depends(get_db),
):
    return HTMLResponse(render_task_form(list_boards(db, with_tasks=False), current_user))


@router.post("/create")
def create_submit(
    title: str = Form(""),
    description: str = Form(""),
    board_id: str = Form(""),
    current_user: User = Depends(get_current_web_user),
    db: Session = Depends(get_db),
):
    service = TaskService(db)
    parsed_board_id = _parse_board_id(board_id)
    errors: List[str] = []
    if not title.strip():
        errors.append("Title is required.")
    if not description.strip():
        errors.append("Description is required.")

    board = None
    try:
        board = service.resolve_board_by_id(parsed_board_id)
    except BoardNotFoundException as exc:
        errors.append(exc.detail)

    if errors:
        page = render_task_form(
            list_boards(db, with_tasks=False),
            current_user,
            title=title,
            description=description,
            board_id=parsed_board_id,
            errors=errors,
        )
        return HTMLResponse(page, status_code=status.HTTP_400_BAD_REQUEST)

    service.create_task(title, description, board, current_user)
    return RedirectResponse("/boards", status_code=status.HTTP_303_SEE_OTHER)


@router.post("/delete")
def delete(
    id: int = Form(...),
    current_user: User = Depends(get_current_web_user),
    db: Session = Depends(get_db),
):
    TaskService(db).delete_task(id, current_user, require_owner=settings.WEB_REQUIRE_OWNER_FOR_DELETE)
    return RedirectResponse("/boards", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/search", response_class=HTMLResponse)
def search_page(
    current_user: User = Depends(get_current_web_user),
    db: Session = Depends(get_db),
):
    tasks = TaskService(db).search_tasks(None, case_sensitive=settings.WEB_SEARCH_CASE_SENSITIVE)
    return HTMLResponse(render_search("", tasks, current_user))


@router.post("/search", response_class=HTMLResponse)
def search_submit(
    keyword: str = Form(""),
    current_user: User = Depends(get_current_web_user),
    db: Session = Depends(get_db),
):
    keyword = keyword.strip()
    tasks = TaskService(db).search_tasks(keyword, case_sensitive=settings.WEB_SEARCH_CASE_SENSITIVE)
    return HTMLResponse(render_search(keyword, tasks, current_user))
