"""Task endpoints"""
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from taskboard.config import settings
from taskboard.database import get_db
from taskboard.dependencies import get_current_user
from taskboard.models import User
from taskboard.schemas import TaskBinding, TaskResponse
from taskboard.services import TaskService, serialize_task

router = APIRouter()


@router.get("", response_model=List[TaskResponse])
def list_tasks(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Return every task."""
    return [serialize_task(task) for task in TaskService(db).list_tasks()]


@router.get("/search/{keyword}", response_model=List[TaskResponse])
def search_tasks(
    keyword: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Return tasks whose title or description contains the keyword."""
    tasks = TaskService(db).search_tasks(keyword, case_sensitive=settings.API_SEARCH_CASE_SENSITIVE)
    return [serialize_task(task) for task in tasks]


@router.get("/board/{board_name}", response_model=List[TaskResponse])
def list_tasks_by_board(
    board_name: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Return the tasks of the board with exactly this name."""
    return [serialize_task(task) for task in TaskService(db).list_by_board_name(board_name)]


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(
    task_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return serialize_task(TaskService(db).get_task(task_id))


@router.post("/create", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    task_in: TaskBinding,
    response: Response,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Create a task owned by the caller on an existing board."""
    service = TaskService(db)
    board = service.resolve_board_by_name(task_in.board)
    task = service.create_task(task_in.title, task_in.description, board, current_user)
    response.headers["Location"] = f"/api/tasks/{task.id}"
    return serialize_task(task)


@router.put("/{task_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def update_task(
    task_id: int,
    task_in: TaskBinding,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Overwrite title, description and board of a task."""
    TaskService(db).update_task(
        task_id,
        task_in.title,
        task_in.description,
        task_in.board,
        current_user,
        require_owner=settings.API_REQUIRE_OWNER_FOR_UPDATE,
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{task_id}", response_model=TaskResponse)
def delete_task(
    task_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Delete a task and return it as it was."""
    return TaskService(db).delete_task(
        task_id,
        current_user,
        require_owner=settings.API_REQUIRE_OWNER_FOR_DELETE,
    )
