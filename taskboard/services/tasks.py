"""Task queries and commands shared by the JSON API and the web pages.

Every operation works on the request's session and commits at most once.
The caller's identity is always passed in explicitly.
"""
import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Session, selectinload

from taskboard.config import settings
from taskboard.exceptions import BoardNotFoundException, NotTaskOwnerException, TaskNotFoundException
from taskboard.models import Board, Task, User
from taskboard.schemas import TaskResponse, UserSummary

logger = logging.getLogger(__name__)


def format_created_on(value: datetime) -> str:
    return value.strftime(settings.DATE_FORMAT)


def serialize_task(task: Task) -> TaskResponse:
    return TaskResponse(
        id=task.id,
        title=task.title,
        description=task.description,
        created_on=format_created_on(task.created_on),
        board=task.board.name,
        owner=UserSummary.model_validate(task.owner),
    )


def _contains(column, keyword: str, case_sensitive: bool):
    if case_sensitive:
        return column.contains(keyword, autoescape=True)
    return func.lower(column).contains(keyword.lower(), autoescape=True)


class TaskService:
    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(Task).options(
            selectinload(Task.board),
            selectinload(Task.owner),
        )

    # Queries

    def list_tasks(self) -> List[Task]:
        return self._query().order_by(Task.id).all()

    def get_task(self, task_id: int) -> Task:
        task = self._query().filter(Task.id == task_id).first()
        if task is None:
            raise TaskNotFoundException(task_id)
        return task

    def search_tasks(self, keyword: Optional[str], case_sensitive: bool = True) -> List[Task]:
        """Tasks whose title or description contains ``keyword`` as given.

        Only a missing or empty keyword applies no filter; whitespace is
        matched like any other character. Callers that want trimming trim.
        """
        query = self._query()
        if keyword:
            query = query.filter(
                or_(
                    _contains(Task.title, keyword, case_sensitive),
                    _contains(Task.description, keyword, case_sensitive),
                )
            )
        return query.order_by(Task.id).all()

    def list_by_board_name(self, board_name: str) -> List[Task]:
        return (
            self._query()
            .join(Task.board)
            .filter(Board.name == board_name)
            .order_by(Task.id)
            .all()
        )

    def resolve_board_by_name(self, board_name: str) -> Board:
        board = self.db.query(Board).filter(Board.name == board_name).first()
        if board is None:
            raise BoardNotFoundException(board_name)
        return board

    def resolve_board_by_id(self, board_id: Optional[int]) -> Board:
        board = None
        if board_id is not None:
            board = self.db.query(Board).filter(Board.id == board_id).first()
        if board is None:
            raise BoardNotFoundException()
        return board

    # Commands

    def create_task(self, title: str, description: str, board: Board, current_user: User) -> Task:
        task = Task(
            title=title,
            description=description,
            created_on=datetime.now(),
            board_id=board.id,
            owner_id=current_user.id,
        )
        self.db.add(task)
        self.db.commit()
        logger.info("Task #%s created on board %r by %s", task.id, board.name, current_user.username)
        return self.get_task(task.id)

    def update_task(
        self,
        task_id: int,
        title: str,
        description: str,
        board_name: str,
        current_user: User,
        require_owner: bool = False,
    ) -> Task:
        task = self.get_task(task_id)
        self._check_owner(task, current_user, require_owner)
        board = self.resolve_board_by_name(board_name)

        task.title = title
        task.description = description
        task.board_id = board.id
        self.db.commit()
        logger.info("Task #%s updated by %s", task_id, current_user.username)
        self.db.refresh(task)
        return task

    def delete_task(self, task_id: int, current_user: User, require_owner: bool = False) -> TaskResponse:
        """Remove the task and return its summary as it was before deletion."""
        task = self.get_task(task_id)
        self._check_owner(task, current_user, require_owner)

        snapshot = serialize_task(task)
        self.db.delete(task)
        self.db.commit()
        logger.info("Task #%s deleted by %s", task_id, current_user.username)
        return snapshot

    def _check_owner(self, task: Task, current_user: User, require_owner: bool) -> None:
        if not require_owner or task.owner_id == current_user.id:
            return
        logger.warning("User %s is not the owner of task #%s", current_user.username, task.id)
        raise NotTaskOwnerException(task.id)
