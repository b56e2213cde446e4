"""TaskBoard Database Models"""
from taskboard.models.user import User
from taskboard.models.board import Board
from taskboard.models.task import Task

__all__ = [
    "User",
    "Board",
    "Task",
]
