"""
Pydantic schemas for request/response validation
"""
from taskboard.schemas.user import UserCreate, UserLogin, UserSummary, Token
from taskboard.schemas.task import TaskBinding, TaskDetails, TaskResponse
from taskboard.schemas.board import BoardListing

__all__ = [
    "UserCreate",
    "UserLogin",
    "UserSummary",
    "Token",
    "TaskBinding",
    "TaskDetails",
    "TaskResponse",
    "BoardListing",
]
