"""HTTP errors raised by services and dependencies."""
from typing import Dict, Optional

from fastapi import HTTPException


class BaseCustomHTTPException(HTTPException):
    def __init__(self, status_code: int, message: str, headers: Optional[Dict[str, str]] = None):
        super().__init__(status_code=status_code, detail=message, headers=headers)


# 400

class BoardNotFoundException(BaseCustomHTTPException):
    def __init__(self, board_name: Optional[str] = None):
        if board_name is None:
            super().__init__(400, "Board does not exist.")
        else:
            super().__init__(400, f"Board {board_name} does not exist.")


class UsernameTakenException(BaseCustomHTTPException):
    def __init__(self):
        super().__init__(400, "Username already registered")


class EmailTakenException(BaseCustomHTTPException):
    def __init__(self):
        super().__init__(400, "Email already registered")


# 401

class NotAuthenticatedException(BaseCustomHTTPException):
    def __init__(self, reason: str = "Not authenticated"):
        super().__init__(401, reason, headers={"WWW-Authenticate": "Bearer"})


class InvalidCredentialsException(BaseCustomHTTPException):
    def __init__(self):
        super().__init__(401, "Invalid username or password")


class NotTaskOwnerException(BaseCustomHTTPException):
    def __init__(self, task_id: int):
        super().__init__(401, f"You are not the owner of task #{task_id}.")


# 404

class TaskNotFoundException(BaseCustomHTTPException):
    def __init__(self, task_id: int):
        super().__init__(404, f"Task #{task_id} not found.")
