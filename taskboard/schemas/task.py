"""Schemas for tasks"""
from pydantic import BaseModel, Field, field_validator

from taskboard.schemas.user import UserSummary


class TaskBinding(BaseModel):
    """Body of the create and update requests; ``board`` is the board name."""

    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    board: str = Field(..., min_length=1)

    @field_validator("title", "description", "board")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class TaskDetails(BaseModel):
    id: int
    title: str
    description: str

    class Config:
        from_attributes = True


class TaskResponse(TaskDetails):
    created_on: str = Field(..., alias="createdOn")
    board: str
    owner: UserSummary

    class Config:
        populate_by_name = True
