"""Schemas for boards"""
from typing import List

from pydantic import BaseModel, Field

from taskboard.schemas.task import TaskDetails


class BoardListing(BaseModel):
    id: int
    name: str
    tasks: List[TaskDetails] = Field(default_factory=list)

    class Config:
        from_attributes = True
