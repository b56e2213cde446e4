"""Board listings."""
from typing import List

from sqlalchemy.orm import Session, selectinload

from taskboard.models import Board


def list_boards(db: Session, with_tasks: bool = True) -> List[Board]:
    query = db.query(Board)
    if with_tasks:
        query = query.options(selectinload(Board.tasks))
    return query.order_by(Board.id).all()
