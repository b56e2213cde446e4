"""
Board Model
"""
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from taskboard.database import Base


class Board(Base):
    __tablename__ = "boards"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(100), unique=True, nullable=False)

    # Relationships
    tasks = relationship("Task", back_populates="board", order_by="Task.id")
