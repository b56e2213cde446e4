"""
Task Model
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from taskboard.database import Base


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    # Stamped once by the service at creation
    created_on = Column(DateTime, nullable=False)
    board_id = Column(Integer, ForeignKey("boards.id"), nullable=False)
    owner_id = Column(String(36), ForeignKey("users.id"), nullable=False)

    # Relationships
    board = relationship("Board", back_populates="tasks")
    owner = relationship("User", back_populates="tasks")
