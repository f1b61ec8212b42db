"""SQLAlchemy ORM models for HIIT."""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class Exercise(Base):
    """One entry of the exercise list shown in the sidebar."""

    __tablename__ = "exercises"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(60), nullable=False)
    exercise_seconds = Column(Integer, nullable=False)
    rest_seconds = Column(Integer, nullable=False, default=0)
    sets = Column(Integer, nullable=False, default=1)
    position = Column(Integer, nullable=False, default=0)  # sidebar order
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    def __repr__(self) -> str:
        return (
            f"<Exercise id={self.id} name={self.name!r} "
            f"{self.sets}x{self.exercise_seconds}s/{self.rest_seconds}s>"
        )
