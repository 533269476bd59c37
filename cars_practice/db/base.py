"""SQLAlchemy declarative base and model imports for Alembic."""
from cars_practice.db.session import Base

# Import all models so Alembic can see them
from cars_practice.models.passage import AnswerChoice, Passage, Question  # noqa: F401
from cars_practice.models.practice_session import PracticeSession, SessionAnswer  # noqa: F401
from cars_practice.models.progress import UserProgress  # noqa: F401
from cars_practice.models.user import User  # noqa: F401

__all__ = [
    "Base",
    "User",
    "Passage",
    "Question",
    "AnswerChoice",
    "PracticeSession",
    "SessionAnswer",
    "UserProgress",
]
