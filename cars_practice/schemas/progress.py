"""Pydantic schema for cumulative user progress."""
from datetime import datetime

from cars_practice.schemas.base import CamelSchema


class ProgressSchema(CamelSchema):
    total_sessions: int = 0
    total_questions_answered: int = 0
    total_correct: int = 0
    average_score: float = 0.0  # percentage, 2 decimals
    total_time_spent: int = 0  # seconds
    last_practice_at: datetime | None = None


class ProgressOutSchema(CamelSchema):
    progress: ProgressSchema
