"""UserProgress model: one row per user, rebuilt from completed sessions."""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from cars_practice.db.session import Base


class UserProgress(Base):
    __tablename__ = "user_progress"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False, index=True)

    total_sessions = Column(Integer, nullable=False, default=0)
    total_questions_answered = Column(Integer, nullable=False, default=0)
    total_correct = Column(Integer, nullable=False, default=0)
    average_score = Column(Numeric(5, 2), nullable=False, default=0)  # percentage
    total_time_spent = Column(Integer, nullable=False, default=0)  # seconds
    last_practice_at = Column(DateTime(timezone=True), nullable=True)
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    user = relationship("User", back_populates="progress")
