"""Practice session: one user's attempt at one passage, plus one answer slot per question."""
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from cars_practice.db.session import Base


class PracticeSession(Base):
    __tablename__ = "practice_sessions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    passage_id = Column(Integer, ForeignKey("passages.id"), nullable=False, index=True)
    started_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    completed_at = Column(DateTime(timezone=True), nullable=True)  # null while in progress
    timed_session = Column(Boolean, nullable=False)
    time_spent = Column(Integer, nullable=True)  # seconds
    score = Column(Integer, nullable=True)  # count of correct answers
    total_questions = Column(Integer, nullable=False)  # frozen at creation

    user = relationship("User", back_populates="sessions")
    answers = relationship(
        "SessionAnswer",
        back_populates="session",
        order_by="SessionAnswer.id",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def is_completed(self) -> bool:
        return self.completed_at is not None


class SessionAnswer(Base):
    __tablename__ = "session_answers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    session_id = Column(
        Integer, ForeignKey("practice_sessions.id", ondelete="CASCADE"), nullable=False, index=True
    )
    question_id = Column(Integer, ForeignKey("questions.id"), nullable=False, index=True)
    selected_choice_id = Column(Integer, ForeignKey("answer_choices.id"), nullable=True)  # null = unanswered
    is_flagged = Column(Boolean, nullable=False, default=False)
    is_correct = Column(Boolean, nullable=True)
    answered_at = Column(DateTime(timezone=True), nullable=True)

    session = relationship("PracticeSession", back_populates="answers")
