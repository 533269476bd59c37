"""Passage content: passage -> ordered questions -> lettered answer choices."""
import enum

from sqlalchemy import Boolean, Column, DateTime, Enum, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from cars_practice.db.session import Base


class Difficulty(str, enum.Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class Passage(Base):
    __tablename__ = "passages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(500), nullable=False)
    content = Column(Text, nullable=False)
    category = Column(String(100), nullable=False)  # Humanities | Social Sciences
    difficulty = Column(
        Enum(Difficulty, native_enum=False, length=50, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    estimated_time = Column(Integer, nullable=False)  # seconds
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    questions = relationship(
        "Question",
        back_populates="passage",
        order_by="Question.question_number",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class Question(Base):
    __tablename__ = "questions"
    __table_args__ = (UniqueConstraint("passage_id", "question_number", name="uq_questions_passage_number"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    passage_id = Column(Integer, ForeignKey("passages.id", ondelete="CASCADE"), nullable=False, index=True)
    question_number = Column(Integer, nullable=False)
    question_text = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    passage = relationship("Passage", back_populates="questions")
    choices = relationship(
        "AnswerChoice",
        back_populates="question",
        order_by="AnswerChoice.choice_letter",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class AnswerChoice(Base):
    __tablename__ = "answer_choices"

    id = Column(Integer, primary_key=True, autoincrement=True)
    question_id = Column(Integer, ForeignKey("questions.id", ondelete="CASCADE"), nullable=False, index=True)
    choice_letter = Column(String(1), nullable=False)  # A-D, not constrained
    choice_text = Column(Text, nullable=False)
    is_correct = Column(Boolean, nullable=False)
    explanation = Column(Text, nullable=False)

    question = relationship("Question", back_populates="choices")
