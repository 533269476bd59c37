"""Pydantic schemas for passages, questions and answer choices."""
from datetime import datetime

from cars_practice.models.passage import Difficulty
from cars_practice.schemas.base import CamelSchema


class ChoiceSchema(CamelSchema):
    id: int
    question_id: int
    choice_letter: str
    choice_text: str
    is_correct: bool
    explanation: str


class QuestionSchema(CamelSchema):
    id: int
    passage_id: int
    question_number: int
    question_text: str
    created_at: datetime | None = None


class QuestionWithChoicesSchema(QuestionSchema):
    choices: list[ChoiceSchema]


class PassageSummarySchema(CamelSchema):
    id: int
    title: str
    content: str
    category: str
    difficulty: Difficulty
    estimated_time: int  # seconds
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PassageDetailSchema(PassageSummarySchema):
    questions: list[QuestionWithChoicesSchema]


class PassageListOutSchema(CamelSchema):
    passages: list[PassageSummarySchema]


class PassageOutSchema(CamelSchema):
    passage: PassageDetailSchema
