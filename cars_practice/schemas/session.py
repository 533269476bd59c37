"""Pydantic schemas for practice sessions, answers and results."""
from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import Field

from cars_practice.schemas.base import CamelSchema
from cars_practice.schemas.passage import ChoiceSchema, PassageDetailSchema, QuestionSchema


# ---------- requests ----------

class SessionCreateSchema(CamelSchema):
    passage_id: int
    timed_session: bool


class AnswerSubmitSchema(CamelSchema):
    question_id: int
    selected_choice_id: int | None = None
    is_flagged: bool | None = None


class SessionCompleteSchema(CamelSchema):
    time_spent: int | None = Field(default=None, ge=0)  # seconds; absent for untimed sessions


# ---------- rows ----------

class SessionSchema(CamelSchema):
    id: int
    user_id: int
    passage_id: int
    started_at: datetime
    completed_at: datetime | None
    timed_session: bool
    time_spent: int | None
    score: int | None
    total_questions: int


class SessionAnswerSchema(CamelSchema):
    id: int
    session_id: int
    question_id: int
    selected_choice_id: int | None
    is_flagged: bool
    is_correct: bool | None
    answered_at: datetime | None


# ---------- responses ----------

class SessionStartOutSchema(CamelSchema):
    session: SessionSchema
    passage: PassageDetailSchema


class SessionDetailOutSchema(CamelSchema):
    session: SessionSchema
    passage: PassageDetailSchema
    answers: list[SessionAnswerSchema]


class AnswerOutSchema(CamelSchema):
    answer: SessionAnswerSchema


class SessionCompleteOutSchema(CamelSchema):
    session: SessionSchema
    score: int
    total_questions: int


class AnsweredQuestionResult(CamelSchema):
    """A question the user picked a choice for."""

    status: Literal["correct", "incorrect"]
    question: QuestionSchema
    user_answer: ChoiceSchema
    correct_answer: ChoiceSchema | None
    is_correct: bool
    is_flagged: bool
    all_choices: list[ChoiceSchema]


class UnansweredQuestionResult(CamelSchema):
    """A question left without a choice; never counts as correct."""

    status: Literal["unanswered"] = "unanswered"
    question: QuestionSchema
    user_answer: None = None
    correct_answer: ChoiceSchema | None
    is_correct: Literal[False] = False
    is_flagged: bool
    all_choices: list[ChoiceSchema]


QuestionResult = Annotated[
    Union[AnsweredQuestionResult, UnansweredQuestionResult],
    Field(discriminator="status"),
]


class SessionResultsOutSchema(CamelSchema):
    session: SessionSchema
    score: int
    total_questions: int
    time_spent: int | None
    questions: list[QuestionResult]
