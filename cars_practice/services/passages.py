"""Passage reader: passage -> questions by number -> choices by letter."""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cars_practice.core.errors import PassageNotFound
from cars_practice.models.passage import AnswerChoice, Passage, Question
from cars_practice.schemas.passage import (
    ChoiceSchema,
    PassageDetailSchema,
    PassageSummarySchema,
    QuestionSchema,
    QuestionWithChoicesSchema,
)


async def list_passages(db: AsyncSession) -> list[PassageSummarySchema]:
    result = await db.execute(select(Passage).order_by(Passage.id.asc()))
    return [PassageSummarySchema.model_validate(p) for p in result.scalars().all()]


async def get_passage_questions(db: AsyncSession, passage_id: int) -> list[Question]:
    result = await db.execute(
        select(Question)
        .where(Question.passage_id == passage_id)
        .order_by(Question.question_number.asc())
    )
    return list(result.scalars().all())


async def get_passage_with_questions(db: AsyncSession, passage_id: int) -> PassageDetailSchema:
    """Assemble the full passage; one choices query per question."""
    result = await db.execute(select(Passage).where(Passage.id == passage_id))
    passage = result.scalar_one_or_none()
    if passage is None:
        raise PassageNotFound()

    questions = []
    for question in await get_passage_questions(db, passage_id):
        choices_result = await db.execute(
            select(AnswerChoice)
            .where(AnswerChoice.question_id == question.id)
            .order_by(AnswerChoice.choice_letter.asc())
        )
        questions.append(
            QuestionWithChoicesSchema(
                **QuestionSchema.model_validate(question).model_dump(),
                choices=[ChoiceSchema.model_validate(c) for c in choices_result.scalars().all()],
            )
        )

    return PassageDetailSchema(
        **PassageSummarySchema.model_validate(passage).model_dump(),
        questions=questions,
    )
