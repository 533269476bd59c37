"""Practice session workflow: create -> answer -> complete -> review.

A session is in progress while `completed_at` is null and becomes completed
exactly once. Every operation is scoped to the owning user; a session owned
by someone else is reported as not found.
"""
from datetime import datetime, timezone

from loguru import logger
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from cars_practice.core.errors import (
    InvalidChoice,
    QuestionNotInSession,
    SessionAlreadyCompleted,
    SessionNotCompleted,
    SessionNotFound,
)
from cars_practice.models.passage import AnswerChoice
from cars_practice.models.practice_session import PracticeSession, SessionAnswer
from cars_practice.schemas.passage import ChoiceSchema, QuestionSchema
from cars_practice.schemas.session import (
    AnsweredQuestionResult,
    SessionAnswerSchema,
    SessionCompleteOutSchema,
    SessionDetailOutSchema,
    SessionResultsOutSchema,
    SessionSchema,
    SessionStartOutSchema,
    UnansweredQuestionResult,
)
from cars_practice.services.passages import get_passage_with_questions
from cars_practice.services.progress import recompute_progress


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


async def _get_owned_session(db: AsyncSession, session_id: int, user_id: int) -> PracticeSession:
    result = await db.execute(
        select(PracticeSession).where(
            PracticeSession.id == session_id,
            PracticeSession.user_id == user_id,
        )
    )
    session = result.scalar_one_or_none()
    if session is None:
        raise SessionNotFound()
    return session


async def _get_open_session(db: AsyncSession, session_id: int, user_id: int) -> PracticeSession:
    session = await _get_owned_session(db, session_id, user_id)
    if session.is_completed:
        raise SessionAlreadyCompleted()
    return session


async def _get_answers(db: AsyncSession, session_id: int) -> list[SessionAnswer]:
    result = await db.execute(
        select(SessionAnswer).where(SessionAnswer.session_id == session_id).order_by(SessionAnswer.id.asc())
    )
    return list(result.scalars().all())


async def create_session(db: AsyncSession, user_id: int, passage_id: int, timed: bool) -> SessionStartOutSchema:
    """Start a session with one unanswered, unflagged answer slot per question."""
    passage = await get_passage_with_questions(db, passage_id)
    question_ids = [q.id for q in passage.questions]

    session = PracticeSession(
        user_id=user_id,
        passage_id=passage_id,
        timed_session=timed,
        total_questions=len(question_ids),
    )
    db.add(session)
    await db.flush()

    db.add_all(
        [SessionAnswer(session_id=session.id, question_id=qid, is_flagged=False) for qid in question_ids]
    )
    await db.commit()
    await db.refresh(session)

    logger.info(
        "User {} started session {} on passage {} ({} questions, timed={})",
        user_id,
        session.id,
        passage_id,
        session.total_questions,
        timed,
    )
    return SessionStartOutSchema(session=SessionSchema.model_validate(session), passage=passage)


async def get_session(db: AsyncSession, session_id: int, user_id: int) -> SessionDetailOutSchema:
    session = await _get_owned_session(db, session_id, user_id)
    passage = await get_passage_with_questions(db, session.passage_id)
    answers = await _get_answers(db, session_id)
    return SessionDetailOutSchema(
        session=SessionSchema.model_validate(session),
        passage=passage,
        answers=[SessionAnswerSchema.model_validate(a) for a in answers],
    )


async def submit_answer(
    db: AsyncSession,
    session_id: int,
    user_id: int,
    question_id: int,
    selected_choice_id: int | None = None,
    is_flagged: bool | None = None,
) -> SessionAnswerSchema:
    """Partial update of one answer slot.

    Choice selection and flagging are independent; an omitted field keeps its
    stored value.
    """
    await _get_open_session(db, session_id, user_id)

    result = await db.execute(
        select(SessionAnswer).where(
            SessionAnswer.session_id == session_id,
            SessionAnswer.question_id == question_id,
        )
    )
    answer = result.scalar_one_or_none()
    if answer is None:
        raise QuestionNotInSession()

    if selected_choice_id is not None:
        choice_result = await db.execute(
            select(AnswerChoice).where(
                AnswerChoice.id == selected_choice_id,
                AnswerChoice.question_id == question_id,
            )
        )
        choice = choice_result.scalar_one_or_none()
        if choice is None:
            raise InvalidChoice()
        answer.selected_choice_id = choice.id
        answer.is_correct = choice.is_correct
        answer.answered_at = _utcnow()

    if is_flagged is not None:
        answer.is_flagged = is_flagged

    await db.commit()
    await db.refresh(answer)
    return SessionAnswerSchema.model_validate(answer)


async def complete_session(
    db: AsyncSession,
    session_id: int,
    user_id: int,
    time_spent: int | None = None,
) -> SessionCompleteOutSchema:
    """Score the session, close it and rebuild the user's progress."""
    session = await _get_open_session(db, session_id, user_id)

    result = await db.execute(
        select(func.count(SessionAnswer.id)).where(
            SessionAnswer.session_id == session_id,
            SessionAnswer.is_correct.is_(True),
        )
    )
    score = result.scalar_one()

    session.completed_at = _utcnow()
    session.score = score
    session.time_spent = time_spent
    await db.flush()

    await recompute_progress(db, user_id)
    await db.commit()
    await db.refresh(session)

    logger.info(
        "User {} completed session {}: {}/{}",
        user_id,
        session_id,
        score,
        session.total_questions,
    )
    return SessionCompleteOutSchema(
        session=SessionSchema.model_validate(session),
        score=score,
        total_questions=session.total_questions,
    )


async def get_session_results(db: AsyncSession, session_id: int, user_id: int) -> SessionResultsOutSchema:
    """Per-question review of a completed session.

    Walks the passage's questions rather than the answer rows, so every
    question is reported even without a matching answer.
    """
    session = await _get_owned_session(db, session_id, user_id)
    if not session.is_completed:
        raise SessionNotCompleted()

    passage = await get_passage_with_questions(db, session.passage_id)
    answers_by_question = {a.question_id: a for a in await _get_answers(db, session_id)}

    results = []
    for question in passage.questions:
        answer = answers_by_question.get(question.id)
        choices = question.choices
        question_row = QuestionSchema(**question.model_dump(exclude={"choices"}))
        correct_choice = next((c for c in choices if c.is_correct), None)
        is_flagged = bool(answer.is_flagged) if answer else False
        user_choice = _find_choice(choices, answer.selected_choice_id) if answer else None

        if user_choice is None:
            results.append(
                UnansweredQuestionResult(
                    question=question_row,
                    correct_answer=correct_choice,
                    is_flagged=is_flagged,
                    all_choices=choices,
                )
            )
            continue

        is_correct = bool(answer.is_correct)
        results.append(
            AnsweredQuestionResult(
                status="correct" if is_correct else "incorrect",
                question=question_row,
                user_answer=user_choice,
                correct_answer=correct_choice,
                is_correct=is_correct,
                is_flagged=is_flagged,
                all_choices=choices,
            )
        )

    return SessionResultsOutSchema(
        session=SessionSchema.model_validate(session),
        score=session.score or 0,
        total_questions=session.total_questions,
        time_spent=session.time_spent,
        questions=results,
    )


def _find_choice(choices: list[ChoiceSchema], choice_id: int | None) -> ChoiceSchema | None:
    if choice_id is None:
        return None
    return next((c for c in choices if c.id == choice_id), None)
