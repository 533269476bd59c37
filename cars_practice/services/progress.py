"""Progress aggregation: rebuilt from all completed sessions on every completion."""
from decimal import ROUND_HALF_UP, Decimal

from loguru import logger
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from cars_practice.models.practice_session import PracticeSession
from cars_practice.models.progress import UserProgress
from cars_practice.schemas.progress import ProgressSchema

TWO_PLACES = Decimal("0.01")


def compute_average_score(total_correct: int, total_questions: int) -> Decimal:
    """Percentage correct rounded to 2 places; 0 when nothing was answered."""
    if total_questions <= 0:
        return Decimal("0.00")
    return (Decimal(100 * total_correct) / Decimal(total_questions)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


async def recompute_progress(db: AsyncSession, user_id: int) -> UserProgress:
    """Aggregate the user's completed sessions and upsert UserProgress.

    Pending session changes must be flushed before calling this. Does not commit.
    """
    result = await db.execute(
        select(
            func.count(PracticeSession.id),
            func.coalesce(func.sum(PracticeSession.total_questions), 0),
            func.coalesce(func.sum(PracticeSession.score), 0),
            func.coalesce(func.sum(func.coalesce(PracticeSession.time_spent, 0)), 0),
            func.max(PracticeSession.completed_at),
        ).where(
            PracticeSession.user_id == user_id,
            PracticeSession.completed_at.is_not(None),
        )
    )
    total_sessions, total_questions, total_correct, total_time, last_practice_at = result.one()

    existing = await db.execute(select(UserProgress).where(UserProgress.user_id == user_id))
    progress = existing.scalar_one_or_none()
    if progress is None:
        progress = UserProgress(user_id=user_id)
        db.add(progress)

    progress.total_sessions = total_sessions
    progress.total_questions_answered = total_questions
    progress.total_correct = total_correct
    progress.average_score = compute_average_score(total_correct, total_questions)
    progress.total_time_spent = total_time
    # true maximum, independent of row order
    progress.last_practice_at = last_practice_at

    logger.info(
        "Progress for user {}: {} sessions, {}/{} correct",
        user_id,
        total_sessions,
        total_correct,
        total_questions,
    )
    return progress


async def get_progress(db: AsyncSession, user_id: int) -> ProgressSchema:
    """Stored progress, or zeroed defaults for a user with no row yet."""
    result = await db.execute(select(UserProgress).where(UserProgress.user_id == user_id))
    progress = result.scalar_one_or_none()
    if progress is None:
        return ProgressSchema()
    return ProgressSchema.model_validate(progress)
