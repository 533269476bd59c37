"""Practice session routes: start, inspect, answer, complete, review."""
from fastapi import APIRouter, status

from cars_practice.routers.deps import CurrentUser, DbSession
from cars_practice.schemas.session import (
    AnswerOutSchema,
    AnswerSubmitSchema,
    SessionCompleteOutSchema,
    SessionCompleteSchema,
    SessionCreateSchema,
    SessionDetailOutSchema,
    SessionResultsOutSchema,
    SessionStartOutSchema,
)
from cars_practice.services import sessions as session_service

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.post("", response_model=SessionStartOutSchema, status_code=status.HTTP_201_CREATED)
async def create_session(body: SessionCreateSchema, current_user: CurrentUser, db: DbSession):
    return await session_service.create_session(db, current_user.user_id, body.passage_id, body.timed_session)


@router.get("/{session_id}", response_model=SessionDetailOutSchema)
async def get_session(session_id: int, current_user: CurrentUser, db: DbSession):
    return await session_service.get_session(db, session_id, current_user.user_id)


@router.patch("/{session_id}/answer", response_model=AnswerOutSchema)
async def submit_answer(session_id: int, body: AnswerSubmitSchema, current_user: CurrentUser, db: DbSession):
    """Select a choice and/or set the flag for one question."""
    answer = await session_service.submit_answer(
        db,
        session_id,
        current_user.user_id,
        body.question_id,
        selected_choice_id=body.selected_choice_id,
        is_flagged=body.is_flagged,
    )
    return AnswerOutSchema(answer=answer)


@router.post("/{session_id}/complete", response_model=SessionCompleteOutSchema)
async def complete_session(
    session_id: int,
    current_user: CurrentUser,
    db: DbSession,
    body: SessionCompleteSchema | None = None,
):
    """Score and close the session; body may be empty for untimed sessions."""
    time_spent = body.time_spent if body else None
    return await session_service.complete_session(db, session_id, current_user.user_id, time_spent)


@router.get("/{session_id}/results", response_model=SessionResultsOutSchema)
async def get_results(session_id: int, current_user: CurrentUser, db: DbSession):
    return await session_service.get_session_results(db, session_id, current_user.user_id)
