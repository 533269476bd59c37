"""Passage routes: list and full passage with questions."""
from fastapi import APIRouter

from cars_practice.routers.deps import CurrentUser, DbSession
from cars_practice.schemas.passage import PassageListOutSchema, PassageOutSchema
from cars_practice.services import passages as passage_service

router = APIRouter(prefix="/passages", tags=["passages"])


@router.get("", response_model=PassageListOutSchema)
async def list_passages(current_user: CurrentUser, db: DbSession):
    return PassageListOutSchema(passages=await passage_service.list_passages(db))


@router.get("/{passage_id}", response_model=PassageOutSchema)
async def get_passage(passage_id: int, current_user: CurrentUser, db: DbSession):
    """Passage with questions (by number) and choices (by letter). Non-integer id -> 400."""
    passage = await passage_service.get_passage_with_questions(db, passage_id)
    return PassageOutSchema(passage=passage)
