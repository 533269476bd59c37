"""Progress route: cumulative stats for the current user."""
from fastapi import APIRouter

from cars_practice.routers.deps import CurrentUser, DbSession
from cars_practice.schemas.progress import ProgressOutSchema
from cars_practice.services.progress import get_progress as load_progress

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get("", response_model=ProgressOutSchema)
async def get_progress(current_user: CurrentUser, db: DbSession):
    """Zeroed defaults until the first session is completed."""
    return ProgressOutSchema(progress=await load_progress(db, current_user.user_id))
