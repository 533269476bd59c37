"""Auth routes: signup, login, current user."""
from fastapi import APIRouter, status

from cars_practice.routers.deps import CurrentUser, DbSession
from cars_practice.schemas.auth import AuthOutSchema, LoginSchema, MeOutSchema, SignupSchema
from cars_practice.services import auth as auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=AuthOutSchema, status_code=status.HTTP_201_CREATED)
async def signup(body: SignupSchema, db: DbSession):
    """Create an account and return it with a token."""
    return await auth_service.register(db, body.email, body.password, body.name)


@router.post("/login", response_model=AuthOutSchema)
async def login(body: LoginSchema, db: DbSession):
    return await auth_service.login(db, body.email, body.password)


@router.get("/me", response_model=MeOutSchema)
async def me(current_user: CurrentUser, db: DbSession):
    user = await auth_service.get_user_by_id(db, current_user.user_id)
    return MeOutSchema(user=user)
