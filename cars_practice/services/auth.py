"""Signup, login, token verification and user lookup."""
from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from cars_practice.core.errors import DuplicateEmail, InvalidCredentials, UserNotFound
from cars_practice.core.security import (
    TokenPayload,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from cars_practice.models.progress import UserProgress
from cars_practice.models.user import User
from cars_practice.schemas.auth import AuthOutSchema, UserOutSchema


def _auth_result(user: User) -> AuthOutSchema:
    return AuthOutSchema(
        user=UserOutSchema.model_validate(user),
        token=create_access_token(user.id, user.email),
    )


async def register(db: AsyncSession, email: str, password: str, name: str) -> AuthOutSchema:
    """Create the user with an empty progress row and return a fresh token."""
    result = await db.execute(select(User.id).where(User.email == email))
    if result.scalar_one_or_none() is not None:
        raise DuplicateEmail()

    user = User(email=email, password_hash=hash_password(password), name=name)
    db.add(user)
    try:
        await db.flush()
    except IntegrityError as exc:
        # lost a race with a concurrent signup for the same email
        await db.rollback()
        raise DuplicateEmail() from exc

    db.add(UserProgress(user_id=user.id))
    await db.commit()
    await db.refresh(user)

    logger.info("Registered user {}", user.id)
    return _auth_result(user)


async def login(db: AsyncSession, email: str, password: str) -> AuthOutSchema:
    """Same error for unknown email and wrong password."""
    result = await db.execute(select(User).where(User.email == email))
    user = result.scalar_one_or_none()
    if user is None or not verify_password(password, user.password_hash):
        logger.warning("Failed login attempt")
        raise InvalidCredentials()

    logger.info("User {} logged in", user.id)
    return _auth_result(user)


def verify_token(token: str) -> TokenPayload:
    return decode_access_token(token)


async def get_user_by_id(db: AsyncSession, user_id: int) -> UserOutSchema:
    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if user is None:
        raise UserNotFound()
    return UserOutSchema.model_validate(user)
