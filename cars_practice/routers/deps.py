"""Shared route dependencies: DB session and the bearer-token user."""
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from cars_practice.core.errors import InvalidOrExpiredToken, Unauthorized
from cars_practice.core.security import TokenPayload
from cars_practice.db.session import get_db
from cars_practice.services import auth as auth_service

bearer_scheme = HTTPBearer(auto_error=False)

DbSession = Annotated[AsyncSession, Depends(get_db)]


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> TokenPayload:
    """Decode `Authorization: Bearer <token>`; 401 when missing or invalid."""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise Unauthorized()
    try:
        return auth_service.verify_token(credentials.credentials)
    except InvalidOrExpiredToken:
        logger.warning("Rejected bearer token")
        raise


CurrentUser = Annotated[TokenPayload, Depends(get_current_user)]
