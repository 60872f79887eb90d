"""Bearer token extraction for protected routes."""

import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from api.dependencies import get_token_service, get_user_repo
from domain.model.errors import InvalidTokenError
from domain.model.user import User
from port.user_repository import UserRepository
from services.token_service import TokenService

logger = logging.getLogger(__name__)

# auto_error=False: a missing header or a non-Bearer scheme yields None
security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    tokens: TokenService = Depends(get_token_service),
) -> str:
    """Authenticated user id from ``Authorization: Bearer <token>``. Raises 401 otherwise."""
    if not credentials:
        raise _unauthorized("Missing token")

    try:
        claims = tokens.verify(credentials.credentials)
    except InvalidTokenError as e:
        raise _unauthorized(e.message)

    return claims.sub


def get_current_user(
    user_id: str = Depends(get_current_user_id),
    repo: UserRepository = Depends(get_user_repo),
) -> User:
    """Authenticated user record. Raises 401 if the token's user no longer exists."""
    user = repo.find_by_id(user_id)
    if user is None:
        logger.debug("Token subject has no user", extra={"userId": user_id})
        raise _unauthorized("User not found")
    return user
