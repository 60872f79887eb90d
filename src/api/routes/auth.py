"""Authentication routes (register, login, me)."""

import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_token_service, get_user_repo
from api.models import ErrorResponse, LoginRequest, RegisterRequest, TokenResponse, UserResponse
from api.security import get_current_user
from domain.model.user import User
from port.user_repository import UserRepository
from services import auth_service
from services.token_service import TokenService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


# Plain ``def`` handlers: FastAPI runs them on its thread pool, so Argon2
# hashing and blocking storage drivers don't stall the event loop.
@router.post(
    "/register",
    response_model=TokenResponse,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def register(
    request: RegisterRequest,
    repo: UserRepository = Depends(get_user_repo),
    tokens: TokenService = Depends(get_token_service),
):
    """Register a new user and return a bearer token.

    Raises:
        400 if email, username or password fails validation
        409 if the username or email is already taken
    """
    result = auth_service.register(
        repo,
        tokens,
        username=request.username,
        email=request.email,
        password=request.password,
    )
    return TokenResponse(token=result.token)


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={401: {"model": ErrorResponse}},
)
def login(
    request: LoginRequest,
    repo: UserRepository = Depends(get_user_repo),
    tokens: TokenService = Depends(get_token_service),
):
    """Login with username and password and return a bearer token.

    Raises:
        401 if credentials are invalid
    """
    result = auth_service.login(repo, tokens, username=request.username, password=request.password)
    return TokenResponse(token=result.token)


@router.get("/me", response_model=UserResponse, responses={401: {"model": ErrorResponse}})
def get_me(current_user: User = Depends(get_current_user)):
    """Get current authenticated user info."""
    return UserResponse(**current_user.to_public())
