"""Auth service: registration and login business logic.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import logging
from dataclasses import dataclass

from domain.model.errors import DuplicateError, InvalidCredentialsError
from domain.model.user import NewUser, User
from domain.validation import validate_email, validate_password, validate_username
from port.user_repository import UserRepository
from services.password_service import hash_password, verify_password
from services.token_service import TokenService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthResult:
    token: str
    user: User


def register(
    repo: UserRepository,
    tokens: TokenService,
    username: str,
    email: str,
    password: str,
) -> AuthResult:
    """Register a new user and issue a token for it.

    Validation runs email, then username, then password; the first
    failing check is reported.

    Raises:
        ValidationError: input does not meet format or strength rules
        DuplicateError: email or username already taken (not distinguished)
        StorageError: repository failure
    """
    validate_email(email)
    validate_username(username)
    validate_password(password)

    if repo.find_by_email(email) is not None:
        raise DuplicateError()
    if repo.find_by_username(username) is not None:
        raise DuplicateError()

    password_hash = hash_password(password)
    user = repo.create(NewUser(username=username, email=email), password_hash)

    logger.info("User registered", extra={"userId": user.id})
    return AuthResult(token=tokens.issue(user.id), user=user)


def login(
    repo: UserRepository,
    tokens: TokenService,
    username: str,
    password: str,
) -> AuthResult:
    """Authenticate by username and password and issue a token.

    Doesn't reveal whether the username exists.

    Raises:
        InvalidCredentialsError: unknown username or wrong password
        PasswordHashError: stored hash is corrupt
    """
    user = repo.find_by_username(username)
    if user is None or not verify_password(user.password_hash, password):
        raise InvalidCredentialsError()

    logger.info("User logged in", extra={"userId": user.id})
    return AuthResult(token=tokens.issue(user.id), user=user)
