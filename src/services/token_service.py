"""Signed, time-bound bearer tokens (HS256 JWT)."""

import logging
from datetime import datetime, timedelta, timezone

from jose import ExpiredSignatureError, JWTError, jwt

from domain.model.errors import InternalError, InvalidTokenError, TokenExpiredError
from domain.model.token import Claims

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
TOKEN_LIFETIME = timedelta(hours=24)


class TokenService:
    """Issues and verifies tokens with a symmetric secret held for the process lifetime."""

    def __init__(self, secret: str, lifetime: timedelta = TOKEN_LIFETIME):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self.lifetime = lifetime

    def issue(self, subject: str, now: datetime | None = None) -> str:
        """Create a token for ``subject`` valid for ``lifetime`` from ``now``."""
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "sub": subject,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self.lifetime).timestamp()),
        }
        try:
            return jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)
        except JWTError as e:
            logger.error("Failed to sign token", extra={"error": str(e)})
            raise InternalError() from e

    def verify(self, token: str) -> Claims:
        """Check signature and expiry and return the claims.

        Every failure surfaces as InvalidTokenError with the same message;
        expiry raises the TokenExpiredError subclass.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[JWT_ALGORITHM],
                options={"require_exp": True, "require_iat": True},
            )
        except ExpiredSignatureError as e:
            logger.debug("JWT expired")
            raise TokenExpiredError() from e
        except JWTError as e:
            logger.debug(f"JWT verification failed: {e}")
            raise InvalidTokenError() from e

        subject = payload.get("sub")
        if not isinstance(subject, str) or not subject:
            logger.debug("JWT has no subject")
            raise InvalidTokenError()

        return Claims(sub=subject, iat=int(payload["iat"]), exp=int(payload["exp"]))
