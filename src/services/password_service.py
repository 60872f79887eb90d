"""Argon2id password hashing.

Encoded hashes are self-describing PHC strings
(``$argon2id$v=19$m=...,t=...,p=...$<salt>$<digest>``), so verification
needs no parameters stored elsewhere.
"""

import logging

from argon2 import PasswordHasher
from argon2.exceptions import HashingError, InvalidHashError, VerificationError, VerifyMismatchError

from domain.model.errors import InternalError, PasswordHashError

logger = logging.getLogger(__name__)

# Library-default work parameters, Argon2id variant
_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    """Hash a password with a fresh random salt."""
    try:
        return _hasher.hash(password)
    except HashingError as e:
        logger.error("Password hashing failed", extra={"error": str(e)})
        raise InternalError() from e


def verify_password(password_hash: str, password: str) -> bool:
    """Check ``password`` against an encoded hash.

    Returns False on a plain mismatch. A hash that cannot be parsed or
    checked raises PasswordHashError, so operators can tell a corrupt
    record apart from a wrong password.
    """
    try:
        return _hasher.verify(password_hash, password)
    except VerifyMismatchError:
        return False
    except (InvalidHashError, VerificationError) as e:
        logger.error("Stored password hash could not be verified", extra={"error": type(e).__name__})
        raise PasswordHashError() from e
