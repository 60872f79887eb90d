"""Unit tests for TokenService (HS256 JWT)."""

import unittest
from datetime import datetime, timedelta, timezone

from jose import jwt

from domain.model.errors import InvalidTokenError, TokenExpiredError
from services.token_service import TOKEN_LIFETIME, TokenService

SECRET = "test-secret-key"


class TestTokenService(unittest.TestCase):

    def setUp(self):
        self.tokens = TokenService(SECRET)

    def test_round_trip_subject(self):
        token = self.tokens.issue("user-123")
        claims = self.tokens.verify(token)

        self.assertEqual(claims.sub, "user-123")

    def test_expiry_is_24_hours_after_issue(self):
        issued_at = datetime.now(timezone.utc).replace(microsecond=0)
        claims = self.tokens.verify(self.tokens.issue("user-123", now=issued_at))

        self.assertEqual(TOKEN_LIFETIME, timedelta(hours=24))
        self.assertEqual(claims.iat, int(issued_at.timestamp()))
        self.assertEqual(claims.exp - claims.iat, 24 * 3600)

    def test_only_standard_claims(self):
        payload = jwt.get_unverified_claims(self.tokens.issue("user-123"))
        self.assertEqual(set(payload), {"sub", "iat", "exp"})

    def test_expired_token_rejected(self):
        issued_at = datetime.now(timezone.utc) - timedelta(hours=25)
        token = self.tokens.issue("user-123", now=issued_at)

        with self.assertRaises(TokenExpiredError) as ctx:
            self.tokens.verify(token)
        self.assertIsInstance(ctx.exception, InvalidTokenError)
        self.assertEqual(ctx.exception.message, "Invalid or expired token")

    def test_token_from_other_secret_rejected(self):
        token = TokenService("another-secret").issue("user-123")

        with self.assertRaises(InvalidTokenError) as ctx:
            self.tokens.verify(token)
        self.assertNotIsInstance(ctx.exception, TokenExpiredError)
        self.assertEqual(ctx.exception.message, "Invalid or expired token")

    def test_malformed_token_rejected(self):
        for token in ("", "not.a.jwt", "abc"):
            with self.subTest(token=token):
                with self.assertRaises(InvalidTokenError):
                    self.tokens.verify(token)

    def test_tampered_payload_rejected(self):
        header, _, signature = self.tokens.issue("user-123").split(".")
        forged_payload = jwt.encode({"sub": "admin", "exp": 9999999999}, "x").split(".")[1]

        with self.assertRaises(InvalidTokenError):
            self.tokens.verify(f"{header}.{forged_payload}.{signature}")

    def test_token_without_subject_rejected(self):
        token = jwt.encode({"exp": 9999999999}, SECRET, algorithm="HS256")
        with self.assertRaises(InvalidTokenError):
            self.tokens.verify(token)

    def test_token_without_expiry_rejected(self):
        token = jwt.encode({"sub": "user-1", "iat": 1}, SECRET, algorithm="HS256")

        with self.assertRaises(InvalidTokenError) as ctx:
            self.tokens.verify(token)
        self.assertEqual(ctx.exception.message, "Invalid or expired token")

    def test_token_without_issued_at_rejected(self):
        token = jwt.encode({"sub": "user-1", "exp": 9999999999}, SECRET, algorithm="HS256")
        with self.assertRaises(InvalidTokenError):
            self.tokens.verify(token)

    def test_empty_secret_refused(self):
        with self.assertRaises(ValueError):
            TokenService("")


if __name__ == '__main__':
    unittest.main()
