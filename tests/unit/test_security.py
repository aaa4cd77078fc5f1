"""
Tests for admin password hashing and session tokens
"""
from datetime import timedelta

import pytest
from jose import JWTError, jwt

from app.config import settings
from app.core import security


@pytest.mark.unit
class TestPasswords:

    def test_hash_verifies(self):
        hashed = security.get_password_hash("password123")

        assert hashed != "password123"
        assert security.verify_password("password123", hashed)
        assert not security.verify_password("password124", hashed)

    def test_missing_or_malformed_hash(self):
        assert security.verify_password("password123", None) is False
        assert security.verify_password("password123", "") is False
        assert security.verify_password("password123", "not-a-bcrypt-hash") is False


@pytest.mark.unit
class TestSessionTokens:

    def test_subject_roundtrip(self):
        token = security.create_access_token("admin@example.com")
        assert security.decode_access_token(token) == "admin@example.com"

    def test_expired_token_rejected(self):
        token = security.create_access_token("admin@example.com", expires_delta=timedelta(seconds=-1))
        with pytest.raises(JWTError):
            security.decode_access_token(token)

    def test_foreign_signature_rejected(self):
        token = jwt.encode({"sub": "admin@example.com"}, "other-secret", algorithm=security.ALGORITHM)
        with pytest.raises(JWTError):
            security.decode_access_token(token)

    def test_token_without_subject_rejected(self):
        token = jwt.encode({"role": "admin"}, settings.SECRET_KEY, algorithm=security.ALGORITHM)
        with pytest.raises(JWTError):
            security.decode_access_token(token)
