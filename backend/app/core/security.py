"""
Admin credentials: bcrypt password hashes and the signed session token.

A session token is an HS256 JWT whose ``sub`` claim is the admin's email.
"""

import bcrypt
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

from jose import JWTError, jwt

from app.config import settings

ALGORITHM = "HS256"
BCRYPT_ROUNDS = 12


def _utf8(value: Union[str, bytes]) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else value


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """False for a wrong password and for a missing or malformed stored hash."""
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(_utf8(plain_password), _utf8(hashed_password))
    except ValueError:
        return False


def get_password_hash(password: str) -> str:
    return bcrypt.hashpw(_utf8(password), bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def create_access_token(subject: str, expires_delta: Optional[timedelta] = None) -> str:
    """Session token for ``subject``; lifetime defaults to ACCESS_TOKEN_EXPIRE_MINUTES."""
    lifetime = expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    claims = {"sub": subject, "exp": datetime.now(timezone.utc) + lifetime}
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> str:
    """
    Subject of a session token.

    Raises:
        JWTError: bad signature, expired token, or no ``sub`` claim
    """
    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    subject = payload.get("sub")
    if not subject:
        raise JWTError("Token has no subject")
    return subject
