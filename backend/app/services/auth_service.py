"""
Admin account service.

Emails are compared case-insensitively; they are stored lowercased.
"""

import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.core import security
from app.models.user import User

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


class AuthService:
    def get_user_by_email(self, db: Session, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == normalize_email(email)).first()

    def authenticate_user(self, db: Session, email: str, password: str) -> Optional[User]:
        """Return the account when the password matches, None otherwise."""
        user = self.get_user_by_email(db, email)
        if user and security.verify_password(password, user.hashed_password):
            return user
        return None

    def create_user(
        self, db: Session, email: str, password: str, is_superuser: bool = False
    ) -> User:
        email = normalize_email(email)
        if self.get_user_by_email(db, email):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="User with this email already exists",
            )

        user = User(
            email=email,
            hashed_password=security.get_password_hash(password),
            is_superuser=is_superuser,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info(f"Created account {user.email} (admin={is_superuser})")
        return user

    def create_user_token(self, user: User) -> dict:
        token = security.create_access_token(user.email)
        return {"access_token": token, "token_type": "bearer"}


auth_service = AuthService()
