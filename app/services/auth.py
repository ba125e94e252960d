"""Authentication service."""

import logging
from dataclasses import dataclass
from datetime import datetime

import bcrypt
from sqlalchemy.orm import Session

from app.models.user import ROLES, User

logger = logging.getLogger("lecture_desk")


@dataclass
class AuthResult:
    """Result of an authentication attempt."""

    success: bool
    error: str | None = None
    user_id: int | None = None
    role: str | None = None
    registration_number: str | None = None
    display_name: str | None = None

    @classmethod
    def for_user(cls, user: User) -> "AuthResult":
        return cls(
            success=True,
            user_id=user.id,
            role=user.role,
            registration_number=user.registration_number,
            display_name=user.display_name,
        )


class AuthService:
    """Handles account registration and login by registration number."""

    def register(
        self, db: Session, registration_number: str, password: str, role: str, display_name: str
    ) -> AuthResult:
        """Register a new account. Returns AuthResult with success/error."""
        if role not in ROLES:
            return AuthResult(success=False, error=f"Unknown role '{role}'")

        registration_number = registration_number.strip().upper()
        existing = db.query(User).filter(User.registration_number == registration_number).first()
        if existing:
            return AuthResult(success=False, error="Registration number already registered")

        password_hash = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")
        user = User(
            registration_number=registration_number,
            password_hash=password_hash,
            role=role,
            display_name=display_name.strip(),
            is_active=True,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info("Registered %s account %s", role, registration_number)

        return AuthResult.for_user(user)

    def authenticate(self, db: Session, registration_number: str, password: str, role: str) -> AuthResult:
        """Authenticate by registration number, password and role.

        A wrong role fails exactly like a wrong password.
        """
        user = (
            db.query(User)
            .filter(User.registration_number == registration_number.strip().upper(), User.role == role)
            .first()
        )
        if not user:
            return AuthResult(success=False, error="Invalid credentials")

        if not bcrypt.checkpw(password.encode("utf-8"), user.password_hash.encode("utf-8")):
            return AuthResult(success=False, error="Invalid credentials")

        if not user.is_active:
            return AuthResult(success=False, error="Account is deactivated")

        user.last_login_at = datetime.utcnow()
        db.commit()

        return AuthResult.for_user(user)


_auth_service: AuthService | None = None


def get_auth_service() -> AuthService:
    """Get singleton auth service instance."""
    global _auth_service
    if _auth_service is None:
        _auth_service = AuthService()
    return _auth_service
