"""User model."""

from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Integer, String

from app.database import Base

ROLES = ("student", "teacher", "parent")


class User(Base):
    """School account: a student, teacher or parent."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, autoincrement=True)
    registration_number = Column(String(64), unique=True, nullable=False, index=True)
    password_hash = Column(String(256), nullable=False)
    role = Column(String(16), nullable=False)  # student, teacher, parent
    display_name = Column(String(256), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    last_login_at = Column(DateTime, nullable=True)
