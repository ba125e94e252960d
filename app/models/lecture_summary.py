"""Lecture summary model."""

import uuid
from datetime import datetime

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, Text

from app.database import Base

STATUS_PENDING = "pending"
STATUS_PUBLISHED = "published"


def _new_id() -> str:
    return uuid.uuid4().hex


class LectureSummary(Base):
    """Uploaded lecture recording with its (eventual) transcription and summary."""

    __tablename__ = "lecture_summary"

    id = Column(String(32), primary_key=True, default=_new_id)
    title = Column(String(256), nullable=False)
    subject = Column(String(128), nullable=False)
    teacher_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    audio_url = Column(String(512), nullable=False)
    audio_filename = Column(String(512), nullable=False, unique=True)
    transcription = Column(Text, nullable=True)
    summary_overview = Column(Text, nullable=True)
    summary_key_points = Column(JSON, nullable=True)
    summary_detailed_explanation = Column(Text, nullable=True)
    status = Column(String(32), nullable=False, default=STATUS_PENDING, index=True)  # pending, published
    published_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    @property
    def audio_file(self) -> dict:
        return {"url": self.audio_url, "filename": self.audio_filename}

    @property
    def summary(self) -> dict | None:
        if self.summary_overview is None:
            return None
        return {
            "overview": self.summary_overview,
            "key_points": list(self.summary_key_points or []),
            "detailed_explanation": self.summary_detailed_explanation or "",
        }
