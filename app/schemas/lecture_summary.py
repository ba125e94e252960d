"""Pydantic schemas for lecture summary endpoints."""

from datetime import datetime

from pydantic import BaseModel


class AudioFileResponse(BaseModel):
    url: str
    filename: str


class SummaryContentResponse(BaseModel):
    overview: str
    key_points: list[str] = []
    detailed_explanation: str


class LectureSummaryResponse(BaseModel):
    id: str
    title: str
    subject: str
    teacher_id: int
    audio_file: AudioFileResponse
    transcription: str | None = None
    summary: SummaryContentResponse | None = None
    status: str
    published_at: datetime | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class PublishResponse(BaseModel):
    message: str
    summary: LectureSummaryResponse


class MessageResponse(BaseModel):
    message: str
