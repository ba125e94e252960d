"""Lecture recording upload-and-publish workflow."""

import logging
from datetime import datetime

from app.errors import NotFoundError, ValidationError
from app.models.lecture_summary import STATUS_PENDING, STATUS_PUBLISHED, LectureSummary
from app.services.blob_store import BlobRef, BlobStore
from app.services.lecture_store import LectureStore
from app.services.principal import Principal

logger = logging.getLogger("lecture_desk")

DEFAULT_TITLE = "Untitled Lecture"
DEFAULT_SUBJECT = "General"


def _mark_published(record: LectureSummary) -> None:
    # published_at is set once; publishing again leaves it alone.
    if record.status == STATUS_PUBLISHED and record.published_at is not None:
        return
    record.status = STATUS_PUBLISHED
    record.published_at = datetime.utcnow()


class LectureWorkflowService:
    """Ownership and status rules for lecture summaries.

    The owner of a record is always the principal that ingested it. Only the
    owner may publish or delete it, and only published records are visible
    to everyone else. The service keeps no state of its own between calls.
    """

    def __init__(self, store: LectureStore, blob_store: BlobStore | None = None) -> None:
        self.store = store
        # When set, a deleted record's recording is removed from blob storage too.
        self.blob_store = blob_store

    def ingest(
        self,
        principal: Principal,
        blob_ref: BlobRef | None,
        title: str | None = None,
        subject: str | None = None,
    ) -> LectureSummary:
        """Create a pending record for an uploaded recording, owned by the caller."""
        if blob_ref is None:
            raise ValidationError("No audio file uploaded")

        record = self.store.create(
            title=(title or "").strip() or DEFAULT_TITLE,
            subject=(subject or "").strip() or DEFAULT_SUBJECT,
            teacher_id=principal.id,
            audio_url=blob_ref.url,
            audio_filename=blob_ref.filename,
            status=STATUS_PENDING,
        )
        logger.info("Lecture %s ingested by teacher %s", record.id, principal.id)
        return record

    def list_for_teacher(self, principal: Principal) -> list[LectureSummary]:
        return self.store.find_by_teacher(principal.id)

    def list_published(self, principal: Principal) -> list[LectureSummary]:
        """Published records from every teacher. Open to any authenticated role."""
        return self.store.find_published()

    def publish(self, principal: Principal, record_id: str) -> LectureSummary:
        record = self.store.update(record_id, _mark_published, teacher_id=principal.id)
        if record is None:
            raise NotFoundError()
        logger.info("Lecture %s published by teacher %s", record.id, principal.id)
        return record

    def delete(self, principal: Principal, record_id: str) -> None:
        record = self.store.find_by_id(record_id, teacher_id=principal.id)
        if record is None:
            raise NotFoundError()
        blob_ref = BlobRef(url=record.audio_url, filename=record.audio_filename)

        if not self.store.delete_by_id(record_id, teacher_id=principal.id):
            raise NotFoundError()
        logger.info("Lecture %s deleted by teacher %s", record_id, principal.id)

        if self.blob_store is not None:
            self.blob_store.remove(blob_ref)
