"""Lecture summary persistence."""

import logging
from collections.abc import Callable
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from app.errors import StoreError
from app.models.lecture_summary import STATUS_PUBLISHED, LectureSummary

logger = logging.getLogger("lecture_desk")


class LectureStore:
    """Create, query, update and delete lecture summaries.

    Lookups that take a ``teacher_id`` filter on ``(id, teacher_id)`` together,
    so a record owned by someone else looks exactly like a missing one.
    Every write is a single commit; on failure the session is rolled back and
    ``StoreError`` is raised.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def _scoped(self, record_id: str, teacher_id: int | None) -> Query:
        query = self.db.query(LectureSummary).filter(LectureSummary.id == record_id)
        if teacher_id is not None:
            query = query.filter(LectureSummary.teacher_id == teacher_id)
        return query

    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Lecture store %s failed", action)
            raise StoreError() from e

    def create(self, **fields) -> LectureSummary:
        """Insert a new record. Assigns id and timestamps."""
        now = datetime.utcnow()
        record = LectureSummary(**fields)
        record.created_at = now
        record.updated_at = now
        self.db.add(record)
        self._commit("create")
        self.db.refresh(record)
        return record

    def find_by_id(self, record_id: str, teacher_id: int | None = None) -> LectureSummary | None:
        try:
            return self._scoped(record_id, teacher_id).first()
        except SQLAlchemyError as e:
            logger.exception("Lecture store lookup failed")
            raise StoreError() from e

    def find_by_teacher(self, teacher_id: int) -> list[LectureSummary]:
        """All records owned by a teacher, newest first."""
        try:
            return (
                self.db.query(LectureSummary)
                .filter(LectureSummary.teacher_id == teacher_id)
                .order_by(LectureSummary.created_at.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.exception("Lecture store teacher query failed")
            raise StoreError() from e

    def find_published(self) -> list[LectureSummary]:
        """All published records, most recently published first."""
        try:
            return (
                self.db.query(LectureSummary)
                .filter(LectureSummary.status == STATUS_PUBLISHED)
                .order_by(LectureSummary.published_at.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.exception("Lecture store published query failed")
            raise StoreError() from e

    def update(
        self,
        record_id: str,
        mutator: Callable[[LectureSummary], None],
        teacher_id: int | None = None,
    ) -> LectureSummary | None:
        """Apply ``mutator`` to a record and persist it. Returns None if no record matched."""
        record = self.find_by_id(record_id, teacher_id)
        if record is None:
            return None
        mutator(record)
        record.updated_at = datetime.utcnow()
        self._commit("update")
        self.db.refresh(record)
        return record

    def delete_by_id(self, record_id: str, teacher_id: int | None = None) -> bool:
        """Delete a record. Returns True if one was removed."""
        try:
            deleted = self._scoped(record_id, teacher_id).delete(synchronize_session="fetch")
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Lecture store delete failed")
            raise StoreError() from e
        self._commit("delete")
        return deleted > 0
