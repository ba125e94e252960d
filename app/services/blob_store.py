"""Blob storage for uploaded lecture recordings."""

import logging
import os
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from fastapi import UploadFile

from app.config import get_settings
from app.errors import ValidationError

logger = logging.getLogger("lecture_desk")

ALLOWED_MIME_TYPES = {
    "audio/mpeg",
    "audio/mp3",
    "audio/wav",
    "audio/x-wav",
    "audio/wave",
}


@dataclass(frozen=True)
class BlobRef:
    """Where a stored recording can be fetched from."""

    url: str
    filename: str


class BlobStore(Protocol):
    async def store(self, upload: UploadFile) -> BlobRef:
        """Persist an uploaded file and return its reference."""

    def remove(self, blob_ref: BlobRef) -> bool:
        """Delete a stored file. Returns True if a file was removed."""


class LocalBlobStore:
    """Stores recordings on the local filesystem under ``UPLOAD_DIR``."""

    def __init__(self, upload_dir: str, url_prefix: str, max_upload_size_mb: int) -> None:
        self.upload_dir = Path(upload_dir)
        self.url_prefix = url_prefix.rstrip("/")
        self.max_upload_size_mb = max_upload_size_mb

    def validate_upload_metadata(self, filename: str, content_type: str | None) -> str | None:
        """Validate the declared MIME type. Returns error message or None if valid.

        The filename is not checked; its extension is only kept on the stored name.
        """
        if content_type not in ALLOWED_MIME_TYPES:
            return f"Invalid content type '{content_type}'. Only MP3 and WAV files are allowed."
        return None

    async def store(self, upload: UploadFile) -> BlobRef:
        """Stream an upload to disk with size limit enforcement.

        Raises ValidationError for disallowed types or oversized files; nothing
        is left on disk in either case.
        """
        error = self.validate_upload_metadata(upload.filename or "", upload.content_type)
        if error:
            raise ValidationError(error)

        max_bytes = self.max_upload_size_mb * 1024 * 1024
        ext = Path(upload.filename or "").suffix.lower()
        stored_filename = f"{uuid.uuid4().hex}{ext}"
        self.upload_dir.mkdir(parents=True, exist_ok=True)

        file_path = self.upload_dir / stored_filename
        file_size = 0
        chunk_size = 1024 * 64

        try:
            with open(file_path, "wb") as f:
                while True:
                    chunk = await upload.read(chunk_size)
                    if not chunk:
                        break
                    file_size += len(chunk)
                    if file_size > max_bytes:
                        raise ValidationError(
                            f"File too large ({file_size // (1024 * 1024)}MB). Maximum: {self.max_upload_size_mb}MB"
                        )
                    f.write(chunk)
        except ValidationError:
            if file_path.exists():
                os.remove(file_path)
            raise

        logger.info("Stored recording %s (%d bytes)", stored_filename, file_size)
        return BlobRef(url=f"{self.url_prefix}/{stored_filename}", filename=stored_filename)

    def remove(self, blob_ref: BlobRef) -> bool:
        # Only bare filenames are accepted; anything with a path component is ignored.
        if Path(blob_ref.filename).name != blob_ref.filename:
            return False
        file_path = self.upload_dir / blob_ref.filename
        if not file_path.exists():
            return False
        os.remove(file_path)
        logger.info("Removed recording %s", blob_ref.filename)
        return True


_blob_store: LocalBlobStore | None = None


def get_blob_store() -> LocalBlobStore:
    """Get singleton blob store instance."""
    global _blob_store
    if _blob_store is None:
        settings = get_settings()
        _blob_store = LocalBlobStore(settings.UPLOAD_DIR, settings.UPLOAD_URL_PREFIX, settings.MAX_UPLOAD_SIZE_MB)
    return _blob_store
