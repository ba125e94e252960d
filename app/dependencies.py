"""Authentication dependencies for FastAPI routes."""

from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session

from app.config import get_settings
from app.database import get_db
from app.services.blob_store import get_blob_store
from app.services.lecture_store import LectureStore
from app.services.lecture_workflow import LectureWorkflowService
from app.services.principal import Principal, PrincipalResolver, get_principal_resolver


def get_current_principal(
    request: Request,
    resolver: PrincipalResolver = Depends(get_principal_resolver),
) -> Principal:
    """Resolve the caller from the Bearer token. Raises 401 if missing or invalid."""
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Not authenticated")

    token = auth_header[7:].strip()
    if not token:
        raise HTTPException(status_code=401, detail="Not authenticated")

    principal = resolver.resolve(token)
    if principal is None:
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    return principal


def get_lecture_workflow(db: Session = Depends(get_db)) -> LectureWorkflowService:
    """Build a workflow service bound to the request's database session."""
    settings = get_settings()
    blob_store = get_blob_store() if settings.DELETE_AUDIO_ON_DELETE else None
    return LectureWorkflowService(LectureStore(db), blob_store=blob_store)
