"""Lecture summary API endpoints."""

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile

from app.dependencies import get_current_principal, get_lecture_workflow
from app.errors import LectureDeskError
from app.rate_limit import limiter
from app.schemas.lecture_summary import LectureSummaryResponse, MessageResponse, PublishResponse
from app.services.blob_store import get_blob_store
from app.services.lecture_workflow import LectureWorkflowService
from app.services.principal import Principal

router = APIRouter(prefix="/api/lecture-summaries", tags=["Lecture Summaries"])


@router.post("/upload", response_model=LectureSummaryResponse, status_code=201)
@limiter.limit("20/minute")
async def upload_lecture(
    request: Request,
    audio: UploadFile | None = File(None),
    title: str | None = Form(None),
    subject: str | None = Form(None),
    principal: Principal = Depends(get_current_principal),
    workflow: LectureWorkflowService = Depends(get_lecture_workflow),
) -> LectureSummaryResponse:
    """Upload a lecture recording and create a pending summary for it."""
    blob_store = get_blob_store()
    blob_ref = await blob_store.store(audio) if audio is not None else None
    try:
        record = workflow.ingest(principal, blob_ref, title=title, subject=subject)
    except LectureDeskError:
        # No record points at the recording, so it must not outlive the failed request.
        if blob_ref is not None:
            blob_store.remove(blob_ref)
        raise
    return LectureSummaryResponse.model_validate(record)


@router.get("/teacher", response_model=list[LectureSummaryResponse])
def list_teacher_summaries(
    principal: Principal = Depends(get_current_principal),
    workflow: LectureWorkflowService = Depends(get_lecture_workflow),
) -> list[LectureSummaryResponse]:
    """List the caller's own lecture summaries, newest first."""
    records = workflow.list_for_teacher(principal)
    return [LectureSummaryResponse.model_validate(r) for r in records]


@router.get("/student", response_model=list[LectureSummaryResponse])
def list_published_summaries(
    principal: Principal = Depends(get_current_principal),
    workflow: LectureWorkflowService = Depends(get_lecture_workflow),
) -> list[LectureSummaryResponse]:
    """List published lecture summaries from all teachers."""
    records = workflow.list_published(principal)
    return [LectureSummaryResponse.model_validate(r) for r in records]


@router.patch("/{summary_id}/publish", response_model=PublishResponse)
def publish_summary(
    summary_id: str,
    principal: Principal = Depends(get_current_principal),
    workflow: LectureWorkflowService = Depends(get_lecture_workflow),
) -> PublishResponse:
    """Publish one of the caller's lecture summaries."""
    record = workflow.publish(principal, summary_id)
    return PublishResponse(
        message="Lecture summary published successfully",
        summary=LectureSummaryResponse.model_validate(record),
    )


@router.delete("/{summary_id}", response_model=MessageResponse)
def delete_summary(
    summary_id: str,
    principal: Principal = Depends(get_current_principal),
    workflow: LectureWorkflowService = Depends(get_lecture_workflow),
) -> MessageResponse:
    """Delete one of the caller's lecture summaries."""
    workflow.delete(principal, summary_id)
    return MessageResponse(message="Lecture summary deleted successfully")
