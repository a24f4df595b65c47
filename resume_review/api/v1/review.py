from fastapi import APIRouter, File, Header, HTTPException, Request, UploadFile, status

from resume_review.core.config import settings
from resume_review.core.rate_limit import rate_limit
from resume_review.engine import InvalidInput
from resume_review.parsing.parse import SUPPORTED_EXTENSIONS, ExtractionFailure, file_extension
from resume_review.schemas.review import (
    ATSResult,
    ExtractTextResponse,
    FeedbackResult,
    JobMatchRequest,
    JobMatchResult,
    ResumeAnalytics,
    ResumeTextRequest,
)
from resume_review.services.review_service import (
    extract_text_from_file,
    run_analytics,
    run_ats_check,
    run_job_match,
    run_review,
)

router = APIRouter()


def _raise_bad_request(exc: Exception) -> None:
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.post("/review", response_model=FeedbackResult)
@rate_limit()
def review_resume(
    request: Request,
    payload: ResumeTextRequest,
    x_ai_key: str | None = Header(default=None, alias="X-AI-Key"),
):
    _ = request
    return run_review(payload, api_key=x_ai_key)


@router.post("/job-match", response_model=JobMatchResult)
@rate_limit()
def job_match(
    request: Request,
    payload: JobMatchRequest,
    x_ai_key: str | None = Header(default=None, alias="X-AI-Key"),
):
    _ = request
    try:
        return run_job_match(payload, api_key=x_ai_key)
    except InvalidInput as exc:
        _raise_bad_request(exc)


@router.post("/ats-check", response_model=ATSResult)
@rate_limit()
async def ats_check(request: Request, payload: ResumeTextRequest):
    _ = request
    return run_ats_check(payload)


@router.post("/analytics", response_model=ResumeAnalytics)
@rate_limit()
async def resume_analytics(request: Request, payload: ResumeTextRequest):
    _ = request
    return run_analytics(payload)


@router.post("/extract-text", response_model=ExtractTextResponse)
@rate_limit(settings.extract_rate_limit)
async def extract_resume_text(request: Request, file: UploadFile = File(...)):
    _ = request
    filename = file.filename or "uploaded-file"

    ext = file_extension(filename)
    if ext not in SUPPORTED_EXTENSIONS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported file type '.{ext}'. Allowed: {', '.join(SUPPORTED_EXTENSIONS)}.",
        )

    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(1024 * 64)
        if not chunk:
            break
        total += len(chunk)
        if total > settings.max_upload_bytes:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"File too large. Maximum allowed size is {settings.max_upload_bytes} bytes.",
            )
        chunks.append(chunk)

    try:
        return extract_text_from_file(filename=filename, content=b"".join(chunks))
    except ExtractionFailure as exc:
        _raise_bad_request(exc)
