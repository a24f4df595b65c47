from __future__ import annotations

import logging

from resume_review.ai.factory import get_feedback_provider
from resume_review.engine import analyze_resume_analytics, check_ats_compatibility, ensure_job_match_input
from resume_review.parsing.parse import extract_text
from resume_review.schemas.review import (
    ATSResult,
    ExtractTextResponse,
    FeedbackResult,
    JobMatchRequest,
    JobMatchResult,
    ResumeAnalytics,
    ResumeTextRequest,
)

logger = logging.getLogger(__name__)


def run_review(payload: ResumeTextRequest, *, api_key: str | None = None) -> FeedbackResult:
    provider = get_feedback_provider(api_key)
    logger.info("review_requested provider=%s chars=%s", provider.name, len(payload.resume_text))
    return provider.analyze_resume(payload.resume_text)


def run_job_match(payload: JobMatchRequest, *, api_key: str | None = None) -> JobMatchResult:
    ensure_job_match_input(payload.resume_text, payload.job_description_text)
    provider = get_feedback_provider(api_key)
    logger.info(
        "job_match_requested provider=%s resume_chars=%s jd_chars=%s",
        provider.name,
        len(payload.resume_text),
        len(payload.job_description_text),
    )
    return provider.analyze_job_match(payload.resume_text, payload.job_description_text)


def run_ats_check(payload: ResumeTextRequest) -> ATSResult:
    return check_ats_compatibility(payload.resume_text)


def run_analytics(payload: ResumeTextRequest) -> ResumeAnalytics:
    return analyze_resume_analytics(payload.resume_text)


def extract_text_from_file(*, filename: str, content: bytes) -> ExtractTextResponse:
    parsed = extract_text(filename, content)
    return ExtractTextResponse(
        filename=filename,
        source_type=parsed.source_type,
        text=parsed.text,
        characters=len(parsed.text),
        warnings=parsed.parsing_warnings,
    )
