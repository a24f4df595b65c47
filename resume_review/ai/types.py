from __future__ import annotations

from typing import Protocol

from resume_review.schemas.review import FeedbackResult, JobMatchResult


class MalformedExternalResponse(RuntimeError):
    def __init__(self, message: str, *, code: str = "invalid_response"):
        super().__init__(message)
        self.code = code


class FeedbackProvider(Protocol):
    name: str

    def analyze_resume(self, text: str) -> FeedbackResult: ...

    def analyze_job_match(self, resume_text: str, job_description: str) -> JobMatchResult: ...
