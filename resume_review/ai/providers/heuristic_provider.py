from __future__ import annotations

from resume_review.engine import analyze_job_match, analyze_resume
from resume_review.schemas.review import FeedbackResult, JobMatchResult


class HeuristicProvider:
    """Deterministic provider backed by the rule-based engine."""

    name = "heuristic"

    def analyze_resume(self, text: str) -> FeedbackResult:
        return analyze_resume(text)

    def analyze_job_match(self, resume_text: str, job_description: str) -> JobMatchResult:
        return analyze_job_match(resume_text, job_description)
