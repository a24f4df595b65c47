from __future__ import annotations

import json
import logging
import re
import time
from typing import Any, TypeVar

from openai import OpenAI
from pydantic import BaseModel, ValidationError

from resume_review.ai.types import FeedbackProvider, MalformedExternalResponse
from resume_review.core.scoring import get_scoring_value
from resume_review.engine import ensure_job_match_input
from resume_review.engine.sections import CANONICAL_SECTIONS
from resume_review.schemas.review import FeedbackResult, JobMatchResult

logger = logging.getLogger(__name__)

_JSON_BLOCK_RE = re.compile(r"(\{[\s\S]*\})")

ResultModel = TypeVar("ResultModel", bound=BaseModel)

REVIEW_SYSTEM_PROMPT = (
    "You are a professional resume coach who provides detailed, actionable feedback. "
    "Always tailor the feedback to the resume content. Never provide generic feedback."
)

REVIEW_USER_PROMPT = """Review the following resume and provide:
1. Overall impressions (3-5 sentences) specific to the content of this resume
2. Section-by-section feedback with specific improvements for each section; always include
   "Professional Summary", "Work Experience", "Skills" and "Education"
3. Exactly 5 distinct, specific, actionable suggestions for improvement
4. A score between 30 and 98 that reflects the quality of this resume

Respond with JSON only, using this structure:
{{
  "overall_impression": "string",
  "section_feedback": {{"section name": "feedback for this section"}},
  "suggestions": ["suggestion 1", "suggestion 2", "suggestion 3", "suggestion 4", "suggestion 5"],
  "score": 0
}}

Resume:
{resume}"""

JOB_MATCH_SYSTEM_PROMPT = """Analyze how well the provided resume matches the given job description.
Identify key skills, technologies and qualifications from the job description, determine whether
they are present in the resume, compute an overall match percentage (30-95) and a relevance score
(40-98), and suggest 5 distinct, specific improvements.

Respond with JSON only, using this structure:
{
  "overall_match": 0,
  "keyword_matches": [{"keyword": "string", "found": true}],
  "missing_keywords": ["string"],
  "suggested_improvements": ["exactly 5 strings"],
  "relevance_score": 0
}"""


def parse_json_payload(content: str | None) -> dict[str, Any]:
    """Decode a completion body, tolerating prose around the JSON object."""
    if not content or not content.strip():
        raise MalformedExternalResponse("External AI returned an empty response.", code="empty_response")
    try:
        parsed = json.loads(content)
    except json.JSONDecodeError:
        match = _JSON_BLOCK_RE.search(content)
        if not match:
            raise MalformedExternalResponse("External AI response is not JSON.", code="not_json") from None
        try:
            parsed = json.loads(match.group(1))
        except json.JSONDecodeError as exc:
            raise MalformedExternalResponse("External AI response is not JSON.", code="not_json") from exc
    if not isinstance(parsed, dict):
        raise MalformedExternalResponse("External AI response must be a JSON object.", code="invalid_schema")
    return parsed


def validate_payload(payload: dict[str, Any], model: type[ResultModel]) -> ResultModel:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise MalformedExternalResponse(
            f"External AI response is missing required fields: {exc.error_count()} error(s).",
            code="invalid_schema",
        ) from exc


def _bounded(value: int, section: str, low: str, high: str, defaults: tuple[int, int]) -> bool:
    lower = int(get_scoring_value(f"{section}.{low}", defaults[0]))
    upper = int(get_scoring_value(f"{section}.{high}", defaults[1]))
    return lower <= value <= upper


def check_review_result(result: FeedbackResult) -> FeedbackResult:
    """Reject external reviews that break the guarantees of the built-in engine."""
    problems: list[str] = []
    missing = [key for key in CANONICAL_SECTIONS if key not in result.section_feedback]
    if missing:
        problems.append(f"missing sections {', '.join(missing)}")
    if not _bounded(result.score, "feedback", "min_score", "max_score", (30, 98)):
        problems.append(f"score {result.score} out of range")
    if len(set(result.suggestions)) != len(result.suggestions):
        problems.append("duplicate suggestions")
    if problems:
        raise MalformedExternalResponse(
            f"External AI review rejected: {'; '.join(problems)}.", code="invalid_schema"
        )
    return result


def check_job_match_result(result: JobMatchResult) -> JobMatchResult:
    problems: list[str] = []
    if not _bounded(result.overall_match, "job_match", "min_match", "max_match", (30, 95)):
        problems.append(f"overall_match {result.overall_match} out of range")
    if not _bounded(result.relevance_score, "job_match", "min_relevance", "max_relevance", (40, 98)):
        problems.append(f"relevance_score {result.relevance_score} out of range")
    if len(set(result.suggested_improvements)) != len(result.suggested_improvements):
        problems.append("duplicate improvements")
    if problems:
        raise MalformedExternalResponse(
            f"External AI job match rejected: {'; '.join(problems)}.", code="invalid_schema"
        )
    return result


class OpenAIProvider:
    name = "openai"

    def __init__(
        self,
        model: str,
        api_key: str,
        fallback: FeedbackProvider,
        base_url: str | None = None,
        timeout_s: float = 20.0,
        max_retries: int = 2,
        temperature: float = 0.2,
        max_output_tokens: int = 1500,
    ):
        key = (api_key or "").strip()
        if not key:
            raise RuntimeError("An OpenAI API key is required for the external provider.")
        self._model = model
        self._temperature = temperature
        self._max_output_tokens = max_output_tokens
        self._fallback = fallback
        self._client = OpenAI(
            api_key=key,
            base_url=base_url or None,
            timeout=timeout_s,
            max_retries=max_retries,
        )

    def _complete_json(self, system_prompt: str, user_prompt: str) -> dict[str, Any]:
        response = self._client.chat.completions.create(
            model=self._model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            temperature=self._temperature,
            response_format={"type": "json_object"},
            max_tokens=self._max_output_tokens,
        )
        content = response.choices[0].message.content if response.choices else ""
        return parse_json_payload(content)

    def analyze_resume(self, text: str) -> FeedbackResult:
        if not text:
            return self._fallback.analyze_resume(text)

        started = time.perf_counter()
        try:
            payload = self._complete_json(REVIEW_SYSTEM_PROMPT, REVIEW_USER_PROMPT.format(resume=text))
            result = check_review_result(validate_payload(payload, FeedbackResult))
        except Exception as exc:  # noqa: BLE001 - deterministic fallback is expected
            logger.warning(
                "external_review_failed model=%s prompt_len=%s code=%s: %s",
                self._model,
                len(text),
                getattr(exc, "code", type(exc).__name__),
                exc,
            )
            return self._fallback.analyze_resume(text)

        logger.info(
            "external_review_completed model=%s latency_ms=%s",
            self._model,
            int((time.perf_counter() - started) * 1000),
        )
        return result

    def analyze_job_match(self, resume_text: str, job_description: str) -> JobMatchResult:
        ensure_job_match_input(resume_text, job_description)

        started = time.perf_counter()
        user_prompt = f"Resume:\n{resume_text}\n\nJob Description:\n{job_description}"
        try:
            payload = self._complete_json(JOB_MATCH_SYSTEM_PROMPT, user_prompt)
            result = check_job_match_result(validate_payload(payload, JobMatchResult))
        except Exception as exc:  # noqa: BLE001 - deterministic fallback is expected
            logger.warning(
                "external_job_match_failed model=%s prompt_len=%s code=%s: %s",
                self._model,
                len(user_prompt),
                getattr(exc, "code", type(exc).__name__),
                exc,
            )
            return self._fallback.analyze_job_match(resume_text, job_description)

        logger.info(
            "external_job_match_completed model=%s latency_ms=%s",
            self._model,
            int((time.perf_counter() - started) * 1000),
        )
        return result
