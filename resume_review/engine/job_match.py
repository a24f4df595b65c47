from __future__ import annotations

import logging
import re

from resume_review.core.scoring import get_scoring_value
from resume_review.schemas.review import JobMatchResult, KeywordMatch

from .signals import detect_signals
from .statistics import round_half_up
from .vocabulary import JOB_MATCH_KEYWORDS, JOB_MATCH_SUGGESTIONS

logger = logging.getLogger(__name__)

_PHRASE = r"([\w\s\-/]+?)(?:\.|,|\s(?:and|or))"
_REQUIREMENT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"experience (?:in|with) " + _PHRASE, re.IGNORECASE),
    re.compile(r"knowledge of " + _PHRASE, re.IGNORECASE),
    re.compile(r"proficiency (?:in|with) " + _PHRASE, re.IGNORECASE),
    re.compile(r"familiar with " + _PHRASE, re.IGNORECASE),
    re.compile(r"skills? (?:in|with) " + _PHRASE, re.IGNORECASE),
)

NOTHING_MISSING_SUGGESTION = (
    "Further develop your expertise in key technologies mentioned in the job description"
)


class InvalidInput(ValueError):
    pass


def _job_value(path: str, default: float) -> float:
    return float(get_scoring_value(f"job_match.{path}", default))


def ensure_job_match_input(resume_text: str, job_description: str) -> None:
    if not (resume_text or "").strip():
        raise InvalidInput("Resume text is required for job matching.")
    if not (job_description or "").strip():
        raise InvalidInput("Job description text is required for job matching.")


def _contains(haystack: str, needle: str) -> bool:
    return needle.lower() in haystack.lower()


def extract_requirement_phrases(job_description: str) -> list[str]:
    min_len = int(_job_value("min_phrase_length", 4))
    max_len = int(_job_value("max_phrase_length", 29))
    phrases: list[str] = []
    for pattern in _REQUIREMENT_PATTERNS:
        for match in pattern.finditer(job_description):
            captured = match.group(1)
            if min_len <= len(captured) <= max_len:
                phrases.append(captured.strip())
    return phrases


def extract_job_keywords(job_description: str) -> list[str]:
    limit = int(_job_value("max_keywords", 10))
    candidates = [keyword for keyword in JOB_MATCH_KEYWORDS if _contains(job_description, keyword)]
    candidates.extend(extract_requirement_phrases(job_description))

    keywords: list[str] = []
    seen: set[str] = set()
    for candidate in candidates:
        key = candidate.lower()
        if not key or key in seen:
            continue
        seen.add(key)
        keywords.append(candidate)
        if len(keywords) >= limit:
            break

    if not keywords:
        keywords = list(JOB_MATCH_KEYWORDS[:limit])
    return keywords


def _extra_missing_terms(resume_text: str, job_description: str, selected: list[str]) -> list[str]:
    limit = int(_job_value("extra_missing", 3))
    taken = {keyword.lower() for keyword in selected}
    pool = [
        term
        for term in JOB_MATCH_KEYWORDS
        if term.lower() not in taken and not _contains(resume_text, term)
    ]
    # Terms the job description mentions but the keyword cap cut off come first.
    pool.sort(key=lambda term: 0 if _contains(job_description, term) else 1)
    return pool[:limit]


def _match_adjustment(resume_text: str) -> int:
    signals = detect_signals(resume_text)
    adjustment = 0
    if signals.quantifiable_count > _job_value("quantified_above", 2):
        adjustment += int(_job_value("quantified_bonus", 5))
    if signals.word_count < _job_value("brief_below", 200):
        adjustment += int(_job_value("brief_penalty", -5))
    return adjustment


def suggest_improvements(missing: list[str]) -> list[str]:
    count = int(_job_value("suggestion_count", 5))
    if missing:
        lead = f"Add specific experience with {' and '.join(missing[:2])}"
    else:
        lead = NOTHING_MISSING_SUGGESTION
    improvements = [lead]
    for suggestion in JOB_MATCH_SUGGESTIONS:
        if len(improvements) >= count:
            break
        if suggestion not in improvements:
            improvements.append(suggestion)
    return improvements


def analyze_job_match(resume_text: str, job_description: str) -> JobMatchResult:
    ensure_job_match_input(resume_text, job_description)

    keywords = extract_job_keywords(job_description)
    matches = [KeywordMatch(keyword=keyword, found=_contains(resume_text, keyword)) for keyword in keywords]
    found_count = sum(1 for match in matches if match.found)
    coverage = found_count / len(matches)

    missing = [match.keyword for match in matches if not match.found]
    for term in _extra_missing_terms(resume_text, job_description, keywords):
        if term not in missing:
            missing.append(term)

    raw_match = round_half_up(coverage * 100) + _match_adjustment(resume_text)
    overall_match = max(int(_job_value("min_match", 30)), min(int(_job_value("max_match", 95)), raw_match))

    bonus = _job_value("base_bonus", 5) + round_half_up(_job_value("coverage_bonus", 10) * coverage)
    length_factor = min(_job_value("length_cap", 15), len(resume_text) / _job_value("length_divisor", 500))
    raw_relevance = round_half_up(overall_match * _job_value("relevance_weight", 0.7) + bonus + length_factor)
    relevance = max(
        int(_job_value("min_relevance", 40)),
        min(int(_job_value("max_relevance", 98)), raw_relevance),
    )

    logger.info(
        "job_match_completed keywords=%s found=%s match=%s relevance=%s",
        len(matches),
        found_count,
        overall_match,
        relevance,
    )
    return JobMatchResult(
        overall_match=overall_match,
        keyword_matches=matches,
        missing_keywords=missing,
        suggested_improvements=suggest_improvements(missing),
        relevance_score=relevance,
    )
