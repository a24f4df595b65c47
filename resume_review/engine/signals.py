from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

from .statistics import compute_statistics
from .vocabulary import (
    ACTION_VERBS,
    DOMAIN_SKILLS,
    QUANTIFIABLE_UNITS,
    SECTION_NAMES,
    SOFT_SKILLS,
    TECHNICAL_SKILLS,
)

QUANTIFIABLE_RE = re.compile(
    r"\d+%|\$\d+|\d+ (?:" + "|".join(QUANTIFIABLE_UNITS) + r")",
    re.IGNORECASE,
)
ACTION_VERB_RE = re.compile(r"\b(?:" + "|".join(ACTION_VERBS) + r")\b", re.IGNORECASE)
DEGREE_RE = re.compile(r"degree|bachelor|master|phd|diploma|certificate", re.IGNORECASE)
DATE_RE = re.compile(r"(?<!\d)(?:19|20)\d{2}(?!\d)|graduated|completed", re.IGNORECASE)
EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")


@dataclass(frozen=True)
class ExtractedSignals:
    word_count: int
    sentence_count: int
    average_sentence_length: float
    sections: tuple[str, ...]
    quantifiable_count: int
    action_verb_count: int
    technical_skills: tuple[str, ...]
    soft_skills: tuple[str, ...]
    domain_skills: tuple[str, ...]
    has_degree: bool
    has_date: bool
    has_contact: bool

    def has_section(self, *names: str) -> bool:
        return any(name in self.sections for name in names)


@lru_cache(maxsize=None)
def section_pattern(name: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(name)}\b", re.IGNORECASE)


@lru_cache(maxsize=None)
def term_pattern(term: str) -> re.Pattern[str]:
    # Lookaround boundaries keep terms like "c#" and ".net" matchable.
    escaped = re.escape(term.lower())
    escaped = escaped.replace(r"\-", r"[\s-]").replace(r"\ ", r"\s+")
    return re.compile(rf"(?<![A-Za-z0-9_]){escaped}(?![A-Za-z0-9_])", re.IGNORECASE)


def detect_sections(text: str) -> tuple[str, ...]:
    return tuple(name for name in SECTION_NAMES if section_pattern(name).search(text or ""))


def count_quantifiables(text: str) -> int:
    return len(QUANTIFIABLE_RE.findall(text or ""))


def count_action_verbs(text: str) -> int:
    return len(ACTION_VERB_RE.findall(text or ""))


def match_terms(text: str, vocabulary: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(term for term in vocabulary if term_pattern(term).search(text or ""))


def count_term(text: str, term: str) -> int:
    return len(term_pattern(term).findall(text or ""))


def detect_signals(text: str) -> ExtractedSignals:
    source = text or ""
    stats = compute_statistics(source)
    return ExtractedSignals(
        word_count=stats.word_count,
        sentence_count=stats.sentence_count,
        average_sentence_length=stats.average_sentence_length,
        sections=detect_sections(source),
        quantifiable_count=count_quantifiables(source),
        action_verb_count=count_action_verbs(source),
        technical_skills=match_terms(source, TECHNICAL_SKILLS),
        soft_skills=match_terms(source, SOFT_SKILLS),
        domain_skills=match_terms(source, DOMAIN_SKILLS),
        has_degree=bool(DEGREE_RE.search(source)),
        has_date=bool(DATE_RE.search(source)),
        has_contact=bool(EMAIL_RE.search(source)),
    )
