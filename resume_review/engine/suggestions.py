from __future__ import annotations

import re

from resume_review.core.scoring import get_scoring_value

from .signals import ACTION_VERB_RE, QUANTIFIABLE_RE
from .vocabulary import SUGGESTION_POOL

_LINKEDIN_RE = re.compile(r"linkedin\.com|linkedin profile", re.IGNORECASE)
_PROJECT_RE = re.compile(r"\bprojects?\b", re.IGNORECASE)
_TECHNICAL_ROLE_RE = re.compile(r"\b(?:developer|engineer|programmer|coding|software|web|app)\b", re.IGNORECASE)


def move_to_top(pool: list[str], marker: str) -> None:
    """Move the first entry starting with ``marker`` (case-insensitive) to the front."""
    prefix = marker.lower()
    for index, entry in enumerate(pool):
        if entry.lower().startswith(prefix):
            pool.insert(0, pool.pop(index))
            return


def prioritize_pool(text: str) -> list[str]:
    pool = list(SUGGESTION_POOL)
    if not QUANTIFIABLE_RE.search(text):
        move_to_top(pool, "Quantify your achievements")
    if not ACTION_VERB_RE.search(text):
        move_to_top(pool, "Use strong action verbs")
    if not _LINKEDIN_RE.search(text):
        move_to_top(pool, "Add a LinkedIn profile")
    if not _PROJECT_RE.search(text):
        move_to_top(pool, "Consider adding a brief projects section")
    if _TECHNICAL_ROLE_RE.search(text):
        move_to_top(pool, "Add a brief technologies/tools section for technical roles")
        move_to_top(pool, "Add specific technical skills with proficiency levels")
    return pool


def select_suggestions(text: str) -> list[str]:
    count = int(get_scoring_value("suggestions.count", 5))
    window = int(get_scoring_value("suggestions.priority_window", 8))
    priority_picks = int(get_scoring_value("suggestions.priority_picks", 3))

    pool = prioritize_pool(text or "")
    picked: list[str] = []
    for entry in pool[:window]:
        if len(picked) >= priority_picks:
            break
        if entry not in picked:
            picked.append(entry)
    for entry in pool:
        if len(picked) >= count:
            break
        if entry not in picked:
            picked.append(entry)
    return picked
