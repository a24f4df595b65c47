from __future__ import annotations

import logging
import re

from resume_review.core.scoring import get_scoring_value
from resume_review.schemas.review import ExperienceMetrics, ResumeAnalytics, SkillItem

from .signals import count_term, section_pattern
from .vocabulary import DOMAIN_SKILLS, KNOWN_ROLE_TITLES, ROLE_WORDS, SOFT_SKILLS, TECHNICAL_SKILLS

logger = logging.getLogger(__name__)

_YEARS_RE = re.compile(r"([0-9]+)\+?\s*(?:years|year|yrs|yr)(?:\s*of)?\s*(?:experience|exp)\b", re.IGNORECASE)
_COMPANY_RE = re.compile(r"\b(?:inc|llc|ltd|corporation|corp|company)\b", re.IGNORECASE)
_ROLE_RE = re.compile(r"\b(?:" + "|".join(ROLE_WORDS) + r")\b", re.IGNORECASE)

_CATEGORIES = (
    ("technical", TECHNICAL_SKILLS),
    ("soft", SOFT_SKILLS),
    ("domain", DOMAIN_SKILLS),
)


def extract_skills(text: str) -> list[SkillItem]:
    limit = int(get_scoring_value("analytics.max_skills", 15))
    items: list[SkillItem] = []
    for category, vocabulary in _CATEGORIES:
        for term in vocabulary:
            count = count_term(text, term)
            if count:
                items.append(SkillItem(name=term, count=count, category=category))
    # sorted() is stable, so ties keep category then vocabulary order.
    ranked = sorted(items, key=lambda item: item.count, reverse=True)
    return ranked[:limit]


def extract_experience_metrics(text: str) -> ExperienceMetrics:
    source = text or ""
    years_match = _YEARS_RE.search(source)
    roles = {match.group(0).lower() for match in _ROLE_RE.finditer(source)}
    recent_role = next(
        (title for title in KNOWN_ROLE_TITLES if section_pattern(title).search(source)),
        None,
    )
    return ExperienceMetrics(
        total_years=int(years_match.group(1)) if years_match else None,
        companies=len(_COMPANY_RE.findall(source)),
        roles=len(roles),
        recent_role=recent_role,
    )


def _insights(skills: list[SkillItem], experience: ExperienceMetrics) -> list[str]:
    technical = sum(1 for item in skills if item.category == "technical")
    soft = sum(1 for item in skills if item.category == "soft")
    if technical > soft * 2:
        balance = "Your resume emphasizes technical skills. Consider balancing with more soft skills."
    elif soft > technical:
        balance = "Your resume highlights soft skills well. Consider adding more technical specifics."
    else:
        balance = "Your resume shows a good balance of technical and soft skills."

    if skills and skills[0].count > 2:
        repetition = f"You mention {skills[0].name} frequently. Ensure you're using varied terminology."
    else:
        repetition = "Consider using industry-specific keywords more consistently."

    if experience.total_years is not None and experience.total_years > 5:
        level = "Your experience level positions you well for senior roles."
    else:
        level = "For your experience level, focus on highlighting projects and achievements."
    return [balance, repetition, level]


def analyze_resume_analytics(text: str) -> ResumeAnalytics:
    skills = extract_skills(text or "")
    experience = extract_experience_metrics(text)
    logger.info(
        "resume_analytics_completed skills=%s years=%s roles=%s",
        len(skills),
        experience.total_years,
        experience.roles,
    )
    return ResumeAnalytics(skills=skills, experience=experience, insights=_insights(skills, experience))
