from __future__ import annotations

import re

from .scoring import ScoreAccumulator, feedback_value
from .signals import ExtractedSignals

PROFESSIONAL_SUMMARY = "Professional Summary"
WORK_EXPERIENCE = "Work Experience"
SKILLS = "Skills"
EDUCATION = "Education"
PROJECTS = "Projects"
CERTIFICATIONS = "Certifications"

CANONICAL_SECTIONS: tuple[str, ...] = (PROFESSIONAL_SUMMARY, WORK_EXPERIENCE, SKILLS, EDUCATION)

EMPTY_SECTION_PLACEHOLDER = "Unable to analyze - no content provided"

MISSING_MESSAGES: dict[str, str] = {
    PROFESSIONAL_SUMMARY: (
        "Your resume appears to be missing a clear professional summary or objective section. "
        "Adding a concise 3-4 line summary would help recruiters quickly understand your value proposition."
    ),
    WORK_EXPERIENCE: (
        "The work experience section appears to be missing or not clearly defined. "
        "This is a critical section that should highlight your relevant roles, responsibilities, "
        "and especially your achievements."
    ),
    SKILLS: (
        "Your resume lacks a clear skills section or doesn't highlight specific competencies. "
        "Adding a well-organized skills section would help recruiters quickly identify your capabilities."
    ),
    EDUCATION: (
        "Your resume appears to be missing an education section. Even with extensive experience, "
        "including your educational background provides a complete picture."
    ),
}

_VALUE_LANGUAGE_RE = re.compile(r"value|contribute|expertise|specialize|experienced in", re.IGNORECASE)

_SUMMARY_NAMES = ("professional summary", "summary", "objective", "profile")
_EXPERIENCE_NAMES = ("experience", "work experience", "employment history")
_EDUCATION_NAMES = ("education", "academic background")
_CERTIFICATION_NAMES = ("certifications", "licenses")

# Detected sections that already feed one of the dedicated rules.
_HANDLED_SECTIONS = frozenset(
    {
        "professional summary",
        "summary",
        "objective",
        "profile",
        "experience",
        "work experience",
        "employment history",
        "skills",
        "technical skills",
        "education",
        "academic background",
        "projects",
        "certifications",
        "licenses",
    }
)


def _summary_feedback(text: str, signals: ExtractedSignals, accumulator: ScoreAccumulator) -> str:
    if not signals.has_section(*_SUMMARY_NAMES):
        accumulator.add("section.summary", feedback_value("sections.summary.missing", -5))
        return MISSING_MESSAGES[PROFESSIONAL_SUMMARY]

    window = feedback_value("sections.summary.value_window", 500)
    if _VALUE_LANGUAGE_RE.search(text[:window]):
        accumulator.add("section.summary", feedback_value("sections.summary.valued", 5))
        return (
            "Your summary effectively communicates your value proposition and key expertise. "
            "Consider adding 1-2 more specific achievements to make it even stronger."
        )

    accumulator.add("section.summary", feedback_value("sections.summary.generic", -3))
    return (
        "Your summary would benefit from a clearer articulation of your unique value proposition "
        "and specific expertise. Currently, it's somewhat generic and doesn't immediately grab attention."
    )


def _experience_feedback(signals: ExtractedSignals, accumulator: ScoreAccumulator) -> str:
    if not signals.has_section(*_EXPERIENCE_NAMES):
        accumulator.add("section.experience", feedback_value("sections.experience.missing", -10))
        return MISSING_MESSAGES[WORK_EXPERIENCE]

    if signals.quantifiable_count > feedback_value("sections.experience.quantified_above", 3):
        accumulator.add("section.experience", feedback_value("sections.experience.quantified", 8))
        return (
            "Your experience section effectively uses quantifiable achievements "
            f"({signals.quantifiable_count} instances noted) which demonstrates your impact. "
            "Continue using the STAR method to showcase results."
        )

    accumulator.add("section.experience", feedback_value("sections.experience.unquantified", -5))
    return (
        "While your experience section outlines your responsibilities, it would be significantly "
        "stronger with more measurable outcomes and specific accomplishments. Try adding metrics "
        "like percentages, dollar amounts, or other quantifiable results."
    )


def _technical_clause(skills: tuple[str, ...], accumulator: ScoreAccumulator) -> str:
    if len(skills) >= feedback_value("sections.skills.technical.strong_at", 4):
        accumulator.add("section.skills.technical", feedback_value("sections.skills.technical.strong", 7))
        return (
            f"Good range of technical skills including {', '.join(skills[:3])}, "
            f"and {len(skills) - 3} more. "
        )
    if skills:
        accumulator.add("section.skills.technical", feedback_value("sections.skills.technical.some", 3))
        return f"You mention some technical skills like {', '.join(skills)}, but consider expanding this list. "
    accumulator.add("section.skills.technical", feedback_value("sections.skills.technical.none", -5))
    return "Your resume could benefit from more specific technical skills relevant to your field. "


def _soft_clause(skills: tuple[str, ...], accumulator: ScoreAccumulator) -> str:
    if len(skills) >= feedback_value("sections.skills.soft.strong_at", 3):
        accumulator.add("section.skills.soft", feedback_value("sections.skills.soft.strong", 5))
        return f"You effectively highlight soft skills such as {', '.join(skills[:3])}."
    if skills:
        accumulator.add("section.skills.soft", feedback_value("sections.skills.soft.some", 2))
        return f"You mention {', '.join(skills)} as soft skills, but should include more to show well-roundedness."
    accumulator.add("section.skills.soft", feedback_value("sections.skills.soft.none", -3))
    return "Consider adding relevant soft skills to complement your technical abilities."


def _skills_feedback(signals: ExtractedSignals, accumulator: ScoreAccumulator) -> str:
    if not signals.technical_skills and not signals.soft_skills:
        accumulator.add("section.skills", feedback_value("sections.skills.missing", -8))
        return MISSING_MESSAGES[SKILLS]
    return _technical_clause(signals.technical_skills, accumulator) + _soft_clause(
        signals.soft_skills, accumulator
    )


def _education_feedback(signals: ExtractedSignals, accumulator: ScoreAccumulator) -> str:
    if not signals.has_section(*_EDUCATION_NAMES):
        accumulator.add("section.education", feedback_value("sections.education.missing", -5))
        return MISSING_MESSAGES[EDUCATION]

    if signals.has_degree:
        accumulator.add("section.education", feedback_value("sections.education.with_degree", 4))
        return (
            "Your education section is clearly presented with necessary details. Consider adding "
            "any relevant coursework or academic achievements that relate to your target role."
        )

    accumulator.add("section.education", feedback_value("sections.education.without_degree", 0))
    return (
        "Your education section could be enhanced with more details about your degrees, "
        "relevant coursework, or academic achievements."
    )


def build_section_feedback(
    text: str,
    signals: ExtractedSignals,
    accumulator: ScoreAccumulator,
) -> dict[str, str]:
    feedback: dict[str, str] = {
        PROFESSIONAL_SUMMARY: _summary_feedback(text, signals, accumulator),
        WORK_EXPERIENCE: _experience_feedback(signals, accumulator),
        SKILLS: _skills_feedback(signals, accumulator),
        EDUCATION: _education_feedback(signals, accumulator),
    }

    if signals.has_section("projects"):
        accumulator.add("section.projects", feedback_value("sections.projects", 5))
        feedback[PROJECTS] = (
            "Including a projects section demonstrates initiative and practical application of your "
            "skills. Make sure each project highlights specific technologies used and measurable outcomes."
        )

    if signals.has_section(*_CERTIFICATION_NAMES):
        accumulator.add("section.certifications", feedback_value("sections.certifications", 4))
        feedback[CERTIFICATIONS] = (
            "Your certifications add credibility to your qualifications. Keep these updated and "
            "ensure they're relevant to your target roles."
        )

    existing = {key.lower() for key in feedback}
    for section in signals.sections:
        if section in _HANDLED_SECTIONS or section in existing:
            continue
        title = section.title()
        accumulator.add(f"section.{section}", feedback_value("sections.other", 0))
        feedback[title] = (
            f"This {title} section adds dimension to your profile. Consider connecting these "
            "elements more explicitly to your professional value proposition."
        )
        existing.add(section)

    for key in CANONICAL_SECTIONS:
        feedback.setdefault(key, MISSING_MESSAGES[key])
    return feedback
