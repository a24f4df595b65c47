from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from resume_review.core.scoring import get_scoring_value
from resume_review.schemas.review import ATSResult, FormattingCheckResult, KeywordMatch

from .signals import EMAIL_RE, section_pattern
from .statistics import round_half_up
from .vocabulary import ATS_GENERIC_TIPS, ATS_KEYWORDS

logger = logging.getLogger(__name__)

_BULLET_GLYPHS = "➢➤►▶◆◇■□●○◦❖✓✔✗★☆→⇒»♦‣⁃▪▫"


@dataclass(frozen=True)
class FormattingCheck:
    name: str
    pattern: re.Pattern[str]
    # True when the pattern must be present, False when it must be absent.
    positive: bool
    remediation: str

    def passes(self, text: str) -> bool:
        found = bool(self.pattern.search(text))
        return found if self.positive else not found


FORMATTING_CHECKS: tuple[FormattingCheck, ...] = (
    FormattingCheck(
        name="Complex tables",
        pattern=re.compile(r"\|\s*-+\s*\|"),
        positive=False,
        remediation="Tables can confuse ATS systems. Use simple bullet points instead.",
    ),
    FormattingCheck(
        name="Uncommon bullet points",
        pattern=re.compile(rf"^[ \t]*[{_BULLET_GLYPHS}]", re.MULTILINE),
        positive=False,
        remediation="Exotic bullet points may not parse correctly. Use standard bullets.",
    ),
    FormattingCheck(
        name="Proper section headers",
        pattern=re.compile(r"(?:experience|education|skills|projects)[ \t]*:?[ \t]*$", re.IGNORECASE | re.MULTILINE),
        positive=True,
        remediation="Put each section title (Experience, Education, Skills) on its own line so ATS can categorize it.",
    ),
    FormattingCheck(
        name="Contact information",
        pattern=EMAIL_RE,
        positive=True,
        remediation="Add a plain-text email address so ATS can pick up your contact details.",
    ),
    FormattingCheck(
        name="Date formats",
        pattern=re.compile(
            r"\b(?:19|20)\d{2}\s*(?:-|–|—|to)\s*(?:(?:19|20)\d{2}|present|current|now)\b",
            re.IGNORECASE,
        ),
        positive=True,
        remediation="Write employment dates as year ranges (e.g., 2019 - 2023 or 2021 - Present).",
    ),
)


def _recommendations(missing_keywords: list[str], failed: list[FormattingCheck]) -> list[str]:
    limit = int(get_scoring_value("ats.max_recommendations", 5))
    candidates: list[str] = []
    if missing_keywords:
        candidates.append(f"Consider adding clear section headers for: {', '.join(missing_keywords)}.")
    candidates.extend(check.remediation for check in failed)
    candidates.extend(ATS_GENERIC_TIPS)

    recommendations: list[str] = []
    for item in candidates:
        if item not in recommendations:
            recommendations.append(item)
    return recommendations[:limit]


def check_ats_compatibility(text: str) -> ATSResult:
    source = text or ""
    keyword_results = [
        KeywordMatch(keyword=keyword, found=bool(section_pattern(keyword).search(source)))
        for keyword in ATS_KEYWORDS
    ]
    formatting_results = [
        FormattingCheckResult(name=check.name, passed=check.passes(source), message=check.remediation)
        for check in FORMATTING_CHECKS
    ]

    keyword_rate = sum(1 for item in keyword_results if item.found) / len(keyword_results)
    formatting_rate = sum(1 for item in formatting_results if item.passed) / len(formatting_results)
    keyword_weight = float(get_scoring_value("ats.keyword_weight", 0.4))
    formatting_weight = float(get_scoring_value("ats.formatting_weight", 0.6))
    score = round_half_up((keyword_rate * keyword_weight + formatting_rate * formatting_weight) * 100)

    missing = [item.keyword for item in keyword_results if not item.found]
    failed = [check for check in FORMATTING_CHECKS if not check.passes(source)]

    logger.info(
        "ats_check_completed score=%s missing_keywords=%s failed_checks=%s",
        score,
        len(missing),
        len(failed),
    )
    return ATSResult(
        overall_score=max(0, min(100, score)),
        keyword_results=keyword_results,
        formatting_results=formatting_results,
        recommendations=_recommendations(missing, failed),
    )
