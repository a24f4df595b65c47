from __future__ import annotations

import logging

from resume_review.schemas.review import FeedbackResult

from .scoring import ScoreAccumulator, feedback_value, score_content
from .sections import CANONICAL_SECTIONS, EMPTY_SECTION_PLACEHOLDER, build_section_feedback
from .signals import detect_signals
from .suggestions import select_suggestions
from .vocabulary import EMPTY_RESUME_SUGGESTIONS

logger = logging.getLogger(__name__)

EMPTY_RESUME_IMPRESSION = (
    "This appears to be an empty resume. Please upload your resume content for a detailed analysis."
)
EMPTY_CONTENT_NOTE = (
    "No content was found to analyze. Please provide your resume text to receive specific feedback."
)


def _empty_feedback() -> FeedbackResult:
    section_feedback = {key: EMPTY_SECTION_PLACEHOLDER for key in CANONICAL_SECTIONS}
    section_feedback["Content"] = EMPTY_CONTENT_NOTE
    return FeedbackResult(
        overall_impression=EMPTY_RESUME_IMPRESSION,
        section_feedback=section_feedback,
        suggestions=list(EMPTY_RESUME_SUGGESTIONS),
        score=feedback_value("empty_score", 0),
    )


def analyze_resume(text: str) -> FeedbackResult:
    if not text:
        logger.info("resume_review_empty_input")
        return _empty_feedback()

    signals = detect_signals(text)
    accumulator = ScoreAccumulator()
    overall_impression = score_content(signals, accumulator)
    section_feedback = build_section_feedback(text, signals, accumulator)
    suggestions = select_suggestions(text)
    score = accumulator.final_score()

    logger.info(
        "resume_review_completed score=%s words=%s sections=%s adjustment=%s",
        score,
        signals.word_count,
        len(section_feedback),
        accumulator.total,
    )
    return FeedbackResult(
        overall_impression=overall_impression,
        section_feedback=section_feedback,
        suggestions=suggestions,
        score=score,
    )
