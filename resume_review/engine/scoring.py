from __future__ import annotations

from dataclasses import dataclass, field

from resume_review.core.scoring import get_scoring_value

from .signals import ExtractedSignals
from .statistics import round_half_up


def feedback_value(path: str, default: int) -> int:
    return int(get_scoring_value(f"feedback.{path}", default))


@dataclass(frozen=True)
class ScoreAdjustment:
    source: str
    delta: int


@dataclass
class ScoreAccumulator:
    """Running total shared by the content rules and the section rules of one review."""

    base: int = field(default_factory=lambda: feedback_value("base_score", 65))
    adjustments: list[ScoreAdjustment] = field(default_factory=list)

    def add(self, source: str, delta: int) -> None:
        self.adjustments.append(ScoreAdjustment(source=source, delta=delta))

    @property
    def total(self) -> int:
        return sum(item.delta for item in self.adjustments)

    def final_score(self) -> int:
        low = feedback_value("min_score", 30)
        high = feedback_value("max_score", 98)
        return max(low, min(high, self.base + self.total))


def word_count_adjustment(word_count: int) -> tuple[int, str]:
    if word_count < feedback_value("word_count.short_below", 200):
        return (
            feedback_value("word_count.short", -10),
            f"Your resume appears quite brief at only about {word_count} words, "
            "which may not provide enough detail for recruiters.",
        )
    if word_count > feedback_value("word_count.long_above", 700):
        return (
            feedback_value("word_count.long", -5),
            f"At over {word_count} words, your resume is quite detailed, "
            "though possibly too lengthy for quick scanning.",
        )
    return (
        feedback_value("word_count.good", 5),
        f"Your resume is a good length at approximately {word_count} words, "
        "making it substantial yet scannable.",
    )


def sentence_length_adjustment(average_sentence_length: float) -> tuple[int, str]:
    rounded = round_half_up(average_sentence_length)
    if average_sentence_length > feedback_value("sentence_length.long_above", 25):
        return (
            feedback_value("sentence_length.long", -5),
            f"Your sentences tend to be lengthy (averaging {rounded} words), "
            "which can make reading more difficult.",
        )
    if average_sentence_length < feedback_value("sentence_length.short_below", 8):
        return (
            feedback_value("sentence_length.short", -3),
            f"Your writing style uses quite short sentences (averaging {rounded} words), "
            "which may appear fragmented.",
        )
    return (
        feedback_value("sentence_length.good", 3),
        "Your writing style has good sentence structure with appropriate length "
        f"(averaging {rounded} words).",
    )


def quantifiable_adjustment(count: int) -> tuple[int, str]:
    if count > feedback_value("quantifiable.strong_above", 5):
        return (
            feedback_value("quantifiable.strong", 10),
            f"Your resume effectively includes {count} quantifiable achievements, "
            "which strengthens your impact.",
        )
    if count > feedback_value("quantifiable.some_above", 2):
        return (
            feedback_value("quantifiable.some", 5),
            f"You've included {count} quantifiable results, which is helpful, "
            "though more would strengthen your impact.",
        )
    return (
        feedback_value("quantifiable.weak", -8),
        f"Your resume lacks sufficient quantifiable achievements, with only {count} "
        "metrics to demonstrate your impact.",
    )


def action_verb_adjustment(count: int) -> tuple[int, str]:
    if count > feedback_value("action_verbs.strong_above", 15):
        return (
            feedback_value("action_verbs.strong", 8),
            "You use strong action verbs throughout your descriptions, "
            "creating dynamic and engaging content.",
        )
    if count > feedback_value("action_verbs.some_above", 8):
        return (
            feedback_value("action_verbs.some", 4),
            "Your use of action verbs is adequate, though increasing their frequency "
            "would strengthen your descriptions.",
        )
    return (
        feedback_value("action_verbs.weak", -7),
        "Your descriptions could benefit from more powerful action verbs "
        "to convey your capabilities and achievements.",
    )


def score_content(signals: ExtractedSignals, accumulator: ScoreAccumulator) -> str:
    """Apply the content rules in order and return the overall impression."""
    rules = (
        ("word_count", word_count_adjustment(signals.word_count)),
        ("sentence_length", sentence_length_adjustment(signals.average_sentence_length)),
        ("quantifiable", quantifiable_adjustment(signals.quantifiable_count)),
        ("action_verbs", action_verb_adjustment(signals.action_verb_count)),
    )
    sentences: list[str] = []
    for source, (delta, sentence) in rules:
        accumulator.add(source, delta)
        sentences.append(sentence)
    return " ".join(sentences)
