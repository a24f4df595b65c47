from __future__ import annotations

import math
import re
from dataclasses import dataclass

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")


@dataclass(frozen=True)
class ContentStatistics:
    word_count: int
    sentence_count: int
    average_sentence_length: float


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_statistics(text: str) -> ContentStatistics:
    words = (text or "").split()
    sentences = [segment for segment in _SENTENCE_SPLIT_RE.split(text or "") if segment.strip()]
    word_count = len(words)
    sentence_count = len(sentences)
    return ContentStatistics(
        word_count=word_count,
        sentence_count=sentence_count,
        average_sentence_length=word_count / max(1, sentence_count),
    )
