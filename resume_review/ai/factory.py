from __future__ import annotations

from resume_review.ai.config import load_ai_config
from resume_review.ai.providers.heuristic_provider import HeuristicProvider
from resume_review.ai.providers.openai_provider import OpenAIProvider
from resume_review.ai.types import FeedbackProvider
from resume_review.core.config import settings


def _looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith("your_") or lower.startswith("replace_") or lower in {"changeme", "todo"}


def usable_api_key(api_key: str | None) -> str | None:
    key = (api_key or "").strip()
    if not key or _looks_like_placeholder(key):
        return None
    if len(key) < settings.min_api_key_length:
        return None
    return key


def get_feedback_provider(api_key: str | None = None) -> FeedbackProvider:
    """Pick the external provider when a usable credential exists, else the heuristic engine."""
    cfg = load_ai_config()
    heuristic = HeuristicProvider()

    if not settings.ai_enabled or cfg.provider == "heuristic":
        return heuristic

    if cfg.provider != "openai":
        raise ValueError(f"Unsupported AI_PROVIDER='{cfg.provider}'")

    key = usable_api_key(api_key) or usable_api_key(settings.openai_api_key)
    if key is None:
        return heuristic

    return OpenAIProvider(
        model=cfg.model,
        api_key=key,
        fallback=heuristic,
        base_url=settings.openai_base_url,
        timeout_s=settings.ai_timeout_s,
        max_retries=settings.ai_max_retries,
        temperature=cfg.temperature,
    )
