from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SkillCategory = Literal["technical", "soft", "domain"]
SourceType = Literal["pdf", "docx", "txt"]


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class FeedbackResult(_FrozenModel):
    overall_impression: str
    section_feedback: dict[str, str]
    suggestions: list[str] = Field(min_length=5, max_length=5)
    score: int = Field(ge=0, le=100)


class KeywordMatch(_FrozenModel):
    keyword: str
    found: bool


class JobMatchResult(_FrozenModel):
    overall_match: int = Field(ge=0, le=100)
    keyword_matches: list[KeywordMatch] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    suggested_improvements: list[str] = Field(min_length=5, max_length=5)
    relevance_score: int = Field(ge=0, le=100)


class FormattingCheckResult(_FrozenModel):
    name: str
    passed: bool
    message: str


class ATSResult(_FrozenModel):
    overall_score: int = Field(ge=0, le=100)
    keyword_results: list[KeywordMatch]
    formatting_results: list[FormattingCheckResult]
    recommendations: list[str] = Field(max_length=5)


class SkillItem(_FrozenModel):
    name: str
    count: int = Field(ge=1)
    category: SkillCategory


class ExperienceMetrics(_FrozenModel):
    total_years: int | None = Field(default=None, ge=0)
    companies: int = Field(default=0, ge=0)
    roles: int = Field(default=0, ge=0)
    recent_role: str | None = None


class ResumeAnalytics(_FrozenModel):
    skills: list[SkillItem] = Field(default_factory=list)
    experience: ExperienceMetrics
    insights: list[str] = Field(default_factory=list)


class ResumeTextRequest(BaseModel):
    resume_text: str = Field(default="", max_length=50000)


class JobMatchRequest(BaseModel):
    resume_text: str = Field(default="", max_length=50000)
    job_description_text: str = Field(default="", max_length=50000)


class ExtractTextResponse(BaseModel):
    filename: str
    source_type: SourceType
    text: str
    characters: int = Field(ge=0)
    warnings: list[str] = Field(default_factory=list)
