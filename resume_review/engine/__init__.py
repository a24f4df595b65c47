from .analytics import analyze_resume_analytics, extract_experience_metrics, extract_skills
from .ats import check_ats_compatibility
from .feedback import analyze_resume
from .job_match import InvalidInput, analyze_job_match, ensure_job_match_input
from .signals import ExtractedSignals, detect_signals
from .statistics import ContentStatistics, compute_statistics

__all__ = [
    "ContentStatistics",
    "compute_statistics",
    "ExtractedSignals",
    "detect_signals",
    "analyze_resume",
    "InvalidInput",
    "analyze_job_match",
    "ensure_job_match_input",
    "check_ats_compatibility",
    "analyze_resume_analytics",
    "extract_skills",
    "extract_experience_metrics",
]
