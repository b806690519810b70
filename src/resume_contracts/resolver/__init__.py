"""Resolution of resume DSL documents into renderer-ready layout trees."""

from resume_contracts.resolver.engine import (
    ResolutionResult,
    ResumeResolver,
    format_timestamp,
    resolve_resume,
    utc_now,
)

__all__ = [
    "ResolutionResult",
    "ResumeResolver",
    "format_timestamp",
    "resolve_resume",
    "utc_now",
]
