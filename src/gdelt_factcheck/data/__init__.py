"""Data models for gdelt-factcheck."""

from gdelt_factcheck.data.models import (
    DEFAULT_SOURCE,
    Article,
    ReliabilityVerdict,
    ScoredArticle,
    SearchOutcome,
    SearchStatus,
)

__all__ = [
    "DEFAULT_SOURCE",
    "Article",
    "ReliabilityVerdict",
    "ScoredArticle",
    "SearchOutcome",
    "SearchStatus",
]
