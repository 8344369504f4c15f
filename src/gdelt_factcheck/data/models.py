"""Core data models for the GDELT fact-check service."""

from dataclasses import dataclass, field
from enum import StrEnum

DEFAULT_SOURCE = "GDELT"


class SearchStatus(StrEnum):
    """Outcome of a single provider search."""

    OK = "ok"
    EMPTY = "empty"
    ERROR = "error"


@dataclass(frozen=True)
class Article:
    """A news article normalized from a GDELT document."""

    title: str = ""
    description: str = ""
    url: str = ""
    source: str = DEFAULT_SOURCE
    published_at: str | None = None
    language: str | None = None
    source_country: str | None = None


@dataclass(frozen=True)
class ScoredArticle:
    """An article paired with its lexical similarity to the claim."""

    article: Article
    similarity: float = 0.0


@dataclass(frozen=True)
class ReliabilityVerdict:
    """Scored, explained verdict for a claim.

    ``matches`` holds the best-scoring articles in non-increasing order of
    similarity; ``top_match`` is its first element, or None when nothing was
    retrieved.
    """

    score: int
    reason: str
    top_match: ScoredArticle | None = None
    matches: tuple[ScoredArticle, ...] = ()


@dataclass(frozen=True)
class SearchOutcome:
    """Result of querying the provider.

    Distinguishes "nothing found" from "request failed" so callers that care
    can tell them apart. Both carry an empty ``articles`` tuple.
    """

    status: SearchStatus
    articles: tuple[Article, ...] = field(default_factory=tuple)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is SearchStatus.OK
