"""JSON wire models for the fact-check endpoint."""

from typing import Any

from pydantic import BaseModel, Field, model_serializer

from gdelt_factcheck.data import ReliabilityVerdict, ScoredArticle

ENGINE = "gdelt-doc-v2"


class HealthResponse(BaseModel):
    status: str = "ok"


class ScoredArticleOut(BaseModel):
    title: str
    description: str
    url: str
    source: str
    published_at: str | None = Field(default=None, serialization_alias="publishedAt")
    language: str | None = None
    source_country: str | None = Field(default=None, serialization_alias="sourceCountry")
    similarity: float

    @classmethod
    def from_scored(cls, scored: ScoredArticle) -> "ScoredArticleOut":
        article = scored.article
        return cls(
            title=article.title,
            description=article.description,
            url=article.url,
            source=article.source,
            published_at=article.published_at,
            language=article.language,
            source_country=article.source_country,
            similarity=scored.similarity,
        )


class ReliabilityOut(BaseModel):
    score: int
    reason: str
    top_match: ScoredArticleOut | None = Field(default=None, serialization_alias="topMatch")
    matches: list[ScoredArticleOut] = Field(default_factory=list)

    @model_serializer(mode="wrap")
    def _omit_missing_top_match(self, handler: Any) -> dict[str, Any]:
        data = handler(self)
        if self.top_match is None:
            data.pop("topMatch", None)
            data.pop("top_match", None)
        return data

    @classmethod
    def from_verdict(cls, verdict: ReliabilityVerdict) -> "ReliabilityOut":
        return cls(
            score=verdict.score,
            reason=verdict.reason,
            top_match=ScoredArticleOut.from_scored(verdict.top_match) if verdict.top_match else None,
            matches=[ScoredArticleOut.from_scored(m) for m in verdict.matches],
        )


class FactCheckResponse(BaseModel):
    ok: bool = True
    engine: str = ENGINE
    reliability: ReliabilityOut


class ErrorResponse(BaseModel):
    ok: bool = False
    error: str
