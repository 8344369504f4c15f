"""Map retrieved articles to a discrete reliability verdict.

Every article is scored against the claim with ``similarity`` over its title
and description. The best similarity is then placed on a fixed ladder:

    > 0.70  -> 90
    > 0.45  -> 70
    > 0.25  -> 50
    else    -> 30

An empty article list is the "no evidence" floor and always scores 25.
"""

from dataclasses import dataclass
from typing import Literal

from gdelt_factcheck.data import Article, ReliabilityVerdict, ScoredArticle
from gdelt_factcheck.text import similarity

ReasonLanguage = Literal["en", "th"]

NO_EVIDENCE_SCORE = 25
DEFAULT_MAX_MATCHES = 10

REASONS: dict[str, dict[int, str]] = {
    "en": {
        90: "very close content match found in the global news corpus",
        70: "a moderately similar article found",
        50: "a loosely related article found",
        30: "retrieved articles do not match the core claim",
        25: "no comparable news found",
    },
    "th": {
        90: "พบข่าวที่มีเนื้อหาใกล้เคียงมากในฐานข่าวระดับโลก",
        70: "พบข่าวที่ใกล้เคียงระดับหนึ่ง",
        50: "พบข่าวที่เกี่ยวข้องห่าง ๆ",
        30: "ข่าวที่พบยังไม่ตรงสาระสำคัญของข้อความนี้",
        25: "ไม่พบข่าวที่ใกล้เคียง",
    },
}


@dataclass(frozen=True)
class Tier:
    """One rung of the threshold ladder: similarity strictly above ``threshold``."""

    threshold: float
    score: int


# Evaluated top-down, first match wins.
LADDER: tuple[Tier, ...] = (
    Tier(threshold=0.70, score=90),
    Tier(threshold=0.45, score=70),
    Tier(threshold=0.25, score=50),
)
FLOOR_SCORE = 30

VERDICT_SCORES = frozenset({NO_EVIDENCE_SCORE, FLOOR_SCORE, *(t.score for t in LADDER)})


def score_for_similarity(top_similarity: float) -> int:
    """Return the verdict score for the best similarity found."""
    for tier in LADDER:
        if top_similarity > tier.threshold:
            return tier.score
    return FLOOR_SCORE


def score_articles(input_text: str, articles: list[Article]) -> list[ScoredArticle]:
    """Score articles against the claim, best first.

    Ties keep the provider's order (``sorted`` is stable).
    """
    scored = [
        ScoredArticle(
            article=article,
            similarity=similarity(input_text, f"{article.title} {article.description}"),
        )
        for article in articles
    ]
    return sorted(scored, key=lambda s: s.similarity, reverse=True)


def build_reliability(
    input_text: str,
    articles: list[Article],
    *,
    max_matches: int = DEFAULT_MAX_MATCHES,
    language: ReasonLanguage = "en",
) -> ReliabilityVerdict:
    """Build a reliability verdict for a claim from retrieved articles.

    Args:
        input_text: Full claim text (not the truncated search query).
        articles: Articles in provider order.
        max_matches: Maximum number of scored articles to keep in ``matches``.
        language: Language of the human-readable reason.

    Returns:
        The verdict. Never raises for empty input; that is the floor case.
    """
    reasons = REASONS[language]
    if not articles:
        return ReliabilityVerdict(score=NO_EVIDENCE_SCORE, reason=reasons[NO_EVIDENCE_SCORE])

    scored = score_articles(input_text, articles)
    top = scored[0]
    score = score_for_similarity(top.similarity)
    return ReliabilityVerdict(
        score=score,
        reason=reasons[score],
        top_match=top,
        matches=tuple(scored[:max_matches]),
    )
