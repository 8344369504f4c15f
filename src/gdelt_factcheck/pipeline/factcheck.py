"""Fact-check pipeline: search GDELT, then score the claim against the results."""

import asyncio
import logging
import time

from gdelt_factcheck.data import ReliabilityVerdict
from gdelt_factcheck.reliability import DEFAULT_MAX_MATCHES, ReasonLanguage, build_reliability
from gdelt_factcheck.run_logger import RunLogger
from gdelt_factcheck.search.base import ArticleSearcher

DEFAULT_MAX_QUERY_LENGTH = 120

logger = logging.getLogger(__name__)


def build_query(text: str, max_length: int = DEFAULT_MAX_QUERY_LENGTH) -> str:
    """Trim the claim and cut it down to a provider-friendly query."""
    return text.strip()[:max_length]


class FactCheckPipeline:
    """Single-claim fact-check flow.

    Flow:
    1. Build the search query from the trimmed, truncated claim
    2. Fetch articles from the searcher (failures arrive as an empty list)
    3. Score the full claim against every article and build the verdict

    Args:
        searcher: Article searcher to query.
        max_query_length: Maximum characters sent as the search query.
        max_matches: Maximum scored articles kept in the verdict.
        reason_language: Language of the verdict reason.
        run_logger: Optional RunLogger for per-run JSON records.
    """

    def __init__(
        self,
        searcher: ArticleSearcher,
        *,
        max_query_length: int = DEFAULT_MAX_QUERY_LENGTH,
        max_matches: int = DEFAULT_MAX_MATCHES,
        reason_language: ReasonLanguage = "en",
        run_logger: RunLogger | None = None,
    ) -> None:
        self._searcher = searcher
        self._max_query_length = max_query_length
        self._max_matches = max_matches
        self._reason_language = reason_language
        self._run_logger = run_logger

    async def run(self, text: str) -> ReliabilityVerdict:
        """Fact-check a claim.

        Args:
            text: Claim text; callers validate that it is not blank.

        Returns:
            The reliability verdict for the claim.
        """
        query = build_query(text, self._max_query_length)
        record = self._run_logger.start_run(text, query) if self._run_logger else None

        t0 = time.monotonic()
        articles = await self._searcher.fetch_articles(query)
        search_duration = time.monotonic() - t0

        t0 = time.monotonic()
        verdict = build_reliability(
            text,
            articles,
            max_matches=self._max_matches,
            language=self._reason_language,
        )
        scoring_duration = time.monotonic() - t0

        logger.info(
            f"Fact-check scored {verdict.score} from {len(articles)} articles "
            f"(query: {query!r})"
        )

        if self._run_logger:
            self._run_logger.log_stage(
                record,
                stage="search",
                component=type(self._searcher).__name__,
                input_data={"query": query},
                output_data=articles,
                duration_seconds=search_duration,
            )
            self._run_logger.log_stage(
                record,
                stage="scoring",
                component="build_reliability",
                input_data={"claim": text, "article_count": len(articles)},
                output_data=verdict,
                duration_seconds=scoring_duration,
            )
            # File I/O off the event loop
            await asyncio.to_thread(
                self._run_logger.finish_run,
                record,
                article_count=len(articles),
                score=verdict.score,
            )

        return verdict
