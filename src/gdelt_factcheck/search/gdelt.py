"""Article search against the GDELT Doc 2.0 API."""

import logging
from typing import Any

import httpx

from gdelt_factcheck.data import DEFAULT_SOURCE, Article, SearchOutcome, SearchStatus

GDELT_DOC_API_URL = "https://api.gdeltproject.org/api/v2/doc/doc"

# GDELT has shipped the document list under both names.
_DOCUMENT_LIST_KEYS = ("articles", "documents")

# Candidate raw field names per Article attribute, first non-empty wins.
_TITLE_KEYS = ("title", "semtag")
_DESCRIPTION_KEYS = ("seendesc", "excerpt")
_URL_KEYS = ("url", "shareurl", "sourceurl")
_SOURCE_KEYS = ("domain", "source")
_PUBLISHED_KEYS = ("seendate", "date")

logger = logging.getLogger(__name__)


class GdeltSearcher:
    """Search for news articles using the GDELT Doc 2.0 API.

    Retrieval failures never raise: a non-2xx status, a body that is not a
    JSON object, or a timeout is logged and reported as an error outcome,
    which ``fetch_articles`` turns into an empty list. Other transport
    errors (DNS, refused connections) propagate to the caller.

    Args:
        base_url: Doc API endpoint.
        mode: GDELT output mode (default "ArtList").
        max_records: Maximum documents to request (GDELT caps this at 250).
        sort: Result ordering (default newest first).
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        *,
        base_url: str = GDELT_DOC_API_URL,
        mode: str = "ArtList",
        max_records: int = 30,
        sort: str = "datedesc",
        timeout: float = 30.0,
    ) -> None:
        self._base_url = base_url
        self._mode = mode
        self._max_records = max_records
        self._sort = sort
        self._timeout = timeout

    def build_params(self, query: str) -> dict[str, str | int]:
        """Query string parameters for a search."""
        return {
            "query": query,
            "mode": self._mode,
            "format": "json",
            "maxrecords": self._max_records,
            "sort": self._sort,
        }

    async def search(self, query: str) -> SearchOutcome:
        """Search GDELT for articles matching the query.

        Args:
            query: Search text, already trimmed and truncated.

        Returns:
            Outcome with normalized articles, or an empty/error outcome.
        """
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(self._base_url, params=self.build_params(query))
        except httpx.TimeoutException as e:
            logger.warning("GDELT request timed out: %s", e)
            return SearchOutcome(status=SearchStatus.ERROR, error=f"timeout: {e}")

        if not response.is_success:
            logger.warning("GDELT error %s %s", response.status_code, response.text)
            return SearchOutcome(
                status=SearchStatus.ERROR,
                error=f"HTTP {response.status_code}",
            )

        try:
            data = response.json()
        except ValueError:
            # GDELT answers some rejected queries with 200 and a plain-text message
            logger.warning("GDELT returned a non-JSON body: %s", response.text[:200])
            return SearchOutcome(status=SearchStatus.ERROR, error="malformed response")

        if not isinstance(data, dict):
            logger.warning("GDELT returned unexpected JSON type %s", type(data).__name__)
            return SearchOutcome(status=SearchStatus.ERROR, error="malformed response")

        documents = _document_list(data)
        articles = tuple(normalize_document(item) for item in documents if isinstance(item, dict))
        if not articles:
            return SearchOutcome(status=SearchStatus.EMPTY)
        return SearchOutcome(status=SearchStatus.OK, articles=articles)

    async def fetch_articles(self, query: str) -> list[Article]:
        """Search and collapse "no data" and "error" into an empty list."""
        outcome = await self.search(query)
        return list(outcome.articles)


def _document_list(data: dict[str, Any]) -> list[Any]:
    for key in _DOCUMENT_LIST_KEYS:
        value = data.get(key)
        if isinstance(value, list):
            return value
    return []


def _first_present(item: dict[str, Any], keys: tuple[str, ...]) -> str | None:
    """Return the first non-empty value among ``keys``, as a string."""
    for key in keys:
        value = item.get(key)
        if value:
            return str(value)
    return None


def normalize_document(item: dict[str, Any]) -> Article:
    """Map a raw GDELT document to an Article.

    Each attribute tries its candidate field names in order; missing text
    fields fall back to "" and a missing source to "GDELT".
    """
    return Article(
        title=_first_present(item, _TITLE_KEYS) or "",
        description=_first_present(item, _DESCRIPTION_KEYS) or "",
        url=_first_present(item, _URL_KEYS) or "",
        source=_first_present(item, _SOURCE_KEYS) or DEFAULT_SOURCE,
        published_at=_first_present(item, _PUBLISHED_KEYS),
        language=_first_present(item, ("language",)),
        source_country=_first_present(item, ("sourcecountry",)),
    )
