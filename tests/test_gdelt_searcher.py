"""Tests for GdeltSearcher."""

from typing import Any

import httpx
import pytest

from gdelt_factcheck.data import Article, SearchStatus
from gdelt_factcheck.search.gdelt import GDELT_DOC_API_URL, GdeltSearcher, normalize_document


def _patch_get(
    monkeypatch: pytest.MonkeyPatch,
    response: httpx.Response | None = None,
    *,
    exc: Exception | None = None,
) -> dict[str, Any]:
    """Patch httpx.AsyncClient.get and capture the request arguments."""
    captured: dict[str, Any] = {}

    async def mock_get(self: httpx.AsyncClient, url: str, **kwargs: Any) -> httpx.Response:
        captured["url"] = url
        captured["params"] = kwargs.get("params")
        if exc is not None:
            raise exc
        assert response is not None
        return response

    monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)
    return captured


class TestGdeltSearcher:
    """Tests for GdeltSearcher."""

    @pytest.fixture
    def mock_response_data(self) -> dict:
        """Sample GDELT ArtList response."""
        return {
            "articles": [
                {
                    "url": "https://example.com/article1",
                    "title": "Article 1",
                    "seendate": "20260201T100000Z",
                    "domain": "example.com",
                    "language": "English",
                    "sourcecountry": "United States",
                },
                {
                    "url": "https://other.com/article2",
                    "title": "Article 2",
                    "seendate": "20260201T110000Z",
                    "domain": "other.com",
                },
            ]
        }

    @pytest.fixture
    def searcher(self) -> GdeltSearcher:
        return GdeltSearcher()

    async def test_search_returns_articles(
        self,
        searcher: GdeltSearcher,
        mock_response_data: dict,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Should return normalized Article objects."""
        _patch_get(monkeypatch, httpx.Response(200, json=mock_response_data))

        outcome = await searcher.search("test query")

        assert outcome.status is SearchStatus.OK
        assert outcome.ok
        assert len(outcome.articles) == 2
        assert all(isinstance(a, Article) for a in outcome.articles)
        first = outcome.articles[0]
        assert first.title == "Article 1"
        assert first.url == "https://example.com/article1"
        assert first.source == "example.com"
        assert first.published_at == "20260201T100000Z"
        assert first.language == "English"
        assert first.source_country == "United States"

    async def test_search_sends_fixed_params(
        self,
        searcher: GdeltSearcher,
        mock_response_data: dict,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Should call the Doc API with ArtList/json/30/datedesc."""
        captured = _patch_get(monkeypatch, httpx.Response(200, json=mock_response_data))

        await searcher.search("the sky is blue")

        assert captured["url"] == GDELT_DOC_API_URL
        assert captured["params"] == {
            "query": "the sky is blue",
            "mode": "ArtList",
            "format": "json",
            "maxrecords": 30,
            "sort": "datedesc",
        }

    async def test_search_reads_documents_key(
        self,
        searcher: GdeltSearcher,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Should fall back to the 'documents' field."""
        data = {"documents": [{"title": "Doc", "url": "https://example.com/doc"}]}
        _patch_get(monkeypatch, httpx.Response(200, json=data))

        articles = await searcher.fetch_articles("query")

        assert [a.title for a in articles] == ["Doc"]

    async def test_search_empty_response(
        self,
        searcher: GdeltSearcher,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """GDELT returns {} when nothing matches."""
        _patch_get(monkeypatch, httpx.Response(200, json={}))

        outcome = await searcher.search("nothing")

        assert outcome.status is SearchStatus.EMPTY
        assert outcome.articles == ()
        assert outcome.error is None

    async def test_search_non_success_status_is_absorbed(
        self,
        searcher: GdeltSearcher,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """A 503 should be logged and produce an empty list, not raise."""
        _patch_get(monkeypatch, httpx.Response(503, text="Service Unavailable"))

        outcome = await searcher.search("query")
        articles = await searcher.fetch_articles("query")

        assert outcome.status is SearchStatus.ERROR
        assert outcome.error == "HTTP 503"
        assert articles == []
        assert "GDELT error 503 Service Unavailable" in caplog.text

    async def test_search_non_json_body_is_absorbed(
        self,
        searcher: GdeltSearcher,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """GDELT answers some bad queries with 200 and plain text."""
        _patch_get(
            monkeypatch,
            httpx.Response(200, text="Your search contained a keyword that was too short."),
        )

        outcome = await searcher.search("a")

        assert outcome.status is SearchStatus.ERROR
        assert outcome.error == "malformed response"
        assert await searcher.fetch_articles("a") == []

    async def test_search_non_object_json_is_absorbed(
        self,
        searcher: GdeltSearcher,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        _patch_get(monkeypatch, httpx.Response(200, json=["not", "an", "object"]))

        outcome = await searcher.search("query")

        assert outcome.status is SearchStatus.ERROR

    async def test_search_timeout_is_absorbed(
        self,
        searcher: GdeltSearcher,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        _patch_get(monkeypatch, exc=httpx.ReadTimeout("timed out"))

        outcome = await searcher.search("query")

        assert outcome.status is SearchStatus.ERROR
        assert outcome.error is not None
        assert outcome.error.startswith("timeout")

    async def test_search_connection_error_propagates(
        self,
        searcher: GdeltSearcher,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Network-level failures are left for the request handler."""
        _patch_get(monkeypatch, exc=httpx.ConnectError("connection refused"))

        with pytest.raises(httpx.ConnectError):
            await searcher.fetch_articles("query")

    async def test_search_skips_non_dict_items(
        self,
        searcher: GdeltSearcher,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        data = {"articles": ["junk", None, {"title": "Real"}]}
        _patch_get(monkeypatch, httpx.Response(200, json=data))

        articles = await searcher.fetch_articles("query")

        assert [a.title for a in articles] == ["Real"]

    def test_build_params_uses_config(self) -> None:
        searcher = GdeltSearcher(mode="ArtList", max_records=50, sort="hybridrel")
        params = searcher.build_params("q")
        assert params["maxrecords"] == 50
        assert params["sort"] == "hybridrel"


class TestNormalizeDocument:
    """Tests for raw document normalization."""

    def test_primary_fields(self) -> None:
        article = normalize_document(
            {
                "title": "T",
                "seendesc": "D",
                "url": "https://a.com",
                "domain": "a.com",
                "seendate": "20260101T000000Z",
            }
        )
        assert article == Article(
            title="T",
            description="D",
            url="https://a.com",
            source="a.com",
            published_at="20260101T000000Z",
        )

    def test_alternate_fields(self) -> None:
        article = normalize_document(
            {
                "semtag": "Tag title",
                "excerpt": "An excerpt",
                "shareurl": "https://share.example.com",
                "source": "Wire",
                "date": "2026-01-01",
            }
        )
        assert article.title == "Tag title"
        assert article.description == "An excerpt"
        assert article.url == "https://share.example.com"
        assert article.source == "Wire"
        assert article.published_at == "2026-01-01"

    def test_first_match_wins(self) -> None:
        article = normalize_document(
            {
                "title": "Primary",
                "semtag": "Secondary",
                "url": "https://primary",
                "shareurl": "https://share",
                "sourceurl": "https://source",
            }
        )
        assert article.title == "Primary"
        assert article.url == "https://primary"

    def test_empty_value_falls_through(self) -> None:
        article = normalize_document(
            {"title": "", "semtag": "Fallback", "url": None, "sourceurl": "https://s"}
        )
        assert article.title == "Fallback"
        assert article.url == "https://s"

    def test_defaults_when_missing(self) -> None:
        article = normalize_document({})
        assert article.title == ""
        assert article.description == ""
        assert article.url == ""
        assert article.source == "GDELT"
        assert article.published_at is None
        assert article.language is None
