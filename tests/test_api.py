"""Tests for the HTTP API."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from fastapi.testclient import TestClient

from gdelt_factcheck.api import create_app
from gdelt_factcheck.config import FactCheckConfig
from gdelt_factcheck.data import Article
from gdelt_factcheck.pipeline import FactCheckPipeline
from gdelt_factcheck.search.gdelt import GdeltSearcher

ENDPOINT = "/api/fact-check-gdelt"


def _client_for(searcher: MagicMock | GdeltSearcher) -> TestClient:
    app = create_app(FactCheckPipeline(searcher), config=FactCheckConfig())
    return TestClient(app)


@pytest.fixture
def searcher() -> MagicMock:
    searcher = MagicMock()
    searcher.fetch_articles = AsyncMock(
        return_value=[
            Article(
                title="แมวกินปลา",
                url="https://example.com/cat",
                source="example.com",
                published_at="20260201T100000Z",
            ),
        ]
    )
    return searcher


@pytest.fixture
def client(searcher: MagicMock) -> TestClient:
    return _client_for(searcher)


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_fact_check_success(client: TestClient) -> None:
    response = client.post(ENDPOINT, json={"text": "แมวกินปลา"})

    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    assert body["engine"] == "gdelt-doc-v2"
    reliability = body["reliability"]
    assert reliability["score"] == 90
    assert reliability["topMatch"]["title"] == "แมวกินปลา"
    assert reliability["topMatch"]["publishedAt"] == "20260201T100000Z"
    assert reliability["topMatch"]["similarity"] == 1.0
    assert len(reliability["matches"]) == 1


@pytest.mark.parametrize("payload", [{}, {"text": ""}, {"text": "   \n"}, {"text": 42}, {"other": "x"}])
def test_fact_check_requires_text(client: TestClient, searcher: MagicMock, payload: dict) -> None:
    response = client.post(ENDPOINT, json=payload)

    assert response.status_code == 400
    assert response.json() == {"ok": False, "error": "text_required"}
    searcher.fetch_articles.assert_not_called()


def test_fact_check_non_json_body(client: TestClient) -> None:
    response = client.post(
        ENDPOINT, content=b"not json", headers={"content-type": "application/json"}
    )

    assert response.status_code == 400
    assert response.json()["error"] == "text_required"


def test_fact_check_no_articles_omits_top_match() -> None:
    searcher = MagicMock()
    searcher.fetch_articles = AsyncMock(return_value=[])
    client = _client_for(searcher)

    response = client.post(ENDPOINT, json={"text": "anything"})

    assert response.status_code == 200
    reliability = response.json()["reliability"]
    assert reliability == {"score": 25, "reason": "no comparable news found", "matches": []}


def test_fact_check_internal_error(caplog: pytest.LogCaptureFixture) -> None:
    searcher = MagicMock()
    searcher.fetch_articles = AsyncMock(side_effect=RuntimeError("secret detail"))
    client = _client_for(searcher)

    response = client.post(ENDPOINT, json={"text": "claim"})

    assert response.status_code == 500
    assert response.json() == {"ok": False, "error": "internal_error"}
    assert "secret detail" not in response.text
    assert "Fact-check request failed" in caplog.text


def test_provider_503_degrades_to_floor_verdict(monkeypatch: pytest.MonkeyPatch) -> None:
    """An upstream 503 is not an error for the caller."""

    async def mock_get(self: httpx.AsyncClient, url: str, **kwargs: object) -> httpx.Response:
        return httpx.Response(503, text="Service Unavailable")

    monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)
    client = _client_for(GdeltSearcher())

    response = client.post(ENDPOINT, json={"text": "the sky is blue"})

    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    assert body["reliability"]["score"] == 25
    assert "topMatch" not in body["reliability"]


def test_cors_headers(client: TestClient) -> None:
    response = client.post(
        ENDPOINT,
        json={"text": "แมวกินปลา"},
        headers={"Origin": "https://frontend.example.com"},
    )
    assert response.headers["access-control-allow-origin"] == "*"
