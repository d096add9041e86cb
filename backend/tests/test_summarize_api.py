"""Tests for the summarize HTTP endpoints."""

import pytest
from fastapi.testclient import TestClient

from blog_summarizer.agents.scraper_agent import RawArticle
from blog_summarizer.exceptions import PersistenceFailure, ScrapeFailure
from blog_summarizer.main import app
from blog_summarizer.services.persistence import SummaryPersistenceSaga, get_persistence_saga
from blog_summarizer.services.summary_service import SummaryService, get_summary_service
from blog_summarizer.services.translator import DictionaryTranslator

from conftest import FakeContentStore, FakeScraper, FakeSummaryWriter


@pytest.fixture
def stores():
    return FakeSummaryWriter(), FakeContentStore()


@pytest.fixture
def wire(stores):
    """Install a scraper and stores into the app; returns the scraper."""
    writer, store = stores

    def _wire(scraper: FakeScraper, summary_writer: FakeSummaryWriter | None = None) -> FakeScraper:
        service = SummaryService(scraper_factory=lambda: scraper, translator=DictionaryTranslator("ur"))
        saga = SummaryPersistenceSaga(summary_writer or writer, store)
        app.dependency_overrides[get_summary_service] = lambda: service
        app.dependency_overrides[get_persistence_saga] = lambda: saga
        return scraper

    yield _wire
    app.dependency_overrides.clear()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


class TestSummarizeEndpoint:
    def test_success(self, client, wire, stores, article) -> None:
        wire(FakeScraper(article))

        response = client.post("/summarize", json={"url": article.url})

        assert response.status_code == 200
        body = response.json()
        assert body["blog_url"] == article.url
        assert body["title"] == article.title
        assert body["summary_english"] == (
            "The company announced a $10 million investment today. "
            "Experts say it is significant. "
            "In conclusion, the move surprised everyone."
        )
        assert body["summary_urdu"]
        assert body["word_count"] == article.word_count
        assert body["author"] == "Jane Doe"

        writer, store = stores
        assert writer.calls[0]["summary_english"] == body["summary_english"]
        assert store.calls[0]["blog_url"] == article.url

    def test_api_prefix_alias(self, client, wire, article) -> None:
        wire(FakeScraper(article))

        response = client.post("/api/summarize", json={"url": article.url})

        assert response.status_code == 200

    @pytest.mark.parametrize(
        "url",
        ["not a url", "http://[::1/post", "http://exa mple.com/post", "https://example.com:99999/x"],
    )
    def test_invalid_url_rejected_before_fetch(self, client, wire, url: str) -> None:
        scraper = wire(FakeScraper())

        response = client.post("/summarize", json={"url": url})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid URL format"}
        assert scraper.requested == []

    def test_missing_url(self, client, wire) -> None:
        wire(FakeScraper())

        response = client.post("/summarize", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "URL is required"}

    def test_wrong_body_type(self, client, wire) -> None:
        wire(FakeScraper())

        response = client.post("/summarize", json={"url": 123})

        assert response.status_code == 400
        assert response.json()["error"]

    def test_scrape_failure(self, client, wire, stores) -> None:
        wire(FakeScraper(error=ScrapeFailure("Failed to scrape blog content: 404 Not Found")))

        response = client.post("/summarize", json={"url": "https://example.com/gone"})

        assert response.status_code == 400
        assert "Failed to scrape" in response.json()["error"]
        assert stores[0].calls == []

    def test_content_too_short(self, client, wire, stores) -> None:
        short = RawArticle(url="https://example.com/a", title="T", body_text="Too short.", word_count=2)
        wire(FakeScraper(short))

        response = client.post("/summarize", json={"url": short.url})

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to generate summary: Content is too short to summarize"
        assert stores[0].calls == []

    def test_unexpected_error(self, client, wire) -> None:
        wire(FakeScraper(error=RuntimeError("boom")))

        response = client.post("/summarize", json={"url": "https://example.com/a"})

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error: boom"}

    def test_persistence_failure_does_not_affect_response(self, client, wire, stores, article) -> None:
        wire(FakeScraper(article), summary_writer=FakeSummaryWriter(error=PersistenceFailure("db down")))

        response = client.post("/summarize", json={"url": article.url})

        assert response.status_code == 200
        assert stores[1].calls == []


class TestInfoEndpoints:
    def test_get_summarize(self, client) -> None:
        response = client.get("/summarize")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Blog Summarizer API"
        assert "Urdu translation" in body["features"]

    def test_topics(self, client) -> None:
        response = client.post("/topics", json={"text": "python python rocks"})

        assert response.status_code == 200
        assert response.json() == {"topics": ["python", "rocks"]}
