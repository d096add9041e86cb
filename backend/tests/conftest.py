"""Shared fixtures and test doubles."""

import pytest

from blog_summarizer.agents.scraper_agent import RawArticle
from blog_summarizer.models import BlogSummary

ARTICLE_BODY = (
    "Breaking news. The company announced a $10 million investment today. "
    "This is expected to help. Experts say it is significant. "
    "In conclusion, the move surprised everyone."
)


class FakeScraper:
    """Stands in for ScraperAgent; returns a canned article or raises."""

    def __init__(self, article: RawArticle | None = None, error: Exception | None = None):
        self.article = article
        self.error = error
        self.requested: list[str] = []
        self.closed = False

    async def scrape_article(self, url: str) -> RawArticle:
        self.requested.append(url)
        if self.error is not None:
            raise self.error
        return self.article

    async def close(self) -> None:
        self.closed = True


class FakeSummaryWriter:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.calls: list[dict] = []

    async def __call__(self, **fields) -> BlogSummary:
        self.calls.append(fields)
        if self.error is not None:
            raise self.error
        return BlogSummary(**fields)


class FakeContentStore:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.calls: list[dict] = []

    async def put_content(self, **fields) -> dict:
        self.calls.append(fields)
        if self.error is not None:
            raise self.error
        return {"status": "created"}


@pytest.fixture
def article() -> RawArticle:
    return RawArticle(
        url="https://example.com/blog/post",
        title="A Post About Investment",
        body_text=ARTICLE_BODY,
        word_count=len(ARTICLE_BODY.split()),
        author="Jane Doe",
        published_date="2024-03-04",
    )
