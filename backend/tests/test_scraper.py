"""Tests for the blog scraper using an in-process HTTP transport."""

import httpx
import pytest

from blog_summarizer.agents.scraper_agent import ScraperAgent
from blog_summarizer.exceptions import ScrapeFailure

URL = "https://blog.example.com/posts/scaling"

BLOG_HTML = """
<html>
<head>
  <title>How We Scaled Our API</title>
  <meta name="author" content="Jane Doe">
  <meta property="article:published_time" content="2024-03-04T10:00:00Z">
  <script>var tracking = "ignore me";</script>
</head>
<body>
  <nav>Home About</nav>
  <article>
    <h1>How We Scaled Our API</h1>
    <p>5 min read</p>
    <p>Listen</p>
    <p>Our team announced a new caching layer in 2024. It reduced latency for every
    customer by half. The migration took three weeks of careful work.</p>
  </article>
</body>
</html>
"""


def make_scraper(handler) -> ScraperAgent:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ScraperAgent(http=client)


def html_response(html: str, status_code: int = 200):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=html, headers={"content-type": "text/html"})

    return handler


class TestScraperAgent:
    @pytest.mark.asyncio
    async def test_extracts_article(self) -> None:
        scraper = make_scraper(html_response(BLOG_HTML))
        try:
            article = await scraper.scrape_article(URL)
        finally:
            await scraper.close()

        assert article.url == URL
        assert article.title == "How We Scaled Our API"
        assert article.body_text == (
            "Our team announced a new caching layer in 2024. It reduced latency for every "
            "customer by half. The migration took three weeks of careful work."
        )
        assert article.word_count == 25
        assert article.author == "Jane Doe"
        assert article.published_date == "2024-03-04T10:00:00Z"

    @pytest.mark.asyncio
    async def test_paragraph_fallback_and_h1_title(self) -> None:
        html = """
        <html><body>
          <h1>Notes on Testing</h1>
          <p>Tests should be fast and deterministic.</p>
          <p>They should also fail loudly when behaviour changes.</p>
          <span class="byline">Sam Lee</span>
          <time datetime="2023-11-02">Nov 2</time>
        </body></html>
        """
        scraper = make_scraper(html_response(html))
        article = await scraper.scrape_article(URL)

        assert article.title == "Notes on Testing"
        assert article.body_text == (
            "Tests should be fast and deterministic. They should also fail loudly when behaviour changes."
        )
        assert article.author == "Sam Lee"
        assert article.published_date == "2023-11-02"

    @pytest.mark.asyncio
    async def test_og_title_fallback(self) -> None:
        html = """
        <html><head><meta property="og:title" content="Open Graph Title"></head>
        <body><main>A long enough body of text that easily clears the fifty character minimum.</main></body></html>
        """
        article = await make_scraper(html_response(html)).scrape_article(URL)

        assert article.title == "Open Graph Title"
        assert article.author is None
        assert article.published_date is None

    @pytest.mark.asyncio
    async def test_long_title_and_author_are_truncated(self) -> None:
        title = "T" * 250
        html = f"""
        <html><head><title>{title}</title><meta name="author" content="{'A' * 150}"></head>
        <body><article>Body text that is comfortably longer than the fifty character minimum.</article></body></html>
        """
        article = await make_scraper(html_response(html)).scrape_article(URL)

        assert len(article.title) == 200
        assert len(article.author) == 100

    @pytest.mark.asyncio
    async def test_insufficient_content(self) -> None:
        html = "<html><head><title>Empty</title></head><body><p>Too little.</p></body></html>"
        with pytest.raises(ScrapeFailure, match="sufficient content"):
            await make_scraper(html_response(html)).scrape_article(URL)

    @pytest.mark.asyncio
    async def test_missing_title(self) -> None:
        html = "<html><body><div>" + "Plenty of words here. " * 10 + "</div><p>" + "More text. " * 10 + "</p></body></html>"
        with pytest.raises(ScrapeFailure):
            await make_scraper(html_response(html)).scrape_article(URL)

    @pytest.mark.asyncio
    async def test_http_error(self) -> None:
        with pytest.raises(ScrapeFailure):
            await make_scraper(html_response("gone", status_code=404)).scrape_article(URL)

    @pytest.mark.asyncio
    async def test_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        with pytest.raises(ScrapeFailure):
            await make_scraper(handler).scrape_article(URL)

    @pytest.mark.asyncio
    async def test_rejects_non_http_scheme_without_fetching(self) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, text=BLOG_HTML)

        with pytest.raises(ScrapeFailure, match="protocol"):
            await make_scraper(handler).scrape_article("ftp://blog.example.com/post")
        assert requests == []
