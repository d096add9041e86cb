"""Blog scraper - extracts article text and metadata with CSS selector lists."""

from dataclasses import dataclass
from urllib.parse import urlparse

import httpx
from bs4 import BeautifulSoup

from blog_summarizer.config import get_settings
from blog_summarizer.core.cleaning import WHITESPACE_RE, clean
from blog_summarizer.exceptions import ScrapeFailure
from blog_summarizer.logging_config import get_logger

logger = get_logger("agents.scraper")


@dataclass(frozen=True)
class RawArticle:
    """Normalized text and metadata extracted from one blog page."""
    url: str
    title: str
    body_text: str
    word_count: int
    author: str | None = None
    published_date: str | None = None


@dataclass
class ScraperConfig:
    """Configuration for the scraper."""
    max_title_chars: int = 200
    max_author_chars: int = 100
    min_content_chars: int = 50
    paragraph_fallback_chars: int = 100


class ScraperAgent:
    """
    Selector-based blog scraper.

    Tries a fixed list of common blog layouts for each field and keeps the
    first (or, for the body, the longest) match. The extracted body goes
    through the same boilerplate cleaning the summarizer relies on.
    """

    CONTENT_SELECTORS = (
        "article",
        ".post-content",
        ".entry-content",
        ".content",
        ".post-body",
        "main",
        ".article-body",
        '[role="main"]',
    )

    AUTHOR_SELECTORS = (
        ".author",
        ".byline",
        '[rel="author"]',
        ".post-author",
        'meta[name="author"]',
    )

    DATE_SELECTORS = (
        "time[datetime]",
        ".published",
        ".post-date",
        'meta[property="article:published_time"]',
    )

    def __init__(self, config: ScraperConfig | None = None, http: httpx.AsyncClient | None = None):
        self.config = config or ScraperConfig()
        self.settings = get_settings()
        self.http = http or httpx.AsyncClient(
            timeout=self.settings.scraper_timeout_seconds,
            follow_redirects=True,
            headers={"User-Agent": self.settings.scraper_user_agent},
        )

    async def _fetch_html(self, url: str) -> str:
        response = await self.http.get(url)
        response.raise_for_status()
        return response.text

    def _parse(self, html: str) -> BeautifulSoup:
        soup = BeautifulSoup(html, "lxml")
        for tag in soup(["script", "style", "noscript", "svg", "iframe"]):
            tag.decompose()
        return soup

    @staticmethod
    def _text(element) -> str:
        return element.get_text(" ", strip=True)

    def _extract_title(self, soup: BeautifulSoup) -> str:
        if soup.title and self._text(soup.title):
            return self._text(soup.title)
        h1 = soup.find("h1")
        if h1 and self._text(h1):
            return self._text(h1)
        og_title = soup.select_one('meta[property="og:title"]')
        return (og_title.get("content") or "").strip() if og_title else ""

    def _extract_body(self, soup: BeautifulSoup) -> str:
        content = ""
        for selector in self.CONTENT_SELECTORS:
            matches = soup.select(selector)
            text = " ".join(self._text(el) for el in matches).strip()
            if len(text) > len(content):
                content = text

        if len(content) < self.config.paragraph_fallback_chars:
            paragraphs = " ".join(self._text(p) for p in soup.find_all("p"))
            if len(paragraphs) > len(content):
                content = paragraphs

        return WHITESPACE_RE.sub(" ", content).strip()

    def _extract_first(self, soup: BeautifulSoup, selectors: tuple[str, ...], attrs: tuple[str, ...]) -> str:
        """Value of the first element matching any selector, attributes before text."""
        for selector in selectors:
            element = soup.select_one(selector)
            if element is None:
                continue
            for attr in attrs:
                if element.get(attr):
                    return element[attr].strip()
            return self._text(element)
        return ""

    async def scrape_article(self, url: str) -> RawArticle:
        """
        Fetch a blog post and extract its title, body and metadata.

        Args:
            url: Absolute http(s) URL of the post

        Returns:
            RawArticle with the cleaned body text

        Raises:
            ScrapeFailure: On network errors, non-2xx responses, or when the
                page has no title or under 50 characters of content
        """
        if urlparse(url).scheme not in ("http", "https"):
            raise ScrapeFailure("Failed to scrape blog content: Invalid URL protocol")

        try:
            html = await self._fetch_html(url)
        except httpx.HTTPError as e:
            logger.warning("scrape_http_error", url=url, error=str(e))
            raise ScrapeFailure(f"Failed to scrape blog content: {e}") from e

        soup = self._parse(html)
        title = self._extract_title(soup)
        body = clean(self._extract_body(soup), title)
        author = self._extract_first(soup, self.AUTHOR_SELECTORS, ("content",))
        published_date = self._extract_first(soup, self.DATE_SELECTORS, ("datetime", "content"))

        if not title or len(body) < self.config.min_content_chars:
            logger.warning("scrape_insufficient_content", url=url, title=title, chars=len(body))
            raise ScrapeFailure(
                "Failed to scrape blog content: Could not extract sufficient content from the webpage"
            )

        article = RawArticle(
            url=url,
            title=title[: self.config.max_title_chars],
            body_text=body,
            word_count=len(body.split()),
            author=author[: self.config.max_author_chars] or None,
            published_date=published_date or None,
        )
        logger.info("scrape_completed", url=url, title=article.title, word_count=article.word_count)
        return article

    async def close(self):
        """Close the HTTP client."""
        await self.http.aclose()
