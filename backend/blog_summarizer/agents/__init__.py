"""Agents package - page scraping."""

from blog_summarizer.agents.scraper_agent import (
    RawArticle,
    ScraperAgent,
    ScraperConfig,
)

__all__ = [
    "RawArticle",
    "ScraperAgent",
    "ScraperConfig",
]
