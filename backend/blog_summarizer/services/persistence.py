"""Background dual write of a finished summary: PostgreSQL first, then DynamoDB.

The two writes form a two-step saga without compensation. The content record
references the summary id, so it is only written once the summary insert has
succeeded. Each step logs its own failure; nothing is raised or retried.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from blog_summarizer.agents.scraper_agent import RawArticle
from blog_summarizer.db.dynamodb import DynamoDBClient, dynamodb
from blog_summarizer.db.postgres import insert_summary
from blog_summarizer.logging_config import get_logger
from blog_summarizer.models import BlogSummary
from blog_summarizer.services.summary_service import Summary

logger = get_logger("services.persistence")

SummaryWriter = Callable[..., Awaitable[BlogSummary]]


@dataclass
class SagaOutcome:
    """What the saga managed to write."""

    summary_id: UUID | None = None
    content_saved: bool = False
    errors: list[str] = field(default_factory=list)

    @property
    def summary_saved(self) -> bool:
        return self.summary_id is not None


class SummaryPersistenceSaga:
    """Write the summary record, then the scraped content record."""

    def __init__(
        self,
        summary_writer: SummaryWriter = insert_summary,
        content_store: DynamoDBClient | Any = dynamodb,
    ):
        self.summary_writer = summary_writer
        self.content_store = content_store

    async def _save_summary(self, article: RawArticle, summary: Summary, outcome: SagaOutcome) -> None:
        try:
            record = await self.summary_writer(
                blog_url=article.url,
                title=article.title,
                summary_english=summary.english_text,
                summary_urdu=summary.translated_text,
            )
        except Exception as e:
            outcome.errors.append(str(e))
            logger.error("summary_store_failed", url=article.url, error=str(e))
            return
        outcome.summary_id = record.id
        logger.info("summary_stored", url=article.url, summary_id=str(record.id))

    async def _save_content(self, article: RawArticle, outcome: SagaOutcome) -> None:
        try:
            await self.content_store.put_content(
                blog_url=article.url,
                title=article.title,
                content=article.body_text,
                word_count=article.word_count,
                author=article.author,
                published_date=article.published_date,
                summary_id=outcome.summary_id,
            )
        except Exception as e:
            outcome.errors.append(str(e))
            logger.error(
                "content_store_failed",
                url=article.url,
                summary_id=str(outcome.summary_id),
                error=str(e),
            )
            return
        outcome.content_saved = True
        logger.info("content_stored", url=article.url, summary_id=str(outcome.summary_id))

    async def run(self, article: RawArticle, summary: Summary) -> SagaOutcome:
        """Run both steps; the second only if the first succeeded."""
        outcome = SagaOutcome()

        await self._save_summary(article, summary, outcome)
        if not outcome.summary_saved:
            return outcome

        await self._save_content(article, outcome)
        return outcome


def get_persistence_saga() -> SummaryPersistenceSaga:
    """Dependency returning the saga bound to the real stores."""
    return SummaryPersistenceSaga()
