"""Summarize-a-URL pipeline: scrape, summarize, translate."""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

from blog_summarizer.agents.scraper_agent import RawArticle, ScraperAgent
from blog_summarizer.core.summarizer import generate_summary
from blog_summarizer.exceptions import (
    BlogSummarizerError,
    InvalidInput,
    SummarizationFailure,
    TranslationFailure,
)
from blog_summarizer.logging_config import get_logger
from blog_summarizer.services.translator import DictionaryTranslator, get_translator

logger = get_logger("services.summary")


class StepStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


@dataclass
class ProcessingStep:
    name: str
    status: StepStatus = StepStatus.PENDING
    message: str | None = None


@dataclass
class ProcessingSteps:
    """Progress of one request through the pipeline, for logs and callers."""

    url: str
    steps: list[ProcessingStep] = field(
        default_factory=lambda: [
            ProcessingStep("scrape"),
            ProcessingStep("summarize"),
            ProcessingStep("translate"),
        ]
    )

    def _update(self, name: str, status: StepStatus, message: str | None = None) -> None:
        step = next(s for s in self.steps if s.name == name)
        step.status = status
        step.message = message
        logger.info("processing_step", url=self.url, step=name, status=status.value, message=message)

    def start(self, name: str) -> None:
        self._update(name, StepStatus.PROCESSING)

    def complete(self, name: str, message: str | None = None) -> None:
        self._update(name, StepStatus.COMPLETED, message)

    def fail(self, name: str, message: str) -> None:
        self._update(name, StepStatus.ERROR, message)

    def status_of(self, name: str) -> StepStatus:
        return next(s.status for s in self.steps if s.name == name)


@dataclass(frozen=True)
class Summary:
    """English extractive summary and its translation."""

    english_text: str
    translated_text: str


@dataclass
class SummarizeResult:
    article: RawArticle
    summary: Summary
    steps: ProcessingSteps


_HTTP_URL = TypeAdapter(AnyHttpUrl)


def validate_url(url: str | None) -> str:
    """Return the URL stripped of surrounding whitespace, or raise InvalidInput."""
    if not url or not url.strip():
        raise InvalidInput("URL is required")

    url = url.strip()
    try:
        _HTTP_URL.validate_python(url)
    except (ValidationError, ValueError) as e:
        raise InvalidInput("Invalid URL format") from e
    return url


class SummaryService:
    """
    Runs one URL through scrape -> summarize -> translate.

    The steps run in order and the first failure aborts the rest. Persisting
    the result is left to the caller.
    """

    def __init__(
        self,
        scraper_factory: Callable[[], ScraperAgent] = ScraperAgent,
        translator: DictionaryTranslator | None = None,
    ):
        self.scraper_factory = scraper_factory
        self._translator = translator

    @property
    def translator(self) -> DictionaryTranslator:
        if self._translator is None:
            self._translator = get_translator()
        return self._translator

    async def _scrape(self, url: str) -> RawArticle:
        scraper = self.scraper_factory()
        try:
            return await scraper.scrape_article(url)
        finally:
            await scraper.close()

    def _summarize(self, article: RawArticle) -> str:
        try:
            return generate_summary(article.body_text, article.title)
        except SummarizationFailure as e:
            raise type(e)(f"Failed to generate summary: {e.message}") from e
        except Exception as e:
            raise SummarizationFailure(f"Failed to generate summary: {e}") from e

    def _translate(self, english: str) -> str:
        try:
            return self.translator.translate(english)
        except TranslationFailure:
            raise
        except Exception as e:
            raise TranslationFailure(f"Failed to translate: {e}") from e

    async def summarize_url(self, url: str) -> SummarizeResult:
        """
        Summarize the blog post at ``url``.

        Raises:
            InvalidInput: URL missing or malformed; nothing is fetched
            ScrapeFailure: Fetch failed or the page had too little content
            SummarizationFailure: Content too short after cleaning
            TranslationFailure: Translation failed
        """
        url = validate_url(url)
        steps = ProcessingSteps(url=url)

        current = "scrape"
        try:
            steps.start(current)
            article = await self._scrape(url)
            steps.complete(current, "Content extracted successfully")

            current = "summarize"
            steps.start(current)
            english = self._summarize(article)
            steps.complete(current, "Summary generated")

            current = "translate"
            steps.start(current)
            translated = self._translate(english)
            steps.complete(current, "Translation completed")
        except BlogSummarizerError as e:
            steps.fail(current, e.message)
            raise

        return SummarizeResult(
            article=article,
            summary=Summary(english_text=english, translated_text=translated),
            steps=steps,
        )


def get_summary_service() -> SummaryService:
    """Dependency returning a service wired to the real scraper and translator."""
    return SummaryService()
