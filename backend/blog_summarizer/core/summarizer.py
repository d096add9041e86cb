"""Extractive summary generation: clean, score, select."""

from blog_summarizer.core.cleaning import prepare_for_summary
from blog_summarizer.core.scoring import score
from blog_summarizer.core.selection import select
from blog_summarizer.exceptions import ContentTooShort
from blog_summarizer.logging_config import get_logger

logger = get_logger("core.summarizer")

MIN_CONTENT_CHARS = 30
FALLBACK_SUMMARY = "Unable to generate summary from provided content."


def generate_summary(content: str, title: str = "") -> str:
    """Produce an English extractive summary of an article body.

    Args:
        content: Article body, ideally already passed through ``clean``.
        title: Article title, used only for log context.

    Returns:
        Two to five sentences of the article in their original order, or
        ``FALLBACK_SUMMARY`` when no sentence is long enough to keep.

    Raises:
        ContentTooShort: If the prepared text is under 30 characters.
    """
    text = prepare_for_summary(content)
    if len(text) < MIN_CONTENT_CHARS:
        raise ContentTooShort("Content is too short to summarize")

    scored = score(text)
    if not scored:
        logger.warning("summary_fallback", title=title, chars=len(text))
        return FALLBACK_SUMMARY

    summary = select(scored)
    logger.info(
        "summary_generated",
        title=title,
        sentences=len(scored),
        summary_chars=len(summary),
    )
    return summary
