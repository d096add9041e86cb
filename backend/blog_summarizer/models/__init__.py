"""Models package - SQLModel database models."""

from blog_summarizer.models.summary import BlogSummary

__all__ = ["BlogSummary"]
