"""Summary record model for PostgreSQL."""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel


class BlogSummary(SQLModel, table=True):
    """
    One row per successful summarize request.
    Rows are only ever inserted; the same URL summarized twice yields two rows.
    """

    __tablename__ = "blog_summaries"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    blog_url: str = Field(max_length=2048, index=True)
    title: str = Field(max_length=200)

    summary_english: str
    summary_urdu: str

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
