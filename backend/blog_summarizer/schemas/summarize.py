"""Summarize schemas for API request/response validation."""

from pydantic import BaseModel, Field


class SummarizeRequest(BaseModel):
    """Body of POST /summarize. The URL is validated by the service."""

    url: str | None = Field(default=None, description="URL of the blog post to summarize")


class SummarizeResponse(BaseModel):
    """Schema for a successful summarize response."""

    blog_url: str
    title: str = Field(..., max_length=200)
    summary_english: str
    summary_urdu: str
    word_count: int = Field(..., ge=0)
    author: str | None = Field(default=None, max_length=100)


class ErrorResponse(BaseModel):
    error: str


class ApiInfoResponse(BaseModel):
    message: str
    usage: str
    features: list[str]


class TopicsRequest(BaseModel):
    text: str = Field(..., description="Text to extract keyword candidates from")


class TopicsResponse(BaseModel):
    topics: list[str]
