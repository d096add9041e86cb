"""Summarize endpoints."""

from fastapi import APIRouter, BackgroundTasks, Depends, status
from fastapi.responses import JSONResponse

from blog_summarizer.core.topics import extract_topics
from blog_summarizer.exceptions import BlogSummarizerError
from blog_summarizer.logging_config import get_logger
from blog_summarizer.schemas.summarize import (
    ApiInfoResponse,
    ErrorResponse,
    SummarizeRequest,
    SummarizeResponse,
    TopicsRequest,
    TopicsResponse,
)
from blog_summarizer.services.persistence import SummaryPersistenceSaga, get_persistence_saga
from blog_summarizer.services.summary_service import SummaryService, get_summary_service

router = APIRouter()
logger = get_logger("api.summarize")

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


@router.post("/summarize", response_model=SummarizeResponse, responses=ERROR_RESPONSES)
async def summarize_blog(
    req: SummarizeRequest,
    background_tasks: BackgroundTasks,
    service: SummaryService = Depends(get_summary_service),
    saga: SummaryPersistenceSaga = Depends(get_persistence_saga),
) -> SummarizeResponse | JSONResponse:
    """
    Scrape a blog post, summarize it and translate the summary to Urdu.

    Both records are written after the response has been sent; storage
    errors only show up in the logs.
    """
    logger.info("summarize_request", url=req.url)
    try:
        result = await service.summarize_url(req.url)
    except BlogSummarizerError:
        # Rendered by the app-level handler
        raise
    except Exception as e:
        logger.exception("summarize_unhandled_error", url=req.url)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": f"Internal server error: {e}"},
        )

    background_tasks.add_task(saga.run, result.article, result.summary)

    return SummarizeResponse(
        blog_url=result.article.url,
        title=result.article.title,
        summary_english=result.summary.english_text,
        summary_urdu=result.summary.translated_text,
        word_count=result.article.word_count,
        author=result.article.author,
    )


@router.get("/summarize", response_model=ApiInfoResponse)
async def summarize_info() -> ApiInfoResponse:
    """Describe the summarize endpoint."""
    return ApiInfoResponse(
        message="Blog Summarizer API",
        usage='POST to this endpoint with { "url": "https://example.com/blog" }',
        features=["Web scraping", "Extractive summarization", "Urdu translation"],
    )


@router.post("/topics", response_model=TopicsResponse)
async def topics(req: TopicsRequest) -> TopicsResponse:
    """Most frequent keyword candidates of a text."""
    return TopicsResponse(topics=extract_topics(req.text))
