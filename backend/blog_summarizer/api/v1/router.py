"""API main router - aggregates all endpoint routers."""

from fastapi import APIRouter

from blog_summarizer.api.v1 import summarize

api_router = APIRouter()

api_router.include_router(summarize.router, tags=["summarize"])
