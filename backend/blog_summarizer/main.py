"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from blog_summarizer.api.v1.router import api_router
from blog_summarizer.config import get_settings
from blog_summarizer.exceptions import BlogSummarizerError
from blog_summarizer.logging_config import configure_logging, get_logger

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup/shutdown events."""
    settings = get_settings()
    logger.info("app_starting", app=settings.app_name, environment=settings.environment)

    # Initialize databases
    from blog_summarizer.db.dynamodb import dynamodb
    from blog_summarizer.db.postgres import init_db

    if settings.postgres_configured:
        try:
            await init_db()
            logger.info("postgres_tables_initialized")
        except Exception as e:
            logger.warning("postgres_init_failed", error=str(e))
    else:
        logger.warning("postgres_not_configured")

    if settings.dynamodb_configured:
        try:
            await dynamodb.create_table_if_not_exists()
            logger.info("dynamodb_table_initialized", table=dynamodb.table_name)
        except Exception as e:
            logger.warning("dynamodb_init_failed", error=str(e))
    else:
        logger.warning("dynamodb_not_configured")

    yield

    logger.info("app_shutdown")


async def domain_error_handler(request: Request, exc: BlogSummarizerError) -> JSONResponse:
    logger.warning(
        "request_failed",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are client errors with the same shape as the rest."""
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request body") if errors else "Invalid request body"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": f"Invalid request: {message}"},
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging()
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Extractive blog summaries with Urdu translation",
        version="0.1.0",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000"],  # Next.js dev server
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(BlogSummarizerError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # Same routes at the root and under the API prefix
    app.include_router(api_router)
    if settings.api_prefix:
        app.include_router(api_router, prefix=settings.api_prefix, include_in_schema=False)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "app": settings.app_name}

    return app


app = create_app()
