"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App
    app_name: str = "Blog Summarizer"
    environment: str = "development"
    debug: bool = False
    api_prefix: str = "/api"

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Scraper
    scraper_timeout_seconds: float = 10.0
    scraper_user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
    )

    # Translation
    translation_target_language: str = "ur"

    # PostgreSQL (summary records)
    database_url: str | None = None

    # DynamoDB (scraped content records)
    aws_region: str = "us-east-1"
    aws_access_key_id: str = ""
    aws_secret_access_key: str = ""
    dynamodb_endpoint_url: str | None = None  # Set for local development
    dynamodb_table_name: str = "blog-contents"
    dynamodb_enabled: bool | None = None

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"

    @property
    def postgres_configured(self) -> bool:
        return bool(self.database_url)

    @property
    def dynamodb_configured(self) -> bool:
        """
        Whether content writes go to DynamoDB.

        DYNAMODB_ENABLED wins when set, e.g. for IAM roles resolved by the
        default AWS credential chain. Otherwise static keys or a local
        endpoint are required.
        """
        if self.dynamodb_enabled is not None:
            return self.dynamodb_enabled
        return bool(self.dynamodb_endpoint_url or self.aws_access_key_id)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
