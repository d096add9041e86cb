"""Domain errors raised along the summarize request path.

Every error carries the HTTP status the API answers with. ``PersistenceFailure``
never reaches a client: the background saga logs it and moves on.
"""


class BlogSummarizerError(Exception):
    """Base class for all domain errors."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(BlogSummarizerError):
    """Missing or malformed request input, e.g. a URL that does not parse."""

    status_code = 400


class ScrapeFailure(BlogSummarizerError):
    """The page could not be fetched or yielded too little content."""

    status_code = 400


class SummarizationFailure(BlogSummarizerError):
    status_code = 500


class ContentTooShort(SummarizationFailure):
    """Cleaned text is too short to summarize."""


class TranslationFailure(BlogSummarizerError):
    status_code = 500


class PersistenceFailure(BlogSummarizerError):
    """A background write to one of the stores failed."""
