"""Blog summarizer backend."""
