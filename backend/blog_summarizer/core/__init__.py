"""Extractive summarization core - cleaning, scoring, selection and topics."""

from blog_summarizer.core.cleaning import clean, prepare_for_summary
from blog_summarizer.core.scoring import ScoredSentence, score, split_sentences
from blog_summarizer.core.selection import select, target_count
from blog_summarizer.core.summarizer import FALLBACK_SUMMARY, generate_summary
from blog_summarizer.core.topics import extract_topics

__all__ = [
    "clean",
    "prepare_for_summary",
    "ScoredSentence",
    "score",
    "split_sentences",
    "select",
    "target_count",
    "FALLBACK_SUMMARY",
    "generate_summary",
    "extract_topics",
]
