"""Frequency-based keyword candidates."""

import re
from collections import Counter

NON_WORD_RE = re.compile(r"[^\w\s]")
MIN_TOKEN_CHARS = 5
MAX_TOPICS = 10

STOP_WORDS: frozenset[str] = frozenset(
    {
        "about",
        "after",
        "again",
        "against",
        "before",
        "being",
        "below",
        "between",
        "during",
        "further",
        "having",
        "other",
        "should",
        "through",
        "under",
        "until",
        "where",
        "while",
        "would",
        "could",
        "their",
        "there",
        "these",
        "those",
        "which",
        "article",
        "content",
    }
)


def extract_topics(text: str) -> list[str]:
    """Return up to ten frequent words longer than four characters.

    Most frequent first; equal counts keep first-seen order.
    """
    tokens = NON_WORD_RE.sub(" ", text.lower()).split()
    counts = Counter(t for t in tokens if len(t) >= MIN_TOKEN_CHARS and t not in STOP_WORDS)
    return [word for word, _ in counts.most_common(MAX_TOPICS)]
