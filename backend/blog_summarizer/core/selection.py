"""Pick the best scored sentences and stitch them back into prose."""

import math

from blog_summarizer.core.scoring import ScoredSentence

SELECTION_RATIO = 0.6
MIN_SELECTED = 2
MAX_SELECTED = 5
TERMINAL_PUNCTUATION = (".", "!", "?")


def target_count(n: int) -> int:
    """Number of sentences to keep out of ``n``: 60% rounded up, within 2..5."""
    k = min(MAX_SELECTED, max(MIN_SELECTED, math.ceil(n * SELECTION_RATIO)))
    return min(k, n)


def select(scored: list[ScoredSentence]) -> str:
    """Return the top-scoring sentences joined in their original order.

    Equal scores are ranked by position, earlier sentences first.
    """
    if not scored:
        return ""

    ranked = sorted(scored, key=lambda s: (-s.score, s.original_index))
    chosen = sorted(ranked[: target_count(len(scored))], key=lambda s: s.original_index)

    summary = ". ".join(s.text for s in chosen)
    if not summary.endswith(TERMINAL_PUNCTUATION):
        summary += "."
    return summary
