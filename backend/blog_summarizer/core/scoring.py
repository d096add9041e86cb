"""Heuristic sentence importance scoring."""

import re
from dataclasses import dataclass

SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
DIGIT_RE = re.compile(r"\d")

MIN_SENTENCE_CHARS = 10

EDGE_SENTENCE_SCORE = 2.0
INNER_SENTENCE_SCORE = 1.0
DIGIT_BONUS = 1.5
IMPORTANT_WORD_BONUS = 1.5
ACTION_VERB_BONUS = 1.0
ORGANIZATION_BONUS = 1.0
LENGTH_BONUS = 0.5
LENGTH_BONUS_WORDS = (8, 30)

IMPORTANT_WORDS: tuple[str, ...] = (
    "important",
    "significant",
    "key",
    "main",
    "primary",
    "essential",
    "crucial",
    "vital",
    "critical",
    "major",
    "principal",
    "fundamental",
    "conclude",
    "conclusion",
    "result",
    "findings",
    "discovery",
    "research",
    "study",
    "analysis",
    "therefore",
    "consequently",
    "demand",
    "require",
    "announce",
    "state",
    "claim",
    "argue",
    "emphasize",
    "highlight",
    "stress",
    "focus",
    "point out",
    "investment",
    "development",
    "growth",
    "decline",
    "increase",
    "decrease",
    "launch",
    "introduce",
    "release",
    "unveil",
    "reveal",
    "disclose",
)

ACTION_VERBS: tuple[str, ...] = (
    "demand",
    "require",
    "develop",
    "invest",
    "grow",
    "launch",
    "announce",
    "reveal",
    "introduce",
    "create",
    "build",
    "establish",
    "implement",
    "improve",
    "enhance",
    "expand",
    "reduce",
    "increase",
)

ORGANIZATIONS: tuple[str, ...] = (
    "openai",
    "microsoft",
    "google",
    "apple",
    "nvidia",
    "meta",
    "amazon",
    "tesla",
    "ibm",
    "oracle",
    "salesforce",
)


@dataclass(frozen=True)
class ScoredSentence:
    """A sentence with its importance score and position in the article."""

    text: str
    original_index: int
    score: float


def split_sentences(text: str) -> list[str]:
    """Split on runs of terminal punctuation, dropping fragments under 10 chars."""
    candidates = (part.strip() for part in SENTENCE_SPLIT_RE.split(text))
    return [c for c in candidates if len(c) >= MIN_SENTENCE_CHARS]


def score_sentence(sentence: str, index: int, total: int) -> float:
    lowered = sentence.lower()

    if index == 0 or index == total - 1:
        value = EDGE_SENTENCE_SCORE
    else:
        value = INNER_SENTENCE_SCORE

    if DIGIT_RE.search(sentence):
        value += DIGIT_BONUS

    # Every occurrence counts, so a sentence repeating "growth" twice earns it twice.
    value += IMPORTANT_WORD_BONUS * sum(lowered.count(word) for word in IMPORTANT_WORDS)
    value += ACTION_VERB_BONUS * sum(1 for verb in ACTION_VERBS if verb in lowered)
    value += ORGANIZATION_BONUS * sum(1 for org in ORGANIZATIONS if org in lowered)

    low, high = LENGTH_BONUS_WORDS
    if low <= len(sentence.split()) <= high:
        value += LENGTH_BONUS

    return value


def score(cleaned_text: str) -> list[ScoredSentence]:
    """Split cleaned text into sentences and score each one.

    Returns an empty list when no sentence survives the length filter.
    """
    sentences = split_sentences(cleaned_text)
    total = len(sentences)
    return [
        ScoredSentence(text=sentence, original_index=i, score=score_sentence(sentence, i, total))
        for i, sentence in enumerate(sentences)
    ]
