"""Dictionary-based English to Urdu translation.

Glossary phrases are substituted case-insensitively on word boundaries; any
word not in the glossary is left exactly as written.
"""

import re
from functools import lru_cache

from blog_summarizer.config import get_settings
from blog_summarizer.constants.glossary_ur import URDU_GLOSSARY
from blog_summarizer.exceptions import TranslationFailure
from blog_summarizer.logging_config import get_logger

logger = get_logger("services.translator")

GLOSSARIES: dict[str, dict[str, str]] = {
    "ur": URDU_GLOSSARY,
}

# Urdu full stop, question mark and comma, only where they end a clause
PUNCTUATION = {".": "۔", "?": "؟", ",": "،"}
CLAUSE_PUNCTUATION_RE = re.compile(r"[.?,](?=\s|$)")
WHITESPACE_RE = re.compile(r"\s+")


class DictionaryTranslator:
    """Translate text with a static glossary for one target language."""

    def __init__(self, target_language: str):
        glossary = GLOSSARIES.get(target_language)
        if glossary is None:
            raise TranslationFailure(f"Unsupported target language: {target_language}")

        self.target_language = target_language
        self._glossary = {phrase.lower(): value for phrase, value in glossary.items()}
        # Longest first so phrases win over the words inside them
        phrases = sorted(self._glossary, key=len, reverse=True)
        self._pattern = re.compile(
            r"\b(?:" + "|".join(re.escape(p) for p in phrases) + r")\b",
            re.IGNORECASE,
        )

    def _substitute(self, match: re.Match) -> str:
        word = match.group(0)
        # Unicode case folding lets e.g. "ı" match "i"; such words stay untranslated
        return self._glossary.get(word.lower(), word)

    def translate(self, text: str) -> str:
        """Translate ``text``; raises TranslationFailure if anything goes wrong."""
        try:
            translated = self._pattern.sub(self._substitute, text)
            translated = CLAUSE_PUNCTUATION_RE.sub(lambda m: PUNCTUATION[m.group(0)], translated)
            translated = WHITESPACE_RE.sub(" ", translated).strip()
        except Exception as e:
            logger.error("translation_failed", target_language=self.target_language, error=str(e))
            raise TranslationFailure(f"Failed to translate: {e}") from e

        logger.info("translation_completed", target_language=self.target_language, chars=len(translated))
        return translated


@lru_cache
def get_translator() -> DictionaryTranslator:
    """Translator for the configured target language, built once."""
    return DictionaryTranslator(get_settings().translation_target_language)
