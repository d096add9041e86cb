"""Boilerplate removal for scraped blog text.

The patterns run in a fixed order: later ones assume the title and the
metadata in front of the body are already gone.
"""

import re

READING_TIME_RE = re.compile(r"\d+\s*min read", re.IGNORECASE)
# "Mar 4, 2024", optionally glued to a "·" separator (or its mis-decoded "Â·")
DATE_RE = re.compile(r"(?:Â?·)?[A-Za-z]+\s+\d+,\s+\d{4}")
SHARE_LABELS_RE = re.compile(r"Listen|Share|AIML")
PHOTO_CREDIT_RE = re.compile(r"Photo by .* on Unsplash", re.IGNORECASE)
LEADING_NON_LETTERS_RE = re.compile(r"^[^a-zA-Z]+")
WHITESPACE_RE = re.compile(r"\s+")

# Summary-side preparation
TITLE_HEADER_RE = re.compile(r"^[^.!?]+-{2}")
READ_MORE_RE = re.compile(r"Read More.*$", re.IGNORECASE | re.DOTALL)
LABEL_PREFIX_RE = re.compile(r"^[^:.!?]{1,60}:")


def _strip_title(text: str, title: str) -> str:
    if not title:
        return text
    escaped = re.escape(title)
    text = re.sub(f"^{escaped}", "", text)
    return re.sub(f"^[^a-zA-Z]*{escaped}", "", text)


def _strip_metadata(text: str) -> str:
    text = READING_TIME_RE.sub("", text, count=1)
    text = DATE_RE.sub("", text)
    text = SHARE_LABELS_RE.sub("", text)
    text = PHOTO_CREDIT_RE.sub("", text, count=1)
    text = LEADING_NON_LETTERS_RE.sub("", text)
    return WHITESPACE_RE.sub(" ", text).strip()


def clean(text: str, title: str = "") -> str:
    """Remove the leading title and page chrome from extracted article text.

    Args:
        text: Raw body text as extracted from the page.
        title: Article title; removed when the body starts with it.

    Returns:
        Single-spaced text with no leading title, reading time, dates,
        share labels or Unsplash credits. Empty input gives ``""``.
    """
    if not text:
        return ""
    return _strip_metadata(_strip_title(text, title))


def prepare_for_summary(text: str) -> str:
    """Normalize body text right before sentence scoring.

    On top of :func:`clean` this drops a ``<title>--`` header, everything from
    the first "Read More" link onward and a short ``Label:`` prefix.
    """
    if not text:
        return ""
    header = TITLE_HEADER_RE.match(text)
    if header:
        text = text[header.end():].strip()
    text = READ_MORE_RE.sub("", text)
    text = LABEL_PREFIX_RE.sub("", text)
    return _strip_metadata(text)
