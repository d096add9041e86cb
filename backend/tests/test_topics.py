"""Tests for keyword extraction."""

from blog_summarizer.core.topics import extract_topics


class TestExtractTopics:
    def test_only_stop_words_and_short_words(self) -> None:
        assert extract_topics("about these which the and cat dog content article") == []

    def test_empty(self) -> None:
        assert extract_topics("") == []

    def test_most_frequent_first(self) -> None:
        assert extract_topics("rocks python great python rocks python") == ["python", "rocks", "great"]

    def test_case_and_punctuation_normalized(self) -> None:
        assert extract_topics("Python, python! PYTHON.") == ["python"]

    def test_ties_keep_first_seen_order(self) -> None:
        assert extract_topics("zebra apple zebra apple mango") == ["zebra", "apple", "mango"]

    def test_at_most_ten(self) -> None:
        words = " ".join(f"keyword{i}" for i in range(15))
        assert len(extract_topics(words)) == 10
