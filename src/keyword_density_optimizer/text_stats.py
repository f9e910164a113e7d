"""
Word, sentence and keyword counting rules.

These helpers are shared by the inserter, the request orchestrator and the
API layer so that every layer counts words and keyword matches the same way.
"""

import math
import re

SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")


def count_words(text: str) -> int:
    """
    Count whitespace-delimited words.

    Args:
        text: Text to count.

    Returns:
        0 for empty or whitespace-only text, otherwise the number of tokens.
    """
    return len(text.split())


def split_words(text: str) -> list[str]:
    """Split text into whitespace-delimited tokens."""
    return text.split()


def split_sentences(text: str) -> list[str]:
    """
    Split text into sentences.

    A boundary is a '.', '!' or '?' followed by whitespace. The punctuation
    stays with its sentence and the whitespace is dropped.
    """
    return SENTENCE_BOUNDARY.split(text)


def keyword_pattern(keyword: str) -> re.Pattern:
    """Build a case-insensitive whole-word pattern for a keyword."""
    return re.compile(rf"(?<!\w){re.escape(keyword.strip())}(?!\w)", re.IGNORECASE)


def count_keyword_occurrences(text: str, keyword: str) -> int:
    """
    Count whole-word, case-insensitive matches of a keyword.

    Args:
        text: Content to search.
        keyword: Keyword or phrase to count.

    Returns:
        Number of matches, 0 for a blank keyword.
    """
    if not keyword.strip():
        return 0
    return len(keyword_pattern(keyword).findall(text))


def calculate_target_occurrences(total_words: int, frequency_percent: float) -> int:
    """
    Number of times a keyword should appear for a given density.

    Halves round up, and every keyword is due at least one occurrence.
    """
    return max(1, math.floor(total_words * frequency_percent / 100 + 0.5))


def calculate_density(occurrences: int, total_words: int) -> float:
    """Keyword density as a percentage of total words."""
    if total_words <= 0:
        return 0.0
    return round(occurrences / total_words * 100, 2)
