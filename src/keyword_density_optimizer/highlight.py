"""
Keyword highlighting.

Locates keyword matches in optimized content so presentation layers can mark
primary and secondary keywords differently.
"""

from typing import Iterable

from .models import KeywordSpan
from .text_stats import keyword_pattern


def find_keyword_spans(
    text: str,
    primary_keywords: Iterable[str],
    secondary_keywords: Iterable[str] = (),
) -> list[KeywordSpan]:
    """
    Find non-overlapping whole-word keyword matches.

    Where matches overlap, primary keywords win over secondary ones and
    longer keywords win over shorter ones.

    Args:
        text: Content to scan.
        primary_keywords: Primary keywords.
        secondary_keywords: Secondary keywords.

    Returns:
        Spans sorted by start offset.
    """
    ranked: list[tuple[str, str]] = []
    for kind, keywords in (("primary", primary_keywords), ("secondary", secondary_keywords)):
        unique = {k.strip() for k in keywords if k.strip()}
        ranked.extend((kind, k) for k in sorted(unique, key=len, reverse=True))

    taken: list[KeywordSpan] = []
    for kind, keyword in ranked:
        for match in keyword_pattern(keyword).finditer(text):
            start, end = match.span()
            if any(start < span.end and span.start < end for span in taken):
                continue
            taken.append(KeywordSpan(start=start, end=end, keyword=keyword, kind=kind))

    return sorted(taken, key=lambda span: span.start)
