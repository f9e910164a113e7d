"""
Request orchestration.

Checks the word limit, runs the keyword inserter for the primary keywords and
then for the secondary keywords on the primary output, and assembles the
per-keyword report in the order the keywords were requested.
"""

import logging
import random
from typing import Optional

from .config import DEFAULT_LIMITS, InsertionConfig, OptimizationLimits
from .inserter import KeywordInserter
from .models import KeywordStat, OptimizationResult
from .schema import OptimizationRequest
from .text_stats import calculate_density, count_words

logger = logging.getLogger(__name__)


class OptimizationError(Exception):
    """Base error for requests that cannot be optimized."""
    pass


class WordLimitExceededError(OptimizationError):
    """Raised when submitted content is longer than the word limit."""

    def __init__(self, word_count: int, limit: int):
        self.word_count = word_count
        self.limit = limit
        super().__init__(f"Content exceeds the {limit} word limit")


class FrequencyOutOfRangeError(OptimizationError):
    """Raised when a keyword frequency falls outside the configured bounds."""

    def __init__(self, name: str, value: float, minimum: float, maximum: float):
        self.name = name
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"{name} must be between {minimum} and {maximum}, got {value}"
        )


def _check_frequency(name: str, value: float, minimum: float, maximum: float) -> None:
    if not minimum <= value <= maximum:
        raise FrequencyOutOfRangeError(name, value, minimum, maximum)


def optimize_content(
    request: OptimizationRequest,
    rng: Optional[random.Random] = None,
    limits: Optional[OptimizationLimits] = None,
    config: Optional[InsertionConfig] = None,
) -> OptimizationResult:
    """
    Optimize content for a validated request.

    The word limit is checked against the submitted content. The reported
    word count is that of the optimized content and may exceed the limit.

    Args:
        request: Validated optimization request.
        rng: Random source shared by both passes.
        limits: Request bounds.
        config: Insertion tuning values.

    Returns:
        OptimizationResult with stats in request order.

    Raises:
        WordLimitExceededError: If the content has too many words.
        FrequencyOutOfRangeError: If a frequency is outside the limits.
    """
    limits = limits or DEFAULT_LIMITS
    _check_frequency(
        "primary_frequency",
        request.primary_frequency,
        limits.primary_frequency_min,
        limits.primary_frequency_max,
    )
    _check_frequency(
        "secondary_frequency",
        request.secondary_frequency,
        limits.secondary_frequency_min,
        limits.secondary_frequency_max,
    )

    original_words = count_words(request.content)
    if original_words > limits.max_words:
        raise WordLimitExceededError(original_words, limits.max_words)

    inserter = KeywordInserter(config=config, rng=rng)

    primary = inserter.insert(
        request.content,
        request.primary_keywords,
        request.primary_frequency,
    )
    secondary = inserter.insert(
        primary.text,
        request.secondary_keywords,
        request.secondary_frequency,
    )

    final_words = count_words(secondary.text)
    result = OptimizationResult(
        optimized_content=secondary.text,
        primary_keyword_stats=_build_stats(
            request.primary_keywords, primary.occurrences, final_words
        ),
        secondary_keyword_stats=_build_stats(
            request.secondary_keywords, secondary.occurrences, final_words
        ),
        total_words=final_words,
        original_word_count=original_words,
    )

    logger.info(
        f"Optimized content: {original_words} -> {final_words} words, "
        f"{len(result.primary_keyword_stats)} primary / "
        f"{len(result.secondary_keyword_stats)} secondary keyword(s)"
    )
    return result


def optimize(
    content: str,
    primary_keywords: Optional[list[str]] = None,
    secondary_keywords: Optional[list[str]] = None,
    primary_frequency: float = DEFAULT_LIMITS.default_primary_frequency,
    secondary_frequency: float = DEFAULT_LIMITS.default_secondary_frequency,
    rng: Optional[random.Random] = None,
    limits: Optional[OptimizationLimits] = None,
    config: Optional[InsertionConfig] = None,
) -> OptimizationResult:
    """
    Validate raw arguments and optimize content.

    Raises:
        pydantic.ValidationError: If the arguments do not form a valid request.
        WordLimitExceededError: If the content has too many words.
    """
    request = OptimizationRequest(
        content=content,
        primary_keywords=primary_keywords or [],
        secondary_keywords=secondary_keywords or [],
        primary_frequency=primary_frequency,
        secondary_frequency=secondary_frequency,
    )
    return optimize_content(request, rng=rng, limits=limits, config=config)


def _build_stats(
    keywords: list[str],
    occurrences: dict[str, int],
    total_words: int,
) -> list[KeywordStat]:
    """Per-keyword stats in request order, skipping blank keywords."""
    stats = []
    for keyword in keywords:
        if not keyword.strip():
            continue
        count = occurrences.get(keyword, 0)
        stats.append(KeywordStat(
            keyword=keyword,
            occurrences=count,
            density=calculate_density(count, total_words),
        ))
    return stats
