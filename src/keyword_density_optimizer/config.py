# -*- coding: utf-8 -*-
"""
Centralized configuration for the Keyword Density Optimizer.

The relevance scores, sentence-length thresholds and loop safety valves used
by the keyword inserter are heuristic tuning values, so they live here rather
than inside the algorithm. Request bounds (word limit, frequency ranges) live
in OptimizationLimits.
"""

from dataclasses import dataclass, field


@dataclass
class InsertionConfig:
    """
    Tuning values for keyword insertion.

    Attributes:
        subword_match_score: Added per keyword sub-word found in a sentence.
        subword_min_length: Sub-words must be longer than this to score.
        related_word_score: Added once if any sentence word and keyword word
            contain one another.
        length_bonus_score: Added when the sentence length is in the
            preferred range.
        preferred_min_words / preferred_max_words: Inclusive preferred
            sentence length range.
        question_penalty: Subtracted when the sentence contains '?' or '!'.

        min_insertion_words: Sentences shorter than this never receive a
            keyword.
        midpoint_max_words: Sentences with at most this many words get the
            keyword at their midpoint.
        clause_punctuation: Word endings after which a keyword may follow.
        conjunctions: Words before which a keyword may be placed.
        default_position_divisor: Fallback position is len(words) / divisor.

        fallback_sample_size: Random sentences used when nothing scores.
        drop_probability: Chance of giving up on a keyword that has no
            candidate sentence left.
        max_modified_ratio: Share of sentences that may be modified per pass.
        max_modified_sentences: Absolute cap on modified sentences per pass.
        max_iterations: Hard ceiling on placement loop iterations.
    """

    # Relevance scoring
    subword_match_score: int = 2
    subword_min_length: int = 3
    related_word_score: int = 1
    length_bonus_score: int = 1
    preferred_min_words: int = 5
    preferred_max_words: int = 20
    question_penalty: int = 1

    # Insertion position
    min_insertion_words: int = 5
    midpoint_max_words: int = 5
    clause_punctuation: tuple[str, ...] = (",", ";", ":", "-")
    conjunctions: frozenset[str] = field(
        default_factory=lambda: frozenset(
            {"and", "or", "but", "so", "because", "while", "although"}
        )
    )
    default_position_divisor: float = 2.5

    # Loop safety valves
    fallback_sample_size: int = 5
    drop_probability: float = 0.2
    max_modified_ratio: float = 0.5
    max_modified_sentences: int = 20
    max_iterations: int = 10_000

    def __post_init__(self):
        """Validate configuration values."""
        if self.preferred_min_words > self.preferred_max_words:
            raise ValueError(
                f"preferred_min_words ({self.preferred_min_words}) must be <= "
                f"preferred_max_words ({self.preferred_max_words})"
            )
        if self.min_insertion_words < 1:
            raise ValueError(
                f"min_insertion_words must be >= 1, got {self.min_insertion_words}"
            )
        if self.default_position_divisor < 1:
            raise ValueError(
                f"default_position_divisor must be >= 1, got {self.default_position_divisor}"
            )
        if not 0 < self.drop_probability <= 1:
            raise ValueError(
                f"drop_probability must be in (0, 1], got {self.drop_probability}"
            )
        if self.max_modified_ratio <= 0:
            raise ValueError(
                f"max_modified_ratio must be > 0, got {self.max_modified_ratio}"
            )
        if self.max_iterations < 1:
            raise ValueError(f"max_iterations must be >= 1, got {self.max_iterations}")

    def max_modified_for(self, sentence_count: int) -> float:
        """Modified-sentence ceiling for a document; the loop stops once exceeded."""
        return min(sentence_count * self.max_modified_ratio, self.max_modified_sentences)


@dataclass
class OptimizationLimits:
    """
    Bounds enforced on optimization requests.

    The word limit applies to the submitted content, not to the optimized
    output, which may end up longer.
    """

    max_words: int = 1000
    primary_frequency_min: float = 0.1
    primary_frequency_max: float = 10.0
    secondary_frequency_min: float = 0.1
    secondary_frequency_max: float = 5.0
    default_primary_frequency: float = 2.5
    default_secondary_frequency: float = 1.0

    def __post_init__(self):
        """Validate configuration values."""
        if self.max_words < 1:
            raise ValueError(f"max_words must be >= 1, got {self.max_words}")
        if not (
            self.primary_frequency_min
            <= self.default_primary_frequency
            <= self.primary_frequency_max
        ):
            raise ValueError(
                f"default_primary_frequency ({self.default_primary_frequency}) must be "
                f"within [{self.primary_frequency_min}, {self.primary_frequency_max}]"
            )
        if not (
            self.secondary_frequency_min
            <= self.default_secondary_frequency
            <= self.secondary_frequency_max
        ):
            raise ValueError(
                f"default_secondary_frequency ({self.default_secondary_frequency}) must be "
                f"within [{self.secondary_frequency_min}, {self.secondary_frequency_max}]"
            )


DEFAULT_LIMITS = OptimizationLimits()
