"""
Tests for request orchestration: word limit, two-pass insertion and
stat reporting.
"""

import random

import pytest
from pydantic import ValidationError

from keyword_density_optimizer.config import OptimizationLimits
from keyword_density_optimizer.optimizer import (
    FrequencyOutOfRangeError,
    OptimizationError,
    WordLimitExceededError,
    _build_stats,
    optimize,
    optimize_content,
)
from keyword_density_optimizer.schema import OptimizationRequest
from keyword_density_optimizer.text_stats import count_keyword_occurrences, count_words


class TestWordLimit:
    """Test the input word limit."""

    def test_over_limit_rejected(self, report_1000_words):
        """Content over 1000 words is rejected before optimization."""
        with pytest.raises(WordLimitExceededError) as exc_info:
            optimize(report_1000_words + " extra", primary_keywords=["widget"])
        assert exc_info.value.word_count == 1001
        assert exc_info.value.limit == 1000
        assert str(exc_info.value) == "Content exceeds the 1000 word limit"

    def test_word_limit_is_optimization_error(self):
        """The word limit error is distinct from validation errors."""
        assert issubclass(WordLimitExceededError, OptimizationError)
        assert not issubclass(WordLimitExceededError, ValueError)

    def test_output_may_exceed_limit(self, report_1000_words):
        """Only the input is limited; the optimized content can pass 1000 words."""
        result = optimize(
            report_1000_words,
            primary_keywords=["widget"],
            rng=random.Random(5),
        )
        assert result.original_word_count == 1000
        assert result.total_words == 1021
        assert result.word_count == result.total_words
        assert result.words_added == 21

    def test_custom_limit(self, sample_content):
        """The limit is configurable."""
        limits = OptimizationLimits(max_words=10)
        with pytest.raises(WordLimitExceededError):
            optimize(sample_content, primary_keywords=["comfort"], limits=limits)


class TestFrequencyLimits:
    """Test frequency bounds taken from the caller's limits."""

    def test_primary_frequency_above_custom_max(self, sample_content):
        """A primary frequency inside the schema range but above the limit is rejected."""
        limits = OptimizationLimits(primary_frequency_max=5.0)
        with pytest.raises(FrequencyOutOfRangeError) as exc_info:
            optimize(
                sample_content,
                primary_keywords=["widget"],
                primary_frequency=9.0,
                limits=limits,
            )
        assert exc_info.value.name == "primary_frequency"
        assert exc_info.value.maximum == 5.0

    def test_secondary_frequency_below_custom_min(self, sample_content):
        """A secondary frequency under the limit's minimum is rejected."""
        limits = OptimizationLimits(secondary_frequency_min=0.5)
        with pytest.raises(FrequencyOutOfRangeError) as exc_info:
            optimize(
                sample_content,
                secondary_keywords=["grip"],
                secondary_frequency=0.2,
                limits=limits,
            )
        assert exc_info.value.name == "secondary_frequency"
        assert issubclass(FrequencyOutOfRangeError, OptimizationError)

    def test_frequencies_within_custom_limits(self, sample_content):
        """Frequencies inside the caller's bounds are accepted."""
        limits = OptimizationLimits(primary_frequency_max=5.0)
        result = optimize(
            sample_content,
            primary_keywords=["comfort"],
            primary_frequency=5.0,
            limits=limits,
            rng=random.Random(4),
        )
        assert result.primary_keyword_stats[0].keyword == "comfort"


class TestTwoPasses:
    """Test primary then secondary insertion."""

    def test_already_satisfied_keyword(self):
        """A keyword already at its target leaves the content as it was."""
        content = "The cat sat on the mat. It was a sunny day in the park."
        result = optimize(content, primary_keywords=["cat"], primary_frequency=2.5)
        assert result.optimized_content == content
        assert result.primary_keyword_stats[0].occurrences == 1
        assert result.secondary_keyword_stats == []

    def test_secondary_runs_on_primary_output(self, report_200_words):
        """Secondary insertion keeps every primary insertion."""
        result = optimize(
            report_200_words,
            primary_keywords=["widget"],
            secondary_keywords=["gadget"],
            primary_frequency=2.5,
            secondary_frequency=1.0,
            rng=random.Random(11),
        )
        primary = result.primary_keyword_stats[0]
        secondary = result.secondary_keyword_stats[0]

        assert primary.occurrences == 5
        assert secondary.occurrences == 2
        assert count_keyword_occurrences(result.optimized_content, "widget") == 5
        assert count_keyword_occurrences(result.optimized_content, "gadget") == 2
        assert result.total_words == 207

    def test_secondary_target_uses_primary_word_count(self, report_200_words):
        """Secondary targets come from the content after primary insertion."""
        result = optimize(
            report_200_words,
            primary_keywords=["widget"],
            secondary_keywords=["gadget"],
            primary_frequency=10,
            secondary_frequency=2.3,
            rng=random.Random(11),
        )
        # Target is 20, but the pass stops once more than 10 of 20 sentences change.
        assert result.primary_keyword_stats[0].occurrences == 11
        # 211 * 2.3% = 4.853
        assert result.secondary_keyword_stats[0].occurrences == 5

    def test_deterministic_with_seed(self, sample_content):
        """The same seed produces the same result."""
        kwargs = dict(
            primary_keywords=["running shoes"],
            secondary_keywords=["cushioning", "grip"],
            primary_frequency=4,
            secondary_frequency=3,
        )
        first = optimize(sample_content, rng=random.Random(99), **kwargs)
        second = optimize(sample_content, rng=random.Random(99), **kwargs)
        assert first == second


class TestStats:
    """Test per-keyword stat reporting."""

    def test_request_order_preserved(self, sample_content):
        """Stats follow the order keywords were requested in."""
        result = optimize(
            sample_content,
            primary_keywords=["zeta", "comfort", "alpha"],
            rng=random.Random(2),
        )
        assert [s.keyword for s in result.primary_keyword_stats] == ["zeta", "comfort", "alpha"]

    def test_missing_keywords_default_to_zero(self):
        """Keywords without a count report zero."""
        stats = _build_stats(["a", "b"], {"a": 2}, 10)
        assert [(s.keyword, s.occurrences) for s in stats] == [("a", 2), ("b", 0)]
        assert stats[0].density == 20.0

    def test_blank_keywords_not_reported(self, sample_content):
        """Whitespace-only keywords are skipped in the report."""
        result = optimize(sample_content, primary_keywords=["comfort", "   "], rng=random.Random(2))
        assert [s.keyword for s in result.primary_keyword_stats] == ["comfort"]

    def test_density_uses_final_word_count(self, report_200_words):
        """Density is measured against the optimized content."""
        result = optimize(report_200_words, primary_keywords=["widget"], rng=random.Random(1))
        assert result.primary_keyword_stats[0].density == round(5 / 205 * 100, 2)


class TestValidation:
    """Test request validation before optimization."""

    def test_empty_content(self):
        """Empty content is rejected."""
        with pytest.raises(ValidationError):
            optimize("", primary_keywords=["widget"])

    def test_no_keywords(self, sample_content):
        """At least one keyword is required."""
        with pytest.raises(ValidationError):
            optimize(sample_content)

    def test_frequency_out_of_range(self, sample_content):
        """Frequencies outside their bounds are rejected."""
        with pytest.raises(ValidationError):
            optimize(sample_content, primary_keywords=["x"], primary_frequency=11)
        with pytest.raises(ValidationError):
            optimize(sample_content, secondary_keywords=["x"], secondary_frequency=5.5)

    def test_optimize_content_accepts_request(self, sample_content):
        """Validated requests can be passed directly."""
        request = OptimizationRequest(content=sample_content, primary_keywords=["comfort"])
        result = optimize_content(request, rng=random.Random(0))
        assert count_words(result.optimized_content) == result.total_words
