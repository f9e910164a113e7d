"""
Data models for the Keyword Density Optimizer.

Plain dataclasses passed between the inserter, the orchestrator and the
presentation layers (CLI and API).
"""

from dataclasses import dataclass, field
from typing import Literal


@dataclass
class InsertionResult:
    """Output of a single keyword insertion pass."""
    text: str
    occurrences: dict[str, int] = field(default_factory=dict)


@dataclass
class KeywordStat:
    """Reported occurrence count for one requested keyword."""
    keyword: str
    occurrences: int
    density: float = 0.0  # Percent of the optimized content's words


@dataclass
class OptimizationResult:
    """Result of a full primary + secondary optimization."""
    optimized_content: str
    primary_keyword_stats: list[KeywordStat] = field(default_factory=list)
    secondary_keyword_stats: list[KeywordStat] = field(default_factory=list)
    total_words: int = 0  # Word count of optimized_content
    original_word_count: int = 0

    @property
    def word_count(self) -> int:
        """Alias of total_words kept for response compatibility."""
        return self.total_words

    @property
    def words_added(self) -> int:
        """Number of tokens inserted across both passes."""
        return self.total_words - self.original_word_count


@dataclass
class KeywordSpan:
    """Location of a keyword match in text."""
    start: int
    end: int
    keyword: str
    kind: Literal["primary", "secondary"]
