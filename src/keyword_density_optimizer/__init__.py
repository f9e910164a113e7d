"""
Keyword Density Optimizer

Rewrites free-form text so that primary and secondary keywords reach a
target density:
- Scores sentences for topical relevance to each keyword
- Inserts keywords at natural points, one per sentence per pass
- Reports per-keyword occurrence counts
"""

__version__ = "1.0.0"
__author__ = "Keyword Density Optimizer Team"

from .config import InsertionConfig, OptimizationLimits

from .models import (
    InsertionResult,
    KeywordStat,
    OptimizationResult,
    KeywordSpan,
)

from .text_stats import (
    count_words,
    split_words,
    split_sentences,
    count_keyword_occurrences,
    calculate_target_occurrences,
    calculate_density,
)

from .inserter import (
    KeywordInserter,
    insert_keywords,
)

from .schema import (
    OptimizationRequest,
    OptimizationResponse,
    KeywordOccurrence,
)

from .optimizer import (
    OptimizationError,
    WordLimitExceededError,
    FrequencyOutOfRangeError,
    optimize,
    optimize_content,
)

from .highlight import find_keyword_spans

__all__ = [
    # Configuration
    "InsertionConfig",
    "OptimizationLimits",
    # Models
    "InsertionResult",
    "KeywordStat",
    "OptimizationResult",
    "KeywordSpan",
    # Text rules
    "count_words",
    "split_words",
    "split_sentences",
    "count_keyword_occurrences",
    "calculate_target_occurrences",
    "calculate_density",
    # Keyword insertion
    "KeywordInserter",
    "insert_keywords",
    # Schemas
    "OptimizationRequest",
    "OptimizationResponse",
    "KeywordOccurrence",
    # Orchestration
    "OptimizationError",
    "WordLimitExceededError",
    "FrequencyOutOfRangeError",
    "optimize",
    "optimize_content",
    # Highlighting
    "find_keyword_spans",
]
