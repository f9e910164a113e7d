"""
Request and response schemas.

The wire format is camelCase JSON. Models accept either the camelCase alias
or the Python field name on input.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .config import DEFAULT_LIMITS
from .models import KeywordStat, OptimizationResult


class CamelModel(BaseModel):
    """Base model serializing field names as camelCase."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OptimizationRequest(CamelModel):
    """Content and keyword settings to optimize."""
    content: str = Field(..., min_length=1, description="Content to optimize")
    primary_keywords: list[str] = Field(default_factory=list, description="Primary keywords")
    secondary_keywords: list[str] = Field(default_factory=list, description="Secondary keywords")
    primary_frequency: float = Field(
        DEFAULT_LIMITS.default_primary_frequency,
        ge=DEFAULT_LIMITS.primary_frequency_min,
        le=DEFAULT_LIMITS.primary_frequency_max,
        description="Target density for each primary keyword, in percent",
    )
    secondary_frequency: float = Field(
        DEFAULT_LIMITS.default_secondary_frequency,
        ge=DEFAULT_LIMITS.secondary_frequency_min,
        le=DEFAULT_LIMITS.secondary_frequency_max,
        description="Target density for each secondary keyword, in percent",
    )

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Content is required")
        return value

    @field_validator("primary_keywords", "secondary_keywords")
    @classmethod
    def keywords_not_empty(cls, value: list[str]) -> list[str]:
        if any(keyword == "" for keyword in value):
            raise ValueError("Keyword cannot be empty")
        return value

    @model_validator(mode="after")
    def require_keywords(self) -> "OptimizationRequest":
        if not any(k.strip() for k in self.primary_keywords + self.secondary_keywords):
            raise ValueError("Please add at least one primary or secondary keyword")
        return self


class KeywordOccurrence(CamelModel):
    """Occurrence report for a single keyword."""
    keyword: str
    occurrences: int = Field(..., ge=0)
    density: float = Field(0.0, ge=0, description="Percent of optimized word count")

    @classmethod
    def from_stat(cls, stat: KeywordStat) -> "KeywordOccurrence":
        return cls(keyword=stat.keyword, occurrences=stat.occurrences, density=stat.density)


class OptimizationResponse(CamelModel):
    """Optimized content with per-keyword statistics."""
    optimized_content: str
    primary_keyword_stats: list[KeywordOccurrence]
    secondary_keyword_stats: list[KeywordOccurrence]
    total_words: int = Field(..., ge=0)
    word_count: int = Field(..., ge=0)

    @classmethod
    def from_result(cls, result: OptimizationResult) -> "OptimizationResponse":
        """Build the wire response from an optimization result."""
        return cls(
            optimized_content=result.optimized_content,
            primary_keyword_stats=[
                KeywordOccurrence.from_stat(s) for s in result.primary_keyword_stats
            ],
            secondary_keyword_stats=[
                KeywordOccurrence.from_stat(s) for s in result.secondary_keyword_stats
            ],
            total_words=result.total_words,
            word_count=result.word_count,
        )
