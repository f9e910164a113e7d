"""
Pytest fixtures and configuration for Keyword Density Optimizer tests.
"""

import random

import pytest


def build_report(sentence_count: int) -> str:
    """Build content of ten-word sentences, one per numbered section."""
    return " ".join(
        f"Section {n} of the report covers budgets, and staff agreed."
        for n in range(1, sentence_count + 1)
    )


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(42)


@pytest.fixture
def sample_content() -> str:
    """Short multi-sentence article."""
    return (
        "Choosing the right running shoes can change how your body feels after a long run. "
        "Many runners focus on price, but comfort and fit matter far more over time. "
        "A good store will measure both feet and watch you walk before suggesting a pair. "
        "Trail runners need extra grip, while road runners usually want lighter cushioning. "
        "Replace your pair every few hundred miles to avoid injuries."
    )


@pytest.fixture
def report_200_words() -> str:
    """Two hundred words across twenty sentences."""
    return build_report(20)


@pytest.fixture
def report_1000_words() -> str:
    """Exactly one thousand words across one hundred sentences."""
    return build_report(100)
