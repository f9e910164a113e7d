"""
Keyword insertion.

Rewrites text so that each keyword reaches a target occurrence count derived
from a density percentage. Keywords are placed one per sentence at the
positions most likely to read naturally:

- Sentences are scored for topical relevance to each keyword
- Keywords take turns through a FIFO queue, least-served first
- Each sentence receives at most one keyword per pass
- Two escape valves (random drop of stuck keywords, a cap on modified
  sentences) guarantee that the loop ends

Reaching the target is best effort. A keyword that cannot be placed simply
stays below its target.
"""

import logging
import math
import random
from collections import deque
from typing import Iterable, Optional

from .config import InsertionConfig
from .models import InsertionResult
from .text_stats import (
    calculate_target_occurrences,
    count_keyword_occurrences,
    count_words,
    split_sentences,
    split_words,
)

logger = logging.getLogger(__name__)


class KeywordInserter:
    """
    Inserts keywords into free-form text.

    The random source is injectable so that placement is reproducible:
    pass a seeded random.Random to get identical output for identical input.
    """

    def __init__(
        self,
        config: Optional[InsertionConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or InsertionConfig()
        self.rng = rng if rng is not None else random.Random()

    def insert(
        self,
        content: str,
        keywords: Iterable[str],
        frequency_percent: float,
    ) -> InsertionResult:
        """
        Insert keywords until each reaches its target occurrence count.

        Args:
            content: Text to rewrite.
            keywords: Keywords to place. Blank entries are ignored.
            frequency_percent: Target density, validated by the caller.

        Returns:
            InsertionResult with the rewritten text and the final occurrence
            count of every non-blank keyword.
        """
        keywords = list(dict.fromkeys(k for k in keywords if k.strip()))
        if not keywords:
            return InsertionResult(text=content, occurrences={})

        cfg = self.config
        total_words = count_words(content)
        target = calculate_target_occurrences(total_words, frequency_percent)

        occurrences = {kw: count_keyword_occurrences(content, kw) for kw in keywords}
        sentences = split_sentences(content)
        relevant = {kw: self.find_relevant_sentences(sentences, kw) for kw in keywords}

        queue = deque(sorted(keywords, key=lambda kw: occurrences[kw] / target))
        modified: set[int] = set()
        max_modified = cfg.max_modified_for(len(sentences))
        iterations = 0

        while queue:
            if iterations >= cfg.max_iterations:
                logger.warning(
                    f"Keyword insertion stopped after {iterations} iterations "
                    f"with {len(queue)} keyword(s) still queued"
                )
                break
            iterations += 1

            keyword = queue.popleft()
            if occurrences[keyword] >= target:
                continue

            candidates = [
                idx for idx in relevant[keyword]
                if self._can_receive(sentences[idx], keyword, idx, modified)
            ]

            if not candidates:
                candidates = [
                    idx for idx, sentence in enumerate(sentences)
                    if self._can_receive(sentence, keyword, idx, modified)
                ]
                if not candidates:
                    if self.rng.random() < cfg.drop_probability:
                        logger.debug(f"Dropping '{keyword}': no sentence can take it")
                    else:
                        queue.append(keyword)
                    continue

            index = self.rng.choice(candidates)
            words = split_words(sentences[index])

            if len(words) >= cfg.min_insertion_words:
                position = self.get_insert_position(words)
                words.insert(position, keyword.strip())
                sentences[index] = " ".join(words)
                modified.add(index)
                occurrences[keyword] += 1

            queue.append(keyword)

            if len(modified) > max_modified:
                logger.debug(
                    f"Modified-sentence cap reached ({len(modified)} > {max_modified})"
                )
                break

        logger.debug(
            f"Inserted {len(modified)} keyword(s) into {len(sentences)} sentence(s), "
            f"target {target} per keyword"
        )
        return InsertionResult(text=" ".join(sentences), occurrences=occurrences)

    def _can_receive(self, sentence: str, keyword: str, index: int, modified: set[int]) -> bool:
        """Check whether a sentence is still open for this keyword in the current pass."""
        if index in modified:
            return False
        if keyword.strip().lower() in sentence.lower():
            return False
        return len(split_words(sentence)) >= self.config.min_insertion_words

    def find_relevant_sentences(self, sentences: list[str], keyword: str) -> list[int]:
        """
        Indices of sentences that are good insertion candidates for a keyword.

        A sentence is relevant when its score is positive. When no sentence
        scores, a few random indices (drawn with replacement) are returned so
        that the keyword still has somewhere to go.
        """
        keyword_words = keyword.lower().split()
        relevant = [
            idx for idx, sentence in enumerate(sentences)
            if self.score_sentence(sentence, keyword_words) > 0
        ]
        if relevant:
            return relevant

        sample_size = min(len(sentences), self.config.fallback_sample_size)
        return [self.rng.randrange(len(sentences)) for _ in range(sample_size)]

    def score_sentence(self, sentence: str, keyword_words: list[str]) -> int:
        """Relevance score of a sentence for a keyword split into lowercase words."""
        cfg = self.config
        lower_sentence = sentence.lower()
        score = 0

        for word in keyword_words:
            if len(word) > cfg.subword_min_length and word in lower_sentence:
                score += cfg.subword_match_score

        sentence_words = lower_sentence.split()
        if any(
            word in kw or kw in word
            for word in sentence_words
            for kw in keyword_words
        ):
            score += cfg.related_word_score

        if cfg.preferred_min_words <= len(sentence_words) <= cfg.preferred_max_words:
            score += cfg.length_bonus_score

        if "?" in sentence or "!" in sentence:
            score -= cfg.question_penalty

        return score

    def get_insert_position(self, words: list[str]) -> int:
        """
        Choose where in a sentence a keyword reads most naturally.

        Short sentences take it in the middle. Longer ones prefer the spot
        right after clause punctuation, then right before a coordinating
        conjunction, then a point a little before the middle.
        """
        cfg = self.config
        if len(words) <= cfg.midpoint_max_words:
            return len(words) // 2

        # Never the first or last slot
        for i in range(1, len(words) - 1):
            if words[i - 1].endswith(cfg.clause_punctuation):
                return i

        for i in range(len(words) - 1):
            if words[i].lower() in cfg.conjunctions:
                return i

        return math.floor(len(words) / cfg.default_position_divisor)


def insert_keywords(
    content: str,
    keywords: Iterable[str],
    frequency_percent: float,
    rng: Optional[random.Random] = None,
    config: Optional[InsertionConfig] = None,
) -> InsertionResult:
    """
    Convenience function to run one keyword insertion pass.

    Args:
        content: Text to rewrite.
        keywords: Keywords to place.
        frequency_percent: Target density percentage.
        rng: Random source; a fresh unseeded generator when omitted.
        config: Insertion tuning values.

    Returns:
        InsertionResult with rewritten text and occurrence counts.
    """
    return KeywordInserter(config=config, rng=rng).insert(content, keywords, frequency_percent)
