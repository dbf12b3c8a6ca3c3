"""
Similarity engine - ranks every other article against a source article.

For each candidate the combined score is

    0.4 * tag_overlap + 0.4 * tfidf_similarity + 0.2 * recency

where
- tag_overlap      = |A & B| / max(|A|, |B|), 0 when both tag sets are empty
- tfidf_similarity = sum over the union of both documents' distinct terms of
                     w(t, source) * w(t, candidate)
- recency          = exp(-|days between the two dates| / 30), 0 when either
                     date is missing or malformed

tfidf_similarity is a raw dot product, not cosine similarity. It is not
bounded to [0, 1] and documents sharing many rare terms can dominate the
ranking. Existing rankings depend on this, so it is not normalized.

FAILURE ISOLATION:
------------------
A candidate that raises (or scores NaN) is logged and given the lowest
possible score, -inf. It sorts behind every successfully scored candidate
and only fills a slot when fewer than top_k candidates scored. The rest
of the ranking is unaffected.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime

import numpy as np

from article_recommender.core.protocols import SimilarityResult
from article_recommender.corpus.corpus import Corpus
from article_recommender.corpus.document import Document
from article_recommender.scoring.tfidf import TfidfScorer

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# CONSTANTS
# ---------------------------------------------------------------------------

DEFAULT_TOP_K = 5
SECONDS_PER_DAY = 60 * 60 * 24
FAILED_SCORE = float("-inf")


@dataclass(frozen=True)
class ScoringWeights:
    """Blend weights for the combined score."""

    tags: float = 0.4
    tfidf: float = 0.4
    recency: float = 0.2
    decay_days: float = 30.0  # exp(-days / decay_days); not a half-life

    def __post_init__(self) -> None:
        if not self.decay_days > 0:
            raise ValueError(f"decay_days must be greater than 0, got {self.decay_days}")


# ---------------------------------------------------------------------------
# COMPONENT SCORES
# ---------------------------------------------------------------------------


def tag_overlap(source_tags: frozenset[str] | set[str], other_tags: frozenset[str] | set[str]) -> float:
    """Shared tags over the size of the larger tag set."""
    denominator = max(len(source_tags), len(other_tags))
    if denominator == 0:
        return 0.0
    return len(source_tags & other_tags) / denominator


def recency_score(
    source_date: datetime | None,
    other_date: datetime | None,
    decay_days: float = 30.0,
) -> float:
    """Exponential decay over the absolute gap between two dates."""
    if source_date is None or other_date is None:
        return 0.0
    days = abs((source_date - other_date).total_seconds()) / SECONDS_PER_DAY
    return math.exp(-days / decay_days)


def tfidf_similarity(source: Document, other: Document, scorer: TfidfScorer) -> float:
    """Unnormalized dot product of the two documents' TF-IDF vectors."""
    union = list(dict.fromkeys(source.terms + other.terms))
    if not union:
        return 0.0
    source_weights = np.array([scorer.score(term, source) for term in union])
    other_weights = np.array([scorer.score(term, other) for term in union])
    return float(np.dot(source_weights, other_weights))


# ---------------------------------------------------------------------------
# ENGINE
# ---------------------------------------------------------------------------


class SimilarityEngine:
    """
    Ranks corpus members against a source document.

    Dependencies are injected: the scorer defaults to a fresh memoizing
    TfidfScorer over the same corpus, shared by every rank() call.
    """

    def __init__(
        self,
        corpus: Corpus,
        scorer: TfidfScorer | None = None,
        weights: ScoringWeights | None = None,
    ):
        self.corpus = corpus
        self.scorer = scorer or TfidfScorer(corpus)
        self.weights = weights or ScoringWeights()

    def score_pair(self, source: Document, other: Document) -> SimilarityResult:
        """Score one candidate. May raise; rank() isolates failures."""
        tags = tag_overlap(source.tags, other.tags)
        tfidf = tfidf_similarity(source, other, self.scorer)

        source_date = source.published_at
        other_date = other.published_at
        if source_date is None or other_date is None:
            logger.debug(
                "No usable date for %s or %s, recency is 0", source.id, other.id
            )
        recency = recency_score(source_date, other_date, self.weights.decay_days)

        combined = (
            self.weights.tags * tags
            + self.weights.tfidf * tfidf
            + self.weights.recency * recency
        )
        return SimilarityResult(
            source_id=source.id,
            candidate_id=other.id,
            score=combined,
            tag_overlap=tags,
            tfidf_similarity=tfidf,
            recency=recency,
        )

    def rank(self, source: Document, top_k: int = DEFAULT_TOP_K) -> list[SimilarityResult]:
        """Top-k candidates by descending score, ties in corpus order."""
        if top_k <= 0:
            return []

        scored: list[SimilarityResult] = []
        for other in self.corpus:
            if other.id == source.id:
                continue
            try:
                result = self.score_pair(source, other)
                if math.isnan(result.score):
                    raise ValueError("combined score is NaN")
            except Exception:
                logger.warning(
                    "Failed to score %s against %s, ranking it last",
                    other.id,
                    source.id,
                    exc_info=True,
                )
                result = SimilarityResult(
                    source_id=source.id,
                    candidate_id=other.id,
                    score=FAILED_SCORE,
                )
            scored.append(result)

        # sorted() is stable, so equal scores keep corpus order
        ranked = sorted(scored, key=lambda r: r.score, reverse=True)
        return ranked[:top_k]


def rank(source: Document, corpus: Corpus, top_k: int = DEFAULT_TOP_K) -> list[SimilarityResult]:
    """Rank corpus members against source with default weights."""
    return SimilarityEngine(corpus).rank(source, top_k)
