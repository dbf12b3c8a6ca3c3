"""
Scoring module - TF-IDF weights and pairwise article similarity.

This module provides:
- TfidfScorer: memoized term weights over one corpus
- SimilarityEngine: weighted tag/term/recency ranking
- ScoringWeights: blend weights and recency decay constant
"""

from article_recommender.scoring.tfidf import TfidfScorer, score
from article_recommender.scoring.similarity import (
    DEFAULT_TOP_K,
    ScoringWeights,
    SimilarityEngine,
    rank,
    recency_score,
    tag_overlap,
    tfidf_similarity,
)

__all__ = [
    "TfidfScorer",
    "score",
    "DEFAULT_TOP_K",
    "ScoringWeights",
    "SimilarityEngine",
    "rank",
    "recency_score",
    "tag_overlap",
    "tfidf_similarity",
]
