"""
article_recommender - related-article recommendations for a static blog.

Loads markdown articles with YAML front matter, scores every article
against every other one with a blend of tag overlap, TF-IDF term
similarity and recency, then writes the top matches back into each
article's front matter and appends a "Recommended Articles" section.

USAGE:
------
from article_recommender import run_recommendations, RecommenderConfig

report = run_recommendations(config=RecommenderConfig(articles_dir="content/articles"))
"""

from article_recommender.config import RecommenderConfig, get_config, reset_config
from article_recommender.core import (
    DocumentStore,
    DuplicateDocumentError,
    FrontMatterError,
    RecommendationUpdate,
    RecommenderError,
    SimilarityResult,
    StoreError,
    StoredDocument,
)
from article_recommender.corpus import ArticleMetadata, Corpus, Document, Tokenizer, tokenize
from article_recommender.scoring import ScoringWeights, SimilarityEngine, TfidfScorer, rank
from article_recommender.store import (
    InMemoryDocumentStore,
    MarkdownDocumentStore,
    get_document_store,
)
from article_recommender.writer import RecommendationWriter
from article_recommender.pipeline import RunReport, preview_recommendations, run_recommendations

__version__ = "0.1.0"

__all__ = [
    # Config
    "RecommenderConfig",
    "get_config",
    "reset_config",
    # Core
    "DocumentStore",
    "StoredDocument",
    "SimilarityResult",
    "RecommendationUpdate",
    "RecommenderError",
    "StoreError",
    "FrontMatterError",
    "DuplicateDocumentError",
    # Corpus
    "ArticleMetadata",
    "Corpus",
    "Document",
    "Tokenizer",
    "tokenize",
    # Scoring
    "ScoringWeights",
    "SimilarityEngine",
    "TfidfScorer",
    "rank",
    # Stores
    "InMemoryDocumentStore",
    "MarkdownDocumentStore",
    "get_document_store",
    # Writer
    "RecommendationWriter",
    # Pipeline
    "RunReport",
    "preview_recommendations",
    "run_recommendations",
]
