"""
Core module - shared protocols, result types and errors.

USAGE:
------
from article_recommender.core import DocumentStore, StoredDocument

class MyStore:
    '''Implements DocumentStore protocol.'''
    ...
"""

from article_recommender.core.errors import (
    RecommenderError,
    StoreError,
    FrontMatterError,
    DuplicateDocumentError,
)
from article_recommender.core.protocols import (
    # Protocols
    DocumentStore,
    # Data classes
    StoredDocument,
    SimilarityResult,
    RecommendationUpdate,
)

__all__ = [
    # Errors
    "RecommenderError",
    "StoreError",
    "FrontMatterError",
    "DuplicateDocumentError",
    # Protocols
    "DocumentStore",
    # Data classes
    "StoredDocument",
    "SimilarityResult",
    "RecommendationUpdate",
]
