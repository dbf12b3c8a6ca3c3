"""
Store module - loading articles and persisting their updates.

ARCHITECTURE:
-------------
1. Protocol defines the contract (DocumentStore in core.protocols)
2. Multiple implementations (MarkdownDocumentStore, InMemoryDocumentStore)
3. Factory function for instantiation
"""

from article_recommender.store.store import (
    DEFAULT_ARTICLES_DIR,
    MarkdownDocumentStore,
    InMemoryDocumentStore,
    get_document_store,
)

__all__ = [
    "DEFAULT_ARTICLES_DIR",
    "MarkdownDocumentStore",
    "InMemoryDocumentStore",
    "get_document_store",
]
