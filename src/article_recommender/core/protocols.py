"""
Core protocols defining contracts for the recommendation pipeline.

The scoring code never touches storage. It consumes StoredDocument
triples handed over by a DocumentStore and hands RecommendationUpdate
records back to it.

PATTERN:
--------
- Protocol defines the contract
- Production implementation (MarkdownDocumentStore)
- Test double (InMemoryDocumentStore)
- Factory function (get_document_store)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# DOCUMENT STORE PROTOCOL
# ---------------------------------------------------------------------------


@dataclass
class StoredDocument:
    """
    A raw document as read from storage.

    The body is the ORIGINAL article body: stores strip any recommendation
    section appended by a previous run before handing the document over.
    """
    id: str
    metadata: dict[str, Any]
    body: str


@runtime_checkable
class DocumentStore(Protocol):
    """
    Contract for document persistence.

    Implementations:
    - MarkdownDocumentStore (markdown files with YAML front matter)
    - InMemoryDocumentStore (testing)
    """

    def load_all(self) -> list[StoredDocument]:
        """Load every document, in a stable enumeration order."""
        ...

    def save(self, document_id: str, metadata: dict[str, Any], body: str) -> None:
        """Persist updated metadata and body for one document."""
        ...


# ---------------------------------------------------------------------------
# SCORING RESULTS
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SimilarityResult:
    """One scored (source, candidate) pair.

    The component scores are kept for debugging and the `show` command;
    only candidate_id ends up in the persisted metadata.
    """
    source_id: str
    candidate_id: str
    score: float
    tag_overlap: float = 0.0
    tfidf_similarity: float = 0.0
    recency: float = 0.0

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "source_id": self.source_id,
            "candidate_id": self.candidate_id,
            "score": self.score,
            "tag_overlap": self.tag_overlap,
            "tfidf_similarity": self.tfidf_similarity,
            "recency": self.recency,
        }


@dataclass
class RecommendationUpdate:
    """What the writer hands back to the store for a single document."""
    document_id: str
    metadata: dict[str, Any]
    body: str
    recommendations: list[str] = field(default_factory=list)
