"""
Exception hierarchy for the recommendation pipeline.

Scoring problems never raise (they degrade a single candidate); these
exceptions cover the cases that genuinely stop work: storage failures
and a corpus that violates its identity invariant.
"""


class RecommenderError(Exception):
    """Base class for all article_recommender errors."""


class StoreError(RecommenderError):
    """A document store could not read or write a document."""


class FrontMatterError(StoreError):
    """A document's front matter block is not a valid YAML mapping."""


class DuplicateDocumentError(RecommenderError):
    """Two documents in one corpus share the same identifier."""

    def __init__(self, document_id: str):
        super().__init__(f"Duplicate document id in corpus: {document_id!r}")
        self.document_id = document_id
