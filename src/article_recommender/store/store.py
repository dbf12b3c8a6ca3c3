"""
Document store implementations following the gold standard pattern.

Pattern: Protocol -> Production impl -> Test double -> Factory

This module contains:
1. MarkdownDocumentStore - markdown files with YAML front matter (production)
2. InMemoryDocumentStore - dict-backed store (testing/development)
3. get_document_store() - Factory function

Both stores hand out ORIGINAL bodies: a recommendation section appended by
an earlier run is stripped on load, so the corpus never scores generated
text.
"""

from __future__ import annotations

import copy
import logging
import threading
from pathlib import Path
from typing import Any

from article_recommender.core.errors import FrontMatterError, StoreError
from article_recommender.core.protocols import StoredDocument
from article_recommender.store import frontmatter
from article_recommender.writer.recommendations import RecommendationWriter

logger = logging.getLogger(__name__)

DEFAULT_ARTICLES_DIR = "content/articles"


# ---------------------------------------------------------------------------
# MARKDOWN STORE (Production)
# ---------------------------------------------------------------------------


class MarkdownDocumentStore:
    """
    Articles as `<id>.md` files in a single directory.

    The document id is the file stem, which is also the article's URL slug.
    Files are enumerated in name order so every run sees the same corpus
    order.
    """

    def __init__(
        self,
        directory: Path | str = DEFAULT_ARTICLES_DIR,
        writer: RecommendationWriter | None = None,
        encoding: str = "utf-8",
    ):
        self._directory = Path(directory)
        self._writer = writer or RecommendationWriter()
        self._encoding = encoding

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, document_id: str) -> Path:
        return self._directory / f"{document_id}.md"

    def load_all(self) -> list[StoredDocument]:
        """Read and parse every markdown file in the directory."""
        if not self._directory.is_dir():
            raise StoreError(f"Articles directory not found: {self._directory}")

        documents = []
        for path in sorted(self._directory.glob("*.md")):
            try:
                text = path.read_text(encoding=self._encoding)
            except (OSError, UnicodeDecodeError) as e:
                raise StoreError(f"Could not read {path}: {e}") from e

            try:
                metadata, body = frontmatter.parse(text)
            except FrontMatterError as e:
                raise FrontMatterError(f"{path}: {e}") from e

            documents.append(
                StoredDocument(
                    id=path.stem,
                    metadata=metadata,
                    body=self._writer.strip_section(body),
                )
            )

        logger.info("Loaded %d articles from %s", len(documents), self._directory)
        return documents

    def save(self, document_id: str, metadata: dict[str, Any], body: str) -> None:
        """Write front matter and body back to `<id>.md`."""
        path = self.path_for(document_id)
        try:
            path.write_text(frontmatter.dump(metadata, body), encoding=self._encoding)
        except OSError as e:
            raise StoreError(f"Could not write {path}: {e}") from e
        logger.debug("Wrote %s", path)


# ---------------------------------------------------------------------------
# IN-MEMORY STORE (Testing/Development)
# ---------------------------------------------------------------------------


class InMemoryDocumentStore:
    """
    In-memory document store for tests.

    Implements the same interface as MarkdownDocumentStore without any
    file I/O and records every save for assertions.
    """

    def __init__(
        self,
        documents: list[StoredDocument] | None = None,
        writer: RecommendationWriter | None = None,
    ):
        self._writer = writer or RecommendationWriter()
        self._documents: dict[str, StoredDocument] = {}
        self._saved: list[str] = []
        self._lock = threading.Lock()
        for doc in documents or []:
            self._documents[doc.id] = doc

    @property
    def saved(self) -> list[str]:
        """Ids passed to save(), in call order (for test assertions)."""
        return list(self._saved)

    def get(self, document_id: str) -> StoredDocument | None:
        return self._documents.get(document_id)

    def load_all(self) -> list[StoredDocument]:
        """Return copies so callers cannot mutate stored state."""
        return [
            StoredDocument(
                id=doc.id,
                metadata=copy.deepcopy(doc.metadata),
                body=self._writer.strip_section(doc.body),
            )
            for doc in self._documents.values()
        ]

    def save(self, document_id: str, metadata: dict[str, Any], body: str) -> None:
        """Replace the stored document."""
        with self._lock:
            self._documents[document_id] = StoredDocument(
                id=document_id,
                metadata=copy.deepcopy(metadata),
                body=body,
            )
            self._saved.append(document_id)


# ---------------------------------------------------------------------------
# FACTORY FUNCTION
# ---------------------------------------------------------------------------


def get_document_store(
    use_files: bool = True,
    directory: Path | str | None = None,
    documents: list[StoredDocument] | None = None,
    writer: RecommendationWriter | None = None,
) -> MarkdownDocumentStore | InMemoryDocumentStore:
    """
    Factory function for document stores.

    Args:
        use_files: If True, use MarkdownDocumentStore. If False, use InMemoryDocumentStore.
        directory: Articles directory for MarkdownDocumentStore.
        documents: Initial documents for InMemoryDocumentStore.
        writer: Writer whose section format is stripped on load.

    Returns:
        DocumentStore implementation.
    """
    if use_files:
        return MarkdownDocumentStore(directory or DEFAULT_ARTICLES_DIR, writer=writer)
    else:
        return InMemoryDocumentStore(documents, writer=writer)
