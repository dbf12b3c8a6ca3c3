"""
Corpus - the frozen set of documents scored together in one run.

The corpus is the unit over which document frequencies are computed:
adding or removing an article changes every other article's scores.
It is built once, after every document has been loaded, and is never
mutated afterwards.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from article_recommender.core.errors import DuplicateDocumentError
from article_recommender.core.protocols import StoredDocument
from article_recommender.corpus.document import Document
from article_recommender.corpus.tokenizer import Tokenizer


class Corpus:
    """Ordered, immutable collection of documents with a term index."""

    def __init__(self, documents: Iterable[Document]):
        self._documents: tuple[Document, ...] = tuple(documents)
        self._by_id: dict[str, Document] = {}
        for doc in self._documents:
            if doc.id in self._by_id:
                raise DuplicateDocumentError(doc.id)
            self._by_id[doc.id] = doc

        # term -> number of documents containing it at least once
        self._df: dict[str, int] = {}
        for doc in self._documents:
            for term in set(doc.terms):
                self._df[term] = self._df.get(term, 0) + 1

    @classmethod
    def from_stored(
        cls,
        stored: Iterable[StoredDocument],
        tokenizer: Tokenizer | None = None,
    ) -> Corpus:
        """Tokenize raw store triples and freeze them into a corpus."""
        tokenizer = tokenizer or Tokenizer()
        return cls(Document.from_stored(s, tokenizer) for s in stored)

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._by_id

    @property
    def documents(self) -> tuple[Document, ...]:
        return self._documents

    def get(self, document_id: str) -> Document | None:
        """Look up a document by id."""
        return self._by_id.get(document_id)

    def document_frequency(self, term: str) -> int:
        """Count of documents whose terms contain `term`."""
        return self._df.get(term, 0)

    @property
    def vocabulary(self) -> frozenset[str]:
        return frozenset(self._df)
