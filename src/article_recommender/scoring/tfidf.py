"""
TF-IDF term weighting over a frozen corpus.

    tf(t, d)  = count(t in d) / len(d)          (0 for a document with no terms)
    idf(t)    = ln(N / (1 + df(t)))
    score     = tf * idf

The +1 smoothing keeps idf finite for terms the corpus has never seen and
pushes terms present in every document below zero. Negative weights are
kept as they are.

MEMOIZATION:
------------
Ranking scores every document against every other one, and each pair sums
over the union of their terms. Term counts per document, idf per term and
the final (term, document) weights are each computed once per scorer, so
the pairwise loop only does dictionary lookups. Weights are cached only
for terms a document contains, keeping the cache proportional to the
total number of distinct terms per document rather than vocabulary x corpus.
"""

from __future__ import annotations

import math
from collections import Counter

from article_recommender.corpus.corpus import Corpus
from article_recommender.corpus.document import Document


class TfidfScorer:
    """Memoizing TF-IDF scorer bound to one corpus."""

    def __init__(self, corpus: Corpus):
        self.corpus = corpus
        self._counts: dict[str, Counter] = {}
        self._idf: dict[str, float] = {}
        self._scores: dict[tuple[str, str], float] = {}

    def _is_member(self, document: Document) -> bool:
        return self.corpus.get(document.id) is document

    def _term_counts(self, document: Document) -> Counter:
        if not self._is_member(document):
            return Counter(document.terms)
        counts = self._counts.get(document.id)
        if counts is None:
            counts = Counter(document.terms)
            self._counts[document.id] = counts
        return counts

    def tf(self, term: str, document: Document) -> float:
        """Relative frequency of term in document."""
        if not document.terms:
            return 0.0
        return self._term_counts(document)[term] / len(document.terms)

    def idf(self, term: str) -> float:
        """Smoothed inverse document frequency of term."""
        cached = self._idf.get(term)
        if cached is not None:
            return cached

        n = len(self.corpus)
        if n == 0:
            value = 0.0
        else:
            value = math.log(n / (1 + self.corpus.document_frequency(term)))
        self._idf[term] = value
        return value

    def score(self, term: str, document: Document) -> float:
        """TF-IDF weight of term in document."""
        # Documents outside the corpus are scored but never cached, so an
        # id collision cannot poison the cache.
        if not self._is_member(document):
            return self.tf(term, document) * self.idf(term)

        # Terms absent from the document weigh 0 and are never cached.
        if self._term_counts(document)[term] == 0:
            return 0.0

        key = (term, document.id)
        cached = self._scores.get(key)
        if cached is None:
            cached = self.tf(term, document) * self.idf(term)
            self._scores[key] = cached
        return cached

    def vector(self, document: Document) -> dict[str, float]:
        """Weights for every distinct term of document, in first-seen order."""
        return {term: self.score(term, document) for term in dict.fromkeys(document.terms)}


def score(term: str, document: Document, corpus: Corpus) -> float:
    """One-off TF-IDF weight. Use TfidfScorer when scoring many pairs."""
    return TfidfScorer(corpus).score(term, document)
