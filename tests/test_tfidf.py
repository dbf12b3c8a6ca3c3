"""
Unit Tests for the TF-IDF Scorer

STAFF ENGINEER PATTERNS:
------------------------
1. Check the formula against hand-computed values
2. Cover the division-by-zero guards explicitly
3. Verify memoization by counting corpus lookups
"""

import math
from unittest.mock import patch

import pytest

from article_recommender.core.protocols import StoredDocument
from article_recommender.corpus.corpus import Corpus
from article_recommender.corpus.document import ArticleMetadata, Document
from article_recommender.scoring.tfidf import TfidfScorer, score


# ---------------------------------------------------------------------------
# FORMULA
# ---------------------------------------------------------------------------


class TestTermFrequency:
    def test_relative_frequency(self, scenario_corpus):
        scorer = TfidfScorer(scenario_corpus)
        a = scenario_corpus.get("a")
        assert scorer.tf("tech", a) == pytest.approx(0.25)
        assert scorer.tf("money", a) == 0.0

    def test_repeated_term(self):
        corpus = Corpus.from_stored([StoredDocument(id="x", metadata={}, body="ai ai news")])
        scorer = TfidfScorer(corpus)
        assert scorer.tf("ai", corpus.get("x")) == pytest.approx(2 / 3)

    def test_empty_document_has_zero_tf(self):
        corpus = Corpus.from_stored([
            StoredDocument(id="empty", metadata={}, body="   "),
            StoredDocument(id="full", metadata={}, body="word"),
        ])
        scorer = TfidfScorer(corpus)
        empty = corpus.get("empty")
        assert scorer.tf("word", empty) == 0.0
        assert scorer.score("word", empty) == 0.0


class TestInverseDocumentFrequency:
    def test_smoothed_idf(self, scenario_corpus):
        scorer = TfidfScorer(scenario_corpus)
        # N=3: "tech" appears in one document, "news" in two
        assert scorer.idf("tech") == pytest.approx(math.log(3 / 2))
        assert scorer.idf("news") == pytest.approx(0.0)

    def test_unseen_term(self, scenario_corpus):
        scorer = TfidfScorer(scenario_corpus)
        assert scorer.idf("unseen") == pytest.approx(math.log(3))

    def test_term_in_every_document_is_negative(self):
        corpus = Corpus.from_stored([
            StoredDocument(id=str(i), metadata={}, body="common") for i in range(4)
        ])
        assert TfidfScorer(corpus).idf("common") == pytest.approx(math.log(4 / 5))
        assert TfidfScorer(corpus).idf("common") < 0

    def test_empty_corpus(self):
        assert TfidfScorer(Corpus([])).idf("anything") == 0.0


class TestScore:
    def test_tf_times_idf(self, scenario_corpus):
        scorer = TfidfScorer(scenario_corpus)
        a = scenario_corpus.get("a")
        assert scorer.score("tech", a) == pytest.approx(0.25 * math.log(3 / 2))

    def test_module_level_score_matches_scorer(self, scenario_corpus):
        a = scenario_corpus.get("a")
        assert score("tech", a, scenario_corpus) == TfidfScorer(scenario_corpus).score("tech", a)

    def test_vector_covers_distinct_terms_in_order(self, scenario_corpus):
        scorer = TfidfScorer(scenario_corpus)
        vector = scorer.vector(scenario_corpus.get("a"))
        assert list(vector) == ["a", "i", "tech", "news"]
        assert vector["tech"] == pytest.approx(0.25 * math.log(3 / 2))

    def test_document_outside_corpus(self, scenario_corpus):
        scorer = TfidfScorer(scenario_corpus)
        outsider = Document(id="a", metadata=ArticleMetadata(), body="tech tech")
        # same id as a corpus member, but its own terms are used
        assert scorer.score("tech", outsider) == pytest.approx(1.0 * math.log(3 / 2))
        assert scorer.score("tech", scenario_corpus.get("a")) == pytest.approx(0.25 * math.log(3 / 2))


# ---------------------------------------------------------------------------
# MEMOIZATION
# ---------------------------------------------------------------------------


class TestMemoization:
    def test_document_frequency_looked_up_once_per_term(self, scenario_corpus):
        scorer = TfidfScorer(scenario_corpus)
        a = scenario_corpus.get("a")
        b = scenario_corpus.get("b")

        with patch.object(
            scenario_corpus, "document_frequency", wraps=scenario_corpus.document_frequency
        ) as df:
            scorer.score("news", a)
            scorer.score("news", a)
            scorer.score("news", b)

        assert df.call_count == 1

    def test_repeated_scores_are_identical(self, scenario_corpus):
        scorer = TfidfScorer(scenario_corpus)
        a = scenario_corpus.get("a")
        assert scorer.score("tech", a) == scorer.score("tech", a)

    def test_absent_term_scores_zero_without_caching(self, scenario_corpus):
        scorer = TfidfScorer(scenario_corpus)
        c = scenario_corpus.get("c")

        assert scorer.score("news", c) == 0.0
        assert ("news", "c") not in scorer._scores

    def test_cache_holds_only_terms_each_document_contains(self, scenario_corpus):
        from article_recommender.scoring.similarity import SimilarityEngine

        scorer = TfidfScorer(scenario_corpus)
        engine = SimilarityEngine(scenario_corpus, scorer=scorer)
        for document in scenario_corpus:
            engine.rank(document)

        expected = {
            (term, document.id)
            for document in scenario_corpus
            for term in document.terms
        }
        # a: a i tech news, b: a i news, c: money stock
        assert set(scorer._scores) == expected
        assert len(scorer._scores) == 9
