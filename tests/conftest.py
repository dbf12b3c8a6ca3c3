"""Shared fixtures for the recommendation pipeline tests."""

import pytest

from article_recommender.config import reset_config
from article_recommender.core.protocols import StoredDocument
from article_recommender.corpus.corpus import Corpus


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    """Each test starts from default config, unaffected by the caller's env."""
    for name in (
        "RECOMMENDER_ARTICLES_DIR",
        "RECOMMENDER_TOP_K",
        "RECOMMENDER_WORKERS",
        "RECOMMENDER_LINK_PREFIX",
        "RECOMMENDER_DECAY_DAYS",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def scenario_documents():
    """
    Three articles: two close AI pieces a day apart, one unrelated
    finance piece five months later.
    """
    return [
        StoredDocument(
            id="a",
            metadata={"title": "AI Tech News", "date": "2024-01-01", "tags": ["ai", "tech"]},
            body="a i tech news",
        ),
        StoredDocument(
            id="b",
            metadata={"title": "AI News", "date": "2024-01-02", "tags": ["ai"]},
            body="a i news",
        ),
        StoredDocument(
            id="c",
            metadata={"title": "Markets", "date": "2024-06-01", "tags": ["finance"]},
            body="money stock",
        ),
    ]


@pytest.fixture
def scenario_corpus(scenario_documents):
    return Corpus.from_stored(scenario_documents)
