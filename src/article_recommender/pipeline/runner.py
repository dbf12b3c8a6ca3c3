"""
Batch recommendation run.

TWO PHASES:
-----------
1. Load: every document is read from the store and frozen into a Corpus.
   Document frequencies depend on the whole corpus, so nothing is scored
   until loading has finished. A store read failure aborts the run here,
   before anything is written.
2. Score and write: each document is ranked against the frozen corpus,
   annotated and saved exactly once. Documents are independent of each
   other's writes, so this phase can run on a thread pool.

A failed write is recorded for that document and the batch moves on.
Documents written earlier are not rolled back: one document's
compute-then-write is the unit of atomicity, not the batch.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime

from article_recommender.config import RecommenderConfig, get_config
from article_recommender.core.errors import RecommenderError, StoreError
from article_recommender.core.protocols import (
    DocumentStore,
    RecommendationUpdate,
    SimilarityResult,
)
from article_recommender.corpus.corpus import Corpus
from article_recommender.corpus.document import Document
from article_recommender.scoring.similarity import ScoringWeights, SimilarityEngine
from article_recommender.store.store import get_document_store
from article_recommender.writer.recommendations import RecommendationWriter

logger = logging.getLogger(__name__)


@dataclass
class RunReport:
    """Summary of one batch run."""
    timestamp: str
    total_documents: int
    duration_ms: float
    dry_run: bool = False
    updated: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)
    recommendations: dict[str, list[str]] = field(default_factory=dict)

    @property
    def all_succeeded(self) -> bool:
        return not self.failed

    def to_dict(self) -> dict:
        """Convert to dict for JSON serialization."""
        return {
            "timestamp": self.timestamp,
            "total_documents": self.total_documents,
            "duration_ms": self.duration_ms,
            "dry_run": self.dry_run,
            "updated": list(self.updated),
            "failed": dict(self.failed),
            "recommendations": {k: list(v) for k, v in self.recommendations.items()},
        }


def _resolve(
    store: DocumentStore | None,
    config: RecommenderConfig | None,
    writer: RecommendationWriter | None,
) -> tuple[DocumentStore, RecommenderConfig, RecommendationWriter]:
    config = config or get_config()
    writer = writer or RecommendationWriter(link_prefix=config.link_prefix)
    store = store or get_document_store(directory=config.articles_dir, writer=writer)
    return store, config, writer


def build_engine(corpus: Corpus, config: RecommenderConfig) -> SimilarityEngine:
    """Similarity engine for a frozen corpus with configured weights."""
    return SimilarityEngine(corpus, weights=ScoringWeights(decay_days=config.decay_days))


def load_corpus(store: DocumentStore) -> Corpus:
    """Phase 1: read everything and freeze it."""
    return Corpus.from_stored(store.load_all())


# ---------------------------------------------------------------------------
# CORE RUN
# ---------------------------------------------------------------------------


def run_recommendations(
    store: DocumentStore | None = None,
    config: RecommenderConfig | None = None,
    writer: RecommendationWriter | None = None,
    dry_run: bool = False,
) -> RunReport:
    """
    Compute and persist recommendations for every document in the store.

    Args:
        store: Injectable document store (markdown files under config.articles_dir if None)
        config: Run configuration (environment defaults if None)
        writer: Section renderer (built from config.link_prefix if None)
        dry_run: Compute everything but skip store.save()

    Returns:
        RunReport listing updated and failed documents

    Raises:
        StoreError: if loading fails; nothing has been written in that case
    """
    store, config, writer = _resolve(store, config, writer)
    start = time.time()

    corpus = load_corpus(store)
    engine = build_engine(corpus, config)
    logger.info(
        "Scoring %d articles (top_k=%d, workers=%d%s)",
        len(corpus),
        config.top_k,
        config.workers,
        ", dry run" if dry_run else "",
    )

    def process(document: Document) -> RecommendationUpdate:
        results = engine.rank(document, config.top_k)
        update = writer.annotate(document, results, corpus)
        if not dry_run:
            store.save(update.document_id, update.metadata, update.body)
        return update

    report = RunReport(
        timestamp=datetime.now().isoformat(),
        total_documents=len(corpus),
        duration_ms=0.0,
        dry_run=dry_run,
    )

    def record(document: Document, outcome: RecommendationUpdate | StoreError) -> None:
        if isinstance(outcome, StoreError):
            logger.error("Failed to write recommendations for %s: %s", document.id, outcome)
            report.failed[document.id] = str(outcome)
        else:
            logger.debug("%s -> %s", document.id, outcome.recommendations)
            report.updated.append(document.id)
            report.recommendations[document.id] = outcome.recommendations

    def attempt(document: Document) -> RecommendationUpdate | StoreError:
        try:
            return process(document)
        except StoreError as e:
            return e

    if config.workers > 1 and len(corpus) > 1:
        with ThreadPoolExecutor(max_workers=config.workers) as executor:
            # map() yields in submission order, so the report follows corpus order
            for document, outcome in zip(corpus, executor.map(attempt, corpus)):
                record(document, outcome)
    else:
        for document in corpus:
            record(document, attempt(document))

    report.duration_ms = (time.time() - start) * 1000
    logger.info(
        "Updated recommendations for %d/%d articles in %.0f ms",
        len(report.updated),
        report.total_documents,
        report.duration_ms,
    )
    return report


def preview_recommendations(
    document_id: str,
    store: DocumentStore | None = None,
    config: RecommenderConfig | None = None,
) -> tuple[Document, list[SimilarityResult]]:
    """Rank one document without writing anything."""
    store, config, _ = _resolve(store, config, None)
    corpus = load_corpus(store)

    document = corpus.get(document_id)
    if document is None:
        raise RecommenderError(f"Unknown article id: {document_id!r}")
    return document, build_engine(corpus, config).rank(document, config.top_k)
