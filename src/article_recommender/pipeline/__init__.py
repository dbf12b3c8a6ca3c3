"""Pipeline module - the two-phase batch recommendation run."""

from article_recommender.pipeline.runner import (
    RunReport,
    build_engine,
    load_corpus,
    preview_recommendations,
    run_recommendations,
)

__all__ = [
    "RunReport",
    "build_engine",
    "load_corpus",
    "preview_recommendations",
    "run_recommendations",
]
