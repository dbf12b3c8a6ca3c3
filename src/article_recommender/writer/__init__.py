"""Writer module - renders recommendation sections and metadata updates."""

from article_recommender.writer.recommendations import (
    DEFAULT_FOOTER,
    DEFAULT_HEADING,
    DEFAULT_LINK_PREFIX,
    RecommendationWriter,
)

__all__ = [
    "DEFAULT_FOOTER",
    "DEFAULT_HEADING",
    "DEFAULT_LINK_PREFIX",
    "RecommendationWriter",
]
