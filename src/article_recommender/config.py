"""
Recommender Configuration

Loads run settings from environment variables. CLI flags override these
per invocation.
"""

import os
from dataclasses import dataclass


def _env_int(name: str, default: int, minimum: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {value}")
    return value


def _env_positive_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if not value > 0:
        raise ValueError(f"{name} must be greater than 0, got {value}")
    return value


@dataclass
class RecommenderConfig:
    """Configuration for a recommendation run.

    Environment Variables:
        RECOMMENDER_ARTICLES_DIR: Directory of markdown articles (default: content/articles)
        RECOMMENDER_TOP_K: Recommendations per article, 0 or more (default: 5)
        RECOMMENDER_WORKERS: Threads for the score-and-write phase, 1 or more (default: 1)
        RECOMMENDER_LINK_PREFIX: URL prefix for recommendation links (default: /articles/)
        RECOMMENDER_DECAY_DAYS: Recency decay constant in days, above 0 (default: 30)
    """

    articles_dir: str = "content/articles"
    top_k: int = 5
    workers: int = 1
    link_prefix: str = "/articles/"
    decay_days: float = 30.0

    def __post_init__(self) -> None:
        if self.top_k < 0:
            raise ValueError(f"top_k must be at least 0, got {self.top_k}")
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
        if not self.decay_days > 0:
            raise ValueError(f"decay_days must be greater than 0, got {self.decay_days}")

    @classmethod
    def from_env(cls) -> "RecommenderConfig":
        """Load config from environment variables."""
        return cls(
            articles_dir=os.environ.get("RECOMMENDER_ARTICLES_DIR") or "content/articles",
            top_k=_env_int("RECOMMENDER_TOP_K", 5, minimum=0),
            workers=_env_int("RECOMMENDER_WORKERS", 1, minimum=1),
            link_prefix=os.environ.get("RECOMMENDER_LINK_PREFIX") or "/articles/",
            decay_days=_env_positive_float("RECOMMENDER_DECAY_DAYS", 30.0),
        )


# Global config singleton
_config: RecommenderConfig | None = None


def get_config() -> RecommenderConfig:
    """Get the global config (lazy-loaded from env)."""
    global _config
    if _config is None:
        _config = RecommenderConfig.from_env()
    return _config


def reset_config() -> None:
    """Reset config (useful for testing)."""
    global _config
    _config = None
