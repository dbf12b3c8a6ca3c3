"""
CLI module - command-line interface.

Provides entry points for:
- Running the full recommendation batch
- Inspecting a single article's ranking
"""

from article_recommender.cli.commands import (
    main,
    run_generate_cli,
    run_show_cli,
)

__all__ = [
    "main",
    "run_generate_cli",
    "run_show_cli",
]
