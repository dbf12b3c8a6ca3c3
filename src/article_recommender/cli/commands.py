"""
CLI commands - entry points for recommendation runs.

Each command follows a consistent pattern:
1. Parse arguments
2. Load environment
3. Run the pipeline
4. Print results
5. Return exit code

The commands only parse flags and format output. The work happens in
article_recommender.pipeline, which the tests drive directly.
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys

from dotenv import load_dotenv

from article_recommender.config import RecommenderConfig, get_config
from article_recommender.core.errors import RecommenderError


def _load_env() -> None:
    """Load environment variables from .env file."""
    load_dotenv()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--articles-dir", help="Directory of markdown articles")
    parser.add_argument("--top-k", type=int, help="Recommendations per article")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")


def _config_from_args(args: argparse.Namespace) -> RecommenderConfig:
    """Environment config with any CLI overrides applied."""
    overrides = {}
    if args.articles_dir:
        overrides["articles_dir"] = args.articles_dir
    if args.top_k is not None:
        overrides["top_k"] = args.top_k
    if getattr(args, "workers", None) is not None:
        overrides["workers"] = args.workers
    return dataclasses.replace(get_config(), **overrides)


def run_generate_cli() -> int:
    """CLI entry point for a full recommendation run."""
    from article_recommender.pipeline.runner import run_recommendations

    parser = argparse.ArgumentParser(description="Generate related-article recommendations")
    _add_common_args(parser)
    parser.add_argument("--workers", type=int, help="Threads for scoring and writing")
    parser.add_argument("--dry-run", action="store_true", help="Compute without writing")
    parser.add_argument("--json", action="store_true", help="Print the run report as JSON")
    args = parser.parse_args()

    _configure_logging(args.verbose)

    try:
        config = _config_from_args(args)
        report = run_recommendations(config=config, dry_run=args.dry_run)
    except (RecommenderError, ValueError) as e:
        print(f"Recommendation generation failed: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        for doc_id in report.updated:
            related = ", ".join(report.recommendations.get(doc_id, [])) or "(none)"
            print(f"  [OK]   {doc_id}: {related}")
        for doc_id, error in report.failed.items():
            print(f"  [FAIL] {doc_id}: {error}")
        print(f"\nUpdated: {len(report.updated)}/{report.total_documents}")

    if report.all_succeeded:
        print("Successfully updated recommendations for all articles", file=sys.stderr)
        return 0
    else:
        return 1


def run_show_cli() -> int:
    """CLI entry point for inspecting one article's ranking."""
    from article_recommender.pipeline.runner import preview_recommendations

    parser = argparse.ArgumentParser(description="Show ranked recommendations for one article")
    parser.add_argument("article_id", help="Article id (file name without .md)")
    _add_common_args(parser)
    args = parser.parse_args()

    _configure_logging(args.verbose)

    try:
        config = _config_from_args(args)
        document, results = preview_recommendations(args.article_id, config=config)
    except (RecommenderError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"{document.id}: {document.title}")
    if not results:
        print("  (no candidates)")
    for position, result in enumerate(results, start=1):
        print(
            f"  {position}. {result.candidate_id}  score={result.score:.4f}"
            f"  tags={result.tag_overlap:.2f}"
            f"  tfidf={result.tfidf_similarity:.4f}"
            f"  recency={result.recency:.4f}"
        )
    return 0


def main() -> int:
    """
    Main CLI entry point with subcommands.

    Usage:
        article-recommender generate          # Update every article
        article-recommender generate --dry-run
        article-recommender show <article-id> # Inspect one ranking
    """
    _load_env()

    parser = argparse.ArgumentParser(
        description="TF-IDF related-article recommendations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  generate    Score every article and write recommendations back
  show        Print one article's ranked candidates without writing

Examples:
  article-recommender generate --articles-dir content/articles
  article-recommender generate --workers 4 --json
  article-recommender show 2024-01-01-ai-news --top-k 10
        """,
    )

    parser.add_argument(
        "command",
        choices=["generate", "show"],
        help="Command to run",
    )

    # Parse just the command first
    args, remaining = parser.parse_known_args()

    commands = {
        "generate": run_generate_cli,
        "show": run_show_cli,
    }

    # Re-inject remaining args for the subcommand
    sys.argv = [sys.argv[0]] + remaining

    try:
        return commands[args.command]()
    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
