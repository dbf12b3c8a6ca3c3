"""
Recommendation writer - folds ranked results back into an article.

Two outputs per article:
1. metadata: `recommendations` set to the ordered candidate ids
2. body: the original body with a "Recommended Articles" section appended

The section is regenerated from scratch on every run. Stores strip the
previous run's section (strip_section) before the body is tokenized, so
scores never drift from re-reading generated text and a re-run over the
same corpus writes byte-identical output.
"""

from __future__ import annotations

from article_recommender.core.protocols import RecommendationUpdate, SimilarityResult
from article_recommender.corpus.corpus import Corpus
from article_recommender.corpus.document import Document

DEFAULT_HEADING = "Recommended Articles"
DEFAULT_LINK_PREFIX = "/articles/"
DEFAULT_FOOTER = (
    "*These recommendations are automatically generated based on "
    "content similarity and trending topics.*"
)


class RecommendationWriter:
    """Renders and strips the appended recommendation section."""

    def __init__(
        self,
        link_prefix: str = DEFAULT_LINK_PREFIX,
        heading: str = DEFAULT_HEADING,
        footer: str = DEFAULT_FOOTER,
    ):
        self.link_prefix = link_prefix
        self.heading = heading
        self.footer = footer

    @property
    def marker(self) -> str:
        """Text that opens a generated section."""
        return f"\n\n## {self.heading}\n"

    def render(self, results: list[SimilarityResult], corpus: Corpus) -> str:
        """Markdown section listing each candidate as a link."""
        lines = []
        for result in results:
            candidate = corpus.get(result.candidate_id)
            label = candidate.title if candidate is not None and candidate.title else result.candidate_id
            lines.append(f"- [{label}]({self.link_prefix}{result.candidate_id})")

        return (
            f"{self.marker}\n"
            + "\n".join(lines)
            + f"\n\n---\n\n{self.footer}\n"
        )

    def strip_section(self, body: str) -> str:
        """Remove a section appended by a previous run, if there is one."""
        start = body.rfind(self.marker)
        if start == -1:
            return body
        if self.footer not in body[start:]:
            # A hand-written heading with the same title, leave it alone
            return body
        return body[:start]

    def annotate(
        self,
        document: Document,
        results: list[SimilarityResult],
        corpus: Corpus,
    ) -> RecommendationUpdate:
        """Updated front matter and body for document."""
        candidate_ids = [r.candidate_id for r in results]
        metadata = document.metadata.with_recommendations(candidate_ids)
        return RecommendationUpdate(
            document_id=document.id,
            metadata=metadata.to_front_matter(),
            body=document.body + self.render(results, corpus),
            recommendations=candidate_ids,
        )
