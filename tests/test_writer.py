"""Unit tests for the recommendation writer."""

from article_recommender.core.protocols import SimilarityResult, StoredDocument
from article_recommender.corpus.corpus import Corpus
from article_recommender.scoring.similarity import rank
from article_recommender.writer.recommendations import DEFAULT_FOOTER, RecommendationWriter


EXPECTED_BLOCK = (
    "\n\n## Recommended Articles\n\n"
    "- [AI News](/articles/b)\n"
    "- [Markets](/articles/c)\n"
    "\n---\n\n"
    "*These recommendations are automatically generated based on "
    "content similarity and trending topics.*\n"
)


def _results(*ids):
    return [SimilarityResult(source_id="a", candidate_id=i, score=1.0) for i in ids]


class TestRender:
    def test_block_format(self, scenario_corpus):
        writer = RecommendationWriter()
        assert writer.render(_results("b", "c"), scenario_corpus) == EXPECTED_BLOCK

    def test_custom_link_prefix(self, scenario_corpus):
        writer = RecommendationWriter(link_prefix="/posts/")
        assert "- [AI News](/posts/b)" in writer.render(_results("b"), scenario_corpus)

    def test_missing_title_falls_back_to_id(self):
        corpus = Corpus.from_stored([
            StoredDocument(id="untitled", metadata={}, body="x"),
        ])
        block = RecommendationWriter().render(_results("untitled"), corpus)
        assert "- [untitled](/articles/untitled)" in block

    def test_no_results(self, scenario_corpus):
        block = RecommendationWriter().render([], scenario_corpus)
        assert block.startswith("\n\n## Recommended Articles\n\n")
        assert block.endswith(DEFAULT_FOOTER + "\n")
        assert "- [" not in block


class TestAnnotate:
    def test_metadata_and_body(self, scenario_corpus):
        writer = RecommendationWriter()
        a = scenario_corpus.get("a")

        update = writer.annotate(a, _results("b", "c"), scenario_corpus)

        assert update.document_id == "a"
        assert update.recommendations == ["b", "c"]
        assert update.metadata == {
            "title": "AI Tech News",
            "date": "2024-01-01",
            "tags": ["ai", "tech"],
            "recommendations": ["b", "c"],
        }
        assert update.body == "a i tech news" + EXPECTED_BLOCK

    def test_original_body_preserved_verbatim(self, scenario_corpus):
        update = RecommendationWriter().annotate(
            scenario_corpus.get("c"), _results("a"), scenario_corpus
        )
        assert update.body.startswith("money stock\n\n## Recommended Articles")

    def test_rerun_is_byte_identical(self, scenario_corpus):
        writer = RecommendationWriter()
        a = scenario_corpus.get("a")

        first = writer.annotate(a, rank(a, scenario_corpus), scenario_corpus)
        second = writer.annotate(a, rank(a, scenario_corpus), scenario_corpus)

        assert first.body == second.body
        assert first.metadata == second.metadata


class TestStripSection:
    def test_strips_generated_section(self):
        writer = RecommendationWriter()
        body = "Original body.\n"
        assert writer.strip_section(body + EXPECTED_BLOCK) == body

    def test_body_without_section_unchanged(self):
        body = "Nothing appended here.\n"
        assert RecommendationWriter().strip_section(body) == body

    def test_handwritten_heading_without_footer_kept(self):
        body = "Intro\n\n## Recommended Articles\n\nMy own picks.\n"
        assert RecommendationWriter().strip_section(body) == body

    def test_only_last_section_is_stripped(self):
        writer = RecommendationWriter()
        body = "Intro\n\n## Recommended Articles\n\nMy own picks.\n"
        assert writer.strip_section(body + EXPECTED_BLOCK) == body

    def test_strip_then_annotate_is_stable(self, scenario_corpus):
        writer = RecommendationWriter()
        a = scenario_corpus.get("a")
        update = writer.annotate(a, _results("b"), scenario_corpus)
        assert writer.strip_section(update.body) == a.body
