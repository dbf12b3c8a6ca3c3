"""
Corpus module - tokenizing and holding the articles of one run.

This module provides:
- tokenize / iter_tokens / Tokenizer: body text to lowercase terms
- ArticleMetadata: typed front matter with verbatim extras
- Document: one tokenized article
- Corpus: the frozen collection scored together
"""

from article_recommender.corpus.tokenizer import Tokenizer, iter_tokens, tokenize
from article_recommender.corpus.document import ArticleMetadata, Document, parse_date
from article_recommender.corpus.corpus import Corpus

__all__ = [
    "Tokenizer",
    "iter_tokens",
    "tokenize",
    "ArticleMetadata",
    "Document",
    "parse_date",
    "Corpus",
]
