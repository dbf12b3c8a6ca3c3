"""
Document model for the recommendation pipeline.

Single responsibility: turn a raw (id, front matter, body) triple into a
typed article with its body tokenized once.

ArticleMetadata makes the fields the engine reads explicit (title, date,
tags) and carries every other front-matter key in `extra` so write-back
preserves them verbatim, in their original order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any

from pydantic import BaseModel, Field, PrivateAttr, field_validator

from article_recommender.core.protocols import StoredDocument
from article_recommender.corpus.tokenizer import Tokenizer, tokenize

KNOWN_KEYS = ("title", "date", "tags", "recommendations")


def parse_date(value: Any) -> datetime | None:
    """
    Parse a front-matter date into an aware datetime.

    Accepts datetime/date objects (YAML produces these for unquoted dates)
    and ISO-8601-like strings, including a trailing "Z". Anything else is
    treated as missing. Naive values are taken to be UTC.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text[-1] in "Zz":
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class ArticleMetadata(BaseModel):
    """Typed view of an article's front matter."""

    title: str = Field(default="", description="Human-readable article title")
    date: Any = Field(
        default=None,
        description="Publication date exactly as stored; see published_at",
    )
    tags: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(
        default_factory=list,
        description="Identifiers of related articles, best match first",
    )
    extra: dict[Any, Any] = Field(
        default_factory=dict,
        description="Every other front-matter key, preserved verbatim",
    )

    _key_order: list[Any] = PrivateAttr(default_factory=list)

    @field_validator("title", mode="before")
    @classmethod
    def _coerce_title(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)

    @field_validator("tags", "recommendations", mode="before")
    @classmethod
    def _coerce_str_list(cls, value: Any) -> list[str]:
        # A bare "tags: news" is one tag, not a list of characters.
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if isinstance(value, (list, tuple)):
            return [str(item) for item in value if item is not None]
        return [str(value)]

    @property
    def published_at(self) -> datetime | None:
        """The parsed publication date, or None if missing or malformed."""
        return parse_date(self.date)

    @classmethod
    def from_front_matter(cls, mapping: dict[Any, Any]) -> ArticleMetadata:
        """Build metadata from a parsed front-matter mapping."""
        known = {key: mapping[key] for key in KNOWN_KEYS if key in mapping}
        extra = {key: value for key, value in mapping.items() if key not in KNOWN_KEYS}

        metadata = cls(**known, extra=extra)
        metadata._key_order = list(mapping)
        return metadata

    def _ordered_keys(self) -> list[Any]:
        if self._key_order:
            order = list(self._key_order)
        else:
            order = [key for key in KNOWN_KEYS if key in self.model_fields_set]
        for key in self.extra:
            if key not in order:
                order.append(key)
        return order

    def with_recommendations(self, document_ids: list[str]) -> ArticleMetadata:
        """Return a copy whose recommendations are replaced by document_ids."""
        order = self._ordered_keys()
        if "recommendations" not in order:
            order.append("recommendations")

        updated = self.model_copy(update={"recommendations": list(document_ids)})
        updated._key_order = order
        return updated

    def to_front_matter(self) -> dict[str, Any]:
        """Mapping to write back, keys in their original order."""
        known = {
            "title": self.title,
            "date": self.date,
            "tags": list(self.tags),
            "recommendations": list(self.recommendations),
        }
        return {
            key: known[key] if key in known else self.extra[key]
            for key in self._ordered_keys()
        }


@dataclass(frozen=True, eq=False)
class Document:
    """
    One article in a corpus.

    `body` is the original article text (never a previously appended
    recommendation block). `terms` is derived from it once, at
    construction, and never changes during a run.
    """
    id: str
    metadata: ArticleMetadata
    body: str
    terms: tuple[str, ...] = field(default=None)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.terms is None:
            object.__setattr__(self, "terms", tuple(tokenize(self.body)))

    @classmethod
    def from_stored(
        cls,
        stored: StoredDocument,
        tokenizer: Tokenizer | None = None,
    ) -> Document:
        """Build a document from a store triple."""
        tokenizer = tokenizer or Tokenizer()
        return cls(
            id=stored.id,
            metadata=ArticleMetadata.from_front_matter(stored.metadata),
            body=stored.body,
            terms=tuple(tokenizer.tokenize(stored.body)),
        )

    @property
    def title(self) -> str:
        return self.metadata.title

    @property
    def published_at(self) -> datetime | None:
        return self.metadata.published_at

    @property
    def tags(self) -> frozenset[str]:
        return frozenset(self.metadata.tags)
