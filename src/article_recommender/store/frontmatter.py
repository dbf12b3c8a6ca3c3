"""
YAML front matter codec for markdown articles.

    ---
    title: "..."
    date: "2024-01-01T00:00:00.000Z"
    tags: [ai, news]
    ---
    body...

parse() and dump() round-trip: parse(dump(m, b)) == (m, b) for any
mapping PyYAML can represent.
"""

from __future__ import annotations

import re
from typing import Any

import yaml

from article_recommender.core.errors import FrontMatterError

_FRONT_MATTER = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)


def parse(text: str) -> tuple[dict[str, Any], str]:
    """Split text into (front matter mapping, body)."""
    match = _FRONT_MATTER.match(text)
    if not match:
        return {}, text

    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        raise FrontMatterError(f"Invalid YAML front matter: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontMatterError(
            f"Front matter must be a mapping, got {type(data).__name__}"
        )
    return data, text[match.end():]


def dump(metadata: dict[str, Any], body: str) -> str:
    """Serialize front matter and body back into one markdown document."""
    try:
        front = yaml.safe_dump(
            metadata,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )
    except yaml.YAMLError as e:
        raise FrontMatterError(f"Cannot serialize front matter: {e}") from e
    return f"---\n{front}---\n{body}"
