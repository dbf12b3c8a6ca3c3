"""Lowercase word tokenizer for article bodies."""

import re
from typing import Iterator

# Maximal runs of word characters are exactly what remains after splitting
# on runs of non-word characters and dropping empty pieces. Word characters
# are ASCII only: accented letters split words.
_WORD_PATTERN = re.compile(r"\w+", re.ASCII)


def iter_tokens(text: str) -> Iterator[str]:
    """Lazily yield lowercase tokens. Each call starts a fresh pass."""
    for match in _WORD_PATTERN.finditer(text.lower()):
        yield match.group(0)


def tokenize(text: str) -> list[str]:
    """Return the full token list for text."""
    return list(iter_tokens(text))


class Tokenizer:
    """Injectable wrapper so documents can be built with another tokenizer."""

    def tokenize(self, text: str) -> list[str]:
        return tokenize(text)
