"""Small helpers for splitting and joining text."""

from __future__ import annotations

from typing import Iterable

_SPACE = " \t\n\v\f\r"


def strip(text: str) -> str:
    """Remove leading and trailing whitespace."""
    return text.strip(_SPACE)


def read_token(text: str, sep: str) -> tuple[str, str]:
    """Skip leading *sep* characters and split off the first token.

    Return the token and the text after the separator that ends it.
    """
    text = text.lstrip(sep)
    token, _, rest = text.partition(sep)
    return token, rest


def split_by(line: str, sep: str) -> list[str]:
    """Split *line* on *sep*, ignoring empty pieces."""
    words = []
    while True:
        word, line = read_token(line, sep)
        if not word:
            return words
        words.append(word)


def join(sep: str, items: Iterable) -> str:
    """Join the string forms of *items* with *sep*; *items* must not be empty."""
    parts = [str(item) for item in items]
    if not parts:
        raise ValueError("cannot join an empty collection")
    return sep.join(parts)