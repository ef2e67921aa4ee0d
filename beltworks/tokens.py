"""Lexer for the condition language of the event database."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    DATE = auto()
    EVENT = auto()
    COLUMN = auto()
    LOGICAL_OP = auto()
    COMPARE_OP = auto()
    PAREN_LEFT = auto()
    PAREN_RIGHT = auto()


@dataclass(frozen=True)
class Token:
    value: str
    type: TokenType


_KEYWORDS = {
    "d": ("ate", "date", TokenType.COLUMN),
    "e": ("vent", "event", TokenType.COLUMN),
    "A": ("ND", "AND", TokenType.LOGICAL_OP),
    "O": ("R", "OR", TokenType.LOGICAL_OP),
}


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9" and len(ch) == 1


class _Reader:
    """Character cursor; ``get`` and ``peek`` return '' at the end."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def next_non_space(self) -> str:
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1
        return self.get()

    def peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def get(self) -> str:
        ch = self.peek()
        if ch:
            self._pos += 1
        return ch

    def read(self, count: int) -> str:
        return "".join(self.get() for _ in range(count))

    def read_until(self, delimiter: str) -> str:
        end = self._text.find(delimiter, self._pos)
        if end == -1:
            chunk, self._pos = self._text[self._pos:], len(self._text)
        else:
            chunk, self._pos = self._text[self._pos:end], end + 1
        return chunk


def _scan(text: str):
    reader = _Reader(text)
    while c := reader.next_non_space():
        if _is_digit(c):
            chars = [c]
            for part in range(3):
                while _is_digit(reader.peek()):
                    chars.append(reader.get())
                if part < 2:
                    chars.append(reader.get())
            yield Token("".join(chars), TokenType.DATE)
        elif c == '"':
            yield Token(reader.read_until('"'), TokenType.EVENT)
        elif c in _KEYWORDS:
            rest, word, kind = _KEYWORDS[c]
            if reader.read(len(rest)) != rest:
                raise ValueError("Unknown token")
            yield Token(word, kind)
        elif c == "(":
            yield Token("(", TokenType.PAREN_LEFT)
        elif c == ")":
            yield Token(")", TokenType.PAREN_RIGHT)
        elif c in "<>":
            if reader.peek() == "=":
                reader.get()
                yield Token(c + "=", TokenType.COMPARE_OP)
            else:
                yield Token(c, TokenType.COMPARE_OP)
        elif c in "=!":
            if reader.get() != "=":
                raise ValueError("Unknown token")
            yield Token(c + "=", TokenType.COMPARE_OP)


def tokenize(text: str) -> list[Token]:
    """Split a condition into tokens; unrecognised characters are skipped."""
    return list(_scan(text))