"""A single-line text editor with a cursor and a clipboard."""

from __future__ import annotations


class Editor:
    """Text with a cursor between characters and a cut/copy buffer."""

    def __init__(self) -> None:
        self._chars: list[str] = []
        self._buffer: list[str] = []
        self._pos = 0

    def left(self) -> None:
        """Move the cursor one character left, if possible."""
        if self._pos > 0:
            self._pos -= 1

    def right(self) -> None:
        """Move the cursor one character right, if possible."""
        if self._pos < len(self._chars):
            self._pos += 1

    def insert(self, token: str) -> None:
        """Insert *token* before the cursor."""
        self._chars.insert(self._pos, token)
        self._pos += 1

    def _span(self, tokens: int) -> slice:
        count = min(len(self._chars) - self._pos, tokens)
        return slice(self._pos, self._pos + count)

    def cut(self, tokens: int = 1) -> None:
        """Move up to *tokens* characters after the cursor into the buffer."""
        span = self._span(tokens)
        self._buffer = self._chars[span]
        del self._chars[span]

    def copy(self, tokens: int = 1) -> None:
        """Copy up to *tokens* characters after the cursor into the buffer."""
        self._buffer = self._chars[self._span(tokens)]

    def paste(self) -> None:
        """Insert the buffer contents before the cursor."""
        self._chars[self._pos:self._pos] = self._buffer
        self._pos += len(self._buffer)

    def text(self) -> str:
        """Return the whole text."""
        return "".join(self._chars)


def type_text(editor: Editor, text: str) -> None:
    """Insert every character of *text* at the cursor."""
    for ch in text:
        editor.insert(ch)