"""
Cursor over immutable input text.

A Scanner never changes: every read returns the consumed text together with
a new Scanner positioned after it, so a caller can always hold on to an
earlier position.
"""

from typing import AbstractSet, Tuple

WHITESPACE_CHARS = ' \t\n\r'
WHITESPACE = frozenset(WHITESPACE_CHARS)


def trim_left(text: str) -> str:
    return text.lstrip(WHITESPACE_CHARS)


def trim_right(text: str) -> str:
    return text.rstrip(WHITESPACE_CHARS)


def trim(text: str) -> str:
    return text.strip(WHITESPACE_CHARS)


class Scanner:
    """Immutable position in a text buffer."""

    def __init__(self, text: str, pos: int = 0):
        self._text = text
        self._pos = min(max(pos, 0), len(text))

    @property
    def text(self) -> str:
        """The whole buffer, not just what is left."""
        return self._text

    @property
    def pos(self) -> int:
        return self._pos

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._text)

    @property
    def remainder(self) -> str:
        return self._text[self._pos:]

    def peek(self) -> str:
        """Return the next character, or '' at end of input."""
        return self._text[self._pos:self._pos + 1]

    def startswith(self, prefix: str) -> bool:
        return self._text.startswith(prefix, self._pos)

    def advance(self, count: int = 1) -> 'Scanner':
        return Scanner(self._text, self._pos + count)

    def read_until(self, stop: AbstractSet[str]) -> Tuple[str, 'Scanner']:
        """
        Consume characters up to, not including, the first one in ``stop``.

        Running out of input is not a failure: everything left is consumed
        and the returned scanner is at end of input.

        Args:
            stop: Set of single-character stop characters

        Returns:
            Tuple of the consumed text and the scanner after it
        """
        text = self._text
        end = self._pos
        length = len(text)
        while end < length and text[end] not in stop:
            end += 1
        return text[self._pos:end], Scanner(text, end)

    def trim_left(self) -> 'Scanner':
        """Skip space, tab, newline and carriage return."""
        text = self._text
        pos = self._pos
        length = len(text)
        while pos < length and text[pos] in WHITESPACE:
            pos += 1
        if pos == self._pos:
            return self
        return Scanner(text, pos)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Scanner):
            return NotImplemented
        return self._text == other._text and self._pos == other._pos

    def __hash__(self) -> int:
        return hash((self._text, self._pos))

    def __repr__(self) -> str:
        return f"Scanner(pos={self._pos}, remainder={self.remainder[:20]!r})"
