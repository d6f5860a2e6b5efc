"""Cursor positions and spans.

Lines are 1-based, columns are 0-based and offsets are absolute character
offsets in the source document. A scan starts from an anchoring Position
(where the scanned block sits in its file) and moves it forward one
character at a time through advance().
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """A point in a source document."""

    line: int = 1
    column: int = 0
    offset: int = 0

    def back(self, count: int) -> Position:
        """Step back over `count` characters on the same line."""
        return Position(self.line, self.column - count, self.offset - count)


def advance(position: Position, ch: str) -> Position:
    """Return the position after consuming `ch`.

    The offset always moves by one. A newline starts the next line.
    """
    if ch == "\n":
        return Position(position.line + 1, 0, position.offset + 1)
    return Position(position.line, position.column + 1, position.offset + 1)


def advance_text(position: Position, text: str) -> Position:
    """Return the position after consuming every character of `text`."""
    for ch in text:
        position = advance(position, ch)
    return position


@dataclass(frozen=True, slots=True)
class TextSpan:
    """Line/column extent of a token. end_column is exclusive."""

    start_line: int
    start_column: int
    end_line: int
    end_column: int

    @classmethod
    def between(cls, start: Position, last: Position) -> TextSpan:
        """Span from `start` through the character at `last` (inclusive)."""
        return cls(start.line, start.column, last.line, last.column + 1)

    def contains(self, other: TextSpan) -> bool:
        """True if `other` lies entirely inside this span."""
        starts_after = (other.start_line, other.start_column) >= (
            self.start_line,
            self.start_column,
        )
        ends_before = (other.end_line, other.end_column) <= (self.end_line, self.end_column)
        return starts_after and ends_before

    @property
    def is_empty(self) -> bool:
        return (self.start_line, self.start_column) >= (self.end_line, self.end_column)
