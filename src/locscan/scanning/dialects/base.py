"""Dialect capability interface.

A dialect tells the scanning engine where strings and comments begin and
end, one character at a time. The engine owns everything else (cursor,
buffers, trie walk), so adding a language means writing one classifier.

classify() returns the lexical state *after* the character at `index`:

- the opening quote of a string yields in_string=True; the closing quote
  yields in_string=False again, so the engine sees the end as a transition
  and includes the delimiter in the token;
- a block comment is reported from the second character of its opener
  (the '*' of '/*') up to but excluding its final character, on which
  in_comment drops back to False;
- a single-line comment sets skip_line on its first character; the engine
  then consumes the rest of the line without calling classify().
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Protocol


@dataclass(frozen=True, slots=True)
class LexState:
    """Lexical flags carried from one character to the next.

    Attributes:
        in_string: Inside a string or char literal
        in_verbatim: The current string is verbatim (C# @"...")
        in_char: The current literal is a char literal ('x')
        in_comment: Inside a block comment
        skip_line: A single-line comment started; skip to end of line
        escape_next: The next character is escaped and cannot close the literal
        prefix_length: Number of marker characters before the opening quote
        opened_at: Index of the character that opened the current token
        closed_at: Index of the character that closed the last token
        aborted: The string was cut off (e.g. by a newline) and must be dropped
    """

    in_string: bool = False
    in_verbatim: bool = False
    in_char: bool = False
    in_comment: bool = False
    skip_line: bool = False
    escape_next: bool = False
    prefix_length: int = 0
    opened_at: int = -1
    closed_at: int = -1
    aborted: bool = False

    @property
    def is_code(self) -> bool:
        """Outside every string and comment."""
        return not (self.in_string or self.in_comment or self.skip_line)

    def close(self, index: int, *, aborted: bool = False) -> LexState:
        return LexState(closed_at=index, aborted=aborted)

    def escaped(self, value: bool) -> LexState:
        return replace(self, escape_next=value)


NORMAL = LexState()


class Dialect(Protocol):
    """Per-language lexical hooks injected into the scanning engine."""

    name: str
    extensions: frozenset[str]
    no_localize_comment: str

    def classify(self, text: str, index: int, state: LexState) -> LexState:
        """Lexical state after consuming text[index]."""
        ...

    def continuation_length(self, text: str, index: int) -> int:
        """Length of a line-continuation marker starting at `index`, or 0."""
        ...

    def decode_literal(self, raw: str) -> str:
        """Value of a literal token; `raw` includes prefix and quotes."""
        ...

    def is_reportable(self, text: str, start: int, end: int, state: LexState) -> bool:
        """Whether the literal text[start:end + 1] is a string worth reporting.

        `state` is the lexical state just before the closing delimiter.
        """
        ...
