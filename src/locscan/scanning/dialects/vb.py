"""Visual Basic lexical rules.

Strings are "..." with "" as the only escape and may span lines. A string
immediately followed by c ("x"c) is a Char literal and is not reported.
Comments start with ' (or a typographic quote) or the REM keyword and run
to the end of the line; there are no block comments. " _" at the end of a
line joins it with the next one.
"""

from __future__ import annotations

import re

from locscan.scanning.chars import char_at, is_identifier_char
from locscan.scanning.dialects.base import LexState

_COMMENT_QUOTES = frozenset({"'", "‘", "’"})

_CONTINUATION_PATTERN = re.compile(r"[ \t]+_[ \t]*(?:\r\n|\n|\r)[ \t]*")


def _is_rem(text: str, index: int) -> bool:
    if text[index : index + 3].upper() != "REM":
        return False
    before = char_at(text, index - 1)
    if is_identifier_char(before) or before == ".":
        return False
    after = char_at(text, index + 3)
    return after == "" or after.isspace()


class VisualBasicDialect:
    """Lexical hooks for VB source and VB code blocks in markup."""

    name = "vb"
    extensions = frozenset({".vb"})
    no_localize_comment = "'VL_NO_LOC"

    def classify(self, text: str, index: int, state: LexState) -> LexState:
        ch = text[index]

        if state.in_string:
            if state.escape_next:
                return state.escaped(False)
            if ch == '"':
                if char_at(text, index + 1) == '"':
                    return state.escaped(True)
                return state.close(index)
            return state

        if ch == '"':
            return LexState(in_string=True, opened_at=index)
        if ch in _COMMENT_QUOTES:
            return LexState(skip_line=True, opened_at=index)
        if ch in "rR" and _is_rem(text, index):
            return LexState(skip_line=True, opened_at=index)
        return state

    def continuation_length(self, text: str, index: int) -> int:
        if text[index] not in " \t":
            return 0
        match = _CONTINUATION_PATTERN.match(text, index)
        if match is None:
            return 0
        return match.end() - index

    def decode_literal(self, raw: str) -> str:
        return raw[1:-1].replace('""', '"')

    def is_reportable(self, text: str, start: int, end: int, state: LexState) -> bool:
        suffix = char_at(text, end + 1)
        if suffix in ("c", "C") and not is_identifier_char(char_at(text, end + 2)):
            return False
        return True
