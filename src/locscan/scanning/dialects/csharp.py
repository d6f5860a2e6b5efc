"""C# lexical rules.

Strings: "..." with backslash escapes, verbatim @"..." with "" escaping,
interpolated $"..." / $@"..." / @$"...". Char literals 'x' are tracked so
their quotes do not open a string, but they are never reported.
Comments: // to end of line and /* ... */ (not nested).
"""

from __future__ import annotations

import re

from locscan.scanning.chars import char_at
from locscan.scanning.dialects.base import LexState

_ESCAPE_PATTERN = re.compile(r"\\(u[0-9a-fA-F]{4}|U[0-9a-fA-F]{8}|x[0-9a-fA-F]{1,4}|.)", re.DOTALL)

_SIMPLE_ESCAPES = {
    "'": "'",
    '"': '"',
    "\\": "\\",
    "0": "\0",
    "a": "\a",
    "b": "\b",
    "e": "\x1b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
}

# Longest first: "$@" must win over "@".
_STRING_PREFIXES = ("$@", "@$", "@", "$")


def _unescape(match: re.Match[str]) -> str:
    body = match.group(1)
    if len(body) > 1:
        code = int(body[1:], 16)
        if code > 0x10FFFF:
            return match.group(0)
        return chr(code)
    return _SIMPLE_ESCAPES.get(body, body)


def _string_prefix(text: str, index: int) -> str:
    """Marker characters written directly before the quote at `index`."""
    for prefix in _STRING_PREFIXES:
        if index >= len(prefix) and text[index - len(prefix) : index] == prefix:
            return prefix
    return ""


class CSharpDialect:
    """Lexical hooks for C# source and C# code blocks in markup."""

    name = "csharp"
    extensions = frozenset({".cs"})
    no_localize_comment = "/*VL_NO_LOC*/"

    def classify(self, text: str, index: int, state: LexState) -> LexState:
        ch = text[index]

        if state.in_comment:
            # '*' of the opener cannot also close: /*/ is still open
            if ch == "/" and char_at(text, index - 1) == "*" and index - 1 > state.opened_at:
                return state.close(index)
            return state

        if state.in_string:
            if state.escape_next:
                return state.escaped(False)
            if state.in_verbatim:
                if ch == '"':
                    if char_at(text, index + 1) == '"':
                        return state.escaped(True)
                    return state.close(index)
                return state
            if ch == "\\":
                return state.escaped(True)
            if ch == ("'" if state.in_char else '"'):
                return state.close(index)
            if ch == "\n":
                return state.close(index, aborted=True)
            return state

        if ch == "/":
            if char_at(text, index + 1) == "/":
                return LexState(skip_line=True, opened_at=index)
            return state
        if ch == "*" and char_at(text, index - 1) == "/" and index - 1 > state.closed_at:
            return LexState(in_comment=True, opened_at=index)
        if ch == '"':
            prefix = _string_prefix(text, index)
            return LexState(
                in_string=True,
                in_verbatim="@" in prefix,
                prefix_length=len(prefix),
                opened_at=index,
            )
        if ch == "'":
            return LexState(in_string=True, in_char=True, opened_at=index)
        return state

    def continuation_length(self, text: str, index: int) -> int:
        return 0

    def decode_literal(self, raw: str) -> str:
        body_start = len(raw) - len(raw.lstrip("@$"))
        verbatim = "@" in raw[:body_start]
        body = raw[body_start + 1 : -1]
        if verbatim:
            return body.replace('""', '"')
        return _ESCAPE_PATTERN.sub(_unescape, body)

    def is_reportable(self, text: str, start: int, end: int, state: LexState) -> bool:
        return not state.in_char
