"""Tests for scanning/dialects."""

import pytest

from locscan.core.errors import ErrorCode, ScanError
from locscan.scanning.dialects import (
    NORMAL,
    CSharpDialect,
    LexState,
    VisualBasicDialect,
    dialect_for_path,
    get_dialect,
)

CSHARP = CSharpDialect()
VB = VisualBasicDialect()


def _states(dialect: CSharpDialect | VisualBasicDialect, text: str) -> list[LexState]:
    states = []
    state = NORMAL
    for index in range(len(text)):
        state = dialect.classify(text, index, state)
        states.append(state)
    return states


class TestRegistry:
    """get_dialect() and dialect_for_path()."""

    @pytest.mark.parametrize(("name", "expected"), [("csharp", "csharp"), ("VB", "vb")])
    def test_get_dialect(self, name: str, expected: str) -> None:
        assert get_dialect(name).name == expected

    def test_unknown_dialect_raises(self) -> None:
        with pytest.raises(ScanError) as exc_info:
            get_dialect("fortran")

        assert exc_info.value.code == ErrorCode.SCAN_UNKNOWN_DIALECT
        assert exc_info.value.details["known"] == ["csharp", "vb"]

    @pytest.mark.parametrize(("path", "expected"), [("Page.cs", "csharp"), ("Module1.VB", "vb")])
    def test_dialect_for_path(self, path: str, expected: str) -> None:
        assert dialect_for_path(path).name == expected

    def test_dialect_for_path_uses_default(self) -> None:
        assert dialect_for_path("notes.txt", default="vb").name == "vb"

    def test_dialect_for_path_without_default_raises(self) -> None:
        with pytest.raises(ScanError):
            dialect_for_path("notes.txt")


class TestCSharpClassify:
    """Per-character lexical states for C#."""

    def test_string_delimiters(self) -> None:
        states = _states(CSHARP, 'x="a";')

        assert [s.in_string for s in states] == [False, False, True, True, False, False]

    def test_escaped_quote_does_not_close(self) -> None:
        states = _states(CSHARP, r'"a\"b"')

        assert [s.in_string for s in states] == [True, True, True, True, True, False]

    def test_verbatim_prefix_and_doubled_quote(self) -> None:
        states = _states(CSHARP, '@"a""b"')

        opened = states[1]
        assert opened.in_string and opened.in_verbatim
        assert opened.prefix_length == 1
        assert all(s.in_string for s in states[1:-1])
        assert not states[-1].in_string

    @pytest.mark.parametrize(("text", "prefix"), [('$"x"', 1), ('$@"x"', 2), ('@$"x"', 2)])
    def test_interpolated_prefixes(self, text: str, prefix: int) -> None:
        states = _states(CSHARP, text)

        assert states[prefix].prefix_length == prefix

    def test_newline_aborts_regular_string(self) -> None:
        states = _states(CSHARP, '"ab\nc')

        assert states[3].aborted
        assert not states[3].in_string

    def test_char_literal_quote_does_not_open_string(self) -> None:
        states = _states(CSHARP, "'\"'")

        assert states[0].in_char
        assert states[1].in_string and states[1].in_char
        assert not states[2].in_string

    def test_block_comment_bounds(self) -> None:
        states = _states(CSHARP, "a/*/b*/c")

        # detected on '*', stays open past '/*/', closes on the final '/'
        assert [s.in_comment for s in states] == [False, False, True, True, True, True, False, False]

    def test_line_comment_sets_skip_line(self) -> None:
        state = CSHARP.classify("a // b", 2, NORMAL)

        assert state.skip_line

    def test_comment_closer_cannot_open_new_comment(self) -> None:
        states = _states(CSHARP, "/*x*/*y")

        assert not states[5].in_comment


class TestCSharpDecode:
    """Escape decoding."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ('"abc"', "abc"),
            (r'"a\tb\n"', "a\tb\n"),
            (r'"\"q\" \\ \0"', '"q" \\ \0'),
            (r'"\x41\u00e9\U0001F600"', "Aé\U0001f600"),
            (r'"\q"', "q"),
            ('@"a""b"', 'a"b'),
            ('@"c:\\temp\\"', "c:\\temp\\"),
            ('$"{name}!"', "{name}!"),
        ],
    )
    def test_decode_literal(self, raw: str, expected: str) -> None:
        assert CSHARP.decode_literal(raw) == expected

    def test_char_literal_not_reportable(self) -> None:
        char_state = LexState(in_string=True, in_char=True)

        assert not CSHARP.is_reportable("'x'", 0, 2, char_state)
        assert CSHARP.is_reportable('"x"', 0, 2, LexState(in_string=True))


class TestVisualBasic:
    """VB strings, comments and continuations."""

    def test_doubled_quote_stays_in_string(self) -> None:
        states = _states(VB, '"a""b"')

        assert all(s.in_string for s in states[:-1])
        assert not states[-1].in_string

    def test_apostrophe_comment(self) -> None:
        assert VB.classify("x ' note", 2, NORMAL).skip_line

    @pytest.mark.parametrize(
        ("text", "index", "expected"),
        [
            ("REM note", 0, True),
            ("x = 1 : rem note", 8, True),
            ("Remove()", 0, False),
            ("x.Rem ", 2, False),
            ("REM", 0, True),
        ],
    )
    def test_rem_comment(self, text: str, index: int, expected: bool) -> None:
        assert VB.classify(text, index, NORMAL).skip_line is expected

    def test_multiline_string(self) -> None:
        states = _states(VB, '"a\nb"')

        assert states[1].in_string and states[2].in_string
        assert not states[3].aborted

    def test_char_suffix_not_reportable(self) -> None:
        assert not VB.is_reportable('"x"c', 0, 2, LexState(in_string=True))
        assert not VB.is_reportable('"x"C)', 0, 2, LexState(in_string=True))
        assert VB.is_reportable('"x"ccc', 0, 2, LexState(in_string=True))
        assert VB.is_reportable('"x" & y', 0, 2, LexState(in_string=True))

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("a _\n  b", 5), ("a _\r\nb", 4), ("a  _  \n\tb", 7), ("a _b", 0), ("a_\nb", 0)],
    )
    def test_continuation_length(self, text: str, expected: int) -> None:
        assert VB.continuation_length(text, 1) == expected

    def test_decode_literal(self) -> None:
        assert VB.decode_literal('"say ""hi"""') == 'say "hi"'
