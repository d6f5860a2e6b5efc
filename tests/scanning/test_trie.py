"""Tests for scanning/trie.py."""

import string

import pytest

from locscan.scanning.chars import is_identifier_char
from locscan.scanning.models import ResourceEntry, ResourceOrigin
from locscan.scanning.trie import ReferenceTrie, is_identifier_path

ORIGIN = ResourceOrigin("A.B", "Res")


def _trie(*keys: str) -> ReferenceTrie:
    return ReferenceTrie.build([ResourceEntry.from_origin(ORIGIN, key, key.lower()) for key in keys])


class TestIdentifierChars:
    """Identifier classification."""

    @pytest.mark.parametrize("ch", ["a", "Z", "0", "_", "ä", "ж"])
    def test_identifier_chars(self, ch: str) -> None:
        assert is_identifier_char(ch)

    @pytest.mark.parametrize("ch", [".", " ", "\n", '"', "(", "", "-"])
    def test_non_identifier_chars(self, ch: str) -> None:
        assert not is_identifier_char(ch)

    def test_identifier_path(self) -> None:
        assert is_identifier_path("A.B.Res.Key")
        assert not is_identifier_path("A..Key")
        assert not is_identifier_path("Res.Some key")


class TestBuild:
    """Trie construction."""

    def test_registers_every_suffix_with_class_and_key(self) -> None:
        trie = _trie("Key")

        for path in ("A.B.Res.Key", "B.Res.Key", "Res.Key"):
            records = trie.lookup(path)
            assert [record.key for record in records] == ["Key"]
        assert trie.lookup("Key") == []
        assert trie.lookup("A.B.Res") == []

    def test_keeps_duplicate_records_in_order(self) -> None:
        # Given
        german = ResourceOrigin("A.B", "Res", culture="de")
        entries = [
            ResourceEntry.from_origin(ORIGIN, "Key", "neutral"),
            ResourceEntry.from_origin(german, "Key", "deutsch"),
        ]

        # When
        trie = ReferenceTrie.build(entries)

        # Then
        assert [record.value for record in trie.lookup("Res.Key")] == ["neutral", "deutsch"]
        assert trie.origins() == [ORIGIN, german]
        assert len(trie) == 2

    def test_skips_keys_that_are_not_identifiers(self) -> None:
        trie = _trie("Good", "Not valid")

        assert len(trie) == 1
        assert trie.lookup("Res.Good")

    def test_known_types_are_qualified_classes(self) -> None:
        global_origin = ResourceOrigin("", "Strings")
        trie = ReferenceTrie.build(
            [
                ResourceEntry.from_origin(ORIGIN, "Key", "v"),
                ResourceEntry.from_origin(global_origin, "Key", "v"),
            ]
        )

        assert trie.known_types() == frozenset({"A.B.Res", "Strings"})


class TestStep:
    """The step function is total."""

    def test_step_never_fails(self) -> None:
        # Given
        trie = _trie("Key", "Other")
        alphabet = string.printable + "äж€"

        # When / Then
        for node in trie:
            for ch in alphabet:
                assert trie.step(node, ch) is not None

    def test_unknown_transition_returns_root(self) -> None:
        trie = _trie("Key")
        node = trie.step(trie.root, "R")

        assert node is not trie.root
        assert trie.step(node, "x") is trie.root

    def test_walk_reaches_terminal(self) -> None:
        trie = _trie("Key")
        node = trie.root
        for ch in "Res.Key":
            node = trie.step(node, ch)

        assert node.is_terminal
        assert node.depth == len("Res.Key")
