"""Tests for scanning/resources.py."""

import json
from pathlib import Path

import pytest

from locscan.core.errors import ErrorCode, ResourceError
from locscan.scanning.resources import (
    load_entries,
    load_resource_file,
    load_resx,
    parse_culture,
)
from locscan.scanning.trie import ReferenceTrie

RESX = """<?xml version="1.0" encoding="utf-8"?>
<root>
  <resheader name="resmimetype">
    <value>text/microsoft-resx</value>
  </resheader>
  <data name="Greeting" xml:space="preserve">
    <value>Hello</value>
  </data>
  <data name="Empty" xml:space="preserve">
    <value />
  </data>
  <data name="Logo" type="System.Drawing.Bitmap, System.Drawing" mimetype="application/x-microsoft.net.object.bytearray.base64">
    <value>AAAA</value>
  </data>
</root>
"""


def _write(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


class TestParseCulture:
    """Culture suffix of resource file names."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("Strings.resx", None),
            ("Strings.de-DE.resx", "de-DE"),
            ("Strings.fr.resx", "fr"),
            ("Strings.zh-Hans.resx", "zh-Hans"),
            ("My.Strings.resx", None),
            ("Strings.Designer.resx", None),
        ],
    )
    def test_parse_culture(self, path: str, expected: str | None) -> None:
        assert parse_culture(path) == expected


class TestLoadResx:
    """.resx files."""

    def test_loads_string_entries(self, tmp_path: Path) -> None:
        # Given
        path = _write(tmp_path / "Strings.resx", RESX)

        # When
        entries = load_resx(path, "App.Properties")

        # Then
        assert [(e.key, e.value) for e in entries] == [("Greeting", "Hello"), ("Empty", "")]
        origin = entries[0].origin
        assert origin.namespace == "App.Properties"
        assert origin.class_name == "Strings"
        assert origin.culture is None
        assert origin.path == str(path)
        assert entries[0].path == "App.Properties.Strings.Greeting"

    def test_culture_file_shares_class_name(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "Strings.de-DE.resx", RESX)

        entries = load_resx(path, "App")

        assert entries[0].origin.class_name == "Strings"
        assert entries[0].origin.culture == "de-DE"

    def test_class_name_override(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "Strings.resx", RESX)

        entries = load_resx(path, "App", class_name="Resources")

        assert entries[0].origin.qualified_class == "App.Resources"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ResourceError) as exc_info:
            load_resx(tmp_path / "Nope.resx", "App")

        assert exc_info.value.code == ErrorCode.RESOURCE_FILE_NOT_FOUND

    def test_malformed_xml(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "Broken.resx", "<root><data name='x'>")

        with pytest.raises(ResourceError) as exc_info:
            load_resx(path, "App")

        assert exc_info.value.code == ErrorCode.RESOURCE_PARSE_ERROR
        assert exc_info.value.details["path"] == str(path)


class TestLoadEntries:
    """YAML and JSON entry lists."""

    def test_yaml_entries_share_origins(self, tmp_path: Path) -> None:
        # Given
        path = _write(
            tmp_path / "resources.yaml",
            """
- namespace: MyNs
  class: Resources
  key: Greeting
  value: Hi
- namespace: MyNs
  class: Resources
  key: Farewell
  value: Bye
- namespace: MyNs
  class: Resources
  key: Greeting
  value: Hallo
  culture: de-DE
""",
        )

        # When
        entries = load_entries(path)

        # Then
        assert [(e.key, e.value) for e in entries] == [
            ("Greeting", "Hi"),
            ("Farewell", "Bye"),
            ("Greeting", "Hallo"),
        ]
        assert entries[0].origin is entries[1].origin
        assert entries[2].origin.culture == "de-DE"

    def test_json_entries_build_a_trie(self, tmp_path: Path) -> None:
        # Given
        items = [{"class": "Strings", "key": "Title", "value": "Main"}]
        path = _write(tmp_path / "resources.json", json.dumps(items))

        # When
        trie = ReferenceTrie.build(load_entries(path))

        # Then
        assert trie.known_types() == frozenset({"Strings"})
        assert [r.value for r in trie.lookup("Strings.Title")] == ["Main"]

    def test_empty_file(self, tmp_path: Path) -> None:
        assert load_entries(_write(tmp_path / "empty.yaml", "")) == []

    @pytest.mark.parametrize(
        ("content", "reason"),
        [
            ("key: value\n", "expected a list"),
            ("- just a string\n", "not a mapping"),
            ("- class: Resources\n  key: Title\n", "missing value"),
            ("- [unclosed\n", ""),
        ],
    )
    def test_invalid_lists(self, tmp_path: Path, content: str, reason: str) -> None:
        path = _write(tmp_path / "bad.yaml", content)

        with pytest.raises(ResourceError) as exc_info:
            load_entries(path)

        assert exc_info.value.code == ErrorCode.RESOURCE_PARSE_ERROR
        assert reason in exc_info.value.details["reason"]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ResourceError):
            load_entries(tmp_path / "missing.yaml")


class TestLoadResourceFile:
    """Dispatch on file extension."""

    def test_resx(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "Strings.resx", RESX)

        entries = load_resource_file(path, namespace="App")

        assert entries[0].origin.qualified_class == "App.Strings"

    def test_entry_list(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "r.yml", "- {class: R, key: K, value: V}\n")

        assert [e.path for e in load_resource_file(path)] == ["R.K"]
