"""Tests for scanning/namespaces.py and scanning/usings.py."""

import pytest

from locscan.scanning.namespaces import NamespaceTable, enclosing_namespaces, qualify
from locscan.scanning.usings import read_usings


class TestHelpers:
    """qualify() and enclosing_namespaces()."""

    @pytest.mark.parametrize(
        ("namespace", "name", "expected"),
        [("A.B", "C", "A.B.C"), ("", "C", "C"), (None, "C", "C")],
    )
    def test_qualify(self, namespace: str | None, name: str, expected: str) -> None:
        assert qualify(namespace, name) == expected

    def test_enclosing_namespaces_innermost_first(self) -> None:
        assert enclosing_namespaces("A.B.C") == ["A.B.C", "A.B", "A"]
        assert enclosing_namespaces("") == []


class TestNamespaceTable:
    """Type and alias lookups."""

    def test_resolve_type_uses_first_matching_namespace(self) -> None:
        table = NamespaceTable(
            namespaces=("System", "App.Res", "Other"),
            known_types={"App.Res.Strings", "Other.Strings"},
        )

        assert table.resolve_type("Strings") == "App.Res"

    def test_resolve_type_falls_back_to_global(self) -> None:
        table = NamespaceTable(namespaces=("System",), known_types={"Strings"})

        assert table.resolve_type("Strings") == ""

    def test_resolve_type_unknown(self) -> None:
        assert NamespaceTable(namespaces=("System",)).resolve_type("Strings") is None

    def test_get_alias(self) -> None:
        table = NamespaceTable(aliases={"R": "App.Resources"})

        assert table.get_alias("R") == "App.Resources"
        assert table.get_alias("S") is None

    def test_with_known_types_returns_copy(self) -> None:
        table = NamespaceTable(namespaces=("A",))
        extended = table.with_known_types(["A.Res"])

        assert extended.resolve_type("Res") == "A"
        assert table.resolve_type("Res") is None

    def test_aliases_are_read_only(self) -> None:
        table = NamespaceTable(aliases={"R": "A"})

        with pytest.raises(TypeError):
            table.aliases["S"] = "B"  # type: ignore[index]

    def test_with_enclosing_appends_parents_after_imports(self) -> None:
        table = NamespaceTable(namespaces=("System", "App"))

        assert table.with_enclosing("App.Web.Pages").namespaces == (
            "System",
            "App",
            "App.Web.Pages",
            "App.Web",
        )


class TestReadUsings:
    """Declaration reader."""

    def test_csharp_usings_aliases_and_namespace(self) -> None:
        # Given
        text = (
            "using System;\n"
            "global using App.Shared;\n"
            "using static System.Math;\n"
            "using R = App.Properties;\n"
            "using global::App.Core;\n"
            "\n"
            "namespace App.Web\n"
            "{\n"
            "    class Page { void M() { using (var x = Open()) { } } }\n"
            "}\n"
        )

        # When
        table = read_usings(text, "csharp")

        # Then
        assert table.namespaces == ("System", "App.Shared", "App.Core", "App.Web", "App")
        assert dict(table.aliases) == {"R": "App.Properties"}

    def test_csharp_file_scoped_namespace(self) -> None:
        table = read_usings("using System;\nnamespace App.Web;\nclass C {}\n", "csharp")

        assert table.namespaces == ("System", "App.Web", "App")

    def test_vb_imports(self) -> None:
        # Given
        text = (
            "Imports System, System.Text\n"
            "imports R = App.My.Resources\n"
            "Imports <xmlns:ns=\"urn:x\">\n"
            "\n"
            "Namespace Web\n"
            "End Namespace\n"
        )

        # When
        table = read_usings(text, "vb", root_namespace="App")

        # Then
        assert table.namespaces == ("System", "System.Text", "App.Web", "App")
        assert dict(table.aliases) == {"R": "App.My.Resources"}

    def test_vb_root_namespace_without_declaration(self) -> None:
        table = read_usings("Imports System\nModule M\nEnd Module\n", "vb", root_namespace="App")

        assert table.namespaces == ("System", "App")
