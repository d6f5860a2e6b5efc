"""Tests for the result items in scanning/models.py."""

import pytest

from locscan.scanning.models import LiteralResult, ReferenceResult, ResourceOrigin, ScanResult
from locscan.scanning.position import TextSpan

SPAN = TextSpan(1, 0, 1, 5)


class TestKind:
    """Each result type names its own kind."""

    def test_kind_is_a_class_attribute(self) -> None:
        assert ScanResult.kind == "result"
        assert LiteralResult.kind == "literal"
        assert ReferenceResult.kind == "reference"

    @pytest.mark.parametrize(
        ("result", "expected"),
        [
            (LiteralResult(text='"abc"', value="abc", span=SPAN, offset=0, length=5), "literal"),
            (
                ReferenceResult(
                    text="R.Key",
                    value="v",
                    span=SPAN,
                    offset=0,
                    length=5,
                    key="Key",
                    origin=ResourceOrigin("", "R"),
                    original_text="R.Key",
                    full_text="R.Key",
                ),
                "reference",
            ),
        ],
    )
    def test_to_dict_reports_kind(self, result: ScanResult, expected: str) -> None:
        data = result.to_dict()

        assert data["kind"] == expected
        assert data["length"] == 5

    def test_base_result_serializes(self) -> None:
        result = ScanResult(text="x", value="x", span=SPAN, offset=0, length=1)

        assert result.to_dict()["kind"] == "result"
