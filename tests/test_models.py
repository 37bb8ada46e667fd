"""Tests for result and location models."""

import json

import pytest

from pptfontfix_mcp_server.tools.errors import ArgumentError
from pptfontfix_mcp_server.tools.models import FontUsageLocation, PptFontAnalyzeResult, parse_locations


class TestFontUsageLocation:
    """Tests for FontUsageLocation."""

    @pytest.mark.parametrize(
        "data",
        [
            {"slide_number": 3, "shape_name": "Title 1"},
            {"slideNumber": 3, "shapeName": "Title 1"},
            {"SlideNumber": "3", "ShapeName": "Title 1"},
        ],
    )
    def test_from_dict_key_styles(self, data):
        assert FontUsageLocation.from_dict(data) == FontUsageLocation(3, "Title 1")

    @pytest.mark.parametrize(
        "data",
        [
            {"slide_number": 1},
            {"shape_name": "Title 1"},
            {"slide_number": "one", "shape_name": "Title 1"},
            ["not", "a", "dict"],
        ],
    )
    def test_from_dict_rejects_malformed(self, data):
        with pytest.raises(ArgumentError):
            FontUsageLocation.from_dict(data)

    def test_locations_are_hashable(self):
        assert len({FontUsageLocation(1, "A"), FontUsageLocation(1, "A")}) == 1


class TestParseLocations:
    """Tests for parse_locations."""

    def test_empty(self):
        assert parse_locations(None) == []
        assert parse_locations([]) == []

    def test_mixed_input(self):
        existing = FontUsageLocation(2, "Body")

        parsed = parse_locations([existing, {"slide_number": 1, "shape_name": "Title"}])

        assert parsed == [existing, FontUsageLocation(1, "Title")]


class TestPptFontAnalyzeResult:
    """Tests for PptFontAnalyzeResult."""

    def test_to_dict_is_json_serializable(self):
        result = PptFontAnalyzeResult(
            used_fonts=["Calibri", "Arial"],
            unused_fonts=["Georgia"],
            inconsistently_used_fonts=["Comic Sans"],
            unused_font_locations=[FontUsageLocation(1, "Empty")],
            inconsistent_font_locations=[FontUsageLocation(2, "Note")],
        )

        data = json.loads(json.dumps(result.to_dict()))

        assert data["used_fonts"] == ["Calibri", "Arial"]
        assert data["unused_font_locations"] == [{"slide_number": 1, "shape_name": "Empty"}]
        assert parse_locations(data["inconsistent_font_locations"]) == [FontUsageLocation(2, "Note")]

    def test_summary(self):
        result = PptFontAnalyzeResult(used_fonts=["Calibri"], inconsistently_used_fonts=["Comic Sans"])

        assert "Used: 1" in result.summary()
        assert "Inconsistent: 1" in result.summary()
