"""Tests for shape traversal."""

from pptfontfix_mcp_server.tools.shapes import (
    collect_shapes_with_absolute_positions,
    iter_all_shapes,
    iter_text_frames,
)

from .conftest import build_presentation


class TestCollectShapes:
    """Tests for collect_shapes_with_absolute_positions."""

    def test_top_level_shape_keeps_its_geometry(self):
        prs = build_presentation([{"shapes": [{"runs": [("x", "Arial")], "left": 100, "top": 200, "name": "Box"}]}])

        (positioned,) = collect_shapes_with_absolute_positions(prs.slides[0].shapes)

        assert positioned.name == "Box"
        assert (positioned.left, positioned.top, positioned.width, positioned.height) == (100, 200, 2743200, 914400)

    def test_group_members_are_flattened(self):
        prs = build_presentation([
            {
                "shapes": [
                    {"runs": [("x", "Arial")], "name": "Before"},
                    {"group": [{"runs": [], "name": "A"}, {"runs": [], "name": "B", "top": 3000000}], "name": "G"},
                ]
            }
        ])

        names = [p.name for p in collect_shapes_with_absolute_positions(prs.slides[0].shapes)]

        assert names == ["Before", "A", "B"]

    def test_moved_and_resized_group_maps_member_geometry(self):
        prs = build_presentation([{"shapes": [{"group": [{"runs": [], "name": "A"}], "name": "G"}]}])
        group = prs.slides[0].shapes[0]
        group.left = 0
        group.width = 2743200 * 2

        (positioned,) = collect_shapes_with_absolute_positions(prs.slides[0].shapes)

        assert positioned.left == 0
        assert positioned.width == 2743200 * 2
        assert positioned.top == 914400


class TestIterShapes:
    """Tests for iter_all_shapes and iter_text_frames."""

    def test_all_shapes_include_groups(self):
        prs = build_presentation([{"shapes": [{"group": [{"runs": [], "name": "A"}], "name": "G"}]}])

        assert [s.name for s in iter_all_shapes(prs.slides[0].shapes)] == ["G", "A"]

    def test_table_yields_one_frame_per_cell(self):
        prs = build_presentation([{"shapes": [{"table": [[[("a", None)], []], [[], [("d", None)]]], "name": "T"}]}])

        frames = list(iter_text_frames(prs.slides[0].shapes[0]))

        assert [f.text for f in frames] == ["a", "", "", "d"]
