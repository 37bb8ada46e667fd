"""Shared fixtures: build small decks with python-pptx."""

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import pytest
from pptx import Presentation
from pptx.util import Emu

# Default python-pptx template: 10in x 7.5in
SLIDE_WIDTH = 9144000
SLIDE_HEIGHT = 6858000

BLANK_LAYOUT = 6

Run = Tuple[str, Optional[str]]


def set_shape_name(shape: Any, name: str) -> None:
    """Rename a shape through its cNvPr element (sp, grpSp and graphicFrame alike)."""
    shape.element.xpath("./*[1]/p:cNvPr")[0].set("name", name)


def add_runs(text_frame: Any, runs: Sequence[Run]) -> None:
    paragraph = text_frame.paragraphs[0]
    for text, font in runs:
        run = paragraph.add_run()
        run.text = text
        if font:
            run.font.name = font


def add_text_shape(
    slide: Any,
    runs: Sequence[Run] = (),
    left: int = 914400,
    top: int = 914400,
    width: int = 2743200,
    height: int = 914400,
    name: Optional[str] = None,
) -> Any:
    """Add a text box holding one paragraph made of (text, font) runs."""
    shape = slide.shapes.add_textbox(Emu(left), Emu(top), Emu(width), Emu(height))
    if name:
        set_shape_name(shape, name)
    add_runs(shape.text_frame, runs)
    return shape


def add_group_shape(slide: Any, group: Sequence[Dict[str, Any]], name: Optional[str] = None) -> Any:
    """Add a group whose members are text boxes built from keyword dicts."""
    shape = slide.shapes.add_group_shape()
    for member_spec in group:
        add_text_shape(shape, **member_spec)
    if name:
        set_shape_name(shape, name)
    return shape


def add_table_shape(
    slide: Any,
    table: Sequence[Sequence[Sequence[Run]]],
    left: int = 914400,
    top: int = 914400,
    width: int = 2743200,
    height: int = 914400,
    name: Optional[str] = None,
) -> Any:
    """Add a table; table[row][col] is the list of runs for that cell."""
    frame = slide.shapes.add_table(len(table), len(table[0]), Emu(left), Emu(top), Emu(width), Emu(height))
    for row_index, row in enumerate(table):
        for col_index, runs in enumerate(row):
            add_runs(frame.table.cell(row_index, col_index).text_frame, runs)
    if name:
        set_shape_name(frame, name)
    return frame


def add_shape(slide: Any, spec: Dict[str, Any]) -> Any:
    if "group" in spec:
        return add_group_shape(slide, **spec)
    if "table" in spec:
        return add_table_shape(slide, **spec)
    return add_text_shape(slide, **spec)


def build_presentation(slides: List[Dict[str, Any]]) -> Any:
    """Create an in-memory deck.

    Each slide spec may contain "hidden" (bool) and "shapes" (list of
    keyword dicts for add_text_shape, or add_group_shape / add_table_shape
    when the dict has a "group" / "table" key).
    """
    prs = Presentation()
    layout = prs.slide_layouts[BLANK_LAYOUT]
    for slide_spec in slides:
        slide = prs.slides.add_slide(layout)
        if slide_spec.get("hidden"):
            slide.element.set("show", "0")
        for shape_spec in slide_spec.get("shapes", []):
            add_shape(slide, shape_spec)
    return prs


@pytest.fixture
def make_deck(tmp_path):
    """Factory writing a deck to tmp_path and returning its path."""

    def _make(slides: List[Dict[str, Any]], file_name: str = "deck.pptx") -> Path:
        path = tmp_path / file_name
        build_presentation(slides).save(str(path))
        return path

    return _make


@pytest.fixture
def top_two_slides():
    """Calibri in 10 runs, Arial in 8, Comic Sans in 2 (one per shape)."""
    return [
        {
            "shapes": [
                {"runs": [("c", "Calibri")] * 6, "name": "Title"},
                {"runs": [("a", "Arial")] * 5, "name": "Body", "top": 2000000},
                {"runs": [("fancy", "Comic Sans")], "name": "Note", "top": 3500000},
            ]
        },
        {
            "shapes": [
                {"runs": [("c", "Calibri")] * 4, "name": "Title"},
                {"runs": [("a", "Arial")] * 3, "name": "Body", "top": 2000000},
                {"runs": [("fancy", "Comic Sans")], "name": "Callout", "top": 3500000},
            ]
        },
    ]
