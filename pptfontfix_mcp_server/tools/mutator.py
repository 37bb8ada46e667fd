"""
In-place edits on an opened presentation.

This module provides functionality to:
- Remove shapes addressed by (slide number, shape name), group members included
- Replace a font name on every text run of the deck
"""

import logging
from typing import Any, Iterable, Optional

from .models import FontUsageLocation
from .shapes import iter_all_shapes, iter_text_runs

logger = logging.getLogger(__name__)


def find_shape(prs: Any, location: FontUsageLocation) -> Optional[Any]:
    """Resolve a location to a shape, or None when slide or shape is missing."""
    if location.slide_number < 1 or location.slide_number > len(prs.slides):
        return None

    slide = prs.slides[location.slide_number - 1]
    for shape in iter_all_shapes(slide.shapes):
        if shape.name == location.shape_name:
            return shape
    return None


def _remove_shape(shape: Any) -> None:
    """Detach the shape's element from its parent (shape tree or group)."""
    element = shape.element
    element.getparent().remove(element)


def remove_locations(prs: Any, locations: Optional[Iterable[FontUsageLocation]]) -> int:
    """Remove the shapes at the given locations.

    Locations that no longer resolve are logged and skipped, so calling this
    twice with the same input removes nothing the second time.

    Returns:
        Number of shapes actually removed
    """
    if not locations:
        return 0

    removed = 0
    for location in locations:
        shape = find_shape(prs, location)
        if shape is None:
            logger.warning(
                "Shape not found, skipping: slide %d, shape '%s'",
                location.slide_number,
                location.shape_name,
            )
            continue

        _remove_shape(shape)
        removed += 1
        logger.debug("Removed slide %d, shape '%s'", location.slide_number, location.shape_name)

    return removed


def replace_font(prs: Any, from_font: str, to_font: str) -> int:
    """Set the font of every run using from_font (case-insensitive) to to_font.

    Hidden slides, off-canvas shapes, group members and table cells are
    included. Runs already spelled exactly as to_font are left alone and not
    counted.

    Returns:
        Number of runs changed
    """
    target = from_font.casefold()
    replaced = 0

    for slide in prs.slides:
        for shape in iter_all_shapes(slide.shapes):
            for run in iter_text_runs(shape):
                font_name = run.font.name
                if font_name and font_name != to_font and font_name.casefold() == target:
                    run.font.name = to_font
                    replaced += 1

    return replaced
