"""
Visibility checks for shapes placed on a slide canvas.

All values are EMUs (English Metric Units), the native unit of both shape
geometry and presentation slide size. No unit conversion is performed.
"""

from typing import Any, Optional


def is_box_visible(
    left: int,
    top: int,
    width: int,
    height: int,
    canvas_width: int,
    canvas_height: int,
) -> bool:
    """Return False if the box lies entirely outside the canvas.

    Touching an edge counts as outside: a box ending exactly at x=0 or
    starting exactly at canvas_width is not rendered on the slide.
    """
    if left + width <= 0 or left >= canvas_width:
        return False
    if top + height <= 0 or top >= canvas_height:
        return False
    return True


def is_shape_visible(
    shape: Any,
    canvas_width: Optional[int],
    canvas_height: Optional[int],
) -> bool:
    """Check whether a shape overlaps the slide canvas.

    Accepts a python-pptx shape or a ShapeWithPosition carrying slide
    coordinates of a group member.

    Shapes whose geometry is inherited (placeholders without their own
    xfrm) or decks without a slide size are treated as visible.
    """
    if canvas_width is None or canvas_height is None:
        return True

    left = getattr(shape, "left", None)
    top = getattr(shape, "top", None)
    width = getattr(shape, "width", None)
    height = getattr(shape, "height", None)
    if None in (left, top, width, height):
        return True

    return is_box_visible(int(left), int(top), int(width), int(height), int(canvas_width), int(canvas_height))
