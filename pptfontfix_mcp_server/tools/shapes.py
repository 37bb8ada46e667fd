"""
Walk the shapes of a slide, including group members and table cells.

Group members store their geometry in the group's child coordinate space
(<a:chOff>/<a:chExt>); positions are mapped back to slide coordinates so the
canvas check sees where the shape is actually drawn.
"""

from dataclasses import dataclass
from typing import Any, Iterator, List, NamedTuple, Optional, Tuple

from pptx.oxml.ns import qn


class _Transform(NamedTuple):
    """Maps child coordinates to slide coordinates: x' = offset + x * scale."""

    offset_x: float = 0.0
    offset_y: float = 0.0
    scale_x: float = 1.0
    scale_y: float = 1.0


@dataclass
class ShapeWithPosition:
    """A leaf shape with its geometry in slide coordinates (None if unknown)."""

    shape: Any
    left: Optional[int]
    top: Optional[int]
    width: Optional[int]
    height: Optional[int]

    @property
    def name(self) -> str:
        return self.shape.name


def is_group(shape: Any) -> bool:
    return hasattr(shape, "shapes")


def iter_text_frames(shape: Any) -> Iterator[Any]:
    """Yield the shape's text frame, or every cell text frame of a table."""
    if getattr(shape, "has_text_frame", False):
        yield shape.text_frame
    elif getattr(shape, "has_table", False):
        for row in shape.table.rows:
            for cell in row.cells:
                yield cell.text_frame


def iter_text_runs(shape: Any) -> Iterator[Any]:
    """Yield every run of every paragraph in the shape's text frames."""
    for text_frame in iter_text_frames(shape):
        for paragraph in text_frame.paragraphs:
            yield from paragraph.runs


def _child_extents(group: Any) -> Optional[Tuple[int, int, int, int]]:
    xfrm = group.element.xpath("./p:grpSpPr/a:xfrm")
    if not xfrm:
        return None
    ch_off = xfrm[0].find(qn("a:chOff"))
    ch_ext = xfrm[0].find(qn("a:chExt"))
    if ch_off is None or ch_ext is None:
        return None
    return (
        int(ch_off.get("x", 0)),
        int(ch_off.get("y", 0)),
        int(ch_ext.get("cx", 0)),
        int(ch_ext.get("cy", 0)),
    )


def _group_transform(group: Any, parent: _Transform) -> _Transform:
    left, top, width, height = group.left, group.top, group.width, group.height
    extents = _child_extents(group)
    if None in (left, top, width, height) or extents is None:
        return parent

    ch_x, ch_y, ch_cx, ch_cy = extents
    scale_x = width / ch_cx if ch_cx else 1.0
    scale_y = height / ch_cy if ch_cy else 1.0
    return _Transform(
        offset_x=parent.offset_x + parent.scale_x * (left - ch_x * scale_x),
        offset_y=parent.offset_y + parent.scale_y * (top - ch_y * scale_y),
        scale_x=parent.scale_x * scale_x,
        scale_y=parent.scale_y * scale_y,
    )


def _position(shape: Any, transform: _Transform) -> ShapeWithPosition:
    left = getattr(shape, "left", None)
    top = getattr(shape, "top", None)
    width = getattr(shape, "width", None)
    height = getattr(shape, "height", None)
    if None in (left, top, width, height):
        return ShapeWithPosition(shape=shape, left=None, top=None, width=None, height=None)

    return ShapeWithPosition(
        shape=shape,
        left=round(transform.offset_x + left * transform.scale_x),
        top=round(transform.offset_y + top * transform.scale_y),
        width=round(width * transform.scale_x),
        height=round(height * transform.scale_y),
    )


def collect_shapes_with_absolute_positions(
    shapes: Any, transform: _Transform = _Transform()
) -> List[ShapeWithPosition]:
    """Recursively collect leaf shapes in document order with slide positions."""
    result = []
    for shape in shapes:
        if is_group(shape):
            result.extend(collect_shapes_with_absolute_positions(shape.shapes, _group_transform(shape, transform)))
        else:
            result.append(_position(shape, transform))
    return result


def iter_all_shapes(shapes: Any) -> Iterator[Any]:
    """Yield every shape depth-first, groups before their members."""
    for shape in shapes:
        yield shape
        if is_group(shape):
            yield from iter_all_shapes(shape.shapes)
