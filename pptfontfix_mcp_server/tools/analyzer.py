"""
Classify the fonts used in a PowerPoint presentation.

This module provides functionality to:
- Walk slides, shapes (group members and table cells included) and text runs
- Detect empty text boxes and text boxes placed outside the slide canvas
- Count visible usages of every font and rank them
- Split fonts into standard (top-K), inconsistently used and unused sets
"""

import logging
import threading
from typing import Any, Dict, List, Optional, Set, Tuple

from .errors import OperationCancelledError
from .geometry import is_shape_visible
from .models import FontUsageLocation, PptFontAnalyzeResult
from .shapes import collect_shapes_with_absolute_positions, iter_text_frames, iter_text_runs

logger = logging.getLogger(__name__)

# Number of most-used fonts treated as the deck's standard fonts
STANDARD_FONT_COUNT = 2


def is_slide_hidden(slide: Any) -> bool:
    """Check the show attribute of <p:sld>; absent means shown."""
    show = slide.element.get("show")
    return show is not None and show.lower() in ("0", "false")


def _is_blank(text: Optional[str]) -> bool:
    return not text or not text.strip()


def analyze_fonts(
    prs: Any,
    cancel_event: Optional[threading.Event] = None,
    standard_font_count: int = STANDARD_FONT_COUNT,
) -> Tuple[PptFontAnalyzeResult, Set[str]]:
    """Analyze font usage across all slides.

    Group members and table cells are visited along with top-level shapes.
    Font names are compared case-insensitively; each font is reported with
    the spelling it first appeared in.

    Args:
        prs: An opened python-pptx Presentation
        cancel_event: Checked once per slide; when set the traversal stops
        standard_font_count: How many top-ranked fonts count as standard

    Returns:
        Tuple of (analysis result, casefolded names of visibly used fonts)

    Raises:
        OperationCancelledError: If cancel_event was set during traversal
    """
    canvas_width = prs.slide_width
    canvas_height = prs.slide_height

    result = PptFontAnalyzeResult()
    # casefolded name -> first spelling seen, in first-encounter order
    all_fonts: Dict[str, str] = {}
    visible_usage: Dict[str, List[FontUsageLocation]] = {}

    for slide_number, slide in enumerate(prs.slides, start=1):
        if cancel_event is not None and cancel_event.is_set():
            raise OperationCancelledError(f"Font analysis cancelled at slide {slide_number}")

        slide_visible = not is_slide_hidden(slide)

        for positioned in collect_shapes_with_absolute_positions(slide.shapes):
            shape = positioned.shape
            shape_visible = is_shape_visible(positioned, canvas_width, canvas_height)
            location = FontUsageLocation(slide_number=slide_number, shape_name=shape.name)

            text_frames = list(iter_text_frames(shape))
            if text_frames:
                blank = all(_is_blank(text_frame.text) for text_frame in text_frames)
                if blank:
                    result.unused_font_locations.append(location)
                if not shape_visible and not blank:
                    result.unused_font_locations.append(location)

            for run in iter_text_runs(shape):
                font_name = run.font.name
                if not font_name:
                    continue
                key = font_name.casefold()
                all_fonts.setdefault(key, font_name)

                if slide_visible and shape_visible and not _is_blank(run.text):
                    visible_usage.setdefault(key, []).append(location)

    visible_fonts = set(visible_usage)
    result.unused_fonts = [name for key, name in all_fonts.items() if key not in visible_fonts]

    # sorted() is stable, so equal counts keep first-encounter order
    ranked = sorted(visible_usage.items(), key=lambda item: len(item[1]), reverse=True)
    result.used_fonts = [all_fonts[key] for key, _ in ranked[:standard_font_count]]
    for key, locations in ranked[standard_font_count:]:
        result.inconsistently_used_fonts.append(all_fonts[key])
        result.inconsistent_font_locations.extend(locations)

    logger.debug(
        "Analyzed %d slides: %d fonts seen, %d visibly used",
        len(prs.slides),
        len(all_fonts),
        len(visible_usage),
    )
    return result, visible_fonts
