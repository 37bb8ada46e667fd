"""
PPT Font Fix MCP Server Tools.
"""

from .analyzer import STANDARD_FONT_COUNT, analyze_fonts
from .errors import (
    ArgumentError,
    InvalidSessionStateError,
    OperationCancelledError,
    PresentationLoadError,
    SessionNotFoundError,
)
from .geometry import is_box_visible, is_shape_visible
from .models import FontUsageLocation, PptFontAnalyzeResult, parse_locations
from .mutator import remove_locations, replace_font
from .session import PresentationSession, SessionRegistry
from .shapes import collect_shapes_with_absolute_positions, iter_text_runs
from .writer import load_presentation, save_presentation

__all__ = [
    "STANDARD_FONT_COUNT",
    "analyze_fonts",
    "ArgumentError",
    "InvalidSessionStateError",
    "OperationCancelledError",
    "PresentationLoadError",
    "SessionNotFoundError",
    "is_box_visible",
    "is_shape_visible",
    "FontUsageLocation",
    "PptFontAnalyzeResult",
    "parse_locations",
    "remove_locations",
    "replace_font",
    "PresentationSession",
    "SessionRegistry",
    "collect_shapes_with_absolute_positions",
    "iter_text_runs",
    "load_presentation",
    "save_presentation",
]
