"""
Data structures for font analysis results.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Union

from .errors import ArgumentError

# Type aliases
LocationDict = Dict[str, Union[int, str]]
ResultDict = Dict[str, Union[List[str], List[LocationDict]]]

# Accepted spellings for location keys coming back from clients
_SLIDE_KEYS = ("slide_number", "slideNumber", "SlideNumber")
_SHAPE_KEYS = ("shape_name", "shapeName", "ShapeName")


def _first_present(data: Dict[str, Any], keys: Iterable[str]) -> Optional[Any]:
    for key in keys:
        if key in data:
            return data[key]
    return None


@dataclass(frozen=True)
class FontUsageLocation:
    """A (slide, shape) pointer where a font-related event occurred.

    Not unique: shape names are only unique enough within a slide, and the
    same shape may be reported more than once.
    """

    slide_number: int  # 1-based
    shape_name: str

    def to_dict(self) -> LocationDict:
        return {"slide_number": self.slide_number, "shape_name": self.shape_name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FontUsageLocation":
        """Build a location from a client-supplied mapping."""
        if not isinstance(data, dict):
            raise ArgumentError(f"Location must be an object, got {type(data).__name__}")

        slide_number = _first_present(data, _SLIDE_KEYS)
        shape_name = _first_present(data, _SHAPE_KEYS)
        if slide_number is None or shape_name is None:
            raise ArgumentError(f"Location requires slide_number and shape_name: {data}")

        try:
            slide_number = int(slide_number)
        except (TypeError, ValueError):
            raise ArgumentError(f"Invalid slide_number: {slide_number!r}")

        return cls(slide_number=slide_number, shape_name=str(shape_name))


def parse_locations(items: Optional[Iterable[Any]]) -> List[FontUsageLocation]:
    """Convert a list of dicts (or locations) into FontUsageLocation objects."""
    if not items:
        return []
    return [item if isinstance(item, FontUsageLocation) else FontUsageLocation.from_dict(item) for item in items]


@dataclass
class PptFontAnalyzeResult:
    """Classification of every font name found in a deck.

    used_fonts, unused_fonts and inconsistently_used_fonts are pairwise
    disjoint and together cover every non-empty font name in the deck.
    """

    used_fonts: List[str] = field(default_factory=list)
    unused_fonts: List[str] = field(default_factory=list)
    inconsistently_used_fonts: List[str] = field(default_factory=list)
    unused_font_locations: List[FontUsageLocation] = field(default_factory=list)
    inconsistent_font_locations: List[FontUsageLocation] = field(default_factory=list)

    def to_dict(self) -> ResultDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "used_fonts": list(self.used_fonts),
            "unused_fonts": list(self.unused_fonts),
            "inconsistently_used_fonts": list(self.inconsistently_used_fonts),
            "unused_font_locations": [loc.to_dict() for loc in self.unused_font_locations],
            "inconsistent_font_locations": [loc.to_dict() for loc in self.inconsistent_font_locations],
        }

    def summary(self) -> str:
        return (
            f"Used: {len(self.used_fonts)}, "
            f"Unused: {len(self.unused_fonts)}, "
            f"Inconsistent: {len(self.inconsistently_used_fonts)} "
            f"({len(self.inconsistent_font_locations)} locations), "
            f"Empty/off-slide shapes: {len(self.unused_font_locations)}"
        )
