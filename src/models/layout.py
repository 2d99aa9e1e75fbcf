"""
Layout data models

Cursor and placement command types for the line layout engine.
"""

from enum import Enum
from dataclasses import dataclass

from .markup import RGB


class FontVariant(Enum):
    """One of the four faces selected by the bold and italic flags"""
    NORMAL = "normal"
    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "boldItalic"


@dataclass
class Cursor:
    """
    Current write position during layout

    x goes back to the left margin on every line; y starts near the top
    of the page and only ever moves down (decreases).
    """
    x: float
    y: float


@dataclass(frozen=True)
class PlacementCommand:
    """
    One absolutely positioned piece of text, ready for a drawing sink

    Attributes:
        text: Text to draw
        x: Horizontal position in points from the left page edge
        y: Baseline position in points from the bottom page edge
        fontVariant: Face to draw with
        size: Font size in points
        color: Resolved colour
    """
    text: str
    x: float
    y: float
    fontVariant: FontVariant
    size: float
    color: RGB
