"""
Colour helpers

Hex parsing for colour tags and resolution of configured colours into
reportlab colour objects.
"""

from typing import Optional

from reportlab.lib.colors import Color

from ..models.markup import RGB
from ..models.config import PdfColor, RGBColor, HexColor

BLACK = RGB(0, 0, 0)


def hex_toRGB(hex_string: str) -> RGB:
    """
    Convert a 6-digit hex colour to RGB.

    Args:
        hex_string: "RRGGBB" with or without a leading '#'

    Returns:
        RGB with 0-255 channels

    Example:
        >>> hex_toRGB("#FF8000")
        RGB(r=255, g=128, b=0)
    """
    value = int(hex_string.lstrip("#"), 16)
    return RGB((value >> 16) & 255, (value >> 8) & 255, value & 255)


def pdfColor_toRGB(color: Optional[PdfColor]) -> RGB:
    """Resolve a configured colour, defaulting to black"""
    if color is None:
        return BLACK
    if isinstance(color, RGBColor):
        return RGB(color.rgb.r, color.rgb.g, color.rgb.b)
    if isinstance(color, HexColor):
        return hex_toRGB(color.hex)
    return BLACK


def rgb_toReportlab(rgb: RGB) -> Color:
    """Scale 0-255 channels to a reportlab Color"""
    return Color(rgb.r / 255, rgb.g / 255, rgb.b / 255)
