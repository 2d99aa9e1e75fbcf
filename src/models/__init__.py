"""
Models package for pdfmarkup

Contains data structures and type definitions for the render pipeline.
"""

from .state import ProgramState, pipeline
from .markup import RGB, Margin, TagKind, Tag, StyleState, TextFragment
from .layout import FontVariant, Cursor, PlacementCommand
from .config import PdfConfig, PdfColor, PageMargin, FontPaths, RGBColor, HexColor

__all__ = [
    "ProgramState",
    "pipeline",
    "RGB",
    "Margin",
    "TagKind",
    "Tag",
    "StyleState",
    "TextFragment",
    "FontVariant",
    "Cursor",
    "PlacementCommand",
    "PdfConfig",
    "PdfColor",
    "PageMargin",
    "FontPaths",
    "RGBColor",
    "HexColor",
]
