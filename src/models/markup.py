"""
Markup data models

Types produced and consumed by the markup compiler: the recognised tags,
the running style state of a line, and the immutable text fragments the
layout engine reads.
"""

from enum import Enum
from dataclasses import dataclass, field, replace
from typing import Optional


@dataclass(frozen=True)
class RGB:
    """
    An sRGB colour with 0-255 integer channels

    Example:
        RGB(255, 0, 0) is pure red
    """
    r: int
    g: int
    b: int


@dataclass(frozen=True)
class Margin:
    """
    Per-fragment margin overlay

    Each side is None when unset. Top/bottom act on the whole line
    (the largest value wins), left/right act on the fragment itself.
    """
    top: Optional[int] = None
    bottom: Optional[int] = None
    left: Optional[int] = None
    right: Optional[int] = None


class TagKind(Enum):
    """Kinds of inline tags understood by the markup compiler"""
    BOLD_OPEN = "b"
    BOLD_CLOSE = "/b"
    ITALIC_OPEN = "i"
    ITALIC_CLOSE = "/i"
    SIZE_OPEN = "size"          # <14>
    SIZE_CLOSE = "/size"        # </14>
    COLOR_OPEN = "color"        # <#FF0000>
    COLOR_CLOSE = "/color"      # </#>
    MARGIN = "margin"           # <mt4>, <mb4>, <ml4>, <mr4>
    MARGIN_RESET = "/m"         # </m>


# Margin tag direction letter -> Margin field
MARGIN_DIRECTIONS = {
    't': 'top',
    'b': 'bottom',
    'l': 'left',
    'r': 'right',
}


@dataclass(frozen=True)
class Tag:
    """
    A tag occurrence found in a line

    Attributes:
        kind: What the tag does
        value: Tag payload: point size for SIZE_OPEN, RGB for COLOR_OPEN,
               (field, amount) tuple for MARGIN, None otherwise
        start: Index of the opening '<' in the line
        end: Index one past the closing '>'
        raw: The tag text exactly as written
    """
    kind: TagKind
    value: object
    start: int
    end: int
    raw: str


@dataclass(frozen=True)
class TextFragment:
    """
    A contiguous run of text sharing one resolved style snapshot

    Fragments are created by the markup compiler in document order and
    never change afterwards.

    Example:
        "<b>Hi</b>" compiles to
        TextFragment(text="Hi", bold=True, italic=False, fontSize=None,
                     color=None, margin=Margin())
    """
    text: str
    bold: bool = False
    italic: bool = False
    fontSize: Optional[int] = None
    color: Optional[RGB] = None
    margin: Margin = field(default_factory=Margin)


@dataclass
class StyleState:
    """
    Running style state for a single line

    Open/close tags flip independent fields; a close tag always clears
    its field, no matter how many opens came before it.
    """
    bold: bool = False
    italic: bool = False
    fontSize: Optional[int] = None
    color: Optional[RGB] = None
    margin: Margin = field(default_factory=Margin)

    def tag_apply(self, tag: Tag) -> None:
        """Apply the effect of one tag to this state"""
        kind = tag.kind
        if kind is TagKind.BOLD_OPEN:
            self.bold = True
        elif kind is TagKind.BOLD_CLOSE:
            self.bold = False
        elif kind is TagKind.ITALIC_OPEN:
            self.italic = True
        elif kind is TagKind.ITALIC_CLOSE:
            self.italic = False
        elif kind is TagKind.SIZE_OPEN:
            self.fontSize = tag.value  # type: ignore[assignment]
        elif kind is TagKind.SIZE_CLOSE:
            self.fontSize = None
        elif kind is TagKind.COLOR_OPEN:
            self.color = tag.value  # type: ignore[assignment]
        elif kind is TagKind.COLOR_CLOSE:
            self.color = None
        elif kind is TagKind.MARGIN:
            side, amount = tag.value  # type: ignore[misc]
            self.margin = replace(self.margin, **{side: amount})
        elif kind is TagKind.MARGIN_RESET:
            self.margin = Margin()

    def fragment_snapshot(self, text: str) -> TextFragment:
        """Freeze the current state around a piece of text"""
        return TextFragment(
            text=text,
            bold=self.bold,
            italic=self.italic,
            fontSize=self.fontSize,
            color=self.color,
            margin=self.margin,
        )
