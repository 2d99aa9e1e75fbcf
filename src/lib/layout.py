"""
Line layout engine

Positions compiled text fragments on a page. Each line starts at the left
margin; fragments advance the cursor by their measured width plus their
right margin. Vertically, a line first steps down by the largest top
margin among its fragments, and after drawing steps down by the line
height plus the largest bottom margin.

There is no wrapping: text running past the right page edge is placed
anyway and left to the renderer to clip.
"""

from typing import Callable, List, Sequence

from ..models.markup import RGB, TextFragment
from ..models.layout import Cursor, FontVariant, PlacementCommand
from .colors import BLACK
from .log import LOG

# (text, variant, size) -> width in points
WidthFunction = Callable[[str, FontVariant, float], float]


def fontVariant_resolve(bold: bool, italic: bool) -> FontVariant:
    """Pick the font face for a bold/italic combination"""
    if bold and italic:
        return FontVariant.BOLD_ITALIC
    if bold:
        return FontVariant.BOLD
    if italic:
        return FontVariant.ITALIC
    return FontVariant.NORMAL


def lineTopMargin_get(fragments: Sequence[TextFragment]) -> int:
    return max([0] + [f.margin.top or 0 for f in fragments])


def lineBottomMargin_get(fragments: Sequence[TextFragment]) -> int:
    return max([0] + [f.margin.bottom or 0 for f in fragments])


class LayoutEngine:
    """
    Turns per-line fragment lists into absolute placement commands

    The engine only holds page geometry and the width function; the cursor
    is created fresh for every document_layout() call, so the same engine
    can lay out any number of documents.

    Attributes:
        base_font_size: Size for fragments without a size tag
        line_height: Vertical step between consecutive lines
        left_margin: x at the start of every line
        top_margin: Distance from the top page edge to the first line
        page_height: Page height in points (y grows upwards)
        width_of: Font metric function (text, variant, size) -> width
        default_color: Colour for fragments without a colour tag
    """

    def __init__(
        self,
        base_font_size: float,
        line_height: float,
        left_margin: float,
        top_margin: float,
        page_height: float,
        width_of: WidthFunction,
        default_color: RGB = BLACK,
    ) -> None:
        self.base_font_size = base_font_size
        self.line_height = line_height
        self.left_margin = left_margin
        self.top_margin = top_margin
        self.page_height = page_height
        self.width_of = width_of
        self.default_color = default_color

    def line_layout(
        self, fragments: Sequence[TextFragment], cursor: Cursor
    ) -> List[PlacementCommand]:
        """
        Lay out one line, moving the cursor down past it.

        Args:
            fragments: Compiled fragments of the line (may be empty)
            cursor: Shared cursor; y is updated in place

        Returns:
            Placement commands for the line's non-empty fragments
        """
        commands: List[PlacementCommand] = []

        cursor.y -= lineTopMargin_get(fragments)
        cursor.x = self.left_margin

        for fragment in fragments:
            variant = fontVariant_resolve(fragment.bold, fragment.italic)
            size = fragment.fontSize if fragment.fontSize is not None else self.base_font_size
            color = fragment.color if fragment.color is not None else self.default_color

            if fragment.text:
                commands.append(
                    PlacementCommand(
                        text=fragment.text,
                        x=cursor.x + (fragment.margin.left or 0),
                        y=cursor.y,
                        fontVariant=variant,
                        size=size,
                        color=color,
                    )
                )

            cursor.x += self.width_of(fragment.text, variant, size) + (fragment.margin.right or 0)

        cursor.y -= self.line_height + lineBottomMargin_get(fragments)
        return commands

    def document_layout(
        self, lines: Sequence[Sequence[TextFragment]]
    ) -> List[PlacementCommand]:
        """
        Lay out a whole document, top to bottom.

        Args:
            lines: One fragment list per input line

        Returns:
            Placement commands in emission (draw) order
        """
        cursor = Cursor(x=self.left_margin, y=self.page_height - self.top_margin)
        commands: List[PlacementCommand] = []

        for fragments in lines:
            commands.extend(self.line_layout(fragments, cursor))

        LOG(
            f"Laid out {len(lines)} lines as {len(commands)} placements "
            f"(cursor ends at y={cursor.y:.1f})",
            level=2,
        )
        return commands


def document_layout(
    lines: Sequence[Sequence[TextFragment]],
    base_font_size: float,
    line_height: float,
    left_margin: float,
    top_margin: float,
    page_height: float,
    width_of: WidthFunction,
    default_color: RGB = BLACK,
) -> List[PlacementCommand]:
    """Lay out a document in one call; see LayoutEngine"""
    engine = LayoutEngine(
        base_font_size=base_font_size,
        line_height=line_height,
        left_margin=left_margin,
        top_margin=top_margin,
        page_height=page_height,
        width_of=width_of,
        default_color=default_color,
    )
    return engine.document_layout(lines)
