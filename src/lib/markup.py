"""
Markup compiler for inline style tags

Turns one line of marked-up text into a flat list of styled text fragments.

Supported tags:
    <b>...</b>                  bold
    <i>...</i>                  italic
    <21>...</21>                font size in points
    <#FF0000>...</#>            colour
    <mt4> <mb5> <ml10> <mr8>    top/bottom/left/right margin
    </m>                        clear all margins

Tags are flags, not a nesting stack: every close tag clears its attribute
outright, so "<12><18>x</12>y" leaves "y" at the default size. Text in
angle brackets that is not one of the forms above stays literal.

Example:
    >>> compiler = MarkupCompiler()
    >>> [f.text for f in compiler.line_compile("<b>Hi</b> there")]
    ['Hi', ' there']
"""

import re
from typing import Iterator, List

from ..models.markup import (
    MARGIN_DIRECTIONS,
    StyleState,
    Tag,
    TagKind,
    TextFragment,
)
from .colors import hex_toRGB
from .log import LOG

# Alternation order sets precedence; matches never overlap.
TAG_PATTERN = re.compile(r"<(/?b|/?i|/?[0-9]+|#[0-9A-Fa-f]{6}|/#|m[tblr][0-9]+|/m)>")

_SIMPLE_TAGS = {
    "b": TagKind.BOLD_OPEN,
    "/b": TagKind.BOLD_CLOSE,
    "i": TagKind.ITALIC_OPEN,
    "/i": TagKind.ITALIC_CLOSE,
    "/#": TagKind.COLOR_CLOSE,
    "/m": TagKind.MARGIN_RESET,
}


def tag_classify(body: str, start: int, end: int, raw: str) -> Tag:
    """
    Build a Tag from the text between '<' and '>'

    Args:
        body: Tag body as captured by TAG_PATTERN (e.g. "b", "/14", "mt4")
        start: Index of '<' in the line
        end: Index one past '>' in the line
        raw: Full tag text including brackets

    Returns:
        Classified Tag with its payload parsed
    """
    if body in _SIMPLE_TAGS:
        return Tag(_SIMPLE_TAGS[body], None, start, end, raw)
    if body.isdigit():
        return Tag(TagKind.SIZE_OPEN, int(body), start, end, raw)
    if body.startswith("/"):
        # "/<digits>": the closing number is not checked against the open
        return Tag(TagKind.SIZE_CLOSE, None, start, end, raw)
    if body.startswith("#"):
        return Tag(TagKind.COLOR_OPEN, hex_toRGB(body), start, end, raw)
    # m[tblr]<digits>
    side = MARGIN_DIRECTIONS[body[1]]
    return Tag(TagKind.MARGIN, (side, int(body[2:])), start, end, raw)


def tags_scan(line: str) -> Iterator[Tag]:
    """Yield every recognised tag in a line, left to right"""
    for match in TAG_PATTERN.finditer(line):
        yield tag_classify(match.group(1), match.start(), match.end(), match.group(0))


def text_strip(line: str) -> str:
    """Return the line with all recognised tags removed"""
    return TAG_PATTERN.sub("", line)


class MarkupCompiler:
    """
    Compiles marked-up lines into TextFragment lists

    Holds no state between calls; every line starts from a fresh
    StyleState.
    """

    def __init__(self, debug: bool = False) -> None:
        """
        Args:
            debug: Trace every tag application via LOG at level 3
        """
        self.debug = debug

    def line_compile(self, line: str) -> List[TextFragment]:
        """
        Compile one line into styled fragments.

        Text before each tag is emitted with the style in force before
        that tag; the remaining tail is emitted with the final style.
        An empty line yields an empty list.

        Args:
            line: A single line of input (no newlines)

        Returns:
            Fragments in document order
        """
        fragments: List[TextFragment] = []
        state = StyleState()
        lastIndex = 0

        for tag in tags_scan(line):
            if tag.start > lastIndex:
                fragments.append(state.fragment_snapshot(line[lastIndex:tag.start]))
            state.tag_apply(tag)
            if self.debug:
                LOG(f"tag {tag.raw} @ {tag.start} -> {state}", level=3)
            lastIndex = tag.end

        if lastIndex < len(line):
            fragments.append(state.fragment_snapshot(line[lastIndex:]))

        return fragments

    def text_compile(self, text: str) -> List[List[TextFragment]]:
        """
        Compile newline-separated text, one fragment list per line.

        Empty lines are kept as empty lists so they still take up a line
        during layout.
        """
        lines = text.split("\n")
        compiled = [self.line_compile(line) for line in lines]
        LOG(
            f"Compiled {len(lines)} lines into "
            f"{sum(len(fragments) for fragments in compiled)} fragments",
            level=2,
        )
        return compiled


def line_compile(line: str) -> List[TextFragment]:
    """Compile a single line with a default MarkupCompiler"""
    return MarkupCompiler().line_compile(line)


def text_compile(text: str) -> List[List[TextFragment]]:
    """Compile newline-separated text with a default MarkupCompiler"""
    return MarkupCompiler().text_compile(text)
