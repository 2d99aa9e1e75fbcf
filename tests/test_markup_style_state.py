"""
Style state tests

Tests flag semantics of close tags (no nesting stack), overlapping tags,
and the independent margin directions.
"""

from pdfmarkup.lib.markup import line_compile
from pdfmarkup.models.markup import RGB, Margin, StyleState, Tag, TagKind


class TestCloseTags:
    """Close tags always clear; they never restore an outer value"""

    def test_unopened_close_is_noop(self):
        """'</b>x' styles x exactly like 'x'"""
        assert line_compile("</b>x") == line_compile("x")

    def test_all_unopened_closes_are_noops(self):
        """Every close form is idempotent on an unset field"""
        assert line_compile("</b></i></12></#></m>x") == line_compile("x")

    def test_repeated_close(self):
        """Closing twice is the same as closing once"""
        assert line_compile("<b>a</b></b>b")[1].bold is False

    def test_size_close_clears_nested_sizes(self):
        """'<12><18>x</12>' leaves x at 18 and clears afterwards"""
        fragments = line_compile("<12><18>x</12>")

        assert len(fragments) == 1
        assert fragments[0].text == "x"
        assert fragments[0].fontSize == 18

        fragments = line_compile("<12><18>x</12>y")
        assert fragments[1].text == "y"
        assert fragments[1].fontSize is None

    def test_size_close_number_is_ignored(self):
        """'</99>' clears a size opened as 14"""
        fragments = line_compile("<14>a</99>b")
        assert [f.fontSize for f in fragments] == [14, None]

    def test_size_zero(self):
        """A zero size is a set value, not unset"""
        assert line_compile("<0>x")[0].fontSize == 0

    def test_color_close_clears_nested_colors(self):
        """'</#>' clears colour outright"""
        fragments = line_compile("<#FF0000><#0000FF>a</#>b")

        assert fragments[0].color == RGB(0, 0, 255)
        assert fragments[1].color is None

    def test_nested_bold_closes_at_first_close(self):
        """'<b><b>a</b>b</b>' - b is already unbolded"""
        fragments = line_compile("<b><b>a</b>b</b>")
        assert [f.bold for f in fragments] == [True, False]


class TestOverlappingTags:
    """Tags are independent flags; close order does not matter"""

    def test_bold_italic(self):
        """Properly nested bold/italic"""
        fragments = line_compile("<b><i>x</i></b>")

        assert fragments[0].bold is True
        assert fragments[0].italic is True

    def test_interleaved_closes(self):
        """'<b><i>x</b>y</i>z' - each close clears only its own flag"""
        fragments = line_compile("<b><i>x</b>y</i>z")

        assert [(f.text, f.bold, f.italic) for f in fragments] == [
            ("x", True, True),
            ("y", False, True),
            ("z", False, False),
        ]

    def test_bold_color_interleave(self):
        """Bold closed while colour stays open"""
        fragments = line_compile("<b><#00FF00>a</b>b</#>c")

        assert [(f.bold, f.color) for f in fragments] == [
            (True, RGB(0, 255, 0)),
            (False, RGB(0, 255, 0)),
            (False, None),
        ]


class TestMargins:
    """Margin tags set one side each; </m> clears all four"""

    def test_directions_are_independent(self):
        """'<mt4><ml10>x' gives top 4, left 10, others unset"""
        fragments = line_compile("<mt4><ml10>x")

        assert len(fragments) == 1
        assert fragments[0].margin == Margin(top=4, left=10)
        assert fragments[0].margin.bottom is None
        assert fragments[0].margin.right is None

    def test_later_value_overwrites(self):
        """Setting the same side twice keeps the last value"""
        assert line_compile("<ml5><ml9>x")[0].margin == Margin(left=9)

    def test_reset_clears_all_sides(self):
        """'</m>' clears every side at once"""
        fragments = line_compile("<mt1><mb2><ml3><mr4>a</m>b")

        assert fragments[0].margin == Margin(top=1, bottom=2, left=3, right=4)
        assert fragments[1].margin == Margin()

    def test_reset_with_partial_margins(self):
        """'</m>' also works when only some sides were set"""
        fragments = line_compile("<mr7>a</m>b")
        assert fragments[1].margin == Margin()

    def test_earlier_fragments_keep_their_margins(self):
        """Later margin tags do not alter fragments already emitted"""
        fragments = line_compile("<ml1>a<ml2>b")

        assert fragments[0].margin.left == 1
        assert fragments[1].margin.left == 2


class TestStyleStateDirect:
    """StyleState.tag_apply on hand-built tags"""

    def test_apply_and_snapshot(self):
        """Snapshots copy the current values"""
        state = StyleState()
        state.tag_apply(Tag(TagKind.BOLD_OPEN, None, 0, 3, "<b>"))
        state.tag_apply(Tag(TagKind.MARGIN, ("bottom", 6), 3, 8, "<mb6>"))
        first = state.fragment_snapshot("one")

        state.tag_apply(Tag(TagKind.MARGIN_RESET, None, 8, 12, "</m>"))
        second = state.fragment_snapshot("two")

        assert first.bold is True
        assert first.margin == Margin(bottom=6)
        assert second.margin == Margin()
