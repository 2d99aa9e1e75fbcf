"""
Line layout engine tests

Uses a fake width function (10pt per character, independent of face and
size unless stated) so positions can be checked exactly.
"""

import pytest

from pdfmarkup.lib.layout import LayoutEngine, document_layout, fontVariant_resolve
from pdfmarkup.lib.markup import line_compile, text_compile
from pdfmarkup.models.layout import FontVariant, PlacementCommand
from pdfmarkup.models.markup import RGB, Margin, TextFragment


def fixed_width(text, variant, size):
    return 10 * len(text)


@pytest.fixture
def engine():
    """A4 page, 14pt text, 24pt lines, margins top=50 left=50"""
    return LayoutEngine(
        base_font_size=14,
        line_height=24,
        left_margin=50,
        top_margin=50,
        page_height=842,
        width_of=fixed_width,
        default_color=RGB(0, 0, 0),
    )


class TestFontVariant:
    """Bold/italic flags select one of four faces"""

    @pytest.mark.parametrize(
        "bold, italic, expected",
        [
            (False, False, FontVariant.NORMAL),
            (True, False, FontVariant.BOLD),
            (False, True, FontVariant.ITALIC),
            (True, True, FontVariant.BOLD_ITALIC),
        ],
    )
    def test_resolve(self, bold, italic, expected):
        assert fontVariant_resolve(bold, italic) is expected


class TestSingleLine:
    """Placement within one line"""

    def test_first_line_position(self, engine):
        """First line starts at (left margin, page height - top margin)"""
        commands = engine.document_layout([[TextFragment(text="Hi")]])

        assert commands == [
            PlacementCommand(
                text="Hi", x=50, y=792, fontVariant=FontVariant.NORMAL, size=14, color=RGB(0, 0, 0)
            )
        ]

    def test_horizontal_advance(self, engine):
        """x of F2 = x of F1 + width(F1) + F1.right + F2.left"""
        first = TextFragment(text="ab", margin=Margin(right=5))
        second = TextFragment(text="c", margin=Margin(left=3))
        commands = engine.document_layout([[first, second]])

        assert commands[0].x == 50
        assert commands[1].x == 50 + 20 + 5 + 3

    def test_left_margin_shifts_only_its_fragment(self, engine):
        """A fragment's left margin moves it but not the cursor after it"""
        first = TextFragment(text="ab", margin=Margin(left=4))
        second = TextFragment(text="c")
        commands = engine.document_layout([[first, second]])

        assert commands[0].x == 54
        assert commands[1].x == 70

    def test_same_y_within_line(self, engine):
        """All fragments of a line share one baseline"""
        commands = engine.document_layout([line_compile("<b>Hi</b> <24>Big</24>")])

        assert len(commands) == 3
        assert len({c.y for c in commands}) == 1
        assert commands[0].x < commands[1].x < commands[2].x

    def test_style_resolution(self, engine):
        """Variant, size and colour come from the fragment, else defaults"""
        commands = engine.document_layout([line_compile("<b><i><20><#FF0000>a</#></20></i></b>b")])

        assert commands[0].fontVariant is FontVariant.BOLD_ITALIC
        assert commands[0].size == 20
        assert commands[0].color == RGB(255, 0, 0)
        assert commands[1].fontVariant is FontVariant.NORMAL
        assert commands[1].size == 14
        assert commands[1].color == RGB(0, 0, 0)

    def test_size_zero_is_not_default(self, engine):
        """An explicit size of 0 is used, not replaced by the base size"""
        commands = engine.document_layout([line_compile("<0>x")])
        assert commands[0].size == 0

    def test_width_uses_fragment_variant_and_size(self):
        """Advance is measured with the same face and size as the placement"""
        calls = []

        def recording_width(text, variant, size):
            calls.append((text, variant, size))
            return 7.5 * len(text)

        commands = document_layout(
            [line_compile("<b><30>AB</30></b><i>c")],
            base_font_size=12,
            line_height=20,
            left_margin=10,
            top_margin=10,
            page_height=100,
            width_of=recording_width,
        )

        assert calls == [("AB", FontVariant.BOLD, 30), ("c", FontVariant.ITALIC, 12)]
        assert commands[1].x == 10 + 15

    def test_empty_text_fragment_emits_nothing(self, engine):
        """Hand-built empty fragments are not drawn"""
        commands = engine.document_layout([[TextFragment(text=""), TextFragment(text="x")]])

        assert [c.text for c in commands] == ["x"]
        assert commands[0].x == 50

    def test_no_wrapping(self, engine):
        """Text past the page width is still placed on the same line"""
        commands = engine.document_layout([[TextFragment(text="x" * 100), TextFragment(text="y")]])

        assert commands[1].x == 50 + 1000
        assert commands[1].y == commands[0].y


class TestVerticalStepping:
    """Line-to-line movement and margins"""

    def test_consecutive_lines(self, engine):
        """Each line is one line height below the previous"""
        commands = engine.document_layout(text_compile("one\ntwo\nthree"))
        assert [c.y for c in commands] == [792, 768, 744]

    def test_empty_line_takes_one_line(self, engine):
        """An empty line advances exactly one line height, drawing nothing"""
        commands = engine.document_layout(text_compile("one\n\nthree"))

        assert [c.text for c in commands] == ["one", "three"]
        assert commands[1].y == commands[0].y - 2 * 24

    def test_top_margin_moves_line_down(self, engine):
        """The largest top margin on a line moves that line down"""
        commands = engine.document_layout(text_compile("<mt4>a<mt10>b</m>c\nnext"))

        assert {c.y for c in commands[:3]} == {782}
        assert commands[3].y == 782 - 24

    def test_bottom_margin_moves_next_line_down(self, engine):
        """The largest bottom margin adds space below the line"""
        commands = engine.document_layout(text_compile("<mb6>a<mb2>b\nnext"))

        assert commands[0].y == 792
        assert commands[2].y == 792 - 24 - 6

    def test_margin_tags_are_line_local(self, engine):
        """Margins do not carry over to the following line"""
        commands = engine.document_layout(text_compile("<mt10><mb10>a\nb\nc"))

        assert commands[0].y == 782
        assert commands[1].y == 782 - 34
        assert commands[2].y == 782 - 34 - 24

    def test_monotonic_y(self, engine):
        """Line y values strictly decrease"""
        commands = engine.document_layout(text_compile("\n".join(f"line {i}" for i in range(40))))
        ys = [c.y for c in commands]

        assert all(a > b for a, b in zip(ys, ys[1:]))

    def test_empty_document_lines(self, engine):
        """Only empty lines give no commands"""
        assert engine.document_layout([[], [], []]) == []


class TestDeterminism:
    """Layout is a pure function of its inputs"""

    def test_repeated_calls_identical(self, engine):
        """The same engine gives equal results every time"""
        lines = text_compile("<b>Hi</b> there\n<mt5><24>Big</24>\n\n<#00FF00>green")

        assert engine.document_layout(lines) == engine.document_layout(lines)

    def test_module_function_matches_engine(self, engine):
        """document_layout() and LayoutEngine agree"""
        lines = text_compile("a<b>b</b>\nc")
        commands = document_layout(
            lines,
            base_font_size=14,
            line_height=24,
            left_margin=50,
            top_margin=50,
            page_height=842,
            width_of=fixed_width,
        )

        assert commands == engine.document_layout(lines)
