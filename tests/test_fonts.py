"""
Font metrics provider tests

Only reportlab's built-in faces are available to the test suite, so
TrueType loading is exercised through its failure paths.
"""

from argparse import Namespace

import pytest
from loguru import logger
from reportlab.pdfbase import pdfmetrics

from pdfmarkup.lib.errors import FontResourceError
from pdfmarkup.lib.fonts import BUILTIN_FONTS, FontSet, ttf_register
from pdfmarkup.lib.log import state_connectToLogger
from pdfmarkup.models.config import FontPaths
from pdfmarkup.models.layout import FontVariant


class TestFontResolution:
    """Which font backs each variant"""

    def test_builtin_fallback(self, tmp_path):
        """With no configured paths and no default files, Helvetica is used"""
        fonts = FontSet.fonts_load(None, fonts_dir=tmp_path)

        assert fonts.names == BUILTIN_FONTS
        assert fonts.font_get(FontVariant.BOLD_ITALIC) == "Helvetica-BoldOblique"

    def test_no_fonts_dir(self):
        """fonts_dir may be omitted"""
        assert FontSet.fonts_load().names == BUILTIN_FONTS

    def test_configured_path_missing(self, tmp_path):
        """A configured font that does not exist is fatal"""
        paths = FontPaths(italic=str(tmp_path / "missing.ttf"))
        with pytest.raises(FontResourceError, match="not found"):
            FontSet.fonts_load(paths, fonts_dir=tmp_path)

    def test_configured_path_not_a_font(self, tmp_path):
        """A configured file that is not TrueType is fatal"""
        bogus = tmp_path / "bogus.ttf"
        bogus.write_bytes(b"this is definitely not a TrueType font file")
        with pytest.raises(FontResourceError, match="Failed to load"):
            ttf_register(bogus)

    def test_broken_default_file(self, tmp_path):
        """A default Roboto file that exists but is broken is fatal"""
        static = tmp_path / "Roboto" / "static"
        static.mkdir(parents=True)
        (static / "Roboto-Bold.ttf").write_bytes(b"broken broken broken broken")

        with pytest.raises(FontResourceError):
            FontSet.fonts_load(None, fonts_dir=tmp_path)

    def test_incomplete_set(self):
        """A FontSet must cover all four variants"""
        with pytest.raises(FontResourceError, match="No font"):
            FontSet({FontVariant.NORMAL: "Helvetica"})


class TestWidths:
    """Text measurement"""

    def test_width_matches_reportlab(self):
        """width_get delegates to reportlab metrics for the variant's face"""
        fonts = FontSet.builtin()

        assert fonts.width_get("Hello", FontVariant.BOLD, 14) == pdfmetrics.stringWidth(
            "Hello", "Helvetica-Bold", 14
        )

    def test_width_scales_with_size(self):
        """Doubling the size doubles the width"""
        fonts = FontSet.builtin()
        small = fonts.width_get("Scale", FontVariant.NORMAL, 10)

        assert fonts.width_get("Scale", FontVariant.NORMAL, 20) == pytest.approx(2 * small)

    def test_empty_text_has_no_width(self):
        """Empty strings measure zero"""
        assert FontSet.builtin().width_get("", FontVariant.ITALIC, 12) == 0


class TestFallbackLogging:
    """Falling back to built-in faces is reported at normal verbosity"""

    def test_missing_default_logged(self, tmp_path):
        """Each variant without its default Roboto file logs a notice"""
        messages = []
        handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
        state_connectToLogger(Namespace(verbosity=1))
        try:
            FontSet.fonts_load(None, fonts_dir=tmp_path)
        finally:
            state_connectToLogger(None)
            logger.remove(handler_id)

        notices = [m for m in messages if "not found; using built-in" in m]
        assert len(notices) == 4
        assert any("Helvetica-BoldOblique" in m for m in notices)
