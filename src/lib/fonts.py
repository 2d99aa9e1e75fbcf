"""
Font metrics provider

Registers the four font variants (normal, bold, italic, bold italic) with
reportlab and answers text width queries for the layout engine.

Each variant is resolved independently:
    1. An explicit path from the configuration's fontPaths
    2. The default Roboto file under the fonts directory
       (<fontsDir>/Roboto/static/Roboto-Regular.ttf etc.)
    3. reportlab's built-in Helvetica face, when neither of the above
       is available
A configured path that cannot be loaded is fatal; the built-in fallback is
only used for variants the configuration says nothing about.
"""

import hashlib
from pathlib import Path
from typing import Dict, Optional, Union

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont

from ..models.config import FontPaths
from ..models.layout import FontVariant
from .errors import FontResourceError
from .log import LOG

DEFAULT_FONT_FILES: Dict[FontVariant, str] = {
    FontVariant.NORMAL: "Roboto-Regular.ttf",
    FontVariant.BOLD: "Roboto-Bold.ttf",
    FontVariant.ITALIC: "Roboto-Italic.ttf",
    FontVariant.BOLD_ITALIC: "Roboto-BoldItalic.ttf",
}

BUILTIN_FONTS: Dict[FontVariant, str] = {
    FontVariant.NORMAL: "Helvetica",
    FontVariant.BOLD: "Helvetica-Bold",
    FontVariant.ITALIC: "Helvetica-Oblique",
    FontVariant.BOLD_ITALIC: "Helvetica-BoldOblique",
}


def ttf_register(path: Union[str, Path]) -> str:
    """
    Register a TrueType file with reportlab.

    The registered name is derived from the resolved file path, so
    registering the same file twice is harmless and different files never
    share a name.

    Args:
        path: TrueType font file

    Returns:
        Font name usable with canvas.setFont() and stringWidth()

    Raises:
        FontResourceError: File missing, unreadable, or not a usable font
    """
    font_path = Path(path).expanduser().resolve()
    digest = hashlib.md5(str(font_path).encode("utf-8")).hexdigest()[:8]
    font_name = f"{font_path.stem}-{digest}"

    if font_name in pdfmetrics.getRegisteredFontNames():
        return font_name
    if not font_path.is_file():
        raise FontResourceError(f"Font file not found: {font_path}")

    try:
        pdfmetrics.registerFont(TTFont(font_name, str(font_path)))
    except (TTFError, OSError) as e:
        raise FontResourceError(f"Failed to load font {font_path}: {e}") from e

    LOG(f"Registered font {font_name} ({font_path})", level=3)
    return font_name


class FontSet:
    """
    The four font faces used for one render

    Treated as a constant lookup table once loaded.

    Attributes:
        names: Registered reportlab font name for every FontVariant
    """

    def __init__(self, names: Dict[FontVariant, str]) -> None:
        missing = set(FontVariant) - set(names)
        if missing:
            raise FontResourceError(
                f"No font for variants: {sorted(v.value for v in missing)}"
            )
        self.names = dict(names)

    @classmethod
    def builtin(cls) -> "FontSet":
        """FontSet using reportlab's standard Helvetica family"""
        return cls(dict(BUILTIN_FONTS))

    @classmethod
    def fonts_load(
        cls,
        font_paths: Optional[FontPaths] = None,
        fonts_dir: Optional[Union[str, Path]] = None,
    ) -> "FontSet":
        """
        Resolve and register all four variants.

        Args:
            font_paths: Explicit per-variant files from the configuration
            fonts_dir: Directory holding Roboto/static/Roboto-*.ttf

        Returns:
            Loaded FontSet

        Raises:
            FontResourceError: A configured or default font file exists in
                               name but cannot be loaded
        """
        configured = font_paths or FontPaths()
        names: Dict[FontVariant, str] = {}

        for variant in FontVariant:
            explicit = getattr(configured, variant.value)
            if explicit:
                names[variant] = ttf_register(explicit)
                continue

            if fonts_dir is not None:
                default_file = Path(fonts_dir) / "Roboto" / "static" / DEFAULT_FONT_FILES[variant]
                if default_file.is_file():
                    names[variant] = ttf_register(default_file)
                    continue
                LOG(
                    f"Default font {default_file} not found; using built-in "
                    f"{BUILTIN_FONTS[variant]} for {variant.value} (text metrics will differ)",
                    level=1,
                )

            names[variant] = BUILTIN_FONTS[variant]

        LOG(
            "Fonts: " + ", ".join(f"{v.value}={n}" for v, n in names.items()),
            level=2,
        )
        return cls(names)

    def font_get(self, variant: FontVariant) -> str:
        """Registered font name for a variant"""
        return self.names[variant]

    def width_get(self, text: str, variant: FontVariant, size: float) -> float:
        """Width of text in points when set in the given variant and size"""
        return pdfmetrics.stringWidth(text, self.names[variant], size)
