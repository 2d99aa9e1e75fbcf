"""
pdfmarkup - inline-markup text to PDF

Markup compiler, line layout engine, fonts, configuration and renderer.
"""

__version__ = "1.0.0"

from .markup import MarkupCompiler, line_compile, text_compile, tags_scan, text_strip
from .layout import LayoutEngine, document_layout, fontVariant_resolve
from .fonts import FontSet
from .config import RenderOptions, config_load, options_resolve
from .renderer import PdfCanvas, Renderer, pdf_generate
from .errors import PdfMarkupError, ConfigError, FontResourceError
from .log import LOG, state_connectToLogger

__all__ = [
    "MarkupCompiler",
    "line_compile",
    "text_compile",
    "tags_scan",
    "text_strip",
    "LayoutEngine",
    "document_layout",
    "fontVariant_resolve",
    "FontSet",
    "RenderOptions",
    "config_load",
    "options_resolve",
    "PdfCanvas",
    "Renderer",
    "pdf_generate",
    "PdfMarkupError",
    "ConfigError",
    "FontResourceError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
