"""
pdfmarkup - inline-markup text to PDF

Renders short pieces of tagged text (<b>, <i>, <14>, <#FF0000>, <mt4> ...)
into positioned, styled text on a PDF page.
"""

__version__ = "1.0.0"

from .lib import (
    MarkupCompiler,
    LayoutEngine,
    Renderer,
    pdf_generate,
    line_compile,
    document_layout,
    PdfMarkupError,
    ConfigError,
    FontResourceError,
    LOG,
    state_connectToLogger,
)

__all__ = [
    "MarkupCompiler",
    "LayoutEngine",
    "Renderer",
    "pdf_generate",
    "line_compile",
    "document_layout",
    "PdfMarkupError",
    "ConfigError",
    "FontResourceError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
