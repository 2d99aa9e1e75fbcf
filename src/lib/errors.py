"""
Exception types raised by pdfmarkup

Markup compilation and layout never raise; failures come from the
resources around them (configuration files and fonts).
"""


class PdfMarkupError(Exception):
    """Base class for render failures"""
    pass


class ConfigError(PdfMarkupError):
    """Raised when a configuration file cannot be read, parsed or validated"""
    pass


class FontResourceError(PdfMarkupError):
    """Raised when a font file cannot be read or registered"""
    pass
