"""
Renderer for marked-up text to PDF

Runs the full render: configuration, fonts, markup compilation, layout,
drawing, and finally writing the document to disk.

The PDF is built in memory and only written once everything has
succeeded, so a failed render never leaves a partial file behind.
"""

import io
import time
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from reportlab.pdfgen import canvas

from ..config import AppSettings, appsettings
from ..models.config import PageMargin, PdfConfig
from ..models.layout import PlacementCommand
from ..models.markup import RGB
from .colors import rgb_toReportlab
from .config import RenderOptions, config_load, options_resolve
from .fonts import FontSet
from .layout import LayoutEngine
from .log import LOG
from .markup import MarkupCompiler


class PdfCanvas:
    """
    In-memory PDF document sink backed by a reportlab canvas

    Example:
        sink = PdfCanvas(title="notes")
        sink.page_create(595, 842)
        sink.text_draw("Hello", 50, 792, 14, "Helvetica", RGB(0, 0, 0))
        pdf_bytes = sink.save()
    """

    def __init__(self, title: Optional[str] = None) -> None:
        self.title = title
        self._buffer = io.BytesIO()
        self._canvas: Optional[canvas.Canvas] = None
        self.page_count = 0

    def page_create(self, width: float, height: float) -> None:
        """Start a new page of the given size in points"""
        if self._canvas is None:
            self._canvas = canvas.Canvas(self._buffer, pagesize=(width, height))
            if self.title:
                self._canvas.setTitle(self.title)
        else:
            self._canvas.showPage()
            self._canvas.setPageSize((width, height))
        self.page_count += 1

    def text_draw(
        self, text: str, x: float, y: float, size: float, font: str, color: RGB
    ) -> None:
        """Draw a single run of text with its baseline at (x, y)"""
        if self._canvas is None:
            raise RuntimeError("text_draw() called before page_create()")
        self._canvas.setFont(font, size)
        self._canvas.setFillColor(rgb_toReportlab(color))
        self._canvas.drawString(x, y, text)

    def save(self) -> bytes:
        """Finish the document and return the PDF bytes"""
        if self._canvas is None:
            raise RuntimeError("save() called before page_create()")
        self._canvas.save()
        return self._buffer.getvalue()


def commands_draw(sink: PdfCanvas, commands: List[PlacementCommand], fonts: FontSet) -> None:
    """Replay placement commands onto a sink, in emission order"""
    for command in commands:
        sink.text_draw(
            command.text,
            command.x,
            command.y,
            command.size,
            fonts.font_get(command.fontVariant),
            command.color,
        )


class Renderer:
    """
    Renders one text document to a PDF file

    Responsibilities:
    - Resolve options (call arguments > config file > defaults)
    - Load fonts
    - Compile markup and lay out lines
    - Draw and write the document
    """

    def __init__(
        self,
        text: str,
        output_dir: Optional[Union[str, Path]] = None,
        document_name: Optional[str] = None,
        margin: Union[PageMargin, Mapping[str, float], None] = None,
        config: Optional[PdfConfig] = None,
        config_path: Optional[Union[str, Path]] = None,
        settings: AppSettings = appsettings,
        debug: bool = False,
    ) -> None:
        """
        Initialize renderer

        Args:
            text: Newline-separated marked-up text
            output_dir: Overrides outputDir from the config file
            document_name: Overrides documentName from the config file
            margin: Overrides margin from the config file ({"top", "left"})
            config: Pre-loaded configuration; skips file loading when given
            config_path: Explicit configuration file to load
            settings: Application settings
            debug: Trace tag handling in the markup compiler
        """
        self.text = text
        self.output_dir = output_dir
        self.document_name = document_name
        self.margin = margin
        self.config = config
        self.config_path = config_path
        self.settings = settings
        self.debug = debug

    def options_get(self) -> RenderOptions:
        config = self.config
        if config is None:
            config = config_load(self.config_path, settings=self.settings)
        return options_resolve(
            config,
            output_dir=self.output_dir,
            document_name=self.document_name,
            margin=self.margin,
            settings=self.settings,
        )

    def render(self) -> Dict[str, Any]:
        """
        Render the document and write it to disk.

        Returns:
            dict with render results:
                - status: True
                - output_file: str path of the written PDF
                - line_count: number of input lines
                - command_count: number of text placements drawn

        Raises:
            ConfigError: Configuration file is malformed or invalid
            FontResourceError: A font file cannot be loaded
        """
        options = self.options_get()
        fonts = FontSet.fonts_load(options.font_paths, self.settings.fonts_dir)

        lines = MarkupCompiler(debug=self.debug).text_compile(self.text)

        width, height = options.page_size
        engine = LayoutEngine(
            base_font_size=options.font_size,
            line_height=options.line_height,
            left_margin=options.margin.left,
            top_margin=options.margin.top,
            page_height=height,
            width_of=fonts.width_get,
            default_color=options.color,
        )
        commands = engine.document_layout(lines)

        sink = PdfCanvas(title=options.document_name)
        sink.page_create(width, height)
        commands_draw(sink, commands, fonts)
        pdf_bytes = sink.save()

        options.output_dir.mkdir(parents=True, exist_ok=True)
        file_name = self.settings.outputFilename_make(
            options.document_name, int(time.time() * 1000)
        )
        output_file = options.output_dir / file_name
        output_file.write_bytes(pdf_bytes)
        LOG(f"Wrote {output_file} ({len(pdf_bytes)} bytes)", level=2)

        return {
            'status': True,
            'output_file': str(output_file),
            'line_count': len(lines),
            'command_count': len(commands),
        }


def pdf_generate(
    text: str,
    output_dir: Optional[Union[str, Path]] = None,
    document_name: Optional[str] = None,
    margin: Union[PageMargin, Mapping[str, float], None] = None,
    config: Optional[PdfConfig] = None,
    config_path: Optional[Union[str, Path]] = None,
    settings: AppSettings = appsettings,
    debug: bool = False,
) -> Path:
    """
    Generate a PDF from marked-up text.

    Args:
        settings: Application settings (fonts directory, output naming)
        debug: Trace tag handling in the markup compiler
        Other arguments as for Renderer

    Returns:
        Path of the generated PDF,
        "<outputDir>/<documentName>-<milliseconds>.pdf"

    Example:
        >>> pdf_generate("<b>Hello</b> world", output_dir="out")
        PosixPath('out/document-1760000000000.pdf')
    """
    result = Renderer(
        text,
        output_dir=output_dir,
        document_name=document_name,
        margin=margin,
        config=config,
        config_path=config_path,
        settings=settings,
        debug=debug,
    ).render()
    return Path(result['output_file'])
