#!/usr/bin/env python3
"""
pdfmarkup - inline-markup text to PDF

Renders a plain text file containing a small set of inline tags into a
single-page PDF with styled, positioned text.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Markup:
    <b>bold</b>  <i>italic</i>  <24>large</24>  <#FF0000>red</#>
    <mt10> <mb10> <ml10> <mr10>   top/bottom/left/right margin
    </m>                          clear margins

Usage:
    pdfmarkup inputdir/ outputdir/ --inputFile notes.txt

    The PDF is written to outputdir/ as <documentName>-<timestamp>.pdf.
    A pdf-markup.config.yaml (or .yml/.json) in inputdir/ is picked up
    automatically unless --configFile names another one.

Examples:
    # Basic render
    pdfmarkup . output/ --inputFile notes.txt

    # Named document with a wider top margin
    pdfmarkup . output/ --inputFile notes.txt --documentName report --marginTop 80

    # Verbose output
    pdfmarkup . output/ --inputFile notes.txt -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .lib import Renderer, config_load, PdfMarkupError, __version__, LOG, state_connectToLogger
from .lib.config import DEFAULT_MARGIN, config_find, margin_coerce
from .models import ProgramState, pipeline


DISPLAY_TITLE = """
  pdfmarkup
  =========
  Inline-markup text to PDF
"""

# Define CLI arguments
parser = ArgumentParser(
    description="pdfmarkup - render inline-markup text to PDF",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile", required=True, type=str, help="Input text file (relative to inputdir)"
)

parser.add_argument(
    "--configFile",
    default=None,
    type=str,
    help="Configuration file (relative to inputdir). Defaults to pdf-markup.config.* in inputdir",
)

parser.add_argument(
    "--documentName",
    default=None,
    type=str,
    help="Output file name prefix, overrides documentName from the configuration",
)

parser.add_argument(
    "--marginTop",
    default=None,
    type=float,
    help="Top page margin in points, overrides the configuration",
)

parser.add_argument(
    "--marginLeft",
    default=None,
    type=float,
    help="Left page margin in points, overrides the configuration",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve all file paths.

    Returns:
        ProgramState with added fields:
            - inputSourceFile: Resolved path to the text file
            - configSourceFile: Resolved configuration file, or None
            - envOK: True if environment is valid

    Exits:
        1 if the input file or an explicitly named config file is missing
    """

    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    input_file = state.inputdir / state.inputFile
    if not input_file.exists():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.inputSourceFile = input_file
    LOG(f"Input file: {input_file}", level=2)

    if state.configFile:
        config_file = state.inputdir / state.configFile
        if not config_file.exists():
            print(f"Error: Configuration file not found: {config_file}", file=sys.stderr)
            state.envOK = False
            sys.exit(1)
        state.configSourceFile = config_file
    else:
        state.configSourceFile = config_find(state.inputdir)
    LOG(f"Configuration file: {state.configSourceFile or '(none, using defaults)'}", level=2)

    # Missing output directories are created, never an error
    state.outputdir.mkdir(parents=True, exist_ok=True)
    LOG(f"Output directory: {state.outputdir}", level=2)

    state.envOK = True
    return state


def source_read(inputstate: ProgramState) -> ProgramState:
    """
    Read the marked-up text file.

    Returns:
        ProgramState with added field:
            - sourceText: File contents

    Exits:
        1 if the file cannot be read
    """

    state = inputstate.copy()

    LOG("Reading source file...", level=1)

    try:
        text = state.inputSourceFile.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        sys.exit(1)

    state.sourceText = text
    LOG(f"Read {len(state.sourceText)} characters from {state.inputSourceFile.name}", level=2)
    return state


def pdf_render(inputstate: ProgramState) -> ProgramState:
    """
    Render the text to PDF.

    The configuration file is loaded here, before any layout work. CLI
    margins override the configured ones side by side.

    Returns:
        ProgramState with added field:
            - renderResult: Dict containing:
                - status: bool
                - output_file: str (path of the generated PDF)
                - line_count: int
                - command_count: int

    Exits:
        1 on configuration or font errors
    """

    state = inputstate.copy()

    LOG("Rendering PDF...", level=1)

    if state.sourceText is None:
        print("Error: No source text available", file=sys.stderr)
        sys.exit(1)

    try:
        if state.configSourceFile:
            config = config_load(state.configSourceFile)
        else:
            config = config_load(search_dir=state.inputdir)

        margin = None
        if state.marginTop is not None or state.marginLeft is not None:
            base = config.margin or DEFAULT_MARGIN
            margin = margin_coerce({
                "top": state.marginTop if state.marginTop is not None else base.top,
                "left": state.marginLeft if state.marginLeft is not None else base.left,
            })

        renderer = Renderer(
            state.sourceText,
            output_dir=state.outputdir,
            document_name=state.documentName,
            margin=margin,
            config=config,
            debug=(state.verbosity >= 3),
        )
        state.renderResult = renderer.render()
        LOG(f"Render complete: {state.renderResult['command_count']} text runs", level=2)
    except PdfMarkupError as e:
        print(f"Render error: {e}", file=sys.stderr)
        sys.exit(1)

    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display render results to the user.

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if renderResult is None
    """
    state: ProgramState = inputstate.copy()
    if not state.renderResult:
        print("Error: Render failed", file=sys.stderr)
        sys.exit(1)

    if state.verbosity >= 1:
        LOG("\n✓ Render successful!", level=1)
        LOG(f"  Output: {state.renderResult['output_file']}", level=1)
        LOG(f"  Lines:  {state.renderResult['line_count']}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="pdfmarkup - inline-markup text to PDF",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - render a marked-up text file to PDF.

    Orchestrates the render pipeline:
        1. env_check: Validate paths and environment
        2. source_read: Read the text file
        3. pdf_render: Load configuration, compile, lay out and write the PDF
        4. results_report: Display results to user

    Args:
        options: CLI arguments from argparse
        inputdir: Directory containing the text file (and configuration)
        outputdir: Directory where the PDF will be written

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, source_read, pdf_render, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
