"""
Program state model and pipeline helper

Defines the ProgramState dataclass carried through the command-line
pipeline and the pipeline() helper for composing its stages.
"""

import dataclasses
from pathlib import Path
from argparse import Namespace
from functools import reduce
from typing import Any, Optional, Type, TypeVar, Dict, Callable
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the render pipeline (state bus pattern).

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, inputFile, configFile,
          documentName, marginTop, marginLeft
        - env_check: inputSourceFile, configSourceFile, envOK
        - source_read: sourceText
        - pdf_render: renderResult
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing the marked-up text file
        outputdir: Directory where the PDF is written
        verbosity: Logging verbosity level (0-3)
        inputFile: Text filename (relative to inputdir)
        configFile: Optional configuration file (relative to inputdir)
        documentName: Optional document name prefix, overrides the config file
        marginTop: Optional top page margin, overrides the config file
        marginLeft: Optional left page margin, overrides the config file
        envOK: Environment validation passed
        inputSourceFile: Resolved path to the text file
        configSourceFile: Resolved path to the configuration file, if any
        sourceText: Contents of the text file
        renderResult: Render results (output_file, line_count, command_count)
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFile: str = field(default="")
    configFile: Optional[str] = field(default=None)
    documentName: Optional[str] = field(default=None)
    marginTop: Optional[float] = field(default=None)
    marginLeft: Optional[float] = field(default=None)

    # Pipeline state
    envOK: bool = field(default=False)
    inputSourceFile: Path = field(default=Path("/"))
    configSourceFile: Optional[Path] = field(default=None)
    sourceText: Optional[str] = field(default=None)
    renderResult: Optional[Dict[str, Any]] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments (inputFile, configFile, etc.)
            inputdir: Directory containing source files
            outputdir: Directory for the generated PDF

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        # Only keep options that are ProgramState fields
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}
        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            source_read,
            pdf_render,
            results_report
        )

    This is equivalent to:
        results_report(pdf_render(source_read(env_check(initial_state))))
    """
    return reduce(lambda state, stage: stage(state), stages, initial_state)
