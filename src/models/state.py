"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

import dataclasses
from functools import reduce
from pathlib import Path
from argparse import Namespace
from typing import Optional, Type, TypeVar, Dict, Callable
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the rendering pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the rendering progresses.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, inputFile, outputFile,
          inline, classes, previewLines, standalone, title, sourceView
        - env_check: inputSourceFile, htmlOutputFile, envOK
        - source_read: sourceText
        - markup_render: renderedMarkup
        - output_write: renderResult
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing the markdown source file
        outputdir: Base output directory for rendered files
        verbosity: Logging verbosity level (1-3)
        inputFile: Input markdown filename (relative to inputdir)
        outputFile: Output filename (defaults to <input stem>.html)
        inline: Render in inline (single-field) mode
        classes: Add semantic md-* class hooks to emitted tags
        previewLines: Render only a bounded preview of this many lines (0 = full)
        standalone: Wrap output in a complete HTML document
        title: Document title used with --standalone
        sourceView: Emit highlighted markdown source instead of rendered markup
        envOK: Environment validation passed
        inputSourceFile: Resolved path to the input file
        htmlOutputFile: Resolved path to the output file
        sourceText: Raw markdown text read from the input file
        renderedMarkup: Rendered markup (fragment or full document)
        renderResult: Write results (output_file, characters, lines)
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFile: str = field(default="")
    outputFile: Optional[str] = field(default=None)
    inline: bool = field(default=False)
    classes: bool = field(default=False)
    previewLines: int = field(default=0)
    standalone: bool = field(default=False)
    title: str = field(default="")
    sourceView: bool = field(default=False)

    # Pipeline state
    envOK: bool = field(default=False)
    inputSourceFile: Path = field(default=Path("/"))
    htmlOutputFile: Path = field(default=Path("/"))
    sourceText: Optional[str] = field(default=None)
    renderedMarkup: Optional[str] = field(default=None)
    renderResult: Optional[Dict] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Options that are not ProgramState fields are dropped.

        Args:
            options: Parsed CLI arguments (inputFile, inline, etc.)
            inputdir: Directory containing source files
            outputdir: Directory for rendered output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)
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

    Args:
        initial_state: Starting ProgramState
        *stages: Variable number of stage functions to execute in order

    Returns:
        Final ProgramState after all transformations

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            source_read,
            markup_render,
            output_write,
            results_report
        )
    """
    return reduce(lambda state, stage: stage(state), stages, initial_state)
