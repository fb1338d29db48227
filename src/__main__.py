#!/usr/bin/env python3
"""
mdlite - Lightweight markdown renderer

Renders a markdown file (typically a generated report) to an HTML file.

Usage:
    mdlite inputdir/ outputdir/ --inputFile report.md

    The rendered markup is written to outputdir/ as report.html unless
    --outputFile names another file.

Examples:
    # Full block rendering
    mdlite . output/ --inputFile report.md

    # Standalone page with md-* class hooks
    mdlite . output/ --inputFile report.md --classes --standalone --title "Weekly report"

    # Ten-line preview
    mdlite . output/ --inputFile report.md --previewLines 10

    # Highlighted source view, verbose
    mdlite . output/ --inputFile report.md --sourceView -vv
"""

import sys
import traceback
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .lib import renderer, __version__, LOG, state_connectToLogger
from .lib.document import document_build
from .lib.source import source_render
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
            _ _ _ _
  _ __  __| | (_) |_ ___
 | '  \/ _` | | |  _/ -_)
 |_|_|_\__,_|_|_|\__\___|

  Lightweight markdown renderer
"""

# Define CLI arguments
parser = ArgumentParser(
    description="mdlite - render markdown reports and descriptions to HTML",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile", required=True, type=str, help="Input markdown file (relative to inputdir)"
)

parser.add_argument(
    "--outputFile",
    default=None,
    type=str,
    help="Output filename within outputdir. Defaults to <inputFile stem>.html",
)

parser.add_argument(
    "--inline",
    action="store_true",
    help="Inline rendering mode (conservative wrapping, for single-field text)",
)

parser.add_argument(
    "--classes",
    action="store_true",
    help="Add semantic md-* class hooks to the emitted tags",
)

parser.add_argument(
    "--previewLines",
    default=0,
    type=int,
    help="Render only the first N lines as a preview (0 renders everything)",
)

parser.add_argument(
    "--standalone",
    action="store_true",
    help="Wrap the output in a complete HTML document",
)

parser.add_argument(
    "--title",
    default="",
    type=str,
    help="Document title for --standalone. Defaults to the input filename",
)

parser.add_argument(
    "--sourceView",
    action="store_true",
    help="Emit the syntax-highlighted markdown source instead of rendered markup",
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

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - inputSourceFile: Resolved path to the markdown input
            - htmlOutputFile: Path of the file to write
            - envOK: True if environment is valid

    Exits:
        1 if the input file is not found
    """

    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    input_file = state.inputdir / state.inputFile

    if not input_file.is_file():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.inputSourceFile = input_file
    LOG(f"Input file: {input_file}", level=2)

    output_name = state.outputFile or f"{input_file.stem}.html"
    state.htmlOutputFile = state.outputdir / output_name
    state.htmlOutputFile.parent.mkdir(parents=True, exist_ok=True)
    LOG(f"Output file: {state.htmlOutputFile}", level=2)

    state.envOK = True
    return state


def source_read(inputstate: ProgramState) -> ProgramState:
    """
    Read the markdown source file.

    Returns:
        ProgramState with added field:
            - sourceText: Raw markdown text

    Exits:
        1 if the file cannot be read
    """

    state = inputstate.copy()

    LOG("Reading source file...", level=1)

    try:
        state.sourceText = state.inputSourceFile.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        sys.exit(1)

    LOG(f"Read {len(state.sourceText)} characters from {state.inputSourceFile.name}", level=2)
    return state


def markup_render(inputstate: ProgramState) -> ProgramState:
    """
    Render the markdown source to markup.

    Chooses between source view, preview, decorated and plain rendering,
    then optionally wraps the result in a standalone document.

    Returns:
        ProgramState with added field:
            - renderedMarkup: Rendered fragment or full document
    """

    state = inputstate.copy()

    if state.sourceView:
        LOG("Highlighting markdown source...", level=1)
        markup = source_render(state.sourceText)
    elif state.previewLines > 0:
        LOG(f"Rendering {state.previewLines}-line preview...", level=1)
        markup = renderer.preview(state.sourceText, state.previewLines)
    elif state.classes:
        LOG("Rendering markdown with class hooks...", level=1)
        markup = renderer.render_withClasses(state.sourceText, inline=state.inline)
    else:
        LOG("Rendering markdown...", level=1)
        markup = renderer.render(state.sourceText, inline=state.inline)

    if state.standalone:
        title = state.title or state.inputSourceFile.name
        LOG(f"Wrapping in standalone document: {title}", level=2)
        markup = document_build(markup, title)

    state.renderedMarkup = markup
    return state


def output_write(inputstate: ProgramState) -> ProgramState:
    """
    Write the rendered markup to the output file.

    Returns:
        ProgramState with added field:
            - renderResult: Dict containing:
                - status: bool
                - output_file: str
                - characters: int
                - lines: int (source lines rendered)

    Exits:
        1 if nothing was rendered or the file cannot be written
    """

    state = inputstate.copy()

    if state.renderedMarkup is None:
        print("Error: No rendered markup available", file=sys.stderr)
        sys.exit(1)

    try:
        state.htmlOutputFile.write_text(state.renderedMarkup, encoding="utf-8")
    except OSError as e:
        print(f"Write error: {e}", file=sys.stderr)
        if state.verbosity >= 3:
            traceback.print_exc()
        sys.exit(1)

    LOG(f"Wrote {state.htmlOutputFile}", level=2)

    state.renderResult = {
        'status': True,
        'output_file': str(state.htmlOutputFile),
        'characters': len(state.renderedMarkup),
        'lines': len(state.sourceText.split('\n')) if state.sourceText else 0,
    }
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display rendering results to the user.

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if renderResult is None
    """
    state: ProgramState = inputstate.copy()
    if not state.renderResult:
        print("Error: Rendering failed", file=sys.stderr)
        sys.exit(1)

    if state.verbosity >= 1:
        LOG("\n✓ Rendering successful!", level=1)
        LOG(f"  Output: {state.renderResult['output_file']}", level=1)
        LOG(f"  Source lines: {state.renderResult['lines']}", level=1)
        LOG(f"  Characters written: {state.renderResult['characters']}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="mdlite - Lightweight markdown renderer",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - render a markdown file to HTML.

    Orchestrates the rendering pipeline:
        1. env_check: Validate paths and environment
        2. source_read: Read the markdown file
        3. markup_render: Render (or highlight) the source
        4. output_write: Write the output file
        5. results_report: Display results to user

    Args:
        options: CLI arguments from argparse
        inputdir: Directory containing the markdown source
        outputdir: Directory where rendered markup will be written

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    state_connectToLogger(state)

    pipeline(state, env_check, source_read, markup_render, output_write, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
