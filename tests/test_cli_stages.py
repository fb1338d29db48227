"""
CLI pipeline stage tests

Runs the stage functions from mdlite.__main__ directly on a ProgramState,
without going through argument parsing.
"""

from argparse import Namespace

import pytest

from mdlite.__main__ import (
    env_check,
    source_read,
    markup_render,
    output_write,
    results_report,
)
from mdlite.models import ProgramState, pipeline


REPORT = "# Report\n\n- one\n- two"


@pytest.fixture
def state(tmp_path):
    (tmp_path / "report.md").write_text(REPORT, encoding="utf-8")
    return ProgramState(
        inputdir=tmp_path,
        outputdir=tmp_path / "out",
        inputFile="report.md",
        verbosity=0,
    )


def run(state):
    return pipeline(state, env_check, source_read, markup_render, output_write, results_report)


class TestPipeline:
    """Test the full stage sequence"""

    def test_render_written(self, state, tmp_path):
        final = run(state)
        output = tmp_path / "out" / "report.html"
        assert final.renderResult["status"] is True
        assert final.renderResult["output_file"] == str(output)
        assert final.renderResult["lines"] == 4
        assert output.read_text(encoding="utf-8") == (
            "<h1>Report</h1>\n<ul>\n<li>one</li>\n<li>two</li>\n</ul>"
        )

    def test_output_filename(self, state, tmp_path):
        state.outputFile = "custom.html"
        run(state)
        assert (tmp_path / "out" / "custom.html").exists()

    def test_classes(self, state):
        state.classes = True
        assert 'class="md-h1"' in run(state).renderedMarkup

    def test_preview(self, state):
        state.previewLines = 1
        assert run(state).renderedMarkup == (
            '<h1 class="md-h1">Report</h1><p class="md-preview-more">...</p>'
        )

    def test_standalone_default_title(self, state):
        state.standalone = True
        markup = run(state).renderedMarkup
        assert markup.startswith("<!DOCTYPE html>")
        assert "<title>report.md</title>" in markup
        assert "<h1>Report</h1>" in markup

    def test_source_view(self, state):
        state.sourceView = True
        assert '<div class="highlight"' in run(state).renderedMarkup

    def test_stages_do_not_mutate_input_state(self, state):
        run(state)
        assert state.renderedMarkup is None
        assert state.envOK is False


class TestErrors:
    """Stages exit with status 1 on errors"""

    def test_missing_input(self, state):
        state.inputFile = "missing.md"
        with pytest.raises(SystemExit) as excinfo:
            env_check(state)
        assert excinfo.value.code == 1

    def test_nothing_rendered(self, state):
        with pytest.raises(SystemExit):
            output_write(env_check(state))

    def test_report_without_result(self, state):
        with pytest.raises(SystemExit):
            results_report(state)


class TestStateCreation:
    """Test ProgramState construction from CLI options"""

    def test_from_namespace(self, tmp_path):
        options = Namespace(inputFile="a.md", inline=True, verbosity=2, unknown="x")
        state = ProgramState.state_createFromNamespace(options, tmp_path, tmp_path / "out")
        assert state.inputFile == "a.md"
        assert state.inline is True
        assert state.verbosity == 2
        assert state.inputdir == tmp_path
        assert not hasattr(state, "unknown")
