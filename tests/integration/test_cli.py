"""Integration tests for CLI commands.

These tests drive the ``stream-xml`` command group end to end, from a call
script on disk to the rendered document.
"""

import json
from pathlib import Path

from click.testing import CliRunner
import pytest

from stream_xml.cli import app

COMPENDIUM_CALLS = [
    ["declare"],
    ["open", "compendium"],
    ["attr", "xmlns:exsl", "http://exslt.org/common"],
    ["attr", "version", "5"],
    ["attr", "auto_indent", "NO"],
    ["open", "item"],
    ["open", "name"],
    ["text", "Copper (c)"],
    ["close"],
    ["open", "text"],
    ["close"],
    ["write_comment", "Cash money"],
    ["open", "type"],
    ["text", "$"],
]

COMPENDIUM = """<?xml version="1.0"?>
<compendium xmlns:exsl="http://exslt.org/common" version="5" auto_indent="NO">
    <item>
        <name>Copper (c)</name>
        <text/>
        <!--Cash money-->
        <type>$</type>
    </item>
</compendium>"""


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty directory so no stray stream_xml.toml is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def write_script(directory: Path, calls: object, name: str = "calls.json") -> Path:
    path = directory / name
    path.write_text(json.dumps(calls), encoding="utf-8")
    return path


@pytest.mark.integration
class TestRenderCommand:
    def test_render_help(self, runner):
        result = runner.invoke(app, ["render", "--help"])

        assert result.exit_code == 0
        assert "SCRIPT" in result.output
        assert "--output" in result.output
        assert "--config" in result.output

    def test_render_to_stdout(self, runner, workdir):
        script = write_script(workdir, COMPENDIUM_CALLS)

        result = runner.invoke(app, ["render", str(script)])

        assert result.exit_code == 0, result.output
        assert result.output == COMPENDIUM + "\n"

    def test_render_to_file(self, runner, workdir):
        script = write_script(workdir, COMPENDIUM_CALLS)
        output = workdir / "out" / "compendium.xml"

        result = runner.invoke(app, ["render", str(script), "--output", str(output)])

        assert result.exit_code == 0, result.output
        assert output.read_text(encoding="utf-8") == COMPENDIUM

    def test_render_with_config_file(self, runner, workdir):
        script = write_script(workdir, [["open", "a"], ["open", "b"]])
        config = workdir / "custom.toml"
        config.write_text("[format]\nindent_width = 2\n")

        result = runner.invoke(app, ["render", str(script), "--config", str(config)])

        assert result.exit_code == 0, result.output
        assert result.output == "<a>\n  <b/>\n</a>\n"

    def test_render_picks_up_local_config(self, runner, workdir):
        script = write_script(workdir, [["open", "a"], ["open", "b"]])
        (workdir / "stream_xml.toml").write_text("[format]\nindent_width = 1\n")

        result = runner.invoke(app, ["render", str(script)])

        assert result.exit_code == 0, result.output
        assert result.output == "<a>\n <b/>\n</a>\n"

    def test_render_rejects_unknown_operation(self, runner, workdir):
        script = write_script(workdir, [["open", "a"], ["explode"]])

        result = runner.invoke(app, ["render", str(script)])

        assert result.exit_code == 1
        assert "Invalid call script" in result.output

    def test_render_rejects_invalid_json(self, runner, workdir):
        script = workdir / "broken.json"
        script.write_text("not json", encoding="utf-8")

        result = runner.invoke(app, ["render", str(script)])

        assert result.exit_code == 1

    def test_render_rejects_invalid_environment(self, runner, workdir, monkeypatch):
        script = write_script(workdir, [["open", "a"]])
        monkeypatch.setenv("STREAM_XML_INDENT_WIDTH", "abc")

        result = runner.invoke(app, ["render", str(script)])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
        assert not isinstance(result.exception, ValueError)

    def test_render_missing_script(self, runner, workdir):
        result = runner.invoke(app, ["render", str(workdir / "missing.json")])

        assert result.exit_code == 2

    def test_verbose_reports_statistics(self, runner, workdir):
        script = write_script(workdir, COMPENDIUM_CALLS)
        output = workdir / "compendium.xml"

        result = runner.invoke(
            app, ["render", str(script), "--output", str(output), "-v"]
        )

        assert result.exit_code == 0, result.output
        assert "Writer Statistics" in result.output


@pytest.mark.integration
class TestOperationsCommand:
    def test_lists_operations(self, runner):
        result = runner.invoke(app, ["operations"])

        assert result.exit_code == 0
        for name in ("declare", "attr", "open", "close", "text", "write_comment"):
            assert name in result.output
