"""Smoke tests: imports work, CLI commands run."""

import json

from click.testing import CliRunner

from mermaid_complete.__main__ import main


def test_import():
    import mermaid_complete

    assert mermaid_complete.extract_symbols("A-->B")[0].id == "A"


def test_cli_help():
    runner = CliRunner()
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "Mermaid flowchart" in result.output


def test_cli_symbols_from_stdin():
    runner = CliRunner()
    result = runner.invoke(main, ["symbols"], input="A[Hello] --> B\n")
    assert result.exit_code == 0
    assert result.output == "A\tHello\nB\tB\n"


def test_cli_symbols_links():
    runner = CliRunner()
    result = runner.invoke(main, ["symbols", "--links"], input="A --> B\n")
    assert result.exit_code == 0
    assert result.output.splitlines() == ["A\tA", "B\tB", "A --> B"]


def test_cli_symbols_file(tmp_path):
    doc = tmp_path / "doc.mmd"
    doc.write_text("graph TD\n  Start\n")
    runner = CliRunner()
    result = runner.invoke(main, ["symbols", str(doc)])
    assert result.exit_code == 0
    assert result.output == "Start\tStart\n"


def test_cli_complete_text():
    runner = CliRunner()
    result = runner.invoke(main, ["complete", "--line", "1", "--column", "3"], input="Fo")
    assert result.exit_code == 0
    first = result.output.splitlines()[0]
    assert first == "variable\tFo\tFo"


def test_cli_complete_json():
    runner = CliRunner()
    result = runner.invoke(main, ["complete", "-L", "1", "-C", "1", "--json"], input="")
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert len(data["suggestions"]) == 46
    assert data["suggestions"][0]["label"] == "-->"


def test_cli_complete_no_new_symbol():
    runner = CliRunner()
    result = runner.invoke(
        main, ["complete", "--line", "1", "--column", "7", "--no-new-symbol"], input="A-- Zq"
    )
    assert result.exit_code == 0
    assert result.output.startswith("operator\t-->\tSolid Link")


def test_cli_complete_bad_position():
    runner = CliRunner()
    result = runner.invoke(main, ["complete", "--line", "0", "--column", "1"], input="A")
    assert result.exit_code == 1
