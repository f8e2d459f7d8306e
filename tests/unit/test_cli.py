"""Unit tests for the command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from dispatchkit.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate CLI runs from DISPATCHKIT_* variables and any local .env file."""
    for name in ("DISPATCHKIT_DEFAULT_PHASES", "DISPATCHKIT_INDENT", "DISPATCHKIT_RECURSION_LIMIT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def document(tmp_path):
    """Write a small JSON document and return its path."""
    path = tmp_path / "doc.json"
    path.write_text(json.dumps({"a": [1, 2], "b": None}))
    return path


def test_render_compact(document):
    """Test rendering a document to stdout."""
    result = runner.invoke(app, ["render", str(document)])

    assert result.exit_code == 0
    assert '{"a":[1,2],"b":null}' in result.output


def test_render_to_file_with_indent(document, tmp_path):
    """Test rendering with indentation to an output file."""
    output = tmp_path / "out.json"

    result = runner.invoke(app, ["render", str(document), "--indent", "2", "-o", str(output)])

    assert result.exit_code == 0
    assert output.read_text() == json.dumps({"a": [1, 2], "b": None}, indent=2) + "\n"


def test_render_uses_configured_indent(document, monkeypatch):
    """Test the indent falls back to DISPATCHKIT_INDENT."""
    monkeypatch.setenv("DISPATCHKIT_INDENT", "1")

    result = runner.invoke(app, ["render", str(document)])

    assert result.exit_code == 0
    assert '\n "a": [\n  1,' in result.output


def test_render_invalid_json_fails(tmp_path):
    """Test invalid JSON exits with an error."""
    path = tmp_path / "bad.json"
    path.write_text("{nope")

    result = runner.invoke(app, ["render", str(path)])

    assert result.exit_code == 1


def test_render_missing_file_fails(tmp_path):
    """Test a missing file exits with an error."""
    result = runner.invoke(app, ["render", str(tmp_path / "missing.json")])

    assert result.exit_code == 1


def test_trace_selected_phases(document):
    """Test tracing only in-visits."""
    result = runner.invoke(app, ["trace", str(document), "--phase", "in"])

    assert result.exit_code == 0
    assert "array (2 items)" in result.output
    assert "object (2 members)" in result.output
    assert "scalar 1" not in result.output


def test_trace_default_phases(document):
    """Test tracing with the configured default phases."""
    result = runner.invoke(app, ["trace", str(document)])

    assert result.exit_code == 0
    assert "pre" in result.output
    assert "post" in result.output
    assert "scalar null" in result.output


def test_trace_invalid_phase(document):
    """Test an unknown phase is rejected by the option parser."""
    result = runner.invoke(app, ["trace", str(document), "--phase", "sideways"])

    assert result.exit_code != 0


def test_show_tree(document, tmp_path):
    """Test the outline output written to a file."""
    output = tmp_path / "tree.txt"

    result = runner.invoke(app, ["show-tree", str(document), "--output", str(output)])

    assert result.exit_code == 0
    assert output.read_text().splitlines() == [
        "object (2 members)",
        '  member "a"',
        "    array (2 items)",
        "      scalar 1",
        "      scalar 2",
        '  member "b"',
        "    scalar null",
    ]
