"""Command-line interface for dispatchkit.

This module provides a CLI that loads JSON documents as trees and runs
walker-based operations over them: rendering, phase tracing and outlines.
"""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table as RichTable
from typing_extensions import Annotated

from dispatchkit.config import Config
from dispatchkit.errors import DispatchKitError
from dispatchkit.json_tree.builder import JsonTreeBuilder
from dispatchkit.json_tree.nodes import JsonNode
from dispatchkit.json_tree.render import OutlinePrinter, PhaseTracer, render_json
from dispatchkit.visitors.phase import VisitPhase

app = typer.Typer(
    name="dispatchkit",
    help="Walk JSON documents with class-dispatched tree walkers",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def load_tree(path: Path, config: Config) -> JsonNode:
    """Read a JSON file and build its tree.

    Args:
        path: Path of the JSON document
        config: Configuration (its recursion limit is applied first)

    Returns:
        The root node of the document tree

    Raises:
        OSError: If the file cannot be read
        ValueError: If the file is not valid JSON
    """
    config.apply_recursion_limit()
    err_console.print(f"[blue]Loading {escape(str(path))}...[/blue]")
    return JsonTreeBuilder.build_from_text(path.read_text(encoding="utf-8"))


def write_output(text: str, output: Optional[Path], what: str) -> None:
    """Write ``text`` to ``output``, or to stdout when no output file is given."""
    if output:
        output.write_text(text + "\n", encoding="utf-8")
        err_console.print(f"[green]✓[/green] {what} written to {escape(str(output))}")
    else:
        typer.echo(text)


def fail(error: Exception) -> typer.Exit:
    """Report ``error`` and return the exit to raise."""
    err_console.print(f"[red]Error:[/red] {escape(str(error))}")
    return typer.Exit(1)


@app.command()
def render(
    file: Annotated[Path, typer.Argument(help="JSON document to render")],
    indent: Annotated[
        Optional[int],
        typer.Option("--indent", "-i", min=0, help="Indentation (compact if not specified)"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output file path (stdout if not specified)"),
    ] = None,
) -> None:
    """Render a JSON document through a pre/in/post tree walker.

    Example:
        dispatchkit render data.json --indent 2
    """
    try:
        config = Config()
        tree = load_tree(file, config)
        text = render_json(tree, indent=indent if indent is not None else config.indent)
        write_output(text, output, "JSON")
    except (DispatchKitError, ValueError, OSError) as e:
        raise fail(e)


@app.command()
def trace(
    file: Annotated[Path, typer.Argument(help="JSON document to walk")],
    phase: Annotated[
        Optional[List[VisitPhase]],
        typer.Option("--phase", "-p", help="Visit phase to trace (repeatable)"),
    ] = None,
) -> None:
    """Show every phase dispatched while walking a JSON document.

    Example:
        dispatchkit trace data.json --phase pre --phase in
    """
    try:
        config = Config()
        phases = phase or config.default_phases
        tree = load_tree(file, config)
        events = PhaseTracer(*phases).trace(tree)

        rich_table = RichTable(title=f"Walk of {escape(str(file))}")
        rich_table.add_column("#", style="dim", justify="right")
        rich_table.add_column("Phase", style="magenta")
        rich_table.add_column("Node", style="cyan")
        for number, event in enumerate(events, start=1):
            rich_table.add_row(str(number), event.phase.value, escape(event.label))
        console.print(rich_table)
    except (DispatchKitError, ValueError, OSError) as e:
        raise fail(e)


@app.command(name="show-tree")
def show_tree(
    file: Annotated[Path, typer.Argument(help="JSON document to outline")],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output file path (stdout if not specified)"),
    ] = None,
) -> None:
    """Display the node tree of a JSON document as an indented outline.

    Example:
        dispatchkit show-tree data.json
    """
    try:
        tree = load_tree(file, Config())
        write_output("\n".join(OutlinePrinter().outline(tree)), output, "Outline")
    except (DispatchKitError, ValueError, OSError) as e:
        raise fail(e)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
