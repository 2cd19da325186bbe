"""Segments command: show how a Delta is split into lines and inline runs."""

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from deltahtml.rendering.debug_tools import map_segments
from deltahtml.rendering.exporter import load_delta

console = Console()


def main(path: str = typer.Argument(..., help="Delta JSON file")):
    """List the segments of a Delta JSON file."""
    try:
        rows = map_segments(load_delta(path))

        if not rows:
            console.print("No segments found")
            return

        table = Table("#", "Kind", "Block", "Text", "Op")

        for row in rows:
            table.add_row(
                str(row["index"]),
                str(row["kind"]),
                str(row["block"] or ""),
                escape(repr(row["text"])),
                escape(str(row["op"])),
            )

        console.print(table)
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)
