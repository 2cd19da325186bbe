#!/usr/bin/env python
"""Command line interface for deltahtml."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from deltahtml.cli.commands import render, segments

app = typer.Typer(help="Render Quill Deltas to HTML")
console = Console()

app.command("render")(render.main)
app.command("segments")(segments.main)


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logs"),
):
    """Render and inspect Quill Delta documents."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
