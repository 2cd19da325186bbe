"""Render command: Delta JSON file -> HTML."""

import os
from typing import Optional

import typer
from rich.console import Console

from deltahtml.rendering.exporter import load_delta, write_html
from deltahtml.rendering.options import RenderConfig
from deltahtml.rendering.renderer import render_delta_fragment, render_delta_page

console = Console()


def main(
    path: str = typer.Argument(..., help="Delta JSON file"),
    out_dir: Optional[str] = typer.Option(
        None, "--out-dir", "-o", help="Write an .html file here instead of printing"
    ),
    full_page: bool = typer.Option(False, "--full-page", help="Emit a full HTML page"),
    title: Optional[str] = typer.Option(None, "--title", help="Page title / file name"),
    no_embeds: bool = typer.Option(False, "--no-embeds", help="Skip non-text inserts"),
    raw_html: bool = typer.Option(
        False, "--raw-html", help="Do not escape text content"
    ),
):
    """Render a Delta JSON file to HTML."""
    config = RenderConfig(render_embeds=not no_embeds, escape_text=not raw_html)
    try:
        delta = load_delta(path)
        fragment = render_delta_fragment(delta, config=config)
        name = title or os.path.splitext(os.path.basename(path))[0]
        if out_dir:
            written = write_html(name, fragment, out_dir, full_page=full_page)
            console.print(f"Wrote [bold]{written}[/bold]")
            return
        page = render_delta_page(name, fragment) if full_page else fragment
        # plain stdout: HTML must not be touched by rich markup
        typer.echo(page)
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)
