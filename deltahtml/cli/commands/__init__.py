"""Command modules for the deltahtml CLI."""

from deltahtml.cli.commands import render, segments

__all__ = ["render", "segments"]
