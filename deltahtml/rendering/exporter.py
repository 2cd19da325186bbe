"""
Exporter helpers for Delta -> HTML files.

These functions are thin, testable wrappers around loading, rendering and file
I/O. They are pure apart from the file they read or write and are what the
CLI is built on.
"""

from __future__ import annotations

import json
import logging
import os
import re
from typing import Optional

from pydantic import ValidationError

from ..exceptions import DeltaLoadError
from ..models.delta import Delta
from .options import RenderConfig
from .renderer import render_delta_fragment, render_delta_page

LOGGER = logging.getLogger(__name__)


def load_delta(path: str) -> Delta:
    """Read a Delta from a JSON file (a list of ops or ``{"ops": [...]}``)."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except UnicodeDecodeError as e:
        raise DeltaLoadError(f"{path}: not UTF-8 encoded ({e})", source=path) from e
    except json.JSONDecodeError as e:
        raise DeltaLoadError(f"{path}: not valid JSON ({e})", source=path) from e
    try:
        delta = Delta.model_validate(data)
    except ValidationError as e:
        raise DeltaLoadError(
            f"{path}: not a valid Delta ({e.error_count()} errors)", source=path
        ) from e
    LOGGER.debug("deltahtml.exporter.loaded path=%s ops=%d", path, len(delta))
    return delta


def _safe_name(s: Optional[str]) -> str:
    if not s:
        return "untitled"
    s = re.sub(r"\s+", " ", s).strip()
    s = re.sub(r"[^\w\- ]+", "-", s)
    return s[:60] or "untitled"


def write_html(
    title: str,
    html_fragment: str,
    out_dir: str,
    *,
    full_page: bool = False,
    filename: Optional[str] = None,
) -> str:
    os.makedirs(out_dir, exist_ok=True)
    page = render_delta_page(title, html_fragment) if full_page else html_fragment
    fname = filename or f"{_safe_name(title)}.html"
    path = os.path.join(out_dir, fname)
    with open(path, "w", encoding="utf-8") as f:
        f.write(page)
    LOGGER.info("Wrote %s (%d chars)", path, len(page))
    return path


def export_delta(
    path: str,
    out_dir: str,
    *,
    title: Optional[str] = None,
    full_page: bool = False,
    config: Optional[RenderConfig] = None,
) -> str:
    """Load, render and write one Delta file; returns the written path."""
    delta = load_delta(path)
    fragment = render_delta_fragment(delta, config=config)
    name = title or os.path.splitext(os.path.basename(path))[0]
    return write_html(name, fragment, out_dir, full_page=full_page)
