"""
Render configuration for Delta HTML output.

Centralizes behavior flags so callers can tune defaults without touching
core logic. Every field has a default; ``RenderConfig()`` matches the
behavior of calling the renderer without a config.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderConfig:
    # Logging/debug: log every segment at DEBUG level
    debug: bool = False

    # HTML-escape text content (&, <, >). Plain text is unaffected.
    escape_text: bool = True

    # Emit placeholders for non-text inserts (images, videos, formulas...).
    # When False, embeds are skipped like retains and deletes.
    render_embeds: bool = True

    # Inline style for embedded images
    image_max_width: str = "100%"

    # Link behavior for embeds that render as links
    link_target_blank: bool = True
    link_rel: str = "noopener noreferrer"
