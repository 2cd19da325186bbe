"""
Pure renderer for Deltas.

Converts a sequence of ``Op`` into minimal, readable HTML. No I/O beyond the
caller-supplied sink.

Line segments are dispatched through an ordered chain of block handlers
(list, header, paragraph); the first handler whose predicate claims the line
renders it. Inline segments accumulate in a pending buffer, wrapped in their
character formatting, and are flushed into the next block that is rendered.
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional, Tuple

from ..models.op import Op
from .embeds import render_embed
from .options import RenderConfig
from .renderer_iface import StringSink, TextSink
from .segmenter import Embed, Inline, Line, Segmenter

LOGGER = logging.getLogger(__name__)


class ListKind(str, Enum):
    ORDERED = "ordered"
    BULLET = "bullet"


def list_kind(op: Op) -> Optional[ListKind]:
    attrs = op.attributes
    if attrs is None:
        return None
    value = attrs.get("list")
    if not isinstance(value, str):
        return None
    try:
        return ListKind(value)
    except ValueError:
        return None


def header_level(op: Op) -> Optional[int]:
    attrs = op.attributes
    if attrs is None:
        return None
    level = attrs.get("header")
    # bool is an int subclass; JSON true is not a header level
    if isinstance(level, bool) or not isinstance(level, int):
        return None
    return max(1, min(6, level))


# Outermost first: <s><u><em><b>text</b></em></u></s>
_INLINE_TAGS: Tuple[Tuple[str, str], ...] = (
    ("strike", "s"),
    ("underline", "u"),
    ("italic", "em"),
    ("bold", "b"),
)


@dataclass(frozen=True)
class InlineStyle:
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strike: bool = False

    @staticmethod
    def from_op(op: Op) -> "InlineStyle":
        attrs = op.attributes
        if attrs is None:
            return InlineStyle()
        # only a JSON true enables a flag
        return InlineStyle(
            bold=attrs.get("bold") is True,
            italic=attrs.get("italic") is True,
            underline=attrs.get("underline") is True,
            strike=attrs.get("strike") is True,
        )

    def wrap(self, html_text: str) -> str:
        enabled = [tag for name, tag in _INLINE_TAGS if getattr(self, name)]
        opening = "".join(f"<{tag}>" for tag in enabled)
        closing = "".join(f"</{tag}>" for tag in reversed(enabled))
        return f"{opening}{html_text}{closing}"


class _RenderContext:
    """Per-render state: the segment cursor, the sink and the inline buffer."""

    def __init__(self, cursor: Segmenter, sink: TextSink, config: RenderConfig):
        self.cursor = cursor
        self.sink = sink
        self.config = config
        self._pending: List[str] = []

    def write(self, text: str) -> None:
        self.sink.write(text)

    def text_html(self, text: str, op: Op) -> str:
        safe = html.escape(text, quote=False) if self.config.escape_text else text
        return InlineStyle.from_op(op).wrap(safe)

    def has_inline(self) -> bool:
        return bool(self._pending)

    def append_inline(self, segment) -> None:
        if isinstance(segment, Embed):
            self._pending.append(render_embed(segment.op, self.config))
        else:
            self._pending.append(self.text_html(segment.text, segment.op))

    def flush_inline(self) -> None:
        if self._pending:
            self.write("".join(self._pending))
            self._pending.clear()

    def write_block(self, tag: str, line: Line) -> None:
        self.write(f"<{tag}>")
        self.flush_inline()
        if line.text:
            self.write(self.text_html(line.text, line.op))
        self.write(f"</{tag}>")


@dataclass(frozen=True)
class BlockHandler:
    name: str
    claims: Callable[[Line], bool]
    render: Callable[[_RenderContext, Line], None]


def _render_list(ctx: _RenderContext, line: Line) -> None:
    # The claiming line is the first item. The group ends at the first line
    # without a list value; that line stays current for the main loop.
    ctx.write("<ul>")
    segment = line
    while segment is not None:
        if isinstance(segment, Line):
            if list_kind(segment.op) is None:
                break
            ctx.write_block("li", segment)
        else:
            ctx.append_inline(segment)
        segment = ctx.cursor.advance()
    ctx.write("</ul>")


def _render_header(ctx: _RenderContext, line: Line) -> None:
    level = header_level(line.op)
    ctx.write_block(f"h{level}", line)
    ctx.cursor.advance()


def _render_paragraph(ctx: _RenderContext, line: Line) -> None:
    ctx.write_block("p", line)
    ctx.cursor.advance()


BLOCK_HANDLERS: Tuple[BlockHandler, ...] = (
    BlockHandler("list", lambda line: list_kind(line.op) is not None, _render_list),
    BlockHandler(
        "header", lambda line: header_level(line.op) is not None, _render_header
    ),
    BlockHandler("paragraph", lambda line: True, _render_paragraph),
)


def select_handler(line: Line) -> BlockHandler:
    for handler in BLOCK_HANDLERS:
        if handler.claims(line):
            return handler
    return BLOCK_HANDLERS[-1]


def render(
    ops: Iterable[Op], sink: TextSink, config: Optional[RenderConfig] = None
) -> None:
    """Render ``ops`` as an HTML fragment into ``sink``."""
    conf = config or RenderConfig()
    cursor = Segmenter(ops, include_embeds=conf.render_embeds)
    ctx = _RenderContext(cursor, sink, conf)

    segment = cursor.current()
    while segment is not None:
        if conf.debug:
            LOGGER.debug("deltahtml.renderer.segment %r", segment)
        if isinstance(segment, Line):
            handler = select_handler(segment)
            handler.render(ctx, segment)
        else:
            ctx.append_inline(segment)
            cursor.advance()
        segment = cursor.current()

    # unterminated trailing text becomes its own paragraph
    if ctx.has_inline():
        ctx.write("<p>")
        ctx.flush_inline()
        ctx.write("</p>")


def render_delta_fragment(
    ops: Iterable[Op], config: Optional[RenderConfig] = None
) -> str:
    sink = StringSink()
    render(ops, sink, config=config)
    return sink.getvalue()


def render_delta_page(title: str, html_fragment: str, extra_css: str = "") -> str:
    return (
        '<!doctype html><meta charset="utf-8">'
        '<meta name="color-scheme" content="light dark">'
        f"<title>{html.escape(title)}</title>"
        "<style>"
        "body{font-family:-apple-system,BlinkMacSystemFont,Segoe UI,Roboto,Helvetica,Arial,sans-serif;line-height:1.4;background:#fff;color:#000}"
        "img{max-width:100%;height:auto}"
        "span.embed.formula{font-family:serif;font-style:italic}"
        "@media (prefers-color-scheme: dark){"
        "body{background:#111;color:#eee}"
        "a{color:#8ab4f8}"
        "}"
        f'{extra_css}</style><div class="delta-content">{html_fragment}</div>'
    )


class DeltaRenderer:
    """Class-based interface for Delta rendering."""

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config or RenderConfig()

    def render(self, ops: Iterable[Op]) -> str:
        """Render the ops to an HTML fragment string."""
        return render_delta_fragment(ops, config=self.config)

    def render_into(self, ops: Iterable[Op], sink: TextSink) -> None:
        """Stream the HTML fragment into ``sink``."""
        render(ops, sink, config=self.config)

    def render_full_page(self, title: str, html_fragment: str) -> str:
        """Wrap an HTML fragment in a full page with CSS."""
        return render_delta_page(title, html_fragment)
