"""
Placeholder rendering for non-text inserts (embeds).

An embed insert carries a JSON value instead of text, conventionally a
single-key object such as ``{"image": "https://..."}``. This module maps that
value to an inline HTML fragment. It performs no I/O.

Design:
  - EmbedContext: immutable bundle of what the strategies may use
  - Renderers: small classes implementing ``render(ctx)``
  - Dispatcher: exact key map, then default fallback
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Optional

from pydantic import JsonValue
from tinyhtml import h

from ..models.op import Op
from .options import RenderConfig


@dataclass(frozen=True)
class EmbedContext:
    key: str
    value: JsonValue
    image_max_width: str = "100%"
    link_target: Optional[str] = None
    link_rel: Optional[str] = None

    @property
    def text(self) -> str:
        if self.value is None:
            return ""
        return self.value if isinstance(self.value, str) else str(self.value)

    def base_attrs(self, extra: dict[str, str] | None = None) -> dict[str, str]:
        base = {"class": "embed", "data-embed": self.key}
        if extra:
            base.update(extra)
        return base


def _is_url(s: str) -> bool:
    return s.startswith("http://") or s.startswith("https://")


class _Renderer:
    def render(self, ctx: EmbedContext) -> str:  # pragma: no cover - interface
        raise NotImplementedError


class _DefaultRenderer(_Renderer):
    def render(self, ctx: EmbedContext) -> str:
        if ctx.text and _is_url(ctx.text):
            extra = {"href": ctx.text}
            if ctx.link_target:
                extra["target"] = ctx.link_target
            if ctx.link_rel:
                extra["rel"] = ctx.link_rel
            return h("a", **ctx.base_attrs(extra))(ctx.text).render()
        return h("span", **ctx.base_attrs())().render()


class _ImageRenderer(_Renderer):
    def render(self, ctx: EmbedContext) -> str:
        if not ctx.text:
            return _DEFAULT.render(ctx)
        attrs = ctx.base_attrs(
            {
                "class": "embed image",
                "src": ctx.text,
                "style": f"max-width:{ctx.image_max_width};height:auto",
            }
        )
        attr_html = " ".join(f'{k}="{html.escape(v)}"' for k, v in attrs.items())
        return f"<img {attr_html}>"


class _VideoRenderer(_Renderer):
    def render(self, ctx: EmbedContext) -> str:
        if not ctx.text:
            return _DEFAULT.render(ctx)
        attrs = ctx.base_attrs(
            {"class": "embed video", "src": ctx.text, "frameborder": "0"}
        )
        return h("iframe", allowfullscreen=True, **attrs)().render()


class _FormulaRenderer(_Renderer):
    def render(self, ctx: EmbedContext) -> str:
        return h("span", **ctx.base_attrs({"class": "embed formula"}))(
            ctx.text
        ).render()


# Singletons
_DEFAULT = _DefaultRenderer()
_IMAGE = _ImageRenderer()
_VIDEO = _VideoRenderer()
_FORMULA = _FormulaRenderer()

_EXACT: dict[str, _Renderer] = {
    "image": _IMAGE,
    "video": _VIDEO,
    "formula": _FORMULA,
}


def embed_context(op: Op, config: Optional[RenderConfig] = None) -> EmbedContext:
    conf = config or RenderConfig()
    value = op.value()
    if isinstance(value, dict) and value:
        key = next(iter(value))
        inner = value[key]
    else:
        key, inner = "unknown", value
    return EmbedContext(
        key=str(key),
        value=inner,
        image_max_width=conf.image_max_width,
        link_target="_blank" if conf.link_target_blank else None,
        link_rel=conf.link_rel or None,
    )


def render_embed(op: Op, config: Optional[RenderConfig] = None) -> str:
    """Render a non-text insert as an inline HTML placeholder."""
    ctx = embed_context(op, config)
    return _EXACT.get(ctx.key, _DEFAULT).render(ctx)


__all__ = ["EmbedContext", "embed_context", "render_embed"]
