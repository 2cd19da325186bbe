"""Render Quill-style Deltas to HTML."""

from .exceptions import DeltaHtmlException, DeltaLoadError, InsertError, OpContractError
from .models import AttributesMap, Delta, Op, OpKind
from .rendering.options import RenderConfig
from .rendering.renderer import DeltaRenderer, render, render_delta_fragment

__all__ = [
    "AttributesMap",
    "Delta",
    "Op",
    "OpKind",
    "RenderConfig",
    "DeltaRenderer",
    "render",
    "render_delta_fragment",
    "DeltaHtmlException",
    "DeltaLoadError",
    "InsertError",
    "OpContractError",
]
