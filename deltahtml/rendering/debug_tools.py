"""
Debug helpers for mapping a Delta to the segments the renderer sees.

These utilities are intended for troubleshooting renderer issues. They do not
perform any I/O and can be safely used in tests.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from ..models.op import Op
from .renderer import header_level, list_kind, select_handler
from .segmenter import Embed, Inline, Line, Segmenter


def _block_name(op: Op) -> str:
    kind = list_kind(op)
    if kind is not None:
        return f"list:{kind.value}"
    level = header_level(op)
    if level is not None:
        return f"h{level}"
    return "p"


def map_segments(ops: Iterable[Op], include_embeds: bool = True) -> List[Dict[str, object]]:
    """Return a list of dictionaries describing each segment.

    Each dict contains:
      - index: segment index
      - kind: "line" | "inline" | "embed"
      - text: segment text ("" for embeds)
      - op: compact form of the owning op
      - block: block the line resolves to ("p", "h2", "list:bullet"), or None
      - handler: name of the block handler that would claim the line, or None
    """
    out: List[Dict[str, object]] = []
    for idx, seg in enumerate(Segmenter(ops, include_embeds=include_embeds)):
        if isinstance(seg, Line):
            out.append(
                {
                    "index": idx,
                    "kind": "line",
                    "text": seg.text,
                    "op": str(seg.op),
                    "block": _block_name(seg.op),
                    "handler": select_handler(seg).name,
                }
            )
        elif isinstance(seg, Inline):
            out.append(
                {
                    "index": idx,
                    "kind": "inline",
                    "text": seg.text,
                    "op": str(seg.op),
                    "block": None,
                    "handler": None,
                }
            )
        elif isinstance(seg, Embed):
            out.append(
                {
                    "index": idx,
                    "kind": "embed",
                    "text": "",
                    "op": str(seg.op),
                    "block": None,
                    "handler": None,
                }
            )
    return out


def dump_segments_text(ops: Iterable[Op]) -> str:
    """Return a human-readable dump of segments with visible line endings."""
    rows = []
    for row in map_segments(ops):
        text = str(row["text"]).replace("\t", "→")
        if row["kind"] == "line":
            rows.append(f"[{row['index']}] LINE {row['block']:<12} {text}⏎  <- {row['op']}")
        elif row["kind"] == "inline":
            rows.append(f"[{row['index']}] INLINE {'':<10} {text}  <- {row['op']}")
        else:
            rows.append(f"[{row['index']}] EMBED {'':<11} {{OBJ}}  <- {row['op']}")
    return "\n".join(rows)


__all__ = ["map_segments", "dump_segments_text"]
