"""
Output seam for the Delta renderer.

The renderer writes HTML incrementally, in document order, to anything that
exposes ``write(text)``: an ``io.StringIO``, an open text file, or the small
``StringSink`` below. Write failures propagate to the caller unchanged.
"""

from __future__ import annotations

from typing import List, Protocol


class TextSink(Protocol):
    """Append-only text destination required by the renderer."""

    def write(self, text: str) -> object: ...


class StringSink:
    """In-memory sink collecting written chunks."""

    def __init__(self) -> None:
        self._chunks: List[str] = []

    def write(self, text: str) -> int:
        self._chunks.append(text)
        return len(text)

    def getvalue(self) -> str:
        return "".join(self._chunks)
