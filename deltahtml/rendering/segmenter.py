"""
Line segmentation of a Delta.

A Delta is flat: block formatting (header, list) lives on the newline that
ends a line, while character formatting lives on each insert. The
``Segmenter`` walks the ops in document order and yields:

  - ``Line``: text up to (not including) a newline, tagged with the insert
    that owns the newline. Every line split from one multi-line insert points
    at that same op, so they share its block attributes.
  - ``Inline``: a run of text without newline, not yet bound to a block.
  - ``Embed``: a non-text insert, only when ``include_embeds=True``.

Retains, deletes and fully consumed inserts are skipped. The segmenter is an
explicit cursor: ``current()`` peeks (computing the first segment lazily) and
never moves; ``advance()`` moves and returns the new current segment.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple, Union

from ..models.op import Op

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Line:
    text: str
    op: Op


@dataclass(frozen=True)
class Inline:
    text: str
    op: Op


@dataclass(frozen=True)
class Embed:
    op: Op


Segment = Union[Line, Inline, Embed]


class Segmenter:
    def __init__(self, ops: Iterable[Op], *, include_embeds: bool = False):
        self._ops: Tuple[Op, ...] = tuple(ops)
        self._include_embeds = include_embeds
        self._index = 0
        self._offset = 0
        self._current: Optional[Segment] = None

    @property
    def exhausted(self) -> bool:
        return self._index >= len(self._ops)

    def current(self) -> Optional[Segment]:
        if self._current is None:
            return self.advance()
        return self._current

    def advance(self) -> Optional[Segment]:
        while self._index < len(self._ops):
            op = self._ops[self._index]
            if op.is_text_insert():
                text = op.value_as_text()
                if self._offset < len(text):
                    self._current = self._split(op, text)
                    return self._current
            elif self._include_embeds and op.is_insert():
                if self._offset == 0:
                    self._offset = 1
                    self._current = Embed(op)
                    return self._current
            else:
                LOGGER.debug("deltahtml.segmenter.skip op=%s", op)
            self._index += 1
            self._offset = 0
        self._current = None
        return None

    def _split(self, op: Op, text: str) -> Segment:
        start = self._offset
        newline = text.find("\n", start)
        if newline < 0:
            # no newline left: the tail of the insert stays inline
            self._offset = len(text)
            return Inline(text[start:], op)
        self._offset = newline + 1
        return Line(text[start:newline], op)

    def __iter__(self) -> Iterator[Segment]:
        segment = self.current()
        while segment is not None:
            yield segment
            segment = self.advance()


__all__ = ["Segmenter", "Segment", "Line", "Inline", "Embed"]
