"""A Delta: the ordered list of operations making up a document."""

from __future__ import annotations

import json
from typing import Iterator, List, Optional, Tuple

from pydantic import ConfigDict, Field, RootModel, model_validator

from .op import Op


class Delta(RootModel[List[Op]]):
    """
    Ordered sequence of ``Op``; list order is document order.

    Accepts either a bare list of ops or the ``{"ops": [...]}`` document shape.
    Rendering only reads a Delta, it never mutates it.
    """

    model_config = ConfigDict(frozen=True)

    root: List[Op] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _unwrap_document(cls, obj):
        # IMPORTANT: RootModel 'before' must return the underlying list.
        if isinstance(obj, dict) and "ops" in obj:
            return obj["ops"]
        return obj

    @classmethod
    def from_json(cls, text: str) -> "Delta":
        return cls.model_validate_json(text)

    @property
    def ops(self) -> Tuple[Op, ...]:
        return tuple(self.root)

    def length(self) -> int:
        return sum(op.length() for op in self.root)

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps({"ops": self.model_dump()}, ensure_ascii=False, indent=indent)

    def __iter__(self) -> Iterator[Op]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> Op:
        return self.root[index]


__all__ = ["Delta"]
