"""Public exports for Delta data models."""

from __future__ import annotations

from .attributes import AttributesMap
from .delta import Delta
from .op import Delete, Insert, Op, OpKind, OpType, Retain

__all__ = [
    "AttributesMap",
    "Delta",
    "Op",
    "OpKind",
    "OpType",
    "Insert",
    "Retain",
    "Delete",
]
