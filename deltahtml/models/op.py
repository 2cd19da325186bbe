"""
Delta operations.

An ``Op`` pairs one of three closed operation kinds with optional formatting
attributes:

  - ``Insert(value)``: text (a JSON string) or an embed (any other JSON value)
  - ``Retain(length)``: skip ``length`` characters, optionally re-formatting them
  - ``Delete(length)``: remove ``length`` characters

On the wire an op is the usual Quill shape, e.g.
``{"insert": "Hello", "attributes": {"bold": true}}``, ``{"retain": 3}`` or
``{"delete": 2}``.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import (
    Field,
    JsonValue,
    PositiveInt,
    model_serializer,
    model_validator,
)

from ..exceptions import InsertError, OpContractError
from ._base import DeltaModel
from .attributes import AttributesMap, coerce_attributes

_EMBED_ATTRIBUTES_MSG = (
    "Insert error: "
    "Cannot combine attributes with an inserted value other than a string."
)


class OpKind(str, Enum):
    INSERT = "insert"
    RETAIN = "retain"
    DELETE = "delete"


class Insert(DeltaModel):
    type: Literal["insert"] = "insert"
    value: JsonValue


class Retain(DeltaModel):
    type: Literal["retain"] = "retain"
    length: PositiveInt


class Delete(DeltaModel):
    type: Literal["delete"] = "delete"
    length: PositiveInt


OpType = Annotated[Union[Insert, Retain, Delete], Field(discriminator="type")]


def _check_span(length: int, what: str) -> None:
    if not isinstance(length, int) or isinstance(length, bool):
        raise OpContractError(f"{what} length must be an int, got {length!r}")
    if length <= 0:
        raise OpContractError(f"{what} length must be greater than zero, got {length}")


def _is_text(value: Any) -> bool:
    return isinstance(value, str)


class Op(DeltaModel):
    """One edit primitive. Build with ``Op.insert``/``Op.retain``/``Op.delete``."""

    kind: OpType
    attrs: AttributesMap = Field(default_factory=AttributesMap)

    @model_validator(mode="before")
    @classmethod
    def _from_wire(cls, obj):
        """Accept the wire shape (``{"insert": ...}``) besides the field shape."""
        if not isinstance(obj, dict) or "kind" in obj:
            return obj
        tags = [t.value for t in OpKind if t.value in obj]
        if len(tags) != 1:
            raise ValueError(
                f"expected exactly one of insert/retain/delete, got {sorted(obj)!r}"
            )
        if "attrs" in obj:
            raise ValueError("a wire op carries its formatting under 'attributes'")
        tag = tags[0]
        rest = {k: v for k, v in obj.items() if k not in (tag, "attributes")}
        if tag == OpKind.INSERT.value:
            kind: Dict[str, Any] = {"type": tag, "value": obj[tag]}
        else:
            kind = {"type": tag, "length": obj[tag]}
        return {"kind": kind, "attrs": obj.get("attributes"), **rest}

    @model_validator(mode="after")
    def _check_attributes(self):
        if self.attrs.is_empty():
            return self
        if isinstance(self.kind, Insert) and not _is_text(self.kind.value):
            raise ValueError(_EMBED_ATTRIBUTES_MSG)
        if isinstance(self.kind, Delete):
            raise ValueError("Delete error: delete operations cannot carry attributes.")
        return self

    @model_serializer(mode="plain")
    def serialize_wire(self) -> Dict[str, Any]:
        kind = self.kind
        if isinstance(kind, Insert):
            out: Dict[str, Any] = {"insert": kind.value}
        elif isinstance(kind, Retain):
            out = {"retain": kind.length}
        elif isinstance(kind, Delete):
            out = {"delete": kind.length}
        else:  # pragma: no cover - OpType is closed
            raise TypeError(f"unknown op kind {kind!r}")
        attrs = self.attributes
        if attrs is not None:
            out["attributes"] = attrs.to_dict()
        return out

    # -- construction ------------------------------------------------------

    @classmethod
    def insert(cls, value: JsonValue, attributes: Any = None) -> "Op":
        """Strict insert. Attributes on a non-text value raise ``OpContractError``."""
        attrs = coerce_attributes(attributes)
        if not _is_text(value) and not attrs.is_empty():
            raise OpContractError(_EMBED_ATTRIBUTES_MSG)
        return cls(kind=Insert(value=value), attrs=attrs)

    @classmethod
    def try_insert(cls, value: JsonValue, attributes: Any = None) -> "Op":
        """Validating insert for untrusted input; raises ``InsertError``."""
        attrs = coerce_attributes(attributes)
        if not _is_text(value) and not attrs.is_empty():
            raise InsertError(_EMBED_ATTRIBUTES_MSG)
        return cls(kind=Insert(value=value), attrs=attrs)

    @classmethod
    def retain(cls, length: int, attributes: Any = None) -> "Op":
        _check_span(length, "retain")
        return cls(kind=Retain(length=length), attrs=coerce_attributes(attributes))

    @classmethod
    def delete(cls, length: int) -> "Op":
        _check_span(length, "delete")
        return cls(kind=Delete(length=length))

    @classmethod
    def retain_until_end(cls) -> "Op":
        return cls.retain(sys.maxsize)

    # -- inspection --------------------------------------------------------

    @property
    def kind_name(self) -> OpKind:
        return OpKind(self.kind.type)

    def is_insert(self) -> bool:
        return isinstance(self.kind, Insert)

    def is_text_insert(self) -> bool:
        return isinstance(self.kind, Insert) and _is_text(self.kind.value)

    def is_retain(self) -> bool:
        return isinstance(self.kind, Retain)

    def is_delete(self) -> bool:
        return isinstance(self.kind, Delete)

    def length(self) -> int:
        kind = self.kind
        if isinstance(kind, Insert):
            return len(kind.value) if _is_text(kind.value) else 1
        return kind.length

    @property
    def attributes(self) -> Optional[AttributesMap]:
        """The formatting attributes, or ``None`` for deletes and empty maps."""
        if isinstance(self.kind, Delete) or self.attrs.is_empty():
            return None
        return self.attrs

    def value(self) -> JsonValue:
        if not isinstance(self.kind, Insert):
            raise OpContractError(
                "Retrieving the value of an operation is possible "
                f"only on INSERT operations; Try to get value of {self}"
            )
        return self.kind.value

    def value_as_text(self) -> str:
        if not self.is_text_insert():
            raise OpContractError(
                "Retrieving the text value of an operation is possible "
                f"only on string INSERT operations; Try to get string value of {self}"
            )
        return self.kind.value  # type: ignore[union-attr,return-value]

    def __str__(self) -> str:
        kind = self.kind
        if isinstance(kind, Insert):
            shown = kind.value if _is_text(kind.value) else str(kind.value)
            out = "ins({})".format(str(shown).replace("\n", "⏎"))
        elif isinstance(kind, Retain):
            out = f"ret({kind.length})"
        else:
            out = f"del({kind.length})"
        attrs = self.attributes
        if attrs is not None:
            out += f" + {attrs}"
        return out


__all__ = ["Op", "OpKind", "OpType", "Insert", "Retain", "Delete"]
