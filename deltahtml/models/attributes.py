"""
Formatting attributes attached to insert and retain operations.

An ``AttributesMap`` is an ordered mapping with unique string keys and
JSON-like values (``{"bold": true, "header": 2}``). The map itself carries no
rendering logic; consumers read it through ``get`` and ``is_empty``.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterator, Optional

from pydantic import ConfigDict, Field, JsonValue, RootModel, model_validator


class AttributesMap(RootModel[Dict[str, JsonValue]]):
    model_config = ConfigDict(frozen=True)

    root: Dict[str, JsonValue] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _none_is_empty(cls, obj):
        # RootModel 'before' validators return the underlying value
        return {} if obj is None else obj

    @classmethod
    def of(cls, **values: Any) -> "AttributesMap":
        """Shorthand constructor: ``AttributesMap.of(bold=True)``."""
        return cls(values)

    def get(self, key: str, default: Optional[JsonValue] = None) -> Optional[JsonValue]:
        return self.root.get(key, default)

    def is_empty(self) -> bool:
        return not self.root

    def to_dict(self) -> Dict[str, JsonValue]:
        return dict(self.root)

    def keys(self):
        return self.root.keys()

    def items(self):
        return self.root.items()

    def __getitem__(self, key: str) -> JsonValue:
        return self.root[key]

    def __contains__(self, key: object) -> bool:
        return key in self.root

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __str__(self) -> str:
        return json.dumps(self.root, ensure_ascii=False)


def coerce_attributes(value: Any) -> AttributesMap:
    """Accept ``None``, a plain mapping or an ``AttributesMap``."""
    if isinstance(value, AttributesMap):
        return value
    return AttributesMap.model_validate(value)


__all__ = ["AttributesMap", "coerce_attributes"]
