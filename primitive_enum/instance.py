"""
PrimitiveEnum Instance
======================

The immutable enum produced by build_enum.

An instance binds an ordered tuple of string keys to a parallel tuple
of scalar values and supports lookup in both directions:

    colors = build_enum({"red": "r", "green": "g"})
    colors("red")          # 'r'
    colors("g")            # 'green'
    colors.value("red")    # 'r'  (keys only)
    colors.key("g")        # 'green'  (values only)

Lookups go through stringify(), so ``e(4)`` and ``e("4")`` are the same
lookup.
"""

import json
import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Optional

from primitive_enum.transforms import Value

# Type tag written by to_json and required by from_json
TYPE_TAG = "PrimitiveEnum"


def stringify(item: Any) -> str:
    """
    Canonical string form used for every key/value comparison.

    Integral floats drop their fractional part so that ``4.0`` and ``4``
    compare equal, and booleans render as ``true``/``false``.
    """
    if isinstance(item, str):
        return item
    if isinstance(item, bool):
        return "true" if item else "false"
    if isinstance(item, float) and math.isfinite(item) and item.is_integer():
        return str(int(item))
    if isinstance(item, float):
        return repr(item)
    return str(item)


@dataclass(frozen=True, eq=False, repr=False)
class PrimitiveEnum:
    """
    Immutable bijective enumeration.

    Instances are normally created with build_enum() or from_json();
    direct construction only checks the shape of the fields, not
    bijectivity.
    """
    keys: tuple[str, ...]
    values: tuple[Value, ...]
    map: Mapping[str, Value]  # key -> value, read-only
    reverse_map: Mapping[str, str]  # stringify(value) -> key, read-only
    default_index: int = 0

    def __post_init__(self):
        # Copy into immutable containers so callers' lists/dicts can't leak in
        object.__setattr__(self, "keys", tuple(self.keys))
        object.__setattr__(self, "values", tuple(self.values))
        object.__setattr__(self, "map", MappingProxyType(dict(self.map)))
        object.__setattr__(self, "reverse_map", MappingProxyType(dict(self.reverse_map)))

        if not self.keys:
            raise ValueError("PrimitiveEnum requires at least one key")
        if len(self.keys) != len(self.values):
            raise ValueError(
                f"PrimitiveEnum keys and values differ in length: "
                f"{len(self.keys)} != {len(self.values)}"
            )
        if not 0 <= self.default_index < len(self.keys):
            raise ValueError(f"Default index {self.default_index} out of range")

    # =========================================================================
    # Lookups
    # =========================================================================

    def __call__(self, lookup: Any) -> Optional[Any]:
        """
        Look up in either direction.

        Returns the value paired with a matching key, else the key paired
        with a matching value, else None.
        """
        text = stringify(lookup)
        if text in self.map:
            return self.map[text]
        return self.reverse_map.get(text)

    def key(self, value: Any) -> Optional[str]:
        """Key paired with value, or None. Never matches keys."""
        return self.reverse_map.get(stringify(value))

    def value(self, key: Any) -> Optional[Value]:
        """Value paired with key, or None. Never matches values."""
        return self.map.get(stringify(key))

    # =========================================================================
    # Introspection
    # =========================================================================

    @property
    def count(self) -> int:
        """Number of members."""
        return len(self.keys)

    @property
    def default_key(self) -> str:
        return self.keys[self.default_index]

    @property
    def default_value(self) -> Value:
        return self.values[self.default_index]

    def __len__(self) -> int:
        return len(self.keys)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys)

    def __contains__(self, key: Any) -> bool:
        return stringify(key) in self.map

    # =========================================================================
    # Representations
    # =========================================================================

    def to_json(self) -> dict[str, Any]:
        """
        JSON-ready record.

        Returns:
            ``{"type": "PrimitiveEnum", "map": {...}, "defaultKey": ...}``
            with a plain-dict copy of the map in key order.
        """
        return {"type": TYPE_TAG, "map": dict(self.map), "defaultKey": self.default_key}

    def dumps(self, **kwargs: Any) -> str:
        """Serialize to JSON text. Keyword arguments go to json.dumps."""
        return json.dumps(self.to_json(), **kwargs)

    def __str__(self) -> str:
        keys = ",".join(self.keys)
        values = ",".join(stringify(v) for v in self.values)
        return f"[Function: {TYPE_TAG}] {keys}|{values}|{self.default_index}"

    def __repr__(self) -> str:
        return f"{TYPE_TAG}({dict(self.map)!r}, default_key={self.default_key!r})"

    # Equal string forms are observationally equivalent
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrimitiveEnum):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))
