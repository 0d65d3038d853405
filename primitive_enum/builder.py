"""
Enum Builder
============

Builds PrimitiveEnum instances from a sequence of keys or a mapping of
keys to raw values.

Usage:
    build_enum(["a", "b"])                       # a=1, b=2
    build_enum(["a", "b"], bitwise)              # a=1, b=2, c=4 ...
    build_enum({"a": "x", "b": "y"}, "b")        # default key 'b'
    build_enum({"a": 1}, {"transform": "identity", "defaultKey": "a"})
"""

import logging
import math
from collections.abc import Iterable, Mapping
from typing import Any, Union

from primitive_enum.config import EnumOptions, get_defaults, normalize_options
from primitive_enum.errors import (
    InvalidDefaultKey,
    InvalidInput,
    InvalidTransform,
    NotBijective,
)
from primitive_enum.instance import PrimitiveEnum, stringify
from primitive_enum.transforms import Transform, Value

logger = logging.getLogger(__name__)

EnumInput = Union[Iterable[str], Mapping[str, Any]]


def _select_transform(is_mapping: bool, opts: EnumOptions) -> Transform:
    transform = opts.transform
    if transform is None:
        defaults = get_defaults()
        preferred = defaults.object_transform if is_mapping else defaults.array_transform
        transform = preferred or defaults.fallback_transform
    if not callable(transform):
        raise InvalidTransform(f"Invalid transform: {type(transform).__name__} is not callable")
    return transform


def _apply(transform: Transform, entry: Any, position: Any) -> Any:
    """Call transform, reporting argument mismatches as InvalidTransform."""
    try:
        return transform(entry, position)
    except TypeError as exc:
        # e.g. sequence/bitwise given a string key from mapping input
        name = getattr(transform, "__name__", type(transform).__name__)
        raise InvalidTransform(
            f"Transform '{name}' failed on ({entry!r}, {position!r}): {exc}"
        ) from exc


def _check_value(key: str, value: Any) -> None:
    if isinstance(value, str):
        return
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInput(
            f"Value for key '{key}' must be a string or number, got {type(value).__name__}"
        )
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidInput(f"Value for key '{key}' must be finite, got {value!r}")
    if isinstance(value, int):
        try:
            stringify(value)
        except ValueError as exc:  # exceeds the int-to-str digit limit
            raise InvalidInput(f"Value for key '{key}' is too large: {exc}") from exc
    if value == 0:
        logger.warning(f"Enum value 0 for key '{key}' is falsy; prefer non-zero values")


class _EnumAssembler:
    """Accumulates bijective key/value pairs in insertion order."""

    def __init__(self):
        self.keys: list[str] = []
        self.values: list[Value] = []
        self.map: dict[str, Value] = {}
        self.reverse_map: dict[str, str] = {}

    def _in_use(self, text: str) -> bool:
        return text in self.map or text in self.reverse_map

    def add(self, key: Any, value: Any) -> None:
        if not isinstance(key, str) or not key:
            raise InvalidInput(f"Enum keys must be non-empty strings, got {key!r}")
        _check_value(key, value)

        # A key or value may not appear twice on one side, nor on both
        # sides unless as part of the same pair.
        value_text = stringify(value)
        if self._in_use(key):
            raise NotBijective(
                f"Enum must be bijective with keys distinctive from values: "
                f"key '{key}' is already in use"
            )
        if value_text != key and self._in_use(value_text):
            raise NotBijective(
                f"Enum must be bijective with keys distinctive from values: "
                f"value '{value_text}' of key '{key}' is already in use"
            )

        self.keys.append(key)
        self.values.append(value)
        self.map[key] = value
        self.reverse_map[value_text] = key

    def default_index(self, default_key: Any) -> int:
        if default_key is None:
            return 0
        try:
            return self.keys.index(default_key)
        except ValueError:
            raise InvalidDefaultKey(
                f"Invalid default key '{default_key}'. Available keys: {self.keys}"
            ) from None


def build_enum(input_map: EnumInput, options: Any = None) -> PrimitiveEnum:
    """
    Build an immutable, bijective enum.

    Args:
        input_map: Either an iterable of keys (values generated by
            ``transform(key, index)``) or a mapping of keys to raw values
            (values generated by ``transform(raw_value, key)``).
        options: A transform, a default key, an options record with
            ``transform``/``defaultKey``, or None. See normalize_options.

    Returns:
        PrimitiveEnum instance.

    Raises:
        InvalidOptions: If options has an unsupported shape.
        InvalidTransform: If the selected transform is not callable, or
            rejects its arguments with a TypeError.
        InvalidInput: If input is empty, not a sequence or mapping, or
            yields a bad key or non-scalar value.
        NotBijective: If a key or value collides with another key or value.
        InvalidDefaultKey: If the default key is not among the keys.
    """
    opts = normalize_options(options)

    if isinstance(input_map, Mapping):
        is_mapping = True
    elif isinstance(input_map, (str, bytes)) or not isinstance(input_map, Iterable):
        raise InvalidInput(
            f"Enum input must be a sequence of keys or a mapping, "
            f"got {type(input_map).__name__}"
        )
    else:
        is_mapping = False

    transform = _select_transform(is_mapping, opts)
    assembler = _EnumAssembler()

    if is_mapping:
        for key, raw_value in input_map.items():
            assembler.add(key, _apply(transform, raw_value, key))
    else:
        for index, key in enumerate(input_map):
            assembler.add(key, _apply(transform, key, index))

    if not assembler.keys:
        raise InvalidInput("Enum input must contain at least one key")

    default_index = assembler.default_index(opts.default_key)

    enum = PrimitiveEnum(
        keys=tuple(assembler.keys),
        values=tuple(assembler.values),
        map=assembler.map,
        reverse_map=assembler.reverse_map,
        default_index=default_index,
    )
    logger.debug(f"Built PrimitiveEnum with {enum.count} members (default={enum.default_key!r})")
    return enum
