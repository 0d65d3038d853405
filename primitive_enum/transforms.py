"""
Built-in Transforms
===================

Pure functions that generate enum values.

For sequence input a transform is called as ``transform(key, index)``;
for mapping input as ``transform(raw_value, key)``. Any callable with
that shape can be used in place of these.
"""

import re
from typing import Any, Callable, Union

# Enum values are strings or finite numbers
Value = Union[str, int, float]

# Type alias for value transforms
Transform = Callable[[Any, Any], Value]

_SEPARATOR_RUN = re.compile(r"[ _]+")


def identity(entry: Any, _: Any = None) -> Any:
    """Value equals the input entry verbatim."""
    return entry


def sequence(_: Any, index: int) -> int:
    """
    1-based positional integer. For sequence input only; mapping input
    passes the key string as the second argument.

    Note: never use 0 as an enum value, it is falsy.
    """
    return index + 1


# Alias kept for callers that spell it out
sequential = sequence


def bitwise(_: Any, index: int) -> int:
    """Single-bit flags starting at 1: 1, 2, 4, 8, ... (sequence input only)."""
    return 1 << index


def id_string(key: str, _: Any = None) -> str:
    """
    CONSTANT_KEY => constant-key.

    Lowercases the key and replaces each run of underscores or spaces
    with a single hyphen.
    """
    return _SEPARATOR_RUN.sub("-", key.lower())
