"""
primitive-enum
==============

Immutable, bijective enums over primitive values. Provides:
- build_enum: Build an enum from a sequence of keys or a key -> value mapping
- PrimitiveEnum: The frozen enum, with two-way lookup and JSON support
- Built-in value transforms and a registry of named transforms
- Process-wide default transforms

Example:
    status = build_enum(["PENDING", "DONE"], id_string)
    status("PENDING")   # 'pending'
    status("done")      # 'DONE'
"""

__version__ = "0.1.0"

from primitive_enum.errors import (
    InvalidDefaultKey,
    InvalidInput,
    InvalidOptions,
    InvalidSerialization,
    InvalidTransform,
    NotBijective,
    PrimitiveEnumError,
)
from primitive_enum.transforms import bitwise, id_string, identity, sequence, sequential
from primitive_enum.registry import TransformRegistry, get_registry, register_transform
from primitive_enum.config import (
    EnumOptions,
    TransformDefaults,
    get_defaults,
    normalize_options,
    reset_default_transforms,
)
from primitive_enum.instance import PrimitiveEnum, stringify
from primitive_enum.builder import build_enum
from primitive_enum.serialization import from_json

__all__ = [
    # Errors
    "PrimitiveEnumError",
    "InvalidOptions",
    "InvalidTransform",
    "InvalidInput",
    "NotBijective",
    "InvalidDefaultKey",
    "InvalidSerialization",
    # Transforms
    "identity",
    "sequence",
    "sequential",
    "bitwise",
    "id_string",
    "TransformRegistry",
    "get_registry",
    "register_transform",
    # Config
    "TransformDefaults",
    "EnumOptions",
    "get_defaults",
    "normalize_options",
    "reset_default_transforms",
    # Enum
    "PrimitiveEnum",
    "stringify",
    "build_enum",
    "from_json",
    "__version__",
]
