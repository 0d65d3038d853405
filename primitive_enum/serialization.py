"""
Serialization
=============

Decoder for the JSON record written by PrimitiveEnum.to_json():

    {"type": "PrimitiveEnum", "map": {"a": "x", ...}, "defaultKey": "a"}

The record only stores the forward map and the default key; keys,
values and the reverse map are rebuilt by build_enum.
"""

import json
from collections.abc import Mapping
from typing import Any, Union

from primitive_enum.builder import build_enum
from primitive_enum.errors import InvalidSerialization
from primitive_enum.instance import TYPE_TAG, PrimitiveEnum
from primitive_enum.transforms import identity


def from_json(data: Union[str, bytes, bytearray, Mapping[str, Any]]) -> PrimitiveEnum:
    """
    Rebuild an enum from its JSON text or already-parsed record.

    Args:
        data: JSON text, or the parsed record.

    Returns:
        PrimitiveEnum equal to the one that was serialized.

    Raises:
        InvalidSerialization: If data does not parse or is not a
            PrimitiveEnum record.
        PrimitiveEnumError: Any build error for a malformed map.
    """
    if isinstance(data, (str, bytes, bytearray)):
        try:
            data = json.loads(data)
        except ValueError as exc:  # JSONDecodeError, or undecodable bytes
            raise InvalidSerialization(f"Input is not valid JSON: {exc}") from exc

    if not isinstance(data, Mapping) or data.get("type") != TYPE_TAG:
        raise InvalidSerialization(f"Input is not a serialized {TYPE_TAG}")

    enum_map = data.get("map")
    if not isinstance(enum_map, Mapping):
        raise InvalidSerialization(f"Serialized {TYPE_TAG} has no 'map' object")

    # Stored values are final, so the default transforms must not apply
    return build_enum(enum_map, {"transform": identity, "defaultKey": data.get("defaultKey")})
