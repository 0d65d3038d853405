"""
Errors
======

Exceptions raised while building or decoding enums.

Each error also derives from the builtin exception a caller would
naturally expect (TypeError for bad arguments, ValueError for bad data),
so ``except ValueError`` keeps working for callers that don't care about
the specific kind.
"""


class PrimitiveEnumError(Exception):
    """Base class for all primitive-enum errors."""


class InvalidOptions(PrimitiveEnumError, TypeError):
    """Options argument is not a transform, default key, record, or None."""


class InvalidTransform(PrimitiveEnumError, TypeError):
    """Resolved transform is not callable (or names no registered transform)."""


class InvalidInput(PrimitiveEnumError, TypeError):
    """Input is not a usable sequence/mapping, or yields a bad key or value."""


class NotBijective(PrimitiveEnumError, ValueError):
    """A key or value duplicates an unrelated key or value."""


class InvalidDefaultKey(PrimitiveEnumError, ValueError):
    """Requested default key is not one of the enum keys."""


class InvalidSerialization(PrimitiveEnumError, ValueError):
    """Input to from_json is not a serialized PrimitiveEnum."""
