"""
Configuration
=============

Process-wide default transforms and per-build options.

The defaults are shared by every build in the process and are not
guarded by a lock: set them once at start-up and treat them as
read-only afterwards.
"""

import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from primitive_enum.errors import InvalidOptions, InvalidTransform
from primitive_enum.registry import get_registry
from primitive_enum.transforms import identity, sequence

logger = logging.getLogger(__name__)


def _coerce_transform(value: Any) -> Optional[Callable[..., Any]]:
    """Resolve a transform setting to a callable (or None for unset)."""
    if value is None or callable(value):
        return value
    if isinstance(value, str):
        return get_registry().get(value)
    raise InvalidTransform(f"Invalid transform: {type(value).__name__} is not callable")


class TransformDefaults(BaseModel):
    """Default transforms used when a build supplies none."""
    model_config = ConfigDict(validate_assignment=True)

    array_transform: Optional[Callable[..., Any]] = Field(
        default=sequence, description="Applied to sequence input when no transform is given"
    )
    object_transform: Optional[Callable[..., Any]] = Field(
        default=None, description="Applied to mapping input when no transform is given"
    )
    # Changing not recommended
    fallback_transform: Optional[Callable[..., Any]] = Field(
        default=identity, description="Used when the input-specific default is unset"
    )

    @field_validator("array_transform", "object_transform", "fallback_transform", mode="before")
    @classmethod
    def _resolve(cls, value: Any) -> Optional[Callable[..., Any]]:
        return _coerce_transform(value)

    def reset(self) -> None:
        """Restore all three defaults to their initial values."""
        for name, field in type(self).model_fields.items():
            setattr(self, name, field.default)
        logger.debug("Default transforms reset")


class EnumOptions(BaseModel):
    """Normalized options for a single build."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    transform: Optional[Callable[..., Any]] = None
    default_key: Optional[str] = Field(default=None, alias="defaultKey")

    @field_validator("transform", mode="before")
    @classmethod
    def _resolve(cls, value: Any) -> Optional[Callable[..., Any]]:
        return _coerce_transform(value)


def normalize_options(options: Any = None) -> EnumOptions:
    """
    Coerce the options argument of build_enum into EnumOptions.

    Args:
        options: One of
            - a callable: used as the transform
            - a string: used as the default key
            - a mapping (or EnumOptions) with ``transform`` and/or
              ``defaultKey``/``default_key``
            - None: no options

    Returns:
        Normalized EnumOptions.

    Raises:
        InvalidOptions: If options has any other shape, or a record
            field has the wrong type.
        InvalidTransform: If a record names a transform that is not
            callable or not registered.
    """
    if options is None:
        return EnumOptions()
    if isinstance(options, EnumOptions):
        return options
    if isinstance(options, str):
        return EnumOptions(default_key=options)
    if isinstance(options, Mapping):
        try:
            return EnumOptions.model_validate(dict(options))
        except ValidationError as exc:
            raise InvalidOptions(f"Invalid options record: {exc}") from exc
    if callable(options):
        return EnumOptions(transform=options)
    raise InvalidOptions(f"Invalid options argument: {type(options).__name__}")


# Global defaults instance
_defaults: Optional[TransformDefaults] = None


def get_defaults() -> TransformDefaults:
    """
    Get the process-wide default transforms.

    Creates them on first access.

    Returns:
        Global TransformDefaults instance.
    """
    global _defaults
    if _defaults is None:
        _defaults = TransformDefaults()
    return _defaults


def reset_default_transforms() -> None:
    """Restore the process-wide default transforms (mainly for tests)."""
    get_defaults().reset()
