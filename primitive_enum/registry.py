"""
Transform Registry
==================

Registry of named value transforms.

Lets options records (and default-transform settings) refer to a
transform by name, e.g. ``{"transform": "bitwise"}``.
"""

import logging
from typing import Callable, Optional

from primitive_enum import transforms
from primitive_enum.errors import InvalidTransform
from primitive_enum.transforms import Transform

logger = logging.getLogger(__name__)


class TransformRegistry:
    """
    Registry for value transforms.

    Provides a central location to register and look up transforms
    by name.

    Example:
        registry = TransformRegistry()

        # Register directly
        registry.register("bitwise", transforms.bitwise)

        # Register with the global decorator
        @register_transform("reversed")
        def reversed_key(key, index):
            return key[::-1]

        # Look up
        fn = registry.get("bitwise")
    """

    def __init__(self):
        """Initialize empty registry."""
        self._transforms: dict[str, Transform] = {}

    # =========================================================================
    # Registration
    # =========================================================================

    def register(self, name: str, transform: Transform) -> None:
        """
        Register a transform function.

        Args:
            name: Unique name for the transform.
            transform: Callable producing enum values.

        Raises:
            ValueError: If name is already registered.
            InvalidTransform: If transform is not callable.
        """
        if name in self._transforms:
            raise ValueError(f"Transform '{name}' is already registered")
        if not callable(transform):
            raise InvalidTransform(
                f"Cannot register '{name}': {type(transform).__name__} is not callable"
            )

        self._transforms[name] = transform
        logger.debug(f"Registered transform: {name}")

    def unregister(self, name: str) -> None:
        """
        Unregister a transform.

        Args:
            name: Name of transform to unregister.
        """
        if self._transforms.pop(name, None) is not None:
            logger.debug(f"Unregistered transform: {name}")

    # =========================================================================
    # Discovery
    # =========================================================================

    def list_transforms(self) -> list[str]:
        """
        List all registered transform names.

        Returns:
            Sorted list of transform names.
        """
        return sorted(self._transforms)

    def has_transform(self, name: str) -> bool:
        """Check if a transform is registered."""
        return name in self._transforms

    def get(self, name: str) -> Transform:
        """
        Get a registered transform.

        Args:
            name: Registered transform name.

        Returns:
            Transform function.

        Raises:
            InvalidTransform: If transform is not registered.
        """
        try:
            return self._transforms[name]
        except KeyError:
            available = self.list_transforms()
            raise InvalidTransform(
                f"Transform '{name}' is not registered. "
                f"Available transforms: {available}"
            ) from None


def _register_builtins(registry: TransformRegistry) -> None:
    registry.register("identity", transforms.identity)
    registry.register("sequence", transforms.sequence)
    registry.register("sequential", transforms.sequential)
    registry.register("bitwise", transforms.bitwise)
    registry.register("id_string", transforms.id_string)
    registry.register("idString", transforms.id_string)


# Global registry instance
_global_registry: Optional[TransformRegistry] = None


def get_registry() -> TransformRegistry:
    """
    Get the global transform registry.

    Creates the registry on first access, with the built-in
    transforms already registered.

    Returns:
        Global TransformRegistry instance.
    """
    global _global_registry
    if _global_registry is None:
        _global_registry = TransformRegistry()
        _register_builtins(_global_registry)
    return _global_registry


def register_transform(name: str) -> Callable[[Transform], Transform]:
    """
    Decorator to register a transform with the global registry.

    Example:
        @register_transform("upper")
        def upper(key, index):
            return key.upper()

    Args:
        name: Unique name for the transform.

    Returns:
        Function decorator.
    """
    def decorator(fn: Transform) -> Transform:
        get_registry().register(name, fn)
        return fn
    return decorator
