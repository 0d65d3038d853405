"""
Unit Tests for Transforms and Registry
======================================

Tests for built-in transforms, the transform registry, and the
process-wide default transforms.
"""

import pytest

from primitive_enum import (
    InvalidTransform,
    TransformDefaults,
    TransformRegistry,
    bitwise,
    build_enum,
    get_defaults,
    get_registry,
    id_string,
    identity,
    register_transform,
    reset_default_transforms,
    sequence,
    sequential,
)


class TestBuiltinTransforms:
    """Tests for the built-in value transforms."""

    def test_identity(self):
        """Test identity returns the entry unchanged."""
        assert identity("a", 3) == "a"
        assert identity(42, "key") == 42

    def test_sequence(self):
        """Test sequence is 1-based."""
        assert [sequence(k, i) for i, k in enumerate("abc")] == [1, 2, 3]
        assert sequential is sequence

    def test_bitwise(self):
        """Test bitwise produces single-bit flags."""
        assert [bitwise(None, i) for i in range(6)] == [1, 2, 4, 8, 16, 32]

    def test_id_string(self):
        """Test id_string lower-kebabs keys."""
        assert id_string("FIRST_KEY") == "first-key"
        assert id_string("Two  Words") == "two-words"
        assert id_string("MIXED _ RUN__end") == "mixed-run-end"


class TestTransformRegistry:
    """Tests for the named transform registry."""

    def test_registry_register(self):
        """Test registering a transform."""
        registry = TransformRegistry()
        registry.register("reversed", lambda key, idx: key[::-1])

        assert registry.has_transform("reversed")
        assert registry.get("reversed")("abc", 0) == "cba"

    def test_registry_duplicate_registration(self):
        """Test that duplicate registration raises error."""
        registry = TransformRegistry()
        registry.register("same_name", identity)

        with pytest.raises(ValueError, match="already registered"):
            registry.register("same_name", sequence)

    def test_registry_rejects_non_callable(self):
        """Test that only callables can be registered."""
        registry = TransformRegistry()

        with pytest.raises(InvalidTransform):
            registry.register("broken", "not a function")

    def test_registry_unknown_name(self):
        """Test lookup of an unknown name lists what is available."""
        registry = TransformRegistry()
        registry.register("known", identity)

        with pytest.raises(InvalidTransform, match="known"):
            registry.get("missing")

    def test_registry_list_and_unregister(self):
        """Test listing and unregistering transforms."""
        registry = TransformRegistry()
        registry.register("transform_b", identity)
        registry.register("transform_a", sequence)

        assert registry.list_transforms() == ["transform_a", "transform_b"]

        registry.unregister("transform_a")
        registry.unregister("never_registered")
        assert registry.list_transforms() == ["transform_b"]

    def test_global_registry_builtins(self):
        """Test the global registry ships the built-in transforms."""
        registry = get_registry()

        for name in ("identity", "sequence", "sequential", "bitwise", "id_string", "idString"):
            assert registry.has_transform(name)
        assert registry.get("bitwise") is bitwise

    def test_global_registry_decorator(self):
        """Test the @register_transform decorator."""
        @register_transform("test_upper")
        def upper(key, idx):
            return key.upper()

        try:
            assert get_registry().get("test_upper") is upper
            assert build_enum(["a", "b"], {"transform": "test_upper"}).values == ("A", "B")
        finally:
            get_registry().unregister("test_upper")


class TestDefaultTransforms:
    """Tests for the process-wide default transforms."""

    def test_initial_defaults(self):
        """Test defaults start as sequence / unset / identity."""
        defaults = get_defaults()

        assert defaults.array_transform is sequence
        assert defaults.object_transform is None
        assert defaults.fallback_transform is identity

    def test_configure_object_default(self):
        """Test the mapping-input default transform."""
        get_defaults().object_transform = lambda raw, key: key.upper()

        assert dict(build_enum({"a": 1, "b": 2}).map) == {"a": "A", "b": "B"}

    def test_configure_array_default(self):
        """Test the sequence-input default transform."""
        get_defaults().array_transform = lambda key, idx: key.upper()

        assert dict(build_enum(["a", "b"]).map) == {"a": "A", "b": "B"}

    def test_fallback_used_when_unset(self):
        """Test the fallback applies when the input default is unset."""
        defaults = get_defaults()
        defaults.array_transform = None
        defaults.fallback_transform = id_string

        assert build_enum(["FIRST_KEY"]).values == ("first-key",)

    def test_default_by_name(self):
        """Test defaults accept a registered transform name."""
        get_defaults().array_transform = "bitwise"

        assert get_defaults().array_transform is bitwise
        assert build_enum(["a", "b", "c"]).values == (1, 2, 4)

    def test_default_rejects_non_callable(self):
        """Test assigning a non-callable default fails immediately."""
        with pytest.raises(InvalidTransform):
            get_defaults().array_transform = 42

        assert get_defaults().array_transform is sequence

    def test_missing_fallback_is_invalid_transform(self):
        """Test a build with no usable transform fails."""
        get_defaults().fallback_transform = None

        with pytest.raises(InvalidTransform):
            build_enum({"a": 1})

    def test_reset(self):
        """Test reset restores all defaults."""
        defaults = get_defaults()
        defaults.array_transform = bitwise
        defaults.object_transform = id_string
        defaults.fallback_transform = sequence

        reset_default_transforms()

        assert defaults.array_transform is sequence
        assert defaults.object_transform is None
        assert defaults.fallback_transform is identity

    def test_independent_instance(self):
        """Test a standalone TransformDefaults has the initial values."""
        assert TransformDefaults().array_transform is sequence

    def test_id_string_alias_in_record(self):
        """Test the camelCase transform name resolves in an options record."""
        e = build_enum(["FIRST_KEY"], {"transform": "idString"})

        assert get_registry().get("idString") is id_string
        assert e.values == ("first-key",)
