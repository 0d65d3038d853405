"""
Pytest configuration and fixtures for all tests.
"""
import pytest

from primitive_enum import bitwise, build_enum, reset_default_transforms


@pytest.fixture(autouse=True)
def default_transforms():
    """
    Reset the process-wide default transforms around every test.

    Tests that reassign defaults would otherwise leak into each other.
    """
    reset_default_transforms()
    yield
    reset_default_transforms()


@pytest.fixture
def seq_enum():
    """Sequence-valued enum a=1 ... f=6."""
    return build_enum(["a", "b", "c", "d", "e", "f"])


@pytest.fixture
def bit_enum(seq_enum):
    """Bitwise enum over the same keys as seq_enum."""
    return build_enum(seq_enum.keys, bitwise)


@pytest.fixture
def map_enum():
    """Mapping enum with non-alphabetical key order."""
    return build_enum({"a": "x", "c": "z", "b": "y"})
