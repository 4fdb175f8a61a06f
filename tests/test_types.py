# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Tests for type definitions.

These tests verify the type aliases and protocol defined in genro_queries.types.
Tests cover:
- Import availability and __all__ exports
- Arrayable protocol checks
"""

from genro_queries.datastructures import OrderedCollection, QueryParams
from genro_queries.types import Arrayable, NestedMap, QueryValue, Scope


class TestTypeImports:
    """Test that all types are importable and correctly defined."""

    def test_all_types_importable(self):
        """Verify all types are importable from the module."""
        assert QueryValue is not None
        assert NestedMap is not None
        assert Scope is not None
        assert Arrayable is not None

    def test_all_exports(self):
        """Verify __all__ contains exactly the expected exports."""
        from genro_queries import types

        assert set(types.__all__) == {"QueryValue", "NestedMap", "Scope", "Arrayable"}


class TestArrayable:
    """Test the Arrayable protocol."""

    def test_collections_are_arrayable(self):
        """Collections, views and QueryParams expose to_dict()."""
        coll = OrderedCollection({"a": "1"})
        assert isinstance(coll, Arrayable)
        assert isinstance(coll.as_readonly(), Arrayable)
        assert isinstance(QueryParams(), Arrayable)

    def test_plain_dict_is_not_arrayable(self):
        """A dict has no to_dict() method."""
        assert not isinstance({"a": "1"}, Arrayable)
