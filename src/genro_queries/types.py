# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Type definitions for genro-queries.

Purpose
=======
This module defines the value types stored in collections and query
parameters, plus the small protocol shared by every object that can be
converted to a plain ordered dict.

A query parameter value is either a single string or a nested map of
strings, mirroring bracket-nested keys in a query string::

    "a=1"             →  {"a": "1"}
    "a[b]=1&a[c]=2"   →  {"a": {"b": "1", "c": "2"}}
    "a[]=x&a[]=y"     →  {"a": {"0": "x", "1": "y"}}

Type Definitions
================

QueryValue : str | NestedMap
    A single parameter value. The two shapes are told apart with
    ``isinstance(value, str)``; everything else is a ``NestedMap``.

    Definition::

        QueryValue = Union[str, "NestedMap"]

NestedMap : dict[str, QueryValue]
    A bracket-nested parameter value. Keys are always strings, including
    the integer indexes produced by ``name[]`` (``"0"``, ``"1"``, ...).

    Definition::

        NestedMap = dict[str, QueryValue]

Scope : Mapping[str, Any]
    Read-only view of an ASGI connection scope; only ``query_string`` is
    read from it.

Arrayable : Protocol
    Objects exposing ``to_dict()`` returning a plain ordered dict.
    ``OrderedCollection``, ``ReadonlyCollection`` and ``QueryParams``
    all satisfy it.

Design Decisions
================
1. **Union alias instead of wrapper classes**: values stay plain ``str``
   and ``dict`` so they can be compared, copied and serialized without
   unwrapping. Coercion helpers dispatch on ``isinstance(value, str)``.

2. **runtime_checkable Protocol**: ``isinstance(obj, Arrayable)`` lets
   the codec accept any object exposing ``to_dict()``.
"""

from collections.abc import Mapping
from typing import Any, Protocol, Union, runtime_checkable

__all__ = ["QueryValue", "NestedMap", "Scope", "Arrayable"]

# Single parameter value
QueryValue = Union[str, "NestedMap"]

# Bracket-nested value
NestedMap = dict[str, QueryValue]

# ASGI scope, read-only
Scope = Mapping[str, Any]


@runtime_checkable
class Arrayable(Protocol):
    """Object convertible to a plain ordered dict."""

    def to_dict(self) -> dict[str, Any]: ...
