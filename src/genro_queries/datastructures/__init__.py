# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Data structures for query parameters.

This package provides an ordered string-keyed collection and the query
parameter class built on it. Raw query strings are plain text; these
classes add ordered storage, strict and non-raising operations and typed
access.

Mapping from raw data to genro-queries classes::

    Raw Data                               genro-queries Classes
    ─────────────────                      ─────────────────────
    [("a", "1"), ("b", "2")]               →  OrderedCollection
    "a=1&b[x]=2"                           →  QueryParams (parsed)
    scope["query_string"] = b"a=1&b=2"     →  QueryParams (parsed)
    params.queries()                       →  ReadonlyCollection (view)

Public Exports
==============
::

    from genro_queries.datastructures import (
        OrderedCollection,
        ReadonlyCollection,
        QueryParams,
        query_params_from_scope,
    )

Modules
=======
- ``collection``: Ordered collection and its read-only view
- ``query_params``: Query parameters with typed access and codec
"""

from .collection import OrderedCollection, ReadonlyCollection
from .query_params import QueryParams, query_params_from_scope

__all__ = [
    "OrderedCollection",
    "ReadonlyCollection",
    "QueryParams",
    "query_params_from_scope",
]
