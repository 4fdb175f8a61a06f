# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Query string parameters with typed access and bracket-nested values.

Purpose
=======
Query parameters are case-sensitive and unique per name. Each value is a
string or a nested map of strings (``a[b]=1``). ``QueryParams`` owns one
``OrderedCollection`` and adds typed getters plus conversion to and from
a query string.

This module provides:
- ``QueryParams``: Typed façade over an ordered parameter collection
- ``query_params_from_scope()``: Factory to create QueryParams from ASGI scope

ASGI Mapping::

    scope["query_string"] = b"a=1&b[x]=2"  →  QueryParams (parsed)

Parsing Schema::

    Query string: "name=john&page=2&filter[tag]=py&empty="
                        ↓
            QueryParams.parse_query_string
                        ↓
    Entries (insertion ordered): {
        "name": "john",
        "page": "2",
        "filter": {"tag": "py"},
        "empty": ""
    }
                        ↓
    params.get("name")               → "john"
    params.get_as_integer("page")    → 2
    params.get_as_array("filter")    → {"tag": "py"}
    params.get_as_bool("empty")      → False
    params.try_get("missing")        → None
    str(params)                      → "name=john&page=2&filter[tag]=py&empty="

Strict vs Non-raising::

    +------------------+--------------------+---------------------------+
    | Strict           | Non-raising        | Strict failure            |
    +------------------+--------------------+---------------------------+
    | get(key)         | try_get(key, d)    | KeyNotFound               |
    | add(key, value)  | try_add(key, value)| DuplicateKey              |
    | remove(key)      | try_remove(key)    | KeyNotFound               |
    | params[key]      | key in params      | KeyNotFound               |
    +------------------+--------------------+---------------------------+

Definition::

    class QueryParams:
        __slots__ = ("_params",)

        def __init__(self, params: Mapping | Iterable[tuple] | None = None) -> None
        def contains_key(self, key: str) -> bool
        def contains_value(self, value: object) -> bool
        def queries(self) -> ReadonlyCollection[QueryValue]
        def get(self, key: str) -> QueryValue
        def try_get(self, key: str, default: Any = None) -> Any
        def get_as_string(self, key: str, default: str = "") -> str
        def get_as_integer(self, key: str, default: int = 0) -> int
        def get_as_float(self, key: str, default: float = 0.0) -> float
        def get_as_bool(self, key: str, default: bool = False) -> bool
        def get_as_array(self, key: str, default: Mapping | None = None) -> NestedMap
        def get_as_datetime(self, key: str, default: datetime | None = None) -> datetime
        def add(self, key: str, value: Any) -> QueryParams
        def try_add(self, key: str, value: Any) -> bool
        def set(self, key: str, value: Any) -> QueryParams
        def remove(self, key: str) -> QueryParams
        def try_remove(self, key: str) -> bool
        def to_dict(self) -> dict[str, QueryValue]
        def to_string(self) -> str
        @classmethod
        def parse_query_string(cls, query_string, config=None) -> QueryParams

    def query_params_from_scope(scope: Scope) -> QueryParams

Example::

    from genro_queries.datastructures import QueryParams, query_params_from_scope

    params = QueryParams.parse_query_string("foo=bar&num=42")
    params.get_as_string("foo")            # "bar"
    params.get_as_integer("num")           # 42
    params.get_as_string("missing", "d")   # "d"

    params.set("page", 3).add("sort", "name")
    str(params)                            # "foo=bar&num=42&page=3&sort=name"

    scope = {"query_string": b"page=1&limit=10"}
    query_params_from_scope(scope).get_as_integer("limit")  # 10

Design Notes
============
- Uses ``__slots__`` for memory efficiency
- Composition: holds one ``OrderedCollection``, never shares it; a
  collection passed to the constructor is copied
- Every inserted value is normalised (``True`` → ``"1"``, ``None`` → ``""``,
  lists and mappings → nested maps); see ``genro_queries.coercion``
- Typed getters never raise; unparsable values give the zero value
- ``get_as_datetime`` computes "now" on every call when no default is given
- Mutators return ``self`` so calls can be chained; ``try_*`` return bool
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any, Iterator

from ..coercion import normalize_value, to_array, to_bool, to_float, to_integer, to_string
from ..config import CodecConfig
from ..exceptions import InvalidDateTime
from ..querystring import build_query_string, parse_query_string
from ..types import NestedMap, QueryValue, Scope
from .collection import OrderedCollection, ReadonlyCollection

__all__ = ["QueryParams", "query_params_from_scope"]


class QueryParams:
    """
    Query string parameters with typed access.

    Parameter names are case-sensitive and unique. Values are strings or
    nested maps of strings, in insertion order.

    Example:
        >>> params = QueryParams.parse_query_string("name=john&tags[]=a&tags[]=b")
        >>> params.get("name")
        'john'
        >>> params.get_as_array("tags")
        {'0': 'a', '1': 'b'}
        >>> params["name"]
        'john'
        >>> "tags" in params
        True
        >>> params.try_add("name", "jane")
        False
        >>> str(params.set("page", 2))
        'name=john&tags[0]=a&tags[1]=b&page=2'
    """

    __slots__ = ("_params",)

    def __init__(
        self,
        params: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None,
    ) -> None:
        """
        Initialize QueryParams from existing parameters.

        Args:
            params: A mapping, an iterable of ``(key, value)`` pairs or a
                    collection. Values are normalised to strings or nested
                    maps. Use ``parse_query_string`` to start from a raw
                    query string.
        """
        if params is None:
            pairs: Iterable[tuple[str, Any]] = ()
        elif isinstance(params, (Mapping, ReadonlyCollection)):
            pairs = params.items()
        else:
            pairs = params
        self._params: OrderedCollection[QueryValue] = OrderedCollection(
            (key, normalize_value(value)) for key, value in pairs
        )

    def contains_key(self, key: str) -> bool:
        """Check if a parameter exists (case-sensitive)."""
        return self._params.contains_key(key)

    def contains_value(self, value: object) -> bool:
        """Check if any parameter has this value; nested maps compare structurally."""
        return self._params.contains_value(value)

    def queries(self) -> ReadonlyCollection[QueryValue]:
        """
        Return a read-only live view of the parameters.

        Returns:
            A ``ReadonlyCollection`` sharing the parameters of this instance.
            It reflects later changes but cannot make any.
        """
        return self._params.as_readonly()

    def get(self, key: str) -> QueryValue:
        """
        Get a parameter value.

        Args:
            key: Parameter name (case-sensitive).

        Returns:
            The string or nested map stored under ``key``.

        Raises:
            KeyNotFound: If the parameter is not present.
        """
        return self._params.get(key)

    def try_get(self, key: str, default: Any = None) -> Any:
        """
        Get a parameter value, or ``default`` if not present.

        Args:
            key: Parameter name (case-sensitive).
            default: Value to return if the parameter is not found.

        Returns:
            The stored value, or ``default``.
        """
        return self._params.try_get(key, default)

    def get_as_string(self, key: str, default: str = "") -> str:
        """Get a parameter as ``str``; nested maps give ``""``."""
        return to_string(self._params.try_get(key, default))

    def get_as_integer(self, key: str, default: int = 0) -> int:
        """
        Get a parameter as ``int``.

        The leading number of the string is used (``"42abc"`` → 42,
        ``"4.7"`` → 4). Anything else gives 0.
        """
        return to_integer(self._params.try_get(key, default))

    def get_as_float(self, key: str, default: float = 0.0) -> float:
        """Get a parameter as ``float``; unparsable strings give 0.0."""
        return to_float(self._params.try_get(key, default))

    def get_as_bool(self, key: str, default: bool = False) -> bool:
        """
        Get a parameter as ``bool``.

        ``""``, ``"0"``, ``"false"``, ``"off"`` and ``"no"`` (trimmed,
        any case) are False; any other string is True. Nested maps are
        True when non-empty.
        """
        return to_bool(self._params.try_get(key, default))

    def get_as_array(self, key: str, default: Mapping[str, Any] | None = None) -> NestedMap:
        """
        Get a parameter as a nested map.

        A plain string value ``v`` gives ``{"0": v}``. The result is a copy.
        """
        return to_array(self._params.try_get(key, default))

    def get_as_datetime(self, key: str, default: datetime | None = None) -> datetime:
        """
        Get a parameter as ``datetime``.

        Args:
            key: Parameter name (case-sensitive).
            default: Returned when the parameter is missing or empty.
                     When None, the current moment is computed on each call.

        Returns:
            The parsed ISO 8601 value (a trailing ``Z`` means UTC), or the
            default.

        Raises:
            InvalidDateTime: If the value is a nested map, or is not empty
                and not ISO 8601.
        """
        value = self._params.try_get(key, "")
        if not isinstance(value, str):
            raise InvalidDateTime(build_query_string({key: value}))
        if not value:
            return default if default is not None else datetime.now()
        text = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
        try:
            return datetime.fromisoformat(text)
        except ValueError as exc:
            raise InvalidDateTime(value) from exc

    def add(self, key: str, value: Any) -> QueryParams:
        """
        Add a parameter.

        Raises:
            DuplicateKey: If the parameter already exists.
        """
        self._params.add(key, normalize_value(value))
        return self

    def try_add(self, key: str, value: Any) -> bool:
        """
        Add a parameter if not already present.

        Returns:
            True if the parameter was added, False if it already existed
            (its value is left unchanged).
        """
        return self._params.try_add(key, normalize_value(value))

    def set(self, key: str, value: Any) -> QueryParams:
        """Add a parameter or replace its value, keeping its position."""
        self._params.set_element(key, normalize_value(value))
        return self

    def remove(self, key: str) -> QueryParams:
        """
        Remove a parameter.

        Raises:
            KeyNotFound: If the parameter is not present.
        """
        self._params.remove(key)
        return self

    def try_remove(self, key: str) -> bool:
        """Remove a parameter if present; return whether it was removed."""
        return self._params.try_remove(key)

    def keys(self) -> list[str]:
        return self._params.keys()

    def values(self) -> list[QueryValue]:
        return self._params.values()

    def items(self) -> list[tuple[str, QueryValue]]:
        """Return ``(name, value)`` pairs in insertion order."""
        return self._params.items()

    def count(self) -> int:
        return self._params.count()

    def to_dict(self) -> dict[str, QueryValue]:
        """Return the parameters as a plain ordered dict (a deep copy)."""
        return self._params.to_dict()

    def to_string(self, config: CodecConfig | None = None) -> str:
        """
        Encode the parameters as a query string.

        Args:
            config: Codec options, the process default when omitted.

        Returns:
            The query string, without a leading ``?``.
        """
        return build_query_string(self._params.to_dict(), config)

    def __getitem__(self, key: str) -> QueryValue:
        """Same as ``get``: raises ``KeyNotFound`` for a missing parameter."""
        return self._params.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        """Same as ``set``."""
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        """Same as ``remove``: raises ``KeyNotFound`` for a missing parameter."""
        self._params.remove(key)

    def __contains__(self, key: object) -> bool:
        """Check if parameter exists (case-sensitive)."""
        return key in self._params

    def __iter__(self) -> Iterator[str]:
        """Iterate over parameter names."""
        return iter(self._params)

    def __len__(self) -> int:
        """Return number of parameters."""
        return len(self._params)

    def __bool__(self) -> bool:
        """Return True if there are any parameters."""
        return bool(self._params)

    def __eq__(self, other: object) -> bool:
        """Equal when both hold the same parameters in the same order."""
        if not isinstance(other, QueryParams):
            return NotImplemented
        return self._params == other._params

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        """Return the query string, without a leading ``?``."""
        return self.to_string()

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"QueryParams({self._params.to_dict()!r})"

    @classmethod
    def parse_query_string(
        cls,
        query_string: str | bytes,
        config: CodecConfig | None = None,
    ) -> QueryParams:
        """
        Create QueryParams from a raw query string.

        Args:
            query_string: The query string without the leading ``?``.
                          Bytes are decoded as Latin-1. Percent-encoding
                          and ``+`` are decoded; ``a[b]=1`` becomes a
                          nested map; a repeated plain name keeps its
                          last value.
            config: Codec options, the process default when omitted.

        Returns:
            A new QueryParams instance.

        Example:
            >>> QueryParams.parse_query_string("a=1&a=2&b[x]=3").to_dict()
            {'a': '2', 'b': {'x': '3'}}
        """
        return cls(parse_query_string(query_string, config))


def query_params_from_scope(scope: Scope) -> QueryParams:
    """
    Create QueryParams instance from ASGI scope.

    Convenience function to extract and parse query string from an ASGI scope mapping.

    Args:
        scope: ASGI scope mapping containing "query_string" key.

    Returns:
        QueryParams instance. Returns empty QueryParams if "query_string" not in scope.

    Example:
        >>> scope = {"type": "http", "query_string": b"page=1&limit=10"}
        >>> params = query_params_from_scope(scope)
        >>> params.get_as_integer("page")
        1
    """
    return QueryParams.parse_query_string(scope.get("query_string", b""))
