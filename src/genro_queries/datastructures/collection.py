# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Ordered string-keyed collection with strict and non-raising operations.

Purpose
=======
A minimal typed map with deterministic iteration order. Every fallible
operation comes in two flavours: a strict one that raises and a ``try_``
one that returns a boolean or a default instead.

This module provides:
- ``ReadonlyCollection``: lookup, containment, iteration, conversion
- ``OrderedCollection``: adds insertion, overwrite and removal

Operation Table::

    +--------------------+---------------------+---------------------------+
    | Strict             | Non-raising         | Failure                   |
    +--------------------+---------------------+---------------------------+
    | get(key)           | try_get(key, d)     | KeyNotFound / returns d   |
    | add(key, value)    | try_add(key, value) | DuplicateKey / False      |
    | remove(key)        | try_remove(key)     | KeyNotFound / False       |
    | c[key]             | key in c            | KeyNotFound / False       |
    | del c[key]         |                     | KeyNotFound               |
    | set_element(k, v)  | c[key] = value      | never fails               |
    +--------------------+---------------------+---------------------------+

Definition::

    class ReadonlyCollection(Generic[V]):
        __slots__ = ("_entries",)

        def contains_key(self, key: str) -> bool
        def contains_value(self, value: object) -> bool
        def get(self, key: str) -> V
        def try_get(self, key: str, default: Any = None) -> Any
        def keys(self) -> list[str]
        def values(self) -> list[V]
        def items(self) -> list[tuple[str, V]]
        def count(self) -> int
        def to_dict(self) -> dict[str, V]

    class OrderedCollection(ReadonlyCollection[V]):
        def __init__(self, entries: Mapping | Iterable[tuple] | None = None) -> None
        def add(self, key: str, value: V) -> None
        def try_add(self, key: str, value: V) -> bool
        def set_element(self, key: str, value: V) -> None
        def remove(self, key: str) -> None
        def try_remove(self, key: str) -> bool
        def as_readonly(self) -> ReadonlyCollection[V]

Example::

    from genro_queries.datastructures import OrderedCollection

    coll = OrderedCollection([("b", "2"), ("a", "1")])
    coll.add("c", "3")
    coll.try_add("a", "other")  # False, "a" is unchanged
    list(coll)                  # ["b", "a", "c"]
    coll.get("missing")         # raises KeyNotFound

Design Notes
============
- Uses ``__slots__`` for memory efficiency
- Backed by a plain ``dict`` (insertion ordered); overwriting a key keeps
  its position
- ``contains_value`` and ``__eq__`` use ``==``, so nested maps compare
  structurally
- Values are copied on the way in and on the way out; no caller ever
  holds a reference to a stored nested map
- ``__iter__`` yields keys, like ``dict``; entries come from ``items()``
- Not a ``collections.abc.Mapping``: ``get`` raises instead of returning
  a default
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from typing import Any, Generic, Iterator, TypeVar

from ..exceptions import DuplicateKey, KeyNotFound

__all__ = ["ReadonlyCollection", "OrderedCollection"]

V = TypeVar("V")


class ReadonlyCollection(Generic[V]):
    """
    Read-only ordered string-keyed collection.

    Returned by ``OrderedCollection.as_readonly()`` as a live view: it shares
    the entries of the collection it was created from, so later changes to
    that collection are visible through it, but it exposes no way to
    change them.

    Example:
        >>> coll = OrderedCollection({"a": "1"})
        >>> view = coll.as_readonly()
        >>> coll.add("b", "2")
        >>> view.keys()
        ['a', 'b']
        >>> hasattr(view, "add")
        False
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: dict[str, V]) -> None:
        """
        Wrap an existing dict without copying it.

        Args:
            entries: The dict holding the entries.
        """
        self._entries = entries

    def contains_key(self, key: str) -> bool:
        """Return True if an entry with exactly this key exists."""
        return key in self._entries

    def contains_value(self, value: object) -> bool:
        """Return True if any entry's value equals ``value`` (deep equality)."""
        return any(item == value for item in self._entries.values())

    def get(self, key: str) -> V:
        """
        Get the value stored under ``key``.

        Args:
            key: Entry key (case-sensitive).

        Returns:
            The stored value. Nested values are returned as copies.

        Raises:
            KeyNotFound: If no entry has this key.
        """
        try:
            return copy.deepcopy(self._entries[key])
        except KeyError:
            raise KeyNotFound(key) from None

    def try_get(self, key: str, default: Any = None) -> Any:
        """Get a copy of the value stored under ``key``, or ``default`` if absent."""
        if key not in self._entries:
            return default
        return copy.deepcopy(self._entries[key])

    def keys(self) -> list[str]:
        return list(self._entries.keys())

    def values(self) -> list[V]:
        return copy.deepcopy(list(self._entries.values()))

    def items(self) -> list[tuple[str, V]]:
        """Return copies of the entries as ``(key, value)`` pairs in insertion order."""
        return copy.deepcopy(list(self._entries.items()))

    def count(self) -> int:
        return len(self._entries)

    def to_dict(self) -> dict[str, V]:
        """
        Convert to a plain ordered dict.

        Nested values are deep-copied, so changing the result never changes
        the collection.
        """
        return copy.deepcopy(self._entries)

    def __getitem__(self, key: str) -> V:
        """Same as ``get``: raises ``KeyNotFound`` for a missing key."""
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        """Iterate over keys in insertion order."""
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __eq__(self, other: object) -> bool:
        """Equal when both hold the same entries in the same order."""
        if not isinstance(other, ReadonlyCollection):
            return NotImplemented
        return list(self._entries.items()) == list(other._entries.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._entries!r})"


class OrderedCollection(ReadonlyCollection[V]):
    """
    Ordered string-keyed collection with mutation.

    At most one entry exists per key. Iteration follows insertion order;
    overwriting a key with ``set_element`` keeps its position.

    Example:
        >>> coll = OrderedCollection()
        >>> coll.add("k", "v1")
        >>> coll.set_element("k", "v2")
        >>> coll.get("k")
        'v2'
        >>> len(coll)
        1
        >>> coll.try_remove("k")
        True
        >>> coll.try_remove("k")
        False
    """

    __slots__ = ()

    def __init__(self, entries: Mapping[str, V] | Iterable[tuple[str, V]] | None = None) -> None:
        """
        Initialize the collection.

        Args:
            entries: Initial entries as a mapping, an iterable of
                     ``(key, value)`` pairs or another collection. A repeated
                     key keeps its first position and its last value.
                     The entries are copied, never shared.
        """
        super().__init__({})
        if entries is None:
            return
        if isinstance(entries, ReadonlyCollection):
            pairs: Iterable[tuple[str, V]] = entries.items()
        elif isinstance(entries, Mapping):
            pairs = entries.items()
        else:
            pairs = entries
        for key, value in pairs:
            self._entries[key] = copy.deepcopy(value)

    def add(self, key: str, value: V) -> None:
        """
        Insert a new entry.

        Raises:
            DuplicateKey: If an entry with this key already exists.
        """
        if key in self._entries:
            raise DuplicateKey(key)
        self._entries[key] = copy.deepcopy(value)

    def try_add(self, key: str, value: V) -> bool:
        """Insert a new entry if the key is absent; return whether it was inserted."""
        if key in self._entries:
            return False
        self._entries[key] = copy.deepcopy(value)
        return True

    def set_element(self, key: str, value: V) -> None:
        """Insert or overwrite the entry for ``key``."""
        self._entries[key] = copy.deepcopy(value)

    def remove(self, key: str) -> None:
        """
        Remove the entry for ``key``.

        Raises:
            KeyNotFound: If no entry has this key.
        """
        try:
            del self._entries[key]
        except KeyError:
            raise KeyNotFound(key) from None

    def try_remove(self, key: str) -> bool:
        """Remove the entry for ``key`` if present; return whether it was removed."""
        if key not in self._entries:
            return False
        del self._entries[key]
        return True

    def as_readonly(self) -> ReadonlyCollection[V]:
        """Return a live read-only view over the same entries."""
        return ReadonlyCollection(self._entries)

    def __setitem__(self, key: str, value: V) -> None:
        """Same as ``set_element``."""
        self.set_element(key, value)

    def __delitem__(self, key: str) -> None:
        """Same as ``remove``: raises ``KeyNotFound`` for a missing key."""
        self.remove(key)
