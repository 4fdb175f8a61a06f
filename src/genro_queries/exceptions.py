# Copyright 2025 Softwell S.r.l.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Exception classes for genro-queries collections and query parameters.

This module provides typed exceptions for the strict operations of
``OrderedCollection`` and ``QueryParams``. The ``try_*`` counterparts
never raise them: they return a boolean or a default instead.

Module Structure
----------------
Three exception classes, each inheriting directly from a builtin:

1. KeyNotFound - Strict lookup or removal of an absent key
2. DuplicateKey - Strict insertion of a key that already exists
3. InvalidDateTime - A non-empty parameter that is not a date-time

Design Decisions
----------------
- Builtin bases: KeyNotFound and DuplicateKey are ``KeyError`` subclasses,
  InvalidDateTime is a ``ValueError`` subclass. Code that already catches
  the builtin keeps working.
- No common base: use tuple syntax for catching multiple:
  ``except (KeyNotFound, DuplicateKey)``
- InvalidDateTime is always raised ``from`` the parser error, so the
  original ``ValueError`` stays available as ``__cause__``.

KeyNotFound
-----------
Attributes:
    key (str): The key that was looked up

Example:
    >>> params = QueryParams({"a": "1"})
    >>> params.get("b")
    Traceback (most recent call last):
        ...
    genro_queries.exceptions.KeyNotFound: 'b'

DuplicateKey
------------
Attributes:
    key (str): The key that is already present

Example:
    >>> params = QueryParams({"a": "1"})
    >>> params.add("a", "2")
    Traceback (most recent call last):
        ...
    genro_queries.exceptions.DuplicateKey: 'a'

InvalidDateTime
---------------
Attributes:
    value (str): The string that could not be parsed

Example:
    >>> params = QueryParams({"since": "yesterday"})
    >>> params.get_as_datetime("since")
    Traceback (most recent call last):
        ...
    genro_queries.exceptions.InvalidDateTime: Invalid date-time value: 'yesterday'
"""

__all__ = ["KeyNotFound", "DuplicateKey", "InvalidDateTime"]


class KeyNotFound(KeyError):
    """
    Raised when a strict operation targets a key that is not present.

    Raised by ``get``, ``remove`` and bracket access (``c[key]``,
    ``del c[key]``). Never raised by ``try_get`` or ``try_remove``.

    Attributes:
        key: The missing key
    """

    def __init__(self, key: str) -> None:
        """
        Initialize the exception.

        Args:
            key: The missing key
        """
        self.key = key
        super().__init__(key)

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"KeyNotFound(key={self.key!r})"


class DuplicateKey(KeyError):
    """
    Raised when a strict ``add`` targets a key that already exists.

    Never raised by ``try_add`` or ``set``.

    Attributes:
        key: The key that is already present
    """

    def __init__(self, key: str) -> None:
        """
        Initialize the exception.

        Args:
            key: The duplicated key
        """
        self.key = key
        super().__init__(key)

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"DuplicateKey(key={self.key!r})"


class InvalidDateTime(ValueError):
    """Raised when a non-empty parameter cannot be parsed as a date-time."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid date-time value: {value!r}")

    def __repr__(self) -> str:
        return f"InvalidDateTime(value={self.value!r})"
