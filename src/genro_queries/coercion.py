# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Value normalisation and scalar coercion for query parameters.

Purpose
=======
Query parameters only ever store strings or nested maps of strings.
``normalize_value`` turns arbitrary Python values into that shape when
they are inserted; the ``to_*`` helpers turn stored values back into
typed Python values when they are read.

Normalisation Table::

    +---------------------------+----------------------------------+
    | Input                     | Stored                           |
    +---------------------------+----------------------------------+
    | str                       | unchanged                        |
    | bool                      | "1" / "0"                        |
    | None                      | ""                               |
    | Mapping                   | dict, str keys, values recursed  |
    | list / tuple              | dict keyed "0", "1", ...         |
    | datetime / date / time    | isoformat()                      |
    | anything else             | str(value)                       |
    +---------------------------+----------------------------------+

Coercion Table::

    +--------+----------------------------------+-----------+------------------+
    | Target | From str                         | From map  | From other       |
    +--------+----------------------------------+-----------+------------------+
    | str    | unchanged                        | ""        | normalised       |
    | int    | leading number, else 0           | 0         | int(), else 0    |
    | float  | leading number, else 0.0         | 0.0       | float(), else 0.0|
    | bool   | False for FALSY_STRINGS          | non-empty | bool()           |
    | array  | {"0": value}                     | copy      | normalised       |
    +--------+----------------------------------+-----------+------------------+

Leading-number examples: ``"42abc"`` → 42, ``" 4.7"`` → 4 / 4.7,
``"1e3"`` → 1000 / 1000.0, ``"abc"`` → 0 / 0.0.

Design Notes
============
- Coercion never raises; unparsable input degrades to the zero value.
- ``FALSY_STRINGS`` is compared after ``strip().lower()``.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from datetime import date, datetime, time
from typing import Any

from .types import NestedMap, QueryValue

__all__ = [
    "FALSY_STRINGS",
    "normalize_value",
    "normalize_scalar",
    "to_string",
    "to_integer",
    "to_float",
    "to_bool",
    "to_array",
]

FALSY_STRINGS = frozenset({"", "0", "false", "off", "no"})

_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def normalize_scalar(value: Any) -> str:
    """Convert a non-container value to its stored string form."""
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)


def normalize_value(value: Any) -> QueryValue:
    """Convert any value to a string or a nested map of strings."""
    if isinstance(value, Mapping):
        return {str(key): normalize_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return {str(index): normalize_value(item) for index, item in enumerate(value)}
    return normalize_scalar(value)


def _leading_number(text: str) -> str | None:
    match = _LEADING_NUMBER.match(text)
    return match.group(1) if match else None


def to_string(value: Any) -> str:
    if isinstance(value, (Mapping, list, tuple)):
        return ""
    return normalize_scalar(value)


def to_integer(value: Any) -> int:
    if isinstance(value, str):
        number = _leading_number(value)
        if number is None:
            return 0
        if number.lstrip("+-").isdigit():
            return int(number)
        parsed = float(number)
        return int(parsed) if math.isfinite(parsed) else 0
    if isinstance(value, (Mapping, list, tuple)) or value is None:
        return 0
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0


def to_float(value: Any) -> float:
    if isinstance(value, str):
        number = _leading_number(value)
        return float(number) if number is not None else 0.0
    if isinstance(value, (Mapping, list, tuple)) or value is None:
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0


def to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in FALSY_STRINGS
    return bool(value)


def to_array(value: Any) -> NestedMap:
    """Coerce a stored value to a nested map; a string becomes ``{"0": value}``."""
    if value is None:
        return {}
    normalized = normalize_value(value)
    if isinstance(normalized, str):
        return {"0": normalized}
    return normalized
