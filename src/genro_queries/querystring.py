# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Query string codec with bracket-nested keys.

Purpose
=======
Converts between a URI query string and a plain ordered dict whose values
are strings or nested maps. Percent-decoding and percent-encoding are done
by ``urllib.parse``; this module adds the bracket layer on top::

    "a=1&b[x]=2&b[y]=3&c[]=4&c[]=5"
                    ↓
         parse_query_string
                    ↓
    {
        "a": "1",
        "b": {"x": "2", "y": "3"},
        "c": {"0": "4", "1": "5"},
    }
                    ↓
         build_query_string
                    ↓
    "a=1&b[x]=2&b[y]=3&c[0]=4&c[1]=5"

Decoding Rules
==============
- Pairs are split on ``config.separator``; ``+`` and ``%XX`` are decoded.
- A pair without ``=`` is a blank value (``"a"`` → ``{"a": ""}``).
- Repeated plain keys: last occurrence wins, first position is kept.
- ``name[]`` appends under the next integer index.
- A key starting with ``[`` has no name and is dropped.
- An unmatched ``[`` keeps the key literal (``"a[b"`` → ``{"a[b": ...}``).
- Text after the last ``]`` is ignored (``"a[b]c"`` → ``a[b]``).
- Nesting deeper than ``config.max_depth`` drops the pair.

Encoding Rules
==============
- Key and value segments are percent-encoded, brackets are not.
- Spaces become ``+`` unless ``config.space_as_plus`` is False (``%20``).
- Nested maps, lists and tuples emit one pair per leaf.
- ``None`` leaves and empty nested maps emit nothing.
- No leading ``?``.

Example::

    from genro_queries.querystring import build_query_string, parse_query_string

    data = parse_query_string("q=hello+world&filter[tag]=py")
    data["filter"]["lang"] = "it"
    build_query_string(data)  # "q=hello+world&filter[tag]=py&filter[lang]=it"
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any, Callable
from urllib.parse import parse_qsl, quote, quote_plus

from .coercion import normalize_scalar
from .config import CodecConfig, default_config
from .types import Arrayable, NestedMap, QueryValue

__all__ = ["parse_query_string", "build_query_string"]

logger = logging.getLogger("genro_queries.querystring")

_SEGMENT = re.compile(r"\[([^\[\]]*)\]")
_INDEX = re.compile(r"0|[1-9][0-9]*")


def _split_key(name: str) -> tuple[str, list[str]]:
    """Split ``base[a][b]`` into ``("base", ["a", "b"])``."""
    start = name.find("[")
    if start < 0:
        return name, []
    segments: list[str] = []
    pos = start
    while pos < len(name) and name[pos] == "[":
        match = _SEGMENT.match(name, pos)
        if match is None:
            break
        segments.append(match.group(1))
        pos = match.end()
    if not segments:
        return name, []
    return name[:start], segments


def _next_index(node: NestedMap) -> str:
    indexes = [int(key) for key in node if _INDEX.fullmatch(key)]
    return str(max(indexes) + 1) if indexes else "0"


def _assign(target: dict[str, QueryValue], base: str, segments: list[str], value: str) -> None:
    if not segments:
        target[base] = value
        return
    node = target.get(base)
    if not isinstance(node, dict):
        node = {}
        target[base] = node
    for segment in segments[:-1]:
        key = segment or _next_index(node)
        child = node.get(key)
        if not isinstance(child, dict):
            child = {}
            node[key] = child
        node = child
    node[segments[-1] or _next_index(node)] = value


def parse_query_string(
    query_string: str | bytes,
    config: CodecConfig | None = None,
) -> dict[str, QueryValue]:
    """
    Decode a query string into an ordered dict.

    Args:
        query_string: Raw query string without the leading ``?``. Bytes are
                      decoded as Latin-1, as ASGI servers deliver them.
        config: Codec options, ``default_config()`` when omitted.

    Returns:
        Ordered dict of strings and nested maps.

    Raises:
        ValueError: If ``config.max_fields`` is set and exceeded.
    """
    config = config or default_config()
    if isinstance(query_string, bytes):
        query_string = query_string.decode("latin-1")
    pairs = parse_qsl(
        query_string,
        keep_blank_values=True,
        encoding=config.encoding,
        max_num_fields=config.max_fields,
        separator=config.separator,
    )
    result: dict[str, QueryValue] = {}
    for name, value in pairs:
        base, segments = _split_key(name)
        if not base:
            logger.warning("Dropping query parameter without a name: %r", name)
            continue
        if len(segments) > config.max_depth:
            logger.warning(
                "Dropping query parameter %r: nesting deeper than %d",
                base,
                config.max_depth,
            )
            continue
        _assign(result, base, segments, value)
    logger.debug("Parsed %d pairs into %d parameters", len(pairs), len(result))
    return result


def _flatten(
    prefix: str,
    value: Any,
    pairs: list[str],
    quote_via: Callable[[str], str],
) -> None:
    if isinstance(value, Mapping):
        items = list(value.items())
    elif isinstance(value, (list, tuple)):
        items = list(enumerate(value))
    else:
        if value is not None:
            pairs.append(f"{prefix}={quote_via(normalize_scalar(value))}")
        return
    for key, item in items:
        _flatten(f"{prefix}[{quote_via(str(key))}]", item, pairs, quote_via)


def build_query_string(
    data: Mapping[str, Any] | Arrayable,
    config: CodecConfig | None = None,
) -> str:
    """
    Encode an ordered mapping into a query string.

    Args:
        data: Mapping of keys to strings, scalars or nested maps, or any
              object exposing ``to_dict()``.
        config: Codec options, ``default_config()`` when omitted.

    Returns:
        The query string, without a leading ``?``. Empty input gives ``""``.
    """
    config = config or default_config()
    if isinstance(data, Arrayable):
        data = data.to_dict()
    encoding = config.encoding
    if config.space_as_plus:

        def quote_via(text: str) -> str:
            return quote_plus(text, safe="", encoding=encoding)

    else:

        def quote_via(text: str) -> str:
            return quote(text, safe="", encoding=encoding)

    pairs: list[str] = []
    for key, value in data.items():
        _flatten(quote_via(str(key)), value, pairs, quote_via)
    logger.debug("Built %d pairs from %d parameters", len(pairs), len(data))
    return config.separator.join(pairs)
