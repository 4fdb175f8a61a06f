# Copyright 2025 Softwell S.r.l.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""genro-queries - Ordered collections and typed URI query parameters.

Main components:
    OrderedCollection: Ordered string-keyed map with strict and try_ operations
    ReadonlyCollection: Read-only live view of an OrderedCollection
    QueryParams: Typed query parameters, parsed from and encoded to query strings

Codec:
    parse_query_string: Query string to ordered dict (bracket-nested keys)
    build_query_string: Ordered dict to query string
    CodecConfig: Separator, encoding and nesting limits (GENRO_QUERIES_* env)

Usage:
    from genro_queries import QueryParams

    params = QueryParams.parse_query_string("foo=bar&num=42")
    params.get_as_integer("num")  # 42
    params.set("page", 2)
    str(params)  # "foo=bar&num=42&page=2"
"""

__version__ = "0.1.0"

from .config import CodecConfig, default_config
from .datastructures import (
    OrderedCollection,
    QueryParams,
    ReadonlyCollection,
    query_params_from_scope,
)
from .exceptions import DuplicateKey, InvalidDateTime, KeyNotFound
from .querystring import build_query_string, parse_query_string
from .types import Arrayable, NestedMap, QueryValue, Scope

__all__ = [
    # Data structures
    "OrderedCollection",
    "ReadonlyCollection",
    "QueryParams",
    "query_params_from_scope",
    # Codec
    "parse_query_string",
    "build_query_string",
    "CodecConfig",
    "default_config",
    # Exceptions
    "KeyNotFound",
    "DuplicateKey",
    "InvalidDateTime",
    # Types
    "QueryValue",
    "NestedMap",
    "Scope",
    "Arrayable",
]
