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

import genro_queries


def test_version() -> None:
    """Test that version is defined."""
    assert genro_queries.__version__ == "0.1.0"


def test_exports() -> None:
    """Test that main exports are available."""
    assert hasattr(genro_queries, "QueryParams")
    assert hasattr(genro_queries, "OrderedCollection")
    assert hasattr(genro_queries, "parse_query_string")
    assert hasattr(genro_queries, "KeyNotFound")


def test_datastructures_exports() -> None:
    """Verify __all__ of the datastructures package."""
    from genro_queries import datastructures

    expected = {
        "OrderedCollection",
        "ReadonlyCollection",
        "QueryParams",
        "query_params_from_scope",
    }
    assert set(datastructures.__all__) == expected
