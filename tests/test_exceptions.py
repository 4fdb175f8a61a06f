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

"""Tests for exception classes."""

import pytest

from genro_queries.exceptions import DuplicateKey, InvalidDateTime, KeyNotFound


class TestKeyNotFound:
    """Tests for KeyNotFound class."""

    def test_key_attribute(self) -> None:
        """Test the missing key is stored."""
        exc = KeyNotFound("page")
        assert exc.key == "page"

    def test_is_key_error(self) -> None:
        """Test it can be caught as KeyError."""
        with pytest.raises(KeyError):
            raise KeyNotFound("page")

    def test_str_like_key_error(self) -> None:
        """Test str() matches a builtin KeyError."""
        assert str(KeyNotFound("page")) == str(KeyError("page"))

    def test_repr(self) -> None:
        """Test repr contains class name and key."""
        assert repr(KeyNotFound("page")) == "KeyNotFound(key='page')"


class TestDuplicateKey:
    """Tests for DuplicateKey class."""

    def test_key_attribute(self) -> None:
        """Test the duplicated key is stored."""
        assert DuplicateKey("page").key == "page"

    def test_is_key_error(self) -> None:
        """Test it can be caught as KeyError."""
        with pytest.raises(KeyError):
            raise DuplicateKey("page")

    def test_not_key_not_found(self) -> None:
        """Test the two key errors are distinct."""
        assert not isinstance(DuplicateKey("a"), KeyNotFound)

    def test_repr(self) -> None:
        """Test repr contains class name and key."""
        assert repr(DuplicateKey("page")) == "DuplicateKey(key='page')"


class TestInvalidDateTime:
    """Tests for InvalidDateTime class."""

    def test_value_attribute(self) -> None:
        """Test the unparsable value is stored."""
        assert InvalidDateTime("soon").value == "soon"

    def test_is_value_error(self) -> None:
        """Test it can be caught as ValueError."""
        with pytest.raises(ValueError):
            raise InvalidDateTime("soon")

    def test_message(self) -> None:
        """Test str() names the value."""
        assert str(InvalidDateTime("soon")) == "Invalid date-time value: 'soon'"

    def test_repr(self) -> None:
        """Test repr contains class name and value."""
        assert repr(InvalidDateTime("soon")) == "InvalidDateTime(value='soon')"


class TestExceptionCatching:
    """Tests for exception catching patterns."""

    def test_catch_multiple_types(self) -> None:
        """Test catching key errors with tuple syntax."""
        for exc_class in (KeyNotFound, DuplicateKey):
            try:
                raise exc_class("k")
            except (KeyNotFound, DuplicateKey) as e:
                assert e.key == "k"
