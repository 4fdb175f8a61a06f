# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Codec configuration - separator, encoding and nesting limits."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from genro_toolbox import SmartOptions  # type: ignore[import-untyped]

__all__ = ["CodecConfig", "DEFAULTS", "default_config"]

DEFAULTS = {"separator": "&", "encoding": "utf-8", "max_depth": 64, "space_as_plus": True}


def _codec_opts_spec(
    separator: str,
    encoding: str,
    max_depth: int,
    max_fields: int,
    space_as_plus: bool,
) -> None:
    """Reference function for SmartOptions type extraction (no defaults)."""


class CodecConfig:
    """Options used by ``parse_query_string`` and ``build_query_string``.

    Config precedence (later overrides earlier):
    1. Built-in DEFAULTS
    2. Environment variables: GENRO_QUERIES_*
    3. Explicit constructor parameters (None means "not given")
    """

    __slots__ = ("_opts",)

    def __init__(
        self,
        separator: str | None = None,
        encoding: str | None = None,
        max_depth: int | None = None,
        max_fields: int | None = None,
        space_as_plus: bool | None = None,
    ) -> None:
        env_opts = SmartOptions(_codec_opts_spec, env="GENRO_QUERIES", argv=[])
        caller_opts = SmartOptions(
            dict(
                separator=separator,
                encoding=encoding,
                max_depth=max_depth,
                max_fields=max_fields,
                space_as_plus=space_as_plus,
            ),
            ignore_none=True,
        )
        self._opts = SmartOptions(DEFAULTS) + env_opts + caller_opts

    def _option(self, name: str) -> Any:
        value = self._opts[name]
        return DEFAULTS.get(name) if value is None else value

    @property
    def separator(self) -> str:
        """Pair separator, ``&`` by default."""
        result: str = self._option("separator")
        return result

    @property
    def encoding(self) -> str:
        """Charset used for percent-decoding and percent-encoding."""
        result: str = self._option("encoding")
        return result

    @property
    def max_depth(self) -> int:
        """Deepest bracket nesting accepted by the parser."""
        return int(self._option("max_depth"))

    @property
    def max_fields(self) -> int | None:
        """Maximum number of pairs the parser accepts, None for no limit."""
        value = self._option("max_fields")
        return int(value) if value else None

    @property
    def space_as_plus(self) -> bool:
        """Encode spaces as ``+`` (True) or ``%20`` (False)."""
        return bool(self._option("space_as_plus"))

    def as_dict(self) -> dict[str, Any]:
        return {
            "separator": self.separator,
            "encoding": self.encoding,
            "max_depth": self.max_depth,
            "max_fields": self.max_fields,
            "space_as_plus": self.space_as_plus,
        }

    def __repr__(self) -> str:
        return f"CodecConfig({self.as_dict()!r})"


@lru_cache(maxsize=1)
def default_config() -> CodecConfig:
    """Process-wide configuration used when a codec call gets no config."""
    return CodecConfig()
