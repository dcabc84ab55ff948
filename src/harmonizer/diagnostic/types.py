# topmark:header:start
#
#   project      : Harmonizer
#   file         : types.py
#   file_relpath : src/harmonizer/diagnostic/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared typing helpers for Harmonizer diagnostics.

This module defines the JSON value alias used for passthrough extension fields,
and a small Protocol expressing "diagnostic-carrying" objects structurally so
that emitters can accept a list, a tuple, or a composition result alike.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from harmonizer.diagnostic.model import Diagnostic

JsonValue: TypeAlias = "None | bool | int | float | str | list[JsonValue] | dict[str, JsonValue]"
JsonObject: TypeAlias = "dict[str, JsonValue]"

# Read-only counterpart of `JsonValue`: arrays become tuples, objects read-only mappings.
FrozenJsonValue: TypeAlias = (
    "None | bool | int | float | str | tuple[FrozenJsonValue, ...] | Mapping[str, FrozenJsonValue]"
)


class DiagnosticsLike(Protocol):
    """Structural interface for objects that carry diagnostics."""

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over contained diagnostics in insertion order."""
        ...
