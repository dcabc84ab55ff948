# topmark:header:start
#
#   project      : Harmonizer
#   file         : schemas.py
#   file_relpath : src/harmonizer/core/machine/schemas.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical schema primitives for Harmonizer machine output.

This module centralizes:
- canonical *keys* used in JSON envelopes and NDJSON records (`MachineKey`)
- canonical NDJSON *kinds* (`MachineKind`)
- the runtime metadata payload (`MetaPayload`, `build_meta_payload`)
- payload normalization (`normalize_payload`)

Design goals:
- Pure (no Click / no Console / no serialization side-effects).
- Stable, shared constants to avoid “stringly-typed” drift across emitters.

Normalization rules:
- `Enum` -> `Enum.value`
- objects with `.to_dict()` -> normalize of that mapping
- mappings -> dict with stringified keys and normalized values
- sequences/sets -> lists of normalized values
"""

from __future__ import annotations

import platform
from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Any, Final, TypedDict, cast

from harmonizer.constants import HARMONIZER_VERSION


class MachineKey:
    """Canonical keys used in machine-readable JSON/NDJSON envelopes."""

    KIND: Final[str] = "kind"
    META: Final[str] = "meta"

    # payload container keys
    DIAGNOSTIC: Final[str] = "diagnostic"
    DIAGNOSTICS: Final[str] = "diagnostics"
    HINT: Final[str] = "hint"
    HINTS: Final[str] = "hints"
    BUILD_ERROR: Final[str] = "build_error"
    BUILD_ERRORS: Final[str] = "build_errors"
    SUMMARY: Final[str] = "summary"

    # diagnostic fields
    CODE: Final[str] = "code"
    MESSAGE: Final[str] = "message"
    RENDERED: Final[str] = "rendered"
    EXTENSIONS: Final[str] = "extensions"

    # summary fields
    OK: Final[str] = "ok"
    SUPERGRAPH_SDL: Final[str] = "supergraph_sdl"
    ERROR_COUNT: Final[str] = "error_count"
    HINT_COUNT: Final[str] = "hint_count"

    VERSION: Final[str] = "version"


class MachineKind:
    """Canonical `kind` values for NDJSON records."""

    DIAGNOSTIC: Final[str] = "diagnostic"
    HINT: Final[str] = "hint"
    BUILD_ERROR: Final[str] = "build_error"
    SUMMARY: Final[str] = "summary"
    VERSION: Final[str] = "version"


_KNOWN_KINDS: Final[set[str]] = {
    MachineKind.DIAGNOSTIC,
    MachineKind.HINT,
    MachineKind.BUILD_ERROR,
    MachineKind.SUMMARY,
    MachineKind.VERSION,
}


class MetaPayload(TypedDict):
    """Metadata describing the Harmonizer runtime environment for machine output."""

    tool: str
    version: str
    platform: str


def build_meta_payload() -> MetaPayload:
    """Return the metadata payload for the current runtime."""
    return MetaPayload(
        tool="harmonizer",
        version=HARMONIZER_VERSION,
        platform=platform.system().lower(),
    )


def validate_machine_kind(kind: str) -> None:
    """Validate that `kind` is a known machine record kind.

    Args:
        kind: Candidate kind string.

    Raises:
        ValueError: If `kind` is empty or not a known kind.
    """
    if not kind:
        raise ValueError("machine kind must be a non-empty string")
    if kind not in _KNOWN_KINDS:
        raise ValueError(
            f"Unknown machine kind '{kind}' - valid choices: {', '.join(sorted(_KNOWN_KINDS))}"
        )


def normalize_payload(obj: object) -> object:
    """Normalize a payload into JSON-serializable structures.

    Conversions:
      - `Enum` -> `Enum.value`
      - object with callable `.to_dict()` -> normalize(`.to_dict()`)
      - `Mapping` -> `dict[str, normalized value]`
      - `list/tuple/set/frozenset` -> `list[normalized item]`

    Notes:
      Passthrough extension mappings are read-only proxies; they are copied
      into plain dicts here so `json.dumps` accepts them.

    Args:
        obj: The payload object to normalize.

    Returns:
        A JSON-serializable representation of `obj`.
    """
    if isinstance(obj, Enum):
        return normalize_payload(obj.value)

    to_dict: Any | None = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return normalize_payload(to_dict())

    if isinstance(obj, Mapping):
        mapping: Mapping[object, Any] = cast("Mapping[object, Any]", obj)
        return {str(k): normalize_payload(v) for k, v in mapping.items()}

    if isinstance(obj, (list, tuple, set, frozenset)):
        seq: Iterator[object] = cast("Iterator[object]", obj)
        return [normalize_payload(v) for v in seq]

    return obj
