# topmark:header:start
#
#   project      : Harmonizer
#   file         : __init__.py
#   file_relpath : src/harmonizer/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Composition diagnostic primitives.

This package provides the typed representation of errors reported by the
external composition engine, and the rules for decoding them from JSON.

Design:
    - Decoded diagnostics are immutable `Diagnostic` instances.
    - The extension block is an `ErrorExtensions` value: an open-vocabulary
      ``code`` plus a read-only passthrough mapping for every other field.
    - Conversion into the host build-error model happens through
      `Diagnostic.to_build_error()`.

Machine output:
    Machine-readable JSON/NDJSON representations live under
    [`harmonizer.diagnostic.machine`][harmonizer.diagnostic.machine].
"""

from __future__ import annotations

from harmonizer.diagnostic.decode import (
    decode_diagnostic,
    decode_diagnostics,
    loads_diagnostic,
)
from harmonizer.diagnostic.model import (
    KNOWN_ERROR_CODES,
    Diagnostic,
    ErrorExtensions,
    freeze_json,
    thaw_json,
)
from harmonizer.diagnostic.types import DiagnosticsLike

__all__ = [
    "KNOWN_ERROR_CODES",
    "Diagnostic",
    "DiagnosticsLike",
    "ErrorExtensions",
    "decode_diagnostic",
    "decode_diagnostics",
    "freeze_json",
    "loads_diagnostic",
    "thaw_json",
]
