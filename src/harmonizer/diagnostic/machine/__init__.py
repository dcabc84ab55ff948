# topmark:header:start
#
#   project      : Harmonizer
#   file         : __init__.py
#   file_relpath : src/harmonizer/diagnostic/machine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Machine-output helpers for composition diagnostics.

Layers:

- **schemas**: typed payloads (`MachineDiagnosticEntry`, `MachineCompositionSummary`).
- **shapes**: JSON envelope and NDJSON record builders for a `CompositionResult`.

Notes:
    Only the shape builders are re-exported here. Typed payload schemas remain
    available from [`harmonizer.diagnostic.machine.schemas`][harmonizer.diagnostic.machine.schemas]
    so callers can be explicit about which layer they depend on.
"""

from __future__ import annotations

from harmonizer.diagnostic.machine.shapes import (
    build_composition_json_envelope,
    iter_composition_ndjson_records,
    iter_diagnostic_ndjson_records,
)

__all__ = [
    "build_composition_json_envelope",
    "iter_composition_ndjson_records",
    "iter_diagnostic_ndjson_records",
]
