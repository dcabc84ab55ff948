# topmark:header:start
#
#   project      : Harmonizer
#   file         : shapes.py
#   file_relpath : src/harmonizer/diagnostic/machine/shapes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Envelope and NDJSON shape builders for composition diagnostics.

JSON envelope:

    {"meta": {...}, "summary": {...}, "diagnostics": [...], "hints": [...],
     "build_errors": [...]}

NDJSON stream (one record per line): every error diagnostic (`kind="diagnostic"`),
then every hint (`kind="hint"`), then every build error (`kind="build_error"`),
and a final `kind="summary"` record.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from harmonizer.core.machine.schemas import MachineKey, MachineKind
from harmonizer.core.machine.shapes import build_json_envelope, build_ndjson_record
from harmonizer.diagnostic.machine.schemas import (
    MachineCompositionSummary,
    MachineDiagnosticEntry,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from harmonizer.composition.output import CompositionResult
    from harmonizer.core.machine.schemas import MetaPayload
    from harmonizer.diagnostic.types import DiagnosticsLike


def iter_diagnostic_ndjson_records(
    *,
    meta: MetaPayload,
    diagnostics: DiagnosticsLike,
    kind: str = MachineKind.DIAGNOSTIC,
) -> Iterator[dict[str, object]]:
    """Yield one NDJSON record per diagnostic.

    Args:
        meta: Shared metadata payload.
        diagnostics: Diagnostics to emit, in order.
        kind: Record kind (`MachineKind.DIAGNOSTIC` or `MachineKind.HINT`).

    Yields:
        One record per diagnostic, its payload being a `MachineDiagnosticEntry`.
    """
    for d in diagnostics:
        yield build_ndjson_record(
            kind=kind,
            meta=meta,
            payload=MachineDiagnosticEntry.from_diagnostic(d),
        )


def iter_composition_ndjson_records(
    *,
    meta: MetaPayload,
    result: CompositionResult,
) -> Iterator[dict[str, object]]:
    """Yield the full NDJSON stream for a composition result.

    Args:
        meta: Shared metadata payload.
        result: The composition result.

    Yields:
        Diagnostic, hint, build-error and summary records, in that order.
    """
    yield from iter_diagnostic_ndjson_records(meta=meta, diagnostics=result.diagnostics)
    yield from iter_diagnostic_ndjson_records(
        meta=meta, diagnostics=result.hints, kind=MachineKind.HINT
    )
    for error in result.errors:
        yield build_ndjson_record(kind=MachineKind.BUILD_ERROR, meta=meta, payload=error)
    yield build_ndjson_record(
        kind=MachineKind.SUMMARY,
        meta=meta,
        payload=MachineCompositionSummary.from_result(result),
    )


def build_composition_json_envelope(
    *,
    meta: MetaPayload,
    result: CompositionResult,
) -> dict[str, object]:
    """Build the JSON envelope for a composition result.

    Args:
        meta: Shared metadata payload.
        result: The composition result.

    Returns:
        JSON-serializable envelope dict.
    """
    return build_json_envelope(
        meta=meta,
        **{
            MachineKey.SUMMARY: MachineCompositionSummary.from_result(result),
            MachineKey.DIAGNOSTICS: [
                MachineDiagnosticEntry.from_diagnostic(d) for d in result.diagnostics
            ],
            MachineKey.HINTS: [MachineDiagnosticEntry.from_diagnostic(d) for d in result.hints],
            MachineKey.BUILD_ERRORS: result.errors.to_list(),
        },
    )
