# topmark:header:start
#
#   project      : Harmonizer
#   file         : output.py
#   file_relpath : src/harmonizer/composition/output.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Interpret the composition engine's result envelope.

The engine reports a whole composition run as a serialized result value:

- success: ``{"Ok": {"supergraphSdl": "...", "hints": [...]}}``
- failure: ``{"Err": [<diagnostic>, ...]}``

Output that cannot be interpreted at all (invalid JSON, unexpected shape) is
reported as a failed result holding a single *generic* diagnostic, so the
aggregator always receives build errors rather than an exception.

Individual diagnostics are decoded with
[`decode_diagnostic`][harmonizer.diagnostic.decode.decode_diagnostic]. In strict
mode (the default) a malformed entry raises `DiagnosticDecodeError`; in lenient
mode it is replaced by a generic diagnostic quoting the decode error.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, cast

from harmonizer.build.model import BuildErrors
from harmonizer.config.logging import get_logger
from harmonizer.constants import ENVELOPE_ERR, ENVELOPE_OK, HINTS_FIELD, SUPERGRAPH_SDL_FIELD
from harmonizer.core.errors import CompositionFailedError, DiagnosticDecodeError
from harmonizer.diagnostic.decode import decode_diagnostic
from harmonizer.diagnostic.model import Diagnostic

if TYPE_CHECKING:
    from collections.abc import Iterator

    from harmonizer.config.logging import HarmonizerLogger


logger: HarmonizerLogger = get_logger(__name__)


@dataclass
class CompositionResult:
    """Outcome of one composition run, as reported by the engine.

    Attributes:
        supergraph_sdl: Composed supergraph schema (success only).
        hints: Non-fatal diagnostics reported alongside a successful composition.
        diagnostics: Error diagnostics, in the order they were reported.
        errors: Build errors converted from `diagnostics`.
        failed: Whether the engine reported a failed composition.
    """

    supergraph_sdl: str | None = None
    hints: tuple[Diagnostic, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()
    errors: BuildErrors = field(default_factory=BuildErrors)
    failed: bool = False

    @classmethod
    def success(cls, supergraph_sdl: str, hints: tuple[Diagnostic, ...] = ()) -> CompositionResult:
        """Create a successful result."""
        return cls(supergraph_sdl=supergraph_sdl, hints=hints)

    @classmethod
    def failure(cls, diagnostics: tuple[Diagnostic, ...]) -> CompositionResult:
        """Create a failed result, converting each diagnostic into a build error."""
        return cls(
            diagnostics=diagnostics,
            errors=BuildErrors.from_diagnostics(diagnostics),
            failed=True,
        )

    @property
    def ok(self) -> bool:
        """Return True if composition produced a supergraph."""
        return not self.failed

    def iter_all(self) -> Iterator[Diagnostic]:
        """Iterate over error diagnostics first, then hints."""
        yield from self.diagnostics
        yield from self.hints

    def raise_for_errors(self) -> None:
        """Raise if composition failed.

        Raises:
            CompositionFailedError: If the result is a failure.
        """
        if self.failed:
            raise CompositionFailedError(self.errors)


def _decode_entry(obj: object, *, strict: bool) -> Diagnostic:
    try:
        return decode_diagnostic(obj)
    except DiagnosticDecodeError as exc:
        if strict:
            raise
        logger.warning("Keeping malformed composition diagnostic as generic error: %s", exc)
        return Diagnostic.generic(f"Malformed composition diagnostic: {exc}")


def _decode_entries(value: object, *, what: str, strict: bool) -> tuple[Diagnostic, ...] | None:
    if not isinstance(value, list):
        return None
    entries: list[object] = cast("list[object]", value)
    logger.debug("Decoding %d composition %s", len(entries), what)
    return tuple(_decode_entry(item, strict=strict) for item in entries)


def _unexpected(reason: str) -> CompositionResult:
    logger.error("Could not interpret composition output: %s", reason)
    return CompositionResult.failure((Diagnostic.generic(reason),))


def interpret_composition_output(payload: object, *, strict: bool = True) -> CompositionResult:
    """Interpret an already-parsed composition envelope.

    Args:
        payload: Parsed JSON value produced by the engine.
        strict: If True, malformed diagnostics raise; otherwise they are kept
            as generic diagnostics.

    Returns:
        The composition result.

    Raises:
        DiagnosticDecodeError: In strict mode, if a reported diagnostic is malformed.
    """
    if not isinstance(payload, dict) or len(cast("dict[str, Any]", payload)) != 1:
        return _unexpected(
            f"Unexpected composition output: expected an object with a single "
            f"'{ENVELOPE_OK}' or '{ENVELOPE_ERR}' key"
        )
    envelope: dict[str, Any] = cast("dict[str, Any]", payload)

    if ENVELOPE_ERR in envelope:
        diagnostics = _decode_entries(envelope[ENVELOPE_ERR], what="errors", strict=strict)
        if diagnostics is None:
            return _unexpected(
                f"Unexpected composition output: '{ENVELOPE_ERR}' must be an array"
            )
        return CompositionResult.failure(diagnostics)

    if ENVELOPE_OK in envelope:
        body: object = envelope[ENVELOPE_OK]
        if not isinstance(body, dict):
            return _unexpected(f"Unexpected composition output: '{ENVELOPE_OK}' must be an object")
        ok: dict[str, Any] = cast("dict[str, Any]", body)
        sdl: object = ok.get(SUPERGRAPH_SDL_FIELD)
        if not isinstance(sdl, str):
            return _unexpected(
                f"Unexpected composition output: '{SUPERGRAPH_SDL_FIELD}' must be a string"
            )
        raw_hints: object = ok.get(HINTS_FIELD)
        # null hints mean none
        if raw_hints is None:
            raw_hints = []
        hints = _decode_entries(raw_hints, what="hints", strict=strict)
        if hints is None:
            return _unexpected(f"Unexpected composition output: '{HINTS_FIELD}' must be an array")
        return CompositionResult.success(sdl, hints)

    return _unexpected(
        f"Unexpected composition output: unknown key {next(iter(envelope))!r}, "
        f"expected '{ENVELOPE_OK}' or '{ENVELOPE_ERR}'"
    )


def interpret_engine_payload(payload: object, *, strict: bool = True) -> CompositionResult:
    """Interpret any supported engine payload.

    Besides the result envelope, a bare array of diagnostics or a single
    diagnostic object is accepted (as found in engine logs). A non-empty bare
    payload is a failed result; an empty array is a result with no errors and
    no supergraph.

    Args:
        payload: Parsed JSON value.
        strict: If True, malformed diagnostics raise.

    Returns:
        The composition result.

    Raises:
        DiagnosticDecodeError: In strict mode, if a reported diagnostic is malformed.
    """
    if isinstance(payload, dict):
        keys: set[str] = set(cast("dict[str, Any]", payload))
        if keys in ({ENVELOPE_OK}, {ENVELOPE_ERR}):
            return interpret_composition_output(payload, strict=strict)
        return CompositionResult.failure((_decode_entry(payload, strict=strict),))
    diagnostics = _decode_entries(payload, what="errors", strict=strict)
    if diagnostics is None:
        return _unexpected(
            "Unexpected engine output: expected a result envelope, "
            "an array of diagnostics, or a diagnostic object"
        )
    if not diagnostics:
        return CompositionResult()
    return CompositionResult.failure(diagnostics)


def parse_composition_output(text: str, *, strict: bool = True) -> CompositionResult:
    """Parse the engine's JSON output into a `CompositionResult`.

    Args:
        text: Raw JSON text emitted by the engine.
        strict: If True, malformed diagnostics raise; otherwise they are kept
            as generic diagnostics.

    Returns:
        The composition result. Unparseable output yields a failed result with
        one generic diagnostic.
    """
    try:
        payload: object = json.loads(text)
    except json.JSONDecodeError as exc:
        return _unexpected(f"Could not parse composition output as JSON: {exc}")
    return interpret_composition_output(payload, strict=strict)


def parse_engine_output(text: str, *, strict: bool = True) -> CompositionResult:
    """Parse any supported engine payload from JSON text.

    See `interpret_engine_payload` for the accepted shapes.

    Args:
        text: Raw JSON text.
        strict: If True, malformed diagnostics raise.

    Returns:
        The composition result. Unparseable text yields a failed result with
        one generic diagnostic.
    """
    try:
        payload: object = json.loads(text)
    except json.JSONDecodeError as exc:
        return _unexpected(f"Could not parse composition output as JSON: {exc}")
    return interpret_engine_payload(payload, strict=strict)
