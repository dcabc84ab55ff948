# topmark:header:start
#
#   project      : Harmonizer
#   file         : test_output.py
#   file_relpath : tests/composition/test_output.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for interpreting the composition engine's result envelope."""

from __future__ import annotations

import json
from typing import Any

import pytest

from harmonizer.composition import (
    CompositionResult,
    interpret_composition_output,
    interpret_engine_payload,
    parse_composition_output,
    parse_engine_output,
)
from harmonizer.core.errors import CompositionFailedError, DiagnosticDecodeError, MissingFieldError
from harmonizer.diagnostic import thaw_json
from tests.conftest import (
    EXTERNAL_UNUSED_ERROR,
    HINT_INCONSISTENT_FIELD,
    KEY_FIELDS_ERROR,
    SUPERGRAPH_SDL,
    engine_err,
    engine_ok,
    parametrize,
)


def test_ok_envelope() -> None:
    """A successful run carries the SDL and its hints."""
    result: CompositionResult = parse_composition_output(engine_ok(hints=[HINT_INCONSISTENT_FIELD]))

    assert result.ok
    assert not result.failed
    assert result.supergraph_sdl == SUPERGRAPH_SDL
    assert [h.code for h in result.hints] == ["INCONSISTENT_OBJECT_VALUE_TYPE_FIELD"]
    assert result.diagnostics == ()
    assert result.errors.is_empty()
    result.raise_for_errors()


def test_ok_envelope_without_hints() -> None:
    """``hints`` is optional in a successful envelope."""
    result: CompositionResult = parse_composition_output(
        json.dumps({"Ok": {"supergraphSdl": SUPERGRAPH_SDL}})
    )

    assert result.ok
    assert result.hints == ()


def test_ok_envelope_with_null_hints() -> None:
    """``hints: null`` is read as no hints; the supergraph is kept."""
    result: CompositionResult = parse_composition_output(
        json.dumps({"Ok": {"supergraphSdl": SUPERGRAPH_SDL, "hints": None}})
    )

    assert result.ok
    assert result.supergraph_sdl == SUPERGRAPH_SDL
    assert result.hints == ()
    assert result.errors.is_empty()


def test_err_envelope_converts_every_diagnostic() -> None:
    """A failed run yields one build error per diagnostic, in order."""
    result: CompositionResult = parse_composition_output(
        engine_err(KEY_FIELDS_ERROR, EXTERNAL_UNUSED_ERROR)
    )

    assert result.failed
    assert not result.ok
    assert result.supergraph_sdl is None
    assert [d.code for d in result.diagnostics] == [
        "KEY_FIELDS_MISSING_ON_BASE",
        "EXTERNAL_UNUSED",
    ]
    assert [str(e) for e in result.errors] == [str(d) for d in result.diagnostics]
    assert thaw_json(result.diagnostics[1].other) == {"nodes": EXTERNAL_UNUSED_ERROR["nodes"]}


def test_raise_for_errors() -> None:
    """A failed result raises with the collected build errors."""
    result: CompositionResult = parse_composition_output(engine_err(KEY_FIELDS_ERROR))

    with pytest.raises(CompositionFailedError) as excinfo:
        result.raise_for_errors()

    assert len(excinfo.value.errors) == 1
    assert "Encountered 1 build error" in str(excinfo.value)


def test_iter_all_lists_errors_then_hints() -> None:
    """`iter_all` yields error diagnostics before hints."""
    result = CompositionResult.success(SUPERGRAPH_SDL)
    assert list(result.iter_all()) == []

    failed: CompositionResult = parse_composition_output(engine_err(KEY_FIELDS_ERROR, {}))
    assert [str(d) for d in failed.iter_all()] == [
        f"KEY_FIELDS_MISSING_ON_BASE: {KEY_FIELDS_ERROR['message']}",
        "UNKNOWN",
    ]


@parametrize(
    "text",
    [
        "not json at all",
        "",
        "[1, 2",
    ],
)
def test_unparseable_output_yields_generic_error(text: str) -> None:
    """Unparseable output becomes one generic build error."""
    result: CompositionResult = parse_composition_output(text)

    assert result.failed
    assert len(result.errors) == 1
    (err,) = result.errors
    assert err.code is None
    assert str(err).startswith("UNKNOWN: Could not parse composition output as JSON")


@parametrize(
    "payload",
    [
        [],
        "Ok",
        {},
        {"Ok": {"supergraphSdl": "x"}, "Err": []},
        {"Maybe": []},
        {"Err": {"message": "m"}},
        {"Ok": "sdl"},
        {"Ok": {"hints": []}},
        {"Ok": {"supergraphSdl": 3}},
        {"Ok": {"supergraphSdl": "x", "hints": {}}},
    ],
)
def test_unexpected_envelope_yields_generic_error(payload: Any) -> None:
    """Shapes other than ``{"Ok": ...}`` / ``{"Err": [...]}`` fail generically."""
    result: CompositionResult = interpret_composition_output(payload)

    assert result.failed
    assert len(result.diagnostics) == 1
    assert result.diagnostics[0].extensions is None
    assert "Unexpected composition output" in (result.diagnostics[0].message or "")


def test_strict_mode_raises_on_malformed_entry() -> None:
    """In strict mode, a malformed diagnostic propagates its decode error."""
    text: str = engine_err(KEY_FIELDS_ERROR, {"message": "m", "nodes": []})

    with pytest.raises(MissingFieldError):
        parse_composition_output(text, strict=True)


def test_strict_mode_raises_on_malformed_hint() -> None:
    """Hints are decoded with the same rules as errors."""
    text: str = engine_ok(hints=[{"code": 12}])

    with pytest.raises(DiagnosticDecodeError):
        parse_composition_output(text)


def test_lenient_mode_keeps_malformed_entry_as_generic() -> None:
    """In lenient mode, a malformed diagnostic becomes a generic one in place."""
    text: str = engine_err(KEY_FIELDS_ERROR, {"message": "m", "nodes": []}, EXTERNAL_UNUSED_ERROR)

    result: CompositionResult = parse_composition_output(text, strict=False)

    assert result.failed
    assert [d.code for d in result.diagnostics] == [
        "KEY_FIELDS_MISSING_ON_BASE",
        None,
        "EXTERNAL_UNUSED",
    ]
    generic_message: str = result.diagnostics[1].message or ""
    assert generic_message.startswith("Malformed composition diagnostic: missing field 'code'")


def test_engine_payload_accepts_bare_array() -> None:
    """A bare array of diagnostics is a failed result."""
    result: CompositionResult = parse_engine_output(json.dumps([KEY_FIELDS_ERROR]))

    assert result.failed
    assert [e.code for e in result.errors] == ["KEY_FIELDS_MISSING_ON_BASE"]


def test_engine_payload_accepts_empty_array() -> None:
    """An empty array reports nothing: no errors, no supergraph."""
    result: CompositionResult = interpret_engine_payload([])

    assert result.ok
    assert result.supergraph_sdl is None
    assert result.errors.is_empty()


def test_engine_payload_accepts_single_object() -> None:
    """A single diagnostic object is a failed result with one error."""
    result: CompositionResult = interpret_engine_payload(EXTERNAL_UNUSED_ERROR)

    assert result.failed
    assert [str(d) for d in result.diagnostics] == [
        f"EXTERNAL_UNUSED: {EXTERNAL_UNUSED_ERROR['message']}"
    ]


def test_engine_payload_routes_envelopes() -> None:
    """Envelopes are recognized by the generic entry point too."""
    assert parse_engine_output(engine_ok()).supergraph_sdl == SUPERGRAPH_SDL
    assert parse_engine_output(engine_err(KEY_FIELDS_ERROR)).failed


@parametrize("payload", [3, "text", None, True])
def test_engine_payload_rejects_scalars(payload: object) -> None:
    """Scalars are not engine output."""
    result: CompositionResult = interpret_engine_payload(payload)

    assert result.failed
    assert "Unexpected engine output" in (result.diagnostics[0].message or "")
