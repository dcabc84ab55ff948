# topmark:header:start
#
#   project      : Harmonizer
#   file         : test_render.py
#   file_relpath : tests/diagnostic/test_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the stable textual rendering of diagnostics.

Log-scraping tooling greps for the ``CODE:`` prefix, so the exact format is a
contract: ``"{code}: {message}"``, ``"{code}"`` without a message, and
``UNKNOWN`` in place of a missing code.
"""

from __future__ import annotations

import pytest

from harmonizer.diagnostic import Diagnostic, ErrorExtensions, decode_diagnostic
from tests.conftest import parametrize


@parametrize(
    "diagnostic, expected",
    [
        (
            Diagnostic(message="boom", extensions=ErrorExtensions(code="EXTERNAL_UNUSED")),
            "EXTERNAL_UNUSED: boom",
        ),
        (
            Diagnostic(message=None, extensions=ErrorExtensions(code="KEY_NOT_SPECIFIED")),
            "KEY_NOT_SPECIFIED",
        ),
        (Diagnostic(message="boom", extensions=None), "UNKNOWN: boom"),
        (Diagnostic(), "UNKNOWN"),
        (Diagnostic(message="", extensions=ErrorExtensions(code="X")), "X: "),
    ],
)
def test_render(diagnostic: Diagnostic, expected: str) -> None:
    """Each shape renders to its documented form."""
    assert str(diagnostic) == expected


def test_render_ignores_passthrough_fields() -> None:
    """Passthrough fields never show up in the one-line rendering."""
    d: Diagnostic = decode_diagnostic({"message": "m", "code": "C", "nodes": [1, 2], "hint": "h"})

    assert str(d) == "C: m"


def test_generic_renders_unknown() -> None:
    """Generic diagnostics carry no code."""
    d: Diagnostic = Diagnostic.generic("Could not parse composition output")

    assert d.extensions is None
    assert str(d) == "UNKNOWN: Could not parse composition output"


@parametrize("key", ["code", "message"])
def test_extensions_reject_reserved_keys(key: str) -> None:
    """`other` may not shadow the wire fields."""
    with pytest.raises(ValueError, match="reserved"):
        ErrorExtensions(code="C", other={key: "x"})


def test_extensions_copy_other() -> None:
    """Constructing extensions snapshots the given mapping."""
    source: dict[str, object] = {"a": 1}
    ext = ErrorExtensions(code="C", other=source)  # type: ignore[arg-type]

    source["b"] = 2

    assert dict(ext.other) == {"a": 1}
    assert ext.to_dict() == {"code": "C", "a": 1}


def test_extensions_copy_nested_values() -> None:
    """Nested values given to the constructor are copied, not shared."""
    nodes: list[dict[str, str]] = [{"subgraph": "a"}]
    ext = ErrorExtensions(code="C", other={"nodes": nodes})  # type: ignore[arg-type]

    nodes[0]["subgraph"] = "mutated"
    nodes.append({"subgraph": "b"})

    assert ext.to_dict() == {"code": "C", "nodes": [{"subgraph": "a"}]}
    assert ext == ErrorExtensions(code="C", other={"nodes": [{"subgraph": "a"}]})
