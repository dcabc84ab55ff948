# topmark:header:start
#
#   project      : Harmonizer
#   file         : test_decode_property.py
#   file_relpath : tests/diagnostic/test_decode_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for diagnostic decoding, rendering and conversion.

For any well-formed flattened object:
1) no field is lost: message, code and every passthrough field survive decoding;
2) the rendering follows the ``CODE: message`` contract;
3) the converted build error renders identically.
"""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import given, settings

from harmonizer.build import BuildError, BuildErrorType
from harmonizer.core.errors import MissingFieldError
from harmonizer.diagnostic import Diagnostic, decode_diagnostic, thaw_json
from tests.strategies_harmonizer import s_codeless_extensions, s_wire_diagnostic


@settings(max_examples=150, deadline=None)
@given(obj=s_wire_diagnostic())
def test_decode_preserves_every_field(obj: dict[str, Any]) -> None:
    """Decoding keeps message, code and passthrough fields verbatim."""
    d: Diagnostic = decode_diagnostic(obj)

    assert d.message == obj.get("message")
    assert d.code == obj.get("code")
    assert thaw_json(d.other) == {k: v for k, v in obj.items() if k not in ("code", "message")}

    expected: dict[str, Any] = {"message": None, **obj}
    assert d.to_dict() == expected


@settings(max_examples=150, deadline=None)
@given(obj=s_wire_diagnostic())
def test_rendering_and_conversion_agree(obj: dict[str, Any]) -> None:
    """The build error mirrors the diagnostic's code, message and rendering."""
    d: Diagnostic = decode_diagnostic(obj)
    code: str = obj.get("code") or "UNKNOWN"
    message: str | None = obj.get("message")

    rendered: str = str(d)
    assert rendered == (code if message is None else f"{code}: {message}")

    err: BuildError = d.to_build_error()
    assert err.type is BuildErrorType.COMPOSITION
    assert (err.code, err.message) == (d.code, d.message)
    assert str(err) == rendered


@pytest.mark.hypothesis_slow
@settings(max_examples=500, deadline=None)
@given(obj=s_codeless_extensions())
def test_extension_fields_require_code(obj: dict[str, Any]) -> None:
    """Any extension field without ``code`` is rejected."""
    with pytest.raises(MissingFieldError):
        decode_diagnostic(obj)
