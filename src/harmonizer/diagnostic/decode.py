# topmark:header:start
#
#   project      : Harmonizer
#   file         : decode.py
#   file_relpath : src/harmonizer/diagnostic/decode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decode composition diagnostics from engine JSON.

Wire shape of one diagnostic:

    { "message"?: string, "code"?: string, ...extra fields }

The extension block is flattened next to ``message``. Decoding therefore
destructures the object explicitly:

1. ``message`` is taken out first (a string, or ``null`` / absent).
2. Every remaining field belongs to the extension block. An empty remainder
   means "no extensions"; a non-empty one must carry a string ``code``.
3. Whatever is left after removing ``code`` is kept verbatim, as a deep
   read-only copy, in `ErrorExtensions.other`.

Decoding is lenient about *unknown* data (unrecognized codes and fields are
kept) but strict about *malformed* data: wrong types and a missing ``code``
raise `DiagnosticDecodeError` subclasses carrying the offending fragment.

All functions here are pure and keep no state between calls.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, cast

from harmonizer.config.logging import get_logger
from harmonizer.constants import CODE_FIELD, MESSAGE_FIELD
from harmonizer.core.errors import (
    DiagnosticDecodeError,
    DiagnosticTypeError,
    MissingFieldError,
)
from harmonizer.diagnostic.model import Diagnostic, ErrorExtensions

if TYPE_CHECKING:
    from harmonizer.config.logging import HarmonizerLogger
    from harmonizer.diagnostic.types import JsonValue


logger: HarmonizerLogger = get_logger(__name__)


def _json_type_name(value: object) -> str:
    """Return the JSON type name of a parsed value, for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _decode_message(obj: dict[str, Any]) -> str | None:
    if MESSAGE_FIELD not in obj:
        return None
    value: object = obj[MESSAGE_FIELD]
    if value is None or isinstance(value, str):
        return value
    raise DiagnosticTypeError(
        f"invalid type for '{MESSAGE_FIELD}': expected string, got {_json_type_name(value)}",
        raw=obj,
        field=MESSAGE_FIELD,
    )


def _decode_extensions(obj: dict[str, Any]) -> ErrorExtensions | None:
    rest: dict[str, Any] = {k: v for k, v in obj.items() if k != MESSAGE_FIELD}
    if not rest:
        return None

    if CODE_FIELD not in rest:
        raise MissingFieldError(
            f"missing field '{CODE_FIELD}' alongside extension fields "
            f"{sorted(rest)}",
            raw=obj,
            field=CODE_FIELD,
        )
    code: object = rest.pop(CODE_FIELD)
    if not isinstance(code, str):
        raise DiagnosticTypeError(
            f"invalid type for '{CODE_FIELD}': expected string, got {_json_type_name(code)}",
            raw=obj,
            field=CODE_FIELD,
        )

    other: dict[str, JsonValue] = rest
    extensions = ErrorExtensions(code=code, other=other)
    if not extensions.is_known_code:
        logger.debug("Decoded unrecognized composition error code %r", code)
    if other:
        logger.trace("Keeping passthrough extension fields for %s: %s", code, sorted(other))
    return extensions


def decode_diagnostic(obj: object) -> Diagnostic:
    """Decode one diagnostic from a parsed JSON value.

    Args:
        obj: A parsed JSON value; must be an object.

    Returns:
        The decoded diagnostic.

    Raises:
        DiagnosticTypeError: If `obj` is not an object, or ``message`` / ``code``
            hold a value of the wrong type.
        MissingFieldError: If extension fields are present without ``code``.
    """
    if not isinstance(obj, dict):
        raise DiagnosticTypeError(
            f"invalid diagnostic: expected object, got {_json_type_name(obj)}",
            raw=obj,
        )
    mapping: dict[str, Any] = cast("dict[str, Any]", obj)
    diagnostic = Diagnostic(
        message=_decode_message(mapping),
        extensions=_decode_extensions(mapping),
    )
    logger.trace("Decoded diagnostic: %s", diagnostic)
    return diagnostic


def decode_diagnostics(items: object) -> list[Diagnostic]:
    """Decode a JSON array of diagnostics.

    Decoding stops at the first malformed entry; its error propagates.

    Args:
        items: A parsed JSON value; must be an array of objects.

    Returns:
        The decoded diagnostics, in input order.

    Raises:
        DiagnosticTypeError: If `items` is not an array.
    """
    if not isinstance(items, list):
        raise DiagnosticTypeError(
            f"invalid diagnostics: expected array, got {_json_type_name(items)}",
            raw=items,
        )
    return [decode_diagnostic(item) for item in cast("list[object]", items)]


def loads_diagnostic(text: str) -> Diagnostic:
    """Decode one diagnostic from JSON text.

    Args:
        text: JSON document containing a single diagnostic object.

    Returns:
        The decoded diagnostic.

    Raises:
        DiagnosticDecodeError: If `text` is not valid JSON or does not decode.
    """
    try:
        obj: object = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DiagnosticDecodeError(f"invalid JSON: {exc}", raw=text) from exc
    return decode_diagnostic(obj)
