# topmark:header:start
#
#   project      : Harmonizer
#   file         : errors.py
#   file_relpath : src/harmonizer/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exception hierarchy for the Harmonizer library layer.

These exceptions are Click-free; the CLI maps them onto its own
`click.ClickException` subclasses (see [`harmonizer.cli.errors`][harmonizer.cli.errors])
to obtain standardized exit codes.

Taxonomy:
    - `DiagnosticDecodeError`: malformed diagnostic JSON coming from the
      composition engine. Subclassed by `DiagnosticTypeError` (a field holds a
      value of the wrong JSON type) and `MissingFieldError` (a required field is
      absent).
    - `CompositionFailedError`: raised on request when a composition result
      carries build errors.
    - `ConfigError`: invalid or unreadable configuration.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from harmonizer.constants import RAW_FRAGMENT_MAX_LEN

if TYPE_CHECKING:
    from harmonizer.build.model import BuildErrors


def format_raw_fragment(raw: object, *, max_len: int = RAW_FRAGMENT_MAX_LEN) -> str:
    """Render a raw JSON fragment compactly for inclusion in an error message.

    Args:
        raw: The offending JSON value.
        max_len: Maximum number of characters to keep.

    Returns:
        Compact JSON text, truncated with an ellipsis when longer than `max_len`.
    """
    try:
        text: str = json.dumps(raw, sort_keys=True, separators=(",", ":"))
    except (TypeError, ValueError):
        text = repr(raw)
    if len(text) > max_len:
        return text[: max_len - 1] + "…"
    return text


class HarmonizerError(Exception):
    """Base class for all Harmonizer library errors."""


class DiagnosticDecodeError(HarmonizerError, ValueError):
    """A diagnostic reported by the composition engine could not be decoded.

    Attributes:
        reason: Short description of what is wrong.
        field: Name of the offending field, if the failure concerns one field.
        raw: The offending JSON fragment (the whole object being decoded).
    """

    def __init__(self, reason: str, *, raw: object, field: str | None = None) -> None:
        self.reason: str = reason
        self.field: str | None = field
        self.raw: object = raw
        super().__init__(f"{reason} (in {format_raw_fragment(raw)})")


class DiagnosticTypeError(DiagnosticDecodeError):
    """A diagnostic field holds a JSON value of the wrong type."""


class MissingFieldError(DiagnosticDecodeError):
    """A diagnostic lacks a field that is required in its context."""


class CompositionFailedError(HarmonizerError):
    """Composition reported one or more build errors.

    Attributes:
        errors: The collected build errors.
    """

    def __init__(self, errors: BuildErrors) -> None:
        self.errors: BuildErrors = errors
        super().__init__(str(errors))


class ConfigError(HarmonizerError):
    """Invalid, malformed, or unreadable Harmonizer configuration."""
