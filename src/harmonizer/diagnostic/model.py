# topmark:header:start
#
#   project      : Harmonizer
#   file         : model.py
#   file_relpath : src/harmonizer/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core diagnostic types for composition errors.

A composition diagnostic mimics the error object produced by the external
composition engine (a `GraphQLError`-like value): a human-readable message plus
an `extensions` block whose fields are flattened next to the message on the
wire.

Sections:
    * KNOWN_ERROR_CODES: documented, non-exhaustive composition error codes.
    * ErrorExtensions: the classification code plus a read-only passthrough bag
      holding every other extension field verbatim.
    * Diagnostic: immutable decoded error (message + optional extensions), with
      its stable textual rendering and its conversion into a host `BuildError`.

Decoding from JSON lives in [`harmonizer.diagnostic.decode`][harmonizer.diagnostic.decode].
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final, cast

from harmonizer.build.model import BuildError
from harmonizer.constants import CODE_FIELD, MESSAGE_FIELD, UNKNOWN_CODE

if TYPE_CHECKING:
    from harmonizer.diagnostic.types import FrozenJsonValue, JsonObject, JsonValue


# Non-exhaustive: newer engine versions add codes without notice.
KNOWN_ERROR_CODES: Final[frozenset[str]] = frozenset(
    {
        "EXTERNAL_TYPE_MISMATCH",
        "EXTERNAL_UNUSED",
        "KEY_FIELDS_MISSING_ON_BASE",
        "KEY_MISSING_ON_BASE",
        "KEY_NOT_SPECIFIED",
        "PROVIDES_FIELDS_MISSING_EXTERNAL",
    }
)


def _empty_other() -> Mapping[str, FrozenJsonValue]:
    return MappingProxyType({})


def freeze_json(value: JsonValue | FrozenJsonValue) -> FrozenJsonValue:
    """Return a read-only copy of a JSON value.

    Objects become `MappingProxyType` views over fresh dicts and arrays become
    tuples, recursively. Scalars are returned as is.
    """
    if isinstance(value, Mapping):
        obj: Mapping[str, Any] = cast("Mapping[str, Any]", value)
        return MappingProxyType({k: freeze_json(v) for k, v in obj.items()})
    if isinstance(value, (list, tuple)):
        items: list[Any] | tuple[Any, ...] = cast("list[Any] | tuple[Any, ...]", value)
        return tuple(freeze_json(v) for v in items)
    return value


def thaw_json(value: JsonValue | FrozenJsonValue) -> JsonValue:
    """Return a plain, mutable copy of a (possibly frozen) JSON value."""
    if isinstance(value, Mapping):
        obj: Mapping[str, Any] = cast("Mapping[str, Any]", value)
        return {k: thaw_json(v) for k, v in obj.items()}
    if isinstance(value, (list, tuple)):
        items: list[Any] | tuple[Any, ...] = cast("list[Any] | tuple[Any, ...]", value)
        return [thaw_json(v) for v in items]
    return value


@dataclass(frozen=True)
class ErrorExtensions:
    """Structured metadata attached to a composition diagnostic.

    Attributes:
        code: Composition error code, e.g. ``"KEY_FIELDS_MISSING_ON_BASE"``.
            Drawn from an open vocabulary; see `KNOWN_ERROR_CODES`.
        other: Every other extension field, preserved verbatim. Stored as a
            deep read-only copy (see `freeze_json`): nested objects are
            read-only mappings and arrays are tuples. Fields unknown to this
            version of Harmonizer end up here.

    Instances compare by value but are not hashable.
    """

    code: str
    other: Mapping[str, JsonValue | FrozenJsonValue] = field(default_factory=_empty_other)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        """Freeze `other` and reject keys that would shadow the wire fields.

        Raises:
            ValueError: If `other` contains a ``code`` or ``message`` key.
        """
        shadowed: set[str] = {CODE_FIELD, MESSAGE_FIELD}.intersection(self.other)
        if shadowed:
            raise ValueError(
                f"Passthrough extension fields must not use reserved keys: {sorted(shadowed)}"
            )
        object.__setattr__(self, "other", freeze_json(self.other))

    @property
    def is_known_code(self) -> bool:
        """Return True if `code` is one of the documented composition error codes."""
        return self.code in KNOWN_ERROR_CODES

    def to_dict(self) -> JsonObject:
        """Return the flattened wire representation (``code`` plus passthrough fields)."""
        out: JsonObject = {CODE_FIELD: self.code}
        out.update({k: thaw_json(v) for k, v in self.other.items()})
        return out


@dataclass(frozen=True)
class Diagnostic:
    """One decoded error reported by the external composition engine.

    Both fields are optional. A diagnostic with neither is legal and renders as
    the ``UNKNOWN`` placeholder. Like `ErrorExtensions`, diagnostics are not
    hashable.

    Attributes:
        message: Human-readable description of the error that prevented composition.
        extensions: Structured metadata, present only when the engine attached some.
    """

    message: str | None = None
    extensions: ErrorExtensions | None = None

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def generic(cls, message: str) -> Diagnostic:
        """Create a diagnostic for a failure detected by Harmonizer itself.

        Used when the engine output cannot be interpreted at all; such
        diagnostics carry no extensions and therefore render with the
        ``UNKNOWN`` code.

        Args:
            message: Description of the failure.

        Returns:
            A diagnostic with `message` set and no extensions.
        """
        return cls(message=message, extensions=None)

    @classmethod
    def from_dict(cls, obj: object) -> Diagnostic:
        """Decode a diagnostic from a parsed JSON object.

        See [`decode_diagnostic`][harmonizer.diagnostic.decode.decode_diagnostic].

        Args:
            obj: A parsed JSON value, expected to be an object.

        Returns:
            The decoded diagnostic.
        """
        from harmonizer.diagnostic.decode import decode_diagnostic

        return decode_diagnostic(obj)

    @property
    def code(self) -> str | None:
        """Return the extension code, or None when there are no extensions."""
        return self.extensions.code if self.extensions is not None else None

    @property
    def other(self) -> Mapping[str, JsonValue | FrozenJsonValue]:
        """Return the read-only passthrough extension fields (empty without extensions)."""
        return self.extensions.other if self.extensions is not None else _empty_other()

    def __str__(self) -> str:
        """Render as ``"{code}: {message}"``, or ``"{code}"`` without a message.

        The code falls back to ``UNKNOWN`` when there are no extensions. This
        form is relied upon by tooling that greps logs for the code prefix.
        """
        code: str = self.code if self.code is not None else UNKNOWN_CODE
        if self.message is not None:
            return f"{code}: {self.message}"
        return code

    def to_dict(self) -> JsonObject:
        """Return the flattened wire representation of this diagnostic.

        Returns:
            A JSON object with ``message`` (possibly ``None``) and, when
            extensions are present, ``code`` plus every passthrough field.
        """
        out: JsonObject = {MESSAGE_FIELD: self.message}
        if self.extensions is not None:
            out.update(self.extensions.to_dict())
        return out

    def to_build_error(self) -> BuildError:
        """Convert into the host's `BuildError`.

        Only ``code`` and ``message`` cross this boundary; passthrough fields in
        `other` are dropped.

        Returns:
            A composition-type `BuildError`.
        """
        return BuildError.composition_error(self.code, self.message)
