# topmark:header:start
#
#   project      : Harmonizer
#   file         : schemas.py
#   file_relpath : src/harmonizer/diagnostic/machine/schemas.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Typed payload schemas for machine-readable diagnostics.

These small, JSON-friendly dataclasses belong to the payload layer
(schemas → shapes → serializers):

- `MachineDiagnosticEntry` represents a single decoded diagnostic, including its
  passthrough extension fields.
- `MachineCompositionSummary` summarizes a composition result.

Build errors serialize through `BuildError.to_dict()` directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from harmonizer.core.machine.schemas import MachineKey
from harmonizer.diagnostic.model import thaw_json

if TYPE_CHECKING:
    from harmonizer.composition.output import CompositionResult
    from harmonizer.diagnostic.model import Diagnostic
    from harmonizer.diagnostic.types import JsonObject


@dataclass(slots=True)
class MachineDiagnosticEntry:
    """Machine-readable diagnostic entry.

    Attributes:
        code: Extension code, or None without extensions.
        message: Human-readable message, if any.
        rendered: The stable one-line textual rendering.
        extensions: Passthrough extension fields (everything but ``code``).
    """

    code: str | None
    message: str | None
    rendered: str
    extensions: JsonObject = field(default_factory=lambda: {})

    @classmethod
    def from_diagnostic(cls, d: Diagnostic) -> MachineDiagnosticEntry:
        """Create a machine-readable entry from a decoded diagnostic.

        Args:
            d: Decoded diagnostic.

        Returns:
            The entry, with passthrough fields copied into a plain dict.
        """
        return cls(
            code=d.code,
            message=d.message,
            rendered=str(d),
            extensions={k: thaw_json(v) for k, v in d.other.items()},
        )

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly dict of this diagnostic entry."""
        return {
            MachineKey.CODE: self.code,
            MachineKey.MESSAGE: self.message,
            MachineKey.RENDERED: self.rendered,
            MachineKey.EXTENSIONS: self.extensions,
        }


@dataclass(slots=True)
class MachineCompositionSummary:
    """Aggregated outcome of one composition run.

    Attributes:
        ok: Whether composition produced a supergraph.
        error_count: Number of build errors.
        hint_count: Number of hints.
        supergraph_sdl: Composed schema, success only.
    """

    ok: bool
    error_count: int
    hint_count: int
    supergraph_sdl: str | None = None

    @classmethod
    def from_result(cls, result: CompositionResult) -> MachineCompositionSummary:
        """Summarize a composition result."""
        return cls(
            ok=result.ok,
            error_count=len(result.errors),
            hint_count=len(result.hints),
            supergraph_sdl=result.supergraph_sdl,
        )

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly dict of the summary."""
        return {
            MachineKey.OK: self.ok,
            MachineKey.ERROR_COUNT: self.error_count,
            MachineKey.HINT_COUNT: self.hint_count,
            MachineKey.SUPERGRAPH_SDL: self.supergraph_sdl,
        }
