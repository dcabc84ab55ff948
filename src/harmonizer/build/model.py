# topmark:header:start
#
#   project      : Harmonizer
#   file         : model.py
#   file_relpath : src/harmonizer/build/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Host build-error model.

`BuildError` is the lowest common denominator shared by every error producer
of the host pipeline, composition being only one of them. It therefore carries
nothing but a type, an optional code and an optional message; bridge-specific
metadata is narrowed away before reaching it.

`BuildErrors` is the ordered collection handed to the aggregator.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from harmonizer.config.logging import get_logger
from harmonizer.constants import UNKNOWN_CODE

if TYPE_CHECKING:
    from harmonizer.config.logging import HarmonizerLogger
    from harmonizer.diagnostic.model import Diagnostic


logger: HarmonizerLogger = get_logger(__name__)


class BuildErrorType(Enum):
    """Origin of a build error."""

    COMPOSITION = "composition"
    CONFIG = "config"


@dataclass(frozen=True)
class BuildError:
    """A single error produced while building a supergraph.

    Attributes:
        message: Human-readable description, if any.
        code: Classification code, if any.
        type: Which stage of the build produced the error.
    """

    message: str | None
    code: str | None
    type: BuildErrorType

    @classmethod
    def composition_error(cls, code: str | None, message: str | None) -> BuildError:
        """Create a build error reported by composition.

        Args:
            code: Composition error code, if known.
            message: Human-readable description, if any.

        Returns:
            A `BuildError` of type `BuildErrorType.COMPOSITION`.
        """
        return cls(message=message, code=code, type=BuildErrorType.COMPOSITION)

    @classmethod
    def config_error(cls, message: str | None) -> BuildError:
        """Create a build error caused by invalid build configuration."""
        return cls(message=message, code=None, type=BuildErrorType.CONFIG)

    def __str__(self) -> str:
        """Render as ``"{code}: {message}"`` with an ``UNKNOWN`` code fallback."""
        code: str = self.code if self.code is not None else UNKNOWN_CODE
        if self.message is not None:
            return f"{code}: {self.message}"
        return code

    def to_dict(self) -> dict[str, str | None]:
        """Return a JSON-friendly dict of this build error."""
        return {
            "type": self.type.value,
            "code": self.code,
            "message": self.message,
        }


@dataclass
class BuildErrors:
    """Ordered, mutable collection of build errors."""

    items: list[BuildError] = field(default_factory=lambda: [])

    @classmethod
    def from_diagnostics(cls, diagnostics: Iterable[Diagnostic]) -> BuildErrors:
        """Convert each diagnostic into a `BuildError`, preserving order.

        Args:
            diagnostics: Decoded composition diagnostics.

        Returns:
            A new collection with one build error per diagnostic.
        """
        errors = cls()
        for diagnostic in diagnostics:
            errors.push(diagnostic.to_build_error())
        return errors

    def push(self, error: BuildError) -> None:
        """Append a build error."""
        self.items.append(error)
        logger.trace("Adding build error: %s", error)

    def extend(self, errors: Iterable[BuildError]) -> None:
        """Append several build errors."""
        for error in errors:
            self.push(error)

    def is_empty(self) -> bool:
        """Return True if the collection holds no errors."""
        return not self.items

    def to_list(self) -> list[dict[str, str | None]]:
        """Return a JSON-friendly list of the contained errors."""
        return [e.to_dict() for e in self.items]

    def __iter__(self) -> Iterator[BuildError]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return bool(self.items)

    def __str__(self) -> str:
        n: int = len(self.items)
        noun: str = "error" if n == 1 else "errors"
        return f"Encountered {n} build {noun} while trying to build a supergraph."
