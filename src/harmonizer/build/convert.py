# topmark:header:start
#
#   project      : Harmonizer
#   file         : convert.py
#   file_relpath : src/harmonizer/build/convert.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Conversion of composition diagnostics into host build errors.

The conversion is total: every legal `Diagnostic` maps onto a `BuildError`.
Passthrough extension fields never cross this seam; anything the host needs
long-term belongs in `BuildError` itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from harmonizer.build.model import BuildErrors

if TYPE_CHECKING:
    from collections.abc import Iterable

    from harmonizer.build.model import BuildError
    from harmonizer.diagnostic.model import Diagnostic


def to_build_error(diagnostic: Diagnostic) -> BuildError:
    """Convert one diagnostic into a composition `BuildError`.

    Args:
        diagnostic: The decoded diagnostic.

    Returns:
        The build error carrying the diagnostic's code and message.
    """
    return diagnostic.to_build_error()


def to_build_errors(diagnostics: Iterable[Diagnostic]) -> BuildErrors:
    """Convert diagnostics into a `BuildErrors` collection, preserving order."""
    return BuildErrors.from_diagnostics(diagnostics)
