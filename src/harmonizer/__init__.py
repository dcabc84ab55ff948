# topmark:header:start
#
#   project      : Harmonizer
#   file         : __init__.py
#   file_relpath : src/harmonizer/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Harmonizer package.

Harmonizer is the diagnostics bridge between an external schema composition
engine and a host build pipeline. It decodes the errors the engine reports into
typed `Diagnostic` values (without losing unknown extension fields) and converts
them into the host's `BuildError` taxonomy.
"""

from __future__ import annotations

from harmonizer.build.model import BuildError, BuildErrors, BuildErrorType
from harmonizer.composition.output import CompositionResult, parse_composition_output
from harmonizer.core.errors import (
    CompositionFailedError,
    DiagnosticDecodeError,
    DiagnosticTypeError,
    MissingFieldError,
)
from harmonizer.diagnostic.decode import decode_diagnostic, decode_diagnostics, loads_diagnostic
from harmonizer.diagnostic.model import Diagnostic, ErrorExtensions

__all__ = [
    "BuildError",
    "BuildErrorType",
    "BuildErrors",
    "CompositionFailedError",
    "CompositionResult",
    "Diagnostic",
    "DiagnosticDecodeError",
    "DiagnosticTypeError",
    "ErrorExtensions",
    "MissingFieldError",
    "decode_diagnostic",
    "decode_diagnostics",
    "loads_diagnostic",
    "parse_composition_output",
]
