# topmark:header:start
#
#   project      : Harmonizer
#   file         : __init__.py
#   file_relpath : src/harmonizer/build/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Host build-error taxonomy and the diagnostic → build-error conversion."""

from __future__ import annotations

from harmonizer.build.convert import to_build_error, to_build_errors
from harmonizer.build.model import BuildError, BuildErrors, BuildErrorType

__all__ = [
    "BuildError",
    "BuildErrorType",
    "BuildErrors",
    "to_build_error",
    "to_build_errors",
]
