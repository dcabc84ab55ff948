# topmark:header:start
#
#   project      : Harmonizer
#   file         : __init__.py
#   file_relpath : src/harmonizer/composition/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Composition result envelopes reported by the external engine."""

from __future__ import annotations

from harmonizer.composition.output import (
    CompositionResult,
    interpret_composition_output,
    interpret_engine_payload,
    parse_composition_output,
    parse_engine_output,
)

__all__ = [
    "CompositionResult",
    "interpret_composition_output",
    "interpret_engine_payload",
    "parse_composition_output",
    "parse_engine_output",
]
