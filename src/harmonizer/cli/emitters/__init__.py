# topmark:header:start
#
#   project      : Harmonizer
#   file         : __init__.py
#   file_relpath : src/harmonizer/cli/emitters/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output emitters for the Harmonizer CLI (text, Markdown, JSON/NDJSON)."""

from __future__ import annotations

from harmonizer.cli.emitters.machine import emit_composition_machine
from harmonizer.cli.emitters.markdown import render_composition_markdown
from harmonizer.cli.emitters.text import emit_composition_text, render_diagnostic_line

__all__ = [
    "emit_composition_machine",
    "emit_composition_text",
    "render_composition_markdown",
    "render_diagnostic_line",
]
