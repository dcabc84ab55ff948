# topmark:header:start
#
#   project      : Harmonizer
#   file         : markdown.py
#   file_relpath : src/harmonizer/cli/emitters/markdown.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markdown output for composition results (colorless, document-shaped)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from harmonizer.constants import UNKNOWN_CODE

if TYPE_CHECKING:
    from collections.abc import Iterable

    from harmonizer.composition.output import CompositionResult
    from harmonizer.diagnostic.model import Diagnostic


def _cell(text: str | None) -> str:
    if text is None:
        return ""
    return text.replace("|", "\\|").replace("\n", "<br>")


def _table(diagnostics: Iterable[Diagnostic]) -> list[str]:
    lines: list[str] = ["| Code | Message |", "| --- | --- |"]
    for d in diagnostics:
        code: str = d.code if d.code is not None else UNKNOWN_CODE
        lines.append(f"| `{code}` | {_cell(d.message)} |")
    return lines


def render_composition_markdown(result: CompositionResult) -> str:
    """Render a composition result as a Markdown document.

    Args:
        result: The composition result.

    Returns:
        Markdown text ending with a newline.
    """
    lines: list[str] = ["# Composition Result", ""]
    if result.failed:
        lines.append(f"**Failed:** {result.errors}")
    elif result.supergraph_sdl is None:
        lines.append("**No build errors reported.**")
    else:
        lines.append("**Succeeded.**")

    if result.diagnostics:
        lines += ["", "## Errors", ""]
        lines += _table(result.diagnostics)
    if result.hints:
        lines += ["", "## Hints", ""]
        lines += _table(result.hints)
    return "\n".join(lines) + "\n"
