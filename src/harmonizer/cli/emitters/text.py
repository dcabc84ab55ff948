# topmark:header:start
#
#   project      : Harmonizer
#   file         : text.py
#   file_relpath : src/harmonizer/cli/emitters/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-readable text output for composition results.

Each diagnostic is printed on its own line using its stable rendering
(``"{code}: {message}"``). Styling only wraps the code; stripping ANSI escapes
yields exactly `str(diagnostic)`, so grepping for a code prefix keeps working.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from harmonizer.constants import UNKNOWN_CODE
from harmonizer.diagnostic.model import thaw_json

if TYPE_CHECKING:
    from harmonizer.cli.console import ConsoleLike
    from harmonizer.composition.output import CompositionResult
    from harmonizer.diagnostic.model import Diagnostic


def render_diagnostic_line(console: ConsoleLike, d: Diagnostic, *, fg: str) -> str:
    """Render one diagnostic, styling its code.

    Args:
        console: Console providing styling.
        d: The diagnostic.
        fg: Foreground color for the code.

    Returns:
        The rendered line; equal to `str(d)` once styling is removed.
    """
    code: str = d.code if d.code is not None else UNKNOWN_CODE
    styled_code: str = console.styled(code, fg=fg, bold=True)
    if d.message is not None:
        return f"{styled_code}: {d.message}"
    return styled_code


def _emit_extensions(console: ConsoleLike, d: Diagnostic) -> None:
    for key in sorted(d.other):
        value: str = json.dumps(thaw_json(d.other[key]), sort_keys=True)
        console.print(f"    {console.styled(key, dim=True)}: {value}")


def emit_composition_text(
    console: ConsoleLike,
    result: CompositionResult,
    *,
    verbosity: int = 0,
    show_extensions: bool = False,
) -> None:
    """Print a composition result for humans.

    Args:
        console: Output console.
        result: The composition result.
        verbosity: Negative prints the summary line only; positive also prints
            the supergraph SDL on success.
        show_extensions: Print passthrough extension fields under each diagnostic.
    """
    if verbosity >= 0:
        for d in result.diagnostics:
            console.print(render_diagnostic_line(console, d, fg="red"))
            if show_extensions:
                _emit_extensions(console, d)
        for d in result.hints:
            console.print(f"hint: {render_diagnostic_line(console, d, fg='yellow')}")
            if show_extensions:
                _emit_extensions(console, d)

    if result.failed:
        console.print(console.styled(f"Composition failed: {result.errors}", fg="red", bold=True))
        return

    if result.supergraph_sdl is None:
        console.print(console.styled("No build errors reported.", fg="green"))
        return

    n_hints: int = len(result.hints)
    noun: str = "hint" if n_hints == 1 else "hints"
    console.print(console.styled(f"Composition succeeded ({n_hints} {noun}).", fg="green"))
    if verbosity > 0 and result.supergraph_sdl is not None:
        console.print()
        console.print(result.supergraph_sdl)
