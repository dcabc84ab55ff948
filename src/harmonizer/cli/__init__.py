# topmark:header:start
#
#   project      : Harmonizer
#   file         : __init__.py
#   file_relpath : src/harmonizer/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Harmonizer CLI package.

This package groups all Click command definitions and supporting utilities
for the Harmonizer command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        harmonizer = "harmonizer.cli.main:cli"

All subcommands live in [`harmonizer.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
