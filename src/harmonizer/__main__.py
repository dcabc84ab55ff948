# topmark:header:start
#
#   project      : Harmonizer
#   file         : __main__.py
#   file_relpath : src/harmonizer/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Harmonizer via ``python -m harmonizer``.

It delegates directly to [`harmonizer.cli.main.cli`][], ensuring a single,
authoritative CLI entry point regardless of how Harmonizer is launched.

Examples:
    Decode engine output from a file::

        python -m harmonizer decode composition-output.json
"""

from __future__ import annotations

from harmonizer.cli.main import cli

if __name__ == "__main__":
    cli()
