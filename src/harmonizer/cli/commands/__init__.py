# topmark:header:start
#
#   project      : Harmonizer
#   file         : __init__.py
#   file_relpath : src/harmonizer/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Harmonizer CLI subcommands."""

from __future__ import annotations
