# topmark:header:start
#
#   project      : Harmonizer
#   file         : keys.py
#   file_relpath : src/harmonizer/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML section and key names for Harmonizer configuration."""

from __future__ import annotations

from typing import Final


class Toml:
    """Canonical TOML section/key names."""

    # [tool.harmonizer] in pyproject.toml
    SECTION_TOOL: Final[str] = "tool"
    SECTION_HARMONIZER: Final[str] = "harmonizer"

    KEY_STRICT: Final[str] = "strict"
    KEY_OUTPUT_FORMAT: Final[str] = "output_format"
    KEY_SHOW_EXTENSIONS: Final[str] = "show_extensions"

    ALL_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_STRICT, KEY_OUTPUT_FORMAT, KEY_SHOW_EXTENSIONS}
    )
