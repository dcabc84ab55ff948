# topmark:header:start
#
#   project      : Harmonizer
#   file         : constants.py
#   file_relpath : src/harmonizer/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Harmonizer Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

HARMONIZER_VERSION: str = get_version("harmonizer")

# Placeholder code used when a diagnostic carries no extension block.
UNKNOWN_CODE: Final[str] = "UNKNOWN"

# Wire field names of a composition diagnostic.
MESSAGE_FIELD: Final[str] = "message"
CODE_FIELD: Final[str] = "code"

# Composition output envelope keys.
ENVELOPE_OK: Final[str] = "Ok"
ENVELOPE_ERR: Final[str] = "Err"
SUPERGRAPH_SDL_FIELD: Final[str] = "supergraphSdl"
HINTS_FIELD: Final[str] = "hints"

# Configuration discovery.
HARMONIZER_TOML_NAME: Final[str] = "harmonizer.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"

LOG_LEVEL_ENV_VAR: Final[str] = "HARMONIZER_LOG_LEVEL"

# Maximum length of a raw JSON fragment quoted in decode error messages.
RAW_FRAGMENT_MAX_LEN: Final[int] = 240
