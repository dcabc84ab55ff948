# topmark:header:start
#
#   project      : Harmonizer
#   file         : __init__.py
#   file_relpath : src/harmonizer/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for Harmonizer."""

from __future__ import annotations

from harmonizer.config.io import discover_config_file, load_config, load_toml_dict
from harmonizer.config.model import Config

__all__ = [
    "Config",
    "discover_config_file",
    "load_config",
    "load_toml_dict",
]
