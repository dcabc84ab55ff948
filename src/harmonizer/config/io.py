# topmark:header:start
#
#   project      : Harmonizer
#   file         : io.py
#   file_relpath : src/harmonizer/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load Harmonizer configuration from TOML.

Sources:
- ``harmonizer.toml``: settings live in the top-level table.
- ``pyproject.toml``: settings live under ``[tool.harmonizer]``.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from harmonizer.config.keys import Toml
from harmonizer.config.logging import get_logger
from harmonizer.config.model import Config
from harmonizer.constants import HARMONIZER_TOML_NAME, PYPROJECT_TOML_NAME
from harmonizer.core.errors import ConfigError

if TYPE_CHECKING:
    from harmonizer.config.logging import HarmonizerLogger

TomlTable = dict[str, Any]

logger: HarmonizerLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document.

    Returns:
        The parsed TOML content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigError(f"Cannot read configuration file {path}: {e}") from e
    except TomlkitParseError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_harmonizer_table(data: TomlTable, path: Path) -> TomlTable | None:
    """Return the Harmonizer settings table from a parsed document.

    Args:
        data: Parsed TOML document.
        path: Where the document came from; selects the layout.

    Returns:
        The settings table, or None if a ``pyproject.toml`` has no
        ``[tool.harmonizer]`` section.

    Raises:
        ConfigError: If the section exists but is not a table.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: object = data.get(Toml.SECTION_TOOL)
    if not isinstance(tool, dict):
        return None
    table: object = cast("TomlTable", tool).get(Toml.SECTION_HARMONIZER)
    if table is None:
        return None
    if not isinstance(table, dict):
        raise ConfigError(f"{path}: [tool.harmonizer] must be a table")
    return cast("TomlTable", table)


def discover_config_file(start: Path) -> Path | None:
    """Find the configuration file for a working directory.

    ``harmonizer.toml`` wins over ``pyproject.toml``; a ``pyproject.toml`` only
    counts when it has a ``[tool.harmonizer]`` section.

    Args:
        start: Directory to look in.

    Returns:
        Path of the configuration file, or None.
    """
    candidate: Path = start / HARMONIZER_TOML_NAME
    if candidate.is_file():
        return candidate
    pyproject: Path = start / PYPROJECT_TOML_NAME
    if pyproject.is_file():
        try:
            if extract_harmonizer_table(load_toml_dict(pyproject), pyproject) is not None:
                return pyproject
        except ConfigError as e:
            # An unrelated, broken pyproject.toml must not prevent running.
            logger.warning("Skipping %s during config discovery: %s", pyproject, e)
    return None


def load_config(path: Path | None = None, *, discover_in: Path | None = None) -> Config:
    """Load the effective file-based configuration.

    Args:
        path: Explicit configuration file; must exist.
        discover_in: Directory in which to discover a configuration file when
            `path` is not given. Defaults to the current working directory.

    Returns:
        The defaults overlaid with the configuration file, if any.

    Raises:
        ConfigError: If the explicit file is missing or invalid.
    """
    if path is None:
        path = discover_config_file(discover_in or Path.cwd())
        if path is None:
            logger.debug("No configuration file found; using defaults")
            return Config.from_defaults()
    elif not path.is_file():
        raise ConfigError(f"Configuration file not found: {path}")

    table: TomlTable | None = extract_harmonizer_table(load_toml_dict(path), path)
    if table is None:
        logger.info("%s has no [tool.harmonizer] section; using defaults", path)
        return Config.from_defaults()
    return Config.from_toml_table(table, source=str(path))
