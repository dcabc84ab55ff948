# topmark:header:start
#
#   project      : Harmonizer
#   file         : model.py
#   file_relpath : src/harmonizer/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Harmonizer configuration model.

`Config` is an immutable snapshot. Layers (defaults, TOML file, CLI overrides)
are merged with `Config.merged_with()`; later layers win, and `None` means
"not set by this layer".
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, cast

from harmonizer.config.keys import Toml
from harmonizer.config.logging import get_logger
from harmonizer.core.errors import ConfigError
from harmonizer.core.formats import OutputFormat

if TYPE_CHECKING:
    from harmonizer.config.logging import HarmonizerLogger


logger: HarmonizerLogger = get_logger(__name__)


@dataclass(frozen=True)
class Config:
    """Immutable Harmonizer settings.

    Attributes:
        strict: Raise on malformed diagnostics instead of keeping them as
            generic errors.
        output_format: Default rendering format.
        show_extensions: Include passthrough extension fields in human output.
    """

    strict: bool = True
    output_format: OutputFormat = OutputFormat.TEXT
    show_extensions: bool = False

    @classmethod
    def from_defaults(cls) -> Config:
        """Return the built-in defaults."""
        return cls()

    @classmethod
    def from_toml_table(cls, table: dict[str, Any], *, source: str = "<toml>") -> Config:
        """Build a config layer from a ``[tool.harmonizer]``-style table.

        Unknown keys are logged and ignored.

        Args:
            table: Parsed TOML table.
            source: Description of the origin, used in messages.

        Returns:
            A config holding the table's values on top of the defaults.

        Raises:
            ConfigError: If a known key holds a value of the wrong type.
        """
        cfg: Config = cls.from_defaults()
        for key in sorted(set(table) - Toml.ALL_KEYS):
            logger.warning("Ignoring unknown configuration key %r in %s", key, source)

        strict: object = table.get(Toml.KEY_STRICT)
        if strict is not None:
            cfg = replace(cfg, strict=_expect_bool(strict, Toml.KEY_STRICT, source))

        show: object = table.get(Toml.KEY_SHOW_EXTENSIONS)
        if show is not None:
            cfg = replace(cfg, show_extensions=_expect_bool(show, Toml.KEY_SHOW_EXTENSIONS, source))

        fmt: object = table.get(Toml.KEY_OUTPUT_FORMAT)
        if fmt is not None:
            cfg = replace(cfg, output_format=_expect_format(fmt, source))

        logger.debug("Loaded configuration from %s: %s", source, cfg)
        return cfg

    def merged_with(
        self,
        *,
        strict: bool | None = None,
        output_format: OutputFormat | None = None,
        show_extensions: bool | None = None,
    ) -> Config:
        """Return a copy with the given (non-None) overrides applied."""
        return Config(
            strict=self.strict if strict is None else strict,
            output_format=self.output_format if output_format is None else output_format,
            show_extensions=self.show_extensions if show_extensions is None else show_extensions,
        )


def _expect_bool(value: object, key: str, source: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{source}: '{key}' must be a boolean, got {type(value).__name__}")
    return value


def _expect_format(value: object, source: str) -> OutputFormat:
    if isinstance(value, str):
        for fmt in OutputFormat:
            if fmt.value == value.lower():
                return fmt
    choices: str = ", ".join(f.value for f in OutputFormat)
    raise ConfigError(
        f"{source}: '{Toml.KEY_OUTPUT_FORMAT}' must be one of: {choices} "
        f"(got {cast('object', value)!r})"
    )
