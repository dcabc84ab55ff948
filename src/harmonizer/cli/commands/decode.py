# topmark:header:start
#
#   project      : Harmonizer
#   file         : decode.py
#   file_relpath : src/harmonizer/cli/commands/decode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Harmonizer `decode` command.

Reads composition engine output from a file or STDIN, decodes the reported
diagnostics and renders them. Accepted inputs are a result envelope
(``{"Ok": ...}`` / ``{"Err": [...]}``), a JSON array of diagnostics, or a single
diagnostic object.

Exit codes:
    - 0: no build errors
    - 1: composition reported build errors
    - 65: a diagnostic could not be decoded (strict mode)
    - 66: input file not found
    - 78: invalid configuration
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from harmonizer.cli.cli_types import EnumChoiceParam
from harmonizer.cli.console import get_console
from harmonizer.cli.emitters import (
    emit_composition_machine,
    emit_composition_text,
    render_composition_markdown,
)
from harmonizer.cli.errors import (
    HarmonizerConfigError,
    HarmonizerDecodeError,
    HarmonizerFileNotFoundError,
    HarmonizerIOError,
    HarmonizerUsageError,
)
from harmonizer.cli.exit_codes import ExitCode
from harmonizer.composition.output import parse_engine_output
from harmonizer.config.io import load_config
from harmonizer.config.logging import get_logger
from harmonizer.config.model import Config
from harmonizer.core.errors import ConfigError, DiagnosticDecodeError
from harmonizer.core.formats import OutputFormat, is_machine_format

if TYPE_CHECKING:
    from harmonizer.cli.console import ConsoleLike
    from harmonizer.composition.output import CompositionResult

logger = get_logger(__name__)

STDIN_SENTINEL: str = "-"


def read_source(source: str) -> str:
    """Read engine output from a path or STDIN (``-``).

    Args:
        source: File path, or ``-`` for STDIN.

    Returns:
        The text read.

    Raises:
        HarmonizerFileNotFoundError: If the file does not exist.
        HarmonizerIOError: If the file cannot be read.
        HarmonizerDecodeError: If the input is not valid UTF-8.
    """
    label: str = "<stdin>" if source == STDIN_SENTINEL else source
    try:
        with click.open_file(source, encoding="utf-8") as stream:
            return stream.read()
    except (FileNotFoundError, IsADirectoryError) as e:
        raise HarmonizerFileNotFoundError(f"Input not found: {label}") from e
    except UnicodeDecodeError as e:
        raise HarmonizerDecodeError(f"Input is not valid UTF-8: {label} ({e})") from e
    except OSError as e:
        raise HarmonizerIOError(f"Cannot read {label}: {e}") from e


def resolve_config(
    *,
    config_path: Path | None,
    no_config: bool,
    strict: bool,
    lenient: bool,
    output_format: OutputFormat | None,
    show_extensions: bool,
) -> Config:
    """Merge defaults, the configuration file and CLI overrides.

    Raises:
        HarmonizerUsageError: If conflicting flags are given.
        HarmonizerConfigError: If the configuration file is invalid.
    """
    if strict and lenient:
        raise HarmonizerUsageError("The '--strict' and '--lenient' options are mutually exclusive.")
    if no_config and config_path is not None:
        raise HarmonizerUsageError(
            "The '--config' and '--no-config' options are mutually exclusive."
        )

    try:
        base: Config = Config.from_defaults() if no_config else load_config(config_path)
    except ConfigError as e:
        raise HarmonizerConfigError(str(e)) from e

    return base.merged_with(
        strict=True if strict else (False if lenient else None),
        output_format=output_format,
        show_extensions=True if show_extensions else None,
    )


def emit_result(
    console: ConsoleLike,
    result: CompositionResult,
    *,
    config: Config,
    verbosity: int,
) -> None:
    """Render a composition result in the configured output format."""
    fmt: OutputFormat = config.output_format
    if is_machine_format(fmt):
        emit_composition_machine(console, result, fmt=fmt)
    elif fmt == OutputFormat.MARKDOWN:
        console.print(render_composition_markdown(result), nl=False)
    else:
        emit_composition_text(
            console,
            result,
            verbosity=verbosity,
            show_extensions=config.show_extensions,
        )


@click.command(
    name="decode",
    help="Decode composition engine output (FILE or '-' for STDIN) and render its diagnostics.",
)
@click.argument("source", required=False, default=STDIN_SENTINEL)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Fail on malformed diagnostics (default unless configured otherwise).",
)
@click.option(
    "--lenient",
    is_flag=True,
    default=False,
    help="Keep malformed diagnostics as generic errors instead of failing.",
)
@click.option(
    "--show-extensions",
    is_flag=True,
    default=False,
    help="Show passthrough extension fields under each diagnostic (text output).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Read settings from this TOML file.",
)
@click.option(
    "--no-config",
    is_flag=True,
    default=False,
    help="Ignore configuration files.",
)
def decode_command(
    *,
    source: str,
    output_format: OutputFormat | None,
    strict: bool,
    lenient: bool,
    show_extensions: bool,
    config_path: Path | None,
    no_config: bool,
) -> None:
    """Decode composition engine output and render its diagnostics."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    verbosity: int = int(ctx.obj.get("verbosity_level", 0))

    config: Config = resolve_config(
        config_path=config_path,
        no_config=no_config,
        strict=strict,
        lenient=lenient,
        output_format=output_format,
        show_extensions=show_extensions,
    )
    logger.debug("Effective configuration: %s", config)

    text: str = read_source(source)
    try:
        result: CompositionResult = parse_engine_output(text, strict=config.strict)
    except DiagnosticDecodeError as e:
        logger.error("Malformed diagnostic in %s: %s", source, e)
        raise HarmonizerDecodeError(f"Malformed diagnostic in {source}: {e}") from e

    emit_result(console, result, config=config, verbosity=verbosity)

    if result.failed:
        ctx.exit(ExitCode.COMPOSITION_FAILED)
