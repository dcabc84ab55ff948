# topmark:header:start
#
#   project      : Harmonizer
#   file         : version.py
#   file_relpath : src/harmonizer/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Harmonizer `version` command.

Prints the current Harmonizer version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from harmonizer.cli.cli_types import EnumChoiceParam
from harmonizer.cli.console import get_console
from harmonizer.constants import HARMONIZER_VERSION
from harmonizer.core.formats import OutputFormat
from harmonizer.core.machine.schemas import MachineKey, MachineKind, build_meta_payload
from harmonizer.core.machine.serializers import serialize_json_envelope, serialize_ndjson
from harmonizer.core.machine.shapes import build_ndjson_record

if TYPE_CHECKING:
    from harmonizer.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of Harmonizer.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of Harmonizer.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    if fmt == OutputFormat.JSON:
        console.print(
            serialize_json_envelope(
                build_meta_payload(), **{MachineKey.VERSION: HARMONIZER_VERSION}
            )
        )
    elif fmt == OutputFormat.NDJSON:
        record = build_ndjson_record(
            kind=MachineKind.VERSION,
            meta=build_meta_payload(),
            payload=HARMONIZER_VERSION,
        )
        console.print(serialize_ndjson([record]), nl=False)
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# Harmonizer Version\n")
        console.print(f"**Harmonizer version: {HARMONIZER_VERSION}**")
    else:
        console.print(console.styled(HARMONIZER_VERSION, bold=True))
