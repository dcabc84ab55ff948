# topmark:header:start
#
#   project      : Harmonizer
#   file         : machine.py
#   file_relpath : src/harmonizer/cli/emitters/machine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON/NDJSON emitters for composition results.

These glue the pure shape builders and serializers to a console; they never
style their output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from harmonizer.core.formats import OutputFormat
from harmonizer.core.machine.schemas import build_meta_payload
from harmonizer.core.machine.serializers import serialize_json_object, serialize_ndjson
from harmonizer.diagnostic.machine.shapes import (
    build_composition_json_envelope,
    iter_composition_ndjson_records,
)

if TYPE_CHECKING:
    from harmonizer.cli.console import ConsoleLike
    from harmonizer.composition.output import CompositionResult
    from harmonizer.core.machine.schemas import MetaPayload


def emit_composition_machine(
    console: ConsoleLike,
    result: CompositionResult,
    *,
    fmt: OutputFormat,
) -> None:
    """Print a composition result as JSON or NDJSON.

    Args:
        console: Output console.
        result: The composition result.
        fmt: `OutputFormat.JSON` or `OutputFormat.NDJSON`.

    Raises:
        ValueError: If `fmt` is not a machine format.
    """
    meta: MetaPayload = build_meta_payload()
    if fmt == OutputFormat.JSON:
        envelope: dict[str, object] = build_composition_json_envelope(meta=meta, result=result)
        console.print(serialize_json_object(envelope))
    elif fmt == OutputFormat.NDJSON:
        console.print(
            serialize_ndjson(iter_composition_ndjson_records(meta=meta, result=result)),
            nl=False,
        )
    else:
        raise ValueError(f"Not a machine output format: {fmt.value}")
