# topmark:header:start
#
#   project      : Harmonizer
#   file         : serializers.py
#   file_relpath : src/harmonizer/core/machine/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Pure JSON/NDJSON serialization utilities for machine output.

This module converts *already-shaped* machine output objects (envelopes or NDJSON
record mappings) into strings. It is console-free, Click-free and side-effect-free.

Conventions:
- `serialize_json_object()` does not append a trailing newline.
- `serialize_ndjson()` returns a string that *does* end with a final `\n`
  (or the empty string when there are no records).
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from harmonizer.core.machine.schemas import normalize_payload
from harmonizer.core.machine.shapes import build_json_envelope

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from harmonizer.core.machine.schemas import MetaPayload


def serialize_json_object(obj: object) -> str:
    """Serialize an object to pretty-printed JSON (no trailing newline).

    Args:
        obj: The object to serialize.

    Returns:
        A pretty-printed JSON string (no trailing newline).
    """
    return json.dumps(normalize_payload(obj), indent=2)


def serialize_json_envelope(meta: MetaPayload, **payloads: object) -> str:
    """Serialize a JSON envelope with `meta` plus named payloads.

    Args:
        meta: Metadata payload.
        **payloads: Named payload objects.

    Returns:
        Pretty-printed JSON string (no trailing newline).
    """
    return serialize_json_object(build_json_envelope(meta=meta, **payloads))


def iter_ndjson_strings(records: Iterable[Mapping[str, object]]) -> Iterator[str]:
    """Serialize shaped NDJSON records into per-line JSON strings.

    Args:
        records: Shaped NDJSON record mappings.

    Yields:
        One JSON string per record (no trailing newline).
    """
    for record in records:
        yield json.dumps(record)


def serialize_ndjson(records: Iterable[Mapping[str, object]]) -> str:
    """Serialize NDJSON record mappings into a newline-delimited string.

    Args:
        records: Shaped NDJSON record mappings.

    Returns:
        One JSON object per line, ending with a trailing newline.
    """
    lines: list[str] = list(iter_ndjson_strings(records))
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
