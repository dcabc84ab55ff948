# topmark:header:start
#
#   project      : Harmonizer
#   file         : __init__.py
#   file_relpath : src/harmonizer/core/machine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared machine-output primitives.

Layers (schemas → shapes → serializers):

- **schemas**: canonical keys/kinds, `MetaPayload`, payload normalization.
- **shapes**: JSON envelopes and NDJSON records around payloads.
- **serializers**: JSON/NDJSON strings from shaped objects.
"""

from __future__ import annotations

from harmonizer.core.machine.schemas import (
    MachineKey,
    MachineKind,
    MetaPayload,
    build_meta_payload,
    normalize_payload,
)
from harmonizer.core.machine.serializers import (
    serialize_json_envelope,
    serialize_json_object,
    serialize_ndjson,
)
from harmonizer.core.machine.shapes import build_json_envelope, build_ndjson_record

__all__ = [
    "MachineKey",
    "MachineKind",
    "MetaPayload",
    "build_json_envelope",
    "build_meta_payload",
    "build_ndjson_record",
    "normalize_payload",
    "serialize_json_envelope",
    "serialize_json_object",
    "serialize_ndjson",
]
