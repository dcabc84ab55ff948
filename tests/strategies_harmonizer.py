# topmark:header:start
#
#   project      : Harmonizer
#   file         : strategies_harmonizer.py
#   file_relpath : tests/strategies_harmonizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating engine-shaped diagnostics.

The generated objects follow the flattened wire shape: an optional
``message`` next to an optional extension block (``code`` plus arbitrary
passthrough fields).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hypothesis import strategies as st

Draw = Callable[[st.SearchStrategy[Any]], Any]

RESERVED_KEYS: frozenset[str] = frozenset({"code", "message"})

CODES: tuple[str, ...] = (
    "EXTERNAL_TYPE_MISMATCH",
    "EXTERNAL_UNUSED",
    "KEY_FIELDS_MISSING_ON_BASE",
    "KEY_MISSING_ON_BASE",
    "KEY_NOT_SPECIFIED",
    "PROVIDES_FIELDS_MISSING_EXTERNAL",
)

json_scalars: st.SearchStrategy[Any] = (
    st.none()
    | st.booleans()
    | st.integers(min_value=-(2**53), max_value=2**53)
    | st.floats(allow_nan=False, allow_infinity=False)
    | st.text(max_size=20)
)

json_values: st.SearchStrategy[Any] = st.recursive(
    json_scalars,
    lambda children: st.lists(children, max_size=3)
    | st.dictionaries(st.text(max_size=8), children, max_size=3),
    max_leaves=8,
)

passthrough_keys: st.SearchStrategy[str] = st.text(min_size=1, max_size=12).filter(
    lambda k: k not in RESERVED_KEYS
)

codes: st.SearchStrategy[str] = st.sampled_from(CODES) | st.from_regex(
    r"[A-Z][A-Z_]{0,30}", fullmatch=True
)

messages: st.SearchStrategy[str | None] = st.none() | st.text(max_size=80)


@st.composite
def s_wire_diagnostic(draw: Draw) -> dict[str, Any]:
    """Generate a well-formed flattened diagnostic object.

    Returns:
        dict[str, Any]: A JSON object that decodes successfully.
    """
    obj: dict[str, Any] = {}
    message: str | None = draw(messages)
    if message is not None or draw(st.booleans()):
        obj["message"] = message
    if draw(st.booleans()):
        obj["code"] = draw(codes)
        obj.update(draw(st.dictionaries(passthrough_keys, json_values, max_size=4)))
    return obj


@st.composite
def s_codeless_extensions(draw: Draw) -> dict[str, Any]:
    """Generate an object with extension fields but no ``code``.

    Returns:
        dict[str, Any]: A JSON object that must fail to decode.
    """
    obj: dict[str, Any] = draw(
        st.dictionaries(passthrough_keys, json_values, min_size=1, max_size=4)
    )
    message: str | None = draw(messages)
    if message is not None:
        obj["message"] = message
    return obj
