"""
Recursive Value-to-text rendering.

Two layouts share one code path: compact output (negative indent) with no
inserted whitespace, and pretty output where every nesting level is indented
by `indent` more spaces than its parent.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ._profile import ProfileContext
from ._types import Kind

if TYPE_CHECKING:
    from ._value import Value

COMPACT = -1

# Control characters without a short escape are written as \u00XX
_CONTROL_LIMIT = 0x20
_ESCAPE_TABLE: dict[int, str] = {
    code: f"\\u{code:04x}" for code in range(_CONTROL_LIMIT)
}
_ESCAPE_TABLE.update(
    {
        ord('"'): '\\"',
        ord("\\"): "\\\\",
        ord("\b"): "\\b",
        ord("\f"): "\\f",
        ord("\n"): "\\n",
        ord("\r"): "\\r",
        ord("\t"): "\\t",
    }
)


@dataclass(frozen=True)
class EncodeConfig:
    """
    Configures serialization with immutable settings.

    A negative indent selects compact output; zero or more selects pretty
    output with that many spaces per nesting level.
    """

    indent: int = COMPACT

    def __post_init__(self) -> None:
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            raise TypeError("indent must be an integer")

    @property
    def pretty(self) -> bool:
        return self.indent >= 0


def _encode_string(s: str) -> str:
    """Encode string with proper escape sequences."""
    return '"' + s.translate(_ESCAPE_TABLE) + '"'


def _encode_float(n: float) -> str:
    """
    Encode a float so that parsing it back yields the same float.

    repr() is the shortest round-tripping form and always keeps a '.' or an
    exponent, so the value comes back as a float rather than an integer.
    Non-finite values have no JSON spelling and are written as null.
    """
    if math.isnan(n) or math.isinf(n):
        return "null"
    return repr(n)


def _get_indent_string(config: EncodeConfig, level: int) -> str:
    """Generate indentation string for given level."""
    return " " * (config.indent * level)


def _encode_array(value: Value, config: EncodeConfig, level: int) -> str:
    """Encode array with optional formatting."""
    if value.empty():
        return "[]"

    encoded_items = [
        _encode_value(item, config, level + 1) for item in value
    ]
    if config.pretty:
        return _format_indented("[", "]", encoded_items, config, level)
    return "[" + ",".join(encoded_items) + "]"


def _encode_object(value: Value, config: EncodeConfig, level: int) -> str:
    """Encode object members in insertion order."""
    if value.empty():
        return "{}"

    separator = ": " if config.pretty else ":"
    encoded_items = [
        _encode_string(key)
        + separator
        + _encode_value(member, config, level + 1)
        for key, member in value.items()
    ]
    if config.pretty:
        return _format_indented("{", "}", encoded_items, config, level)
    return "{" + ",".join(encoded_items) + "}"


def _format_indented(
    opener: str,
    closer: str,
    items: list[str],
    config: EncodeConfig,
    level: int,
) -> str:
    """Lay out already-encoded children one per line."""
    indent_str = _get_indent_string(config, level)
    inner_indent = _get_indent_string(config, level + 1)

    lines = [opener]
    for i, item in enumerate(items):
        line = f"{inner_indent}{item}"
        if i < len(items) - 1:
            line += ","
        lines.append(line)

    lines.append(f"{indent_str}{closer}")
    return "\n".join(lines)


def _encode_value(value: Value, config: EncodeConfig, level: int) -> str:  # noqa: PLR0911
    """Encode any Value node."""
    kind = value.kind
    if kind is Kind.NULL:
        return "null"
    elif kind is Kind.BOOLEAN:
        return "true" if value.get_bool() else "false"
    elif kind is Kind.NUMBER_INTEGER:
        return str(value.get_int())
    elif kind is Kind.NUMBER_FLOAT:
        return _encode_float(value.get_float())
    elif kind is Kind.STRING:
        return _encode_string(value.get_string())
    elif kind is Kind.ARRAY:
        return _encode_array(value, config, level)
    else:
        return _encode_object(value, config, level)


def encode(value: Value, config: EncodeConfig) -> str:
    """Render a Value tree with an already-built configuration."""
    with ProfileContext("encode_value"):
        return _encode_value(value, config, 0)


def dumps(value: Value, indent: int = COMPACT) -> str:
    """
    Serializes a Value tree to JSON text.

    Compact when indent is negative, pretty-printed otherwise. Total over
    every valid tree: it never raises for a Value.
    """
    return encode(value, EncodeConfig(indent=indent))
