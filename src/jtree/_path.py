"""
Dot-separated path navigation over Value trees.

"player.stats.health" walks object keys; a segment made only of ASCII
digits, as in "options.0.enabled", indexes into an array. Reads never
create anything. Writes create missing object members along the way but
never grow arrays.
"""

from typing import Any

from ._errors import IndexOutOfRange
from ._errors import JsonError
from ._errors import PathError
from ._errors import TypeMismatch
from ._types import JsonLike
from ._types import PathSegment
from ._value import Value
from ._value import convert_or_default


def split_path(path: str) -> list[PathSegment]:
    """Splits a path into object keys (str) and array indices (int)."""
    if not isinstance(path, str):
        raise TypeError(f"path must be str, not {type(path).__name__}")
    return [
        int(segment) if segment.isascii() and segment.isdigit() else segment
        for segment in path.split(".")
    ]


def _mismatch(node: Value, segment: PathSegment) -> TypeMismatch:
    expected = "array" if isinstance(segment, int) else "object"
    return TypeMismatch(
        f"segment {segment!r} requires {expected}, got {node.kind.value}"
    )


def _read_step(node: Value, segment: PathSegment) -> Value:
    if isinstance(segment, int) and not node.is_array():
        raise _mismatch(node, segment)
    if isinstance(segment, str) and not node.is_object():
        raise _mismatch(node, segment)
    return node.at(segment)


def _write_step(node: Value | None, segment: PathSegment) -> Value | None:
    """
    Validates one step of a write without mutating anything.

    None stands for a node that does not exist yet and would be created
    as null by the write.
    """
    if node is None or node.is_null():
        if isinstance(segment, int):
            raise IndexOutOfRange(segment, 0)
        return None

    if isinstance(segment, int):
        if not node.is_array():
            raise _mismatch(node, segment)
        return node.at(segment)

    if not node.is_object():
        raise _mismatch(node, segment)
    return node.find(segment)


def at_path(root: Value, path: str) -> Value:
    """
    Resolves path against root.

    Raises PathError wrapping the TypeMismatch, KeyNotFound or
    IndexOutOfRange that stopped the walk.
    """
    node = root
    try:
        for segment in split_path(path):
            node = _read_step(node, segment)
    except JsonError as exc:
        raise PathError(path, exc) from exc
    return node


def has_path(root: Value, path: str) -> bool:
    try:
        at_path(root, path)
    except (PathError, TypeError):
        return False
    return True


def set_path(root: Value, path: str, data: JsonLike) -> Value:
    """
    Writes a copy of data at path and returns the node that now holds it.

    Null nodes on the way are promoted to objects or arrays as the next
    segment requires and missing object members are created. Indices,
    including the last one, must already be in range. The whole path is
    checked before anything is modified, so a failed write leaves the tree
    untouched.
    """
    segments = split_path(path)
    value = Value(data)

    node: Value | None = root
    try:
        for segment in segments:
            node = _write_step(node, segment)
    except JsonError as exc:
        raise PathError(path, exc) from exc

    parent = root
    for segment in segments[:-1]:
        parent = parent[segment]
    parent[segments[-1]] = value
    return parent[segments[-1]]


def value_at_path(
    root: Value, path: str, default: Any, as_type: type | None = None
) -> Any:
    """
    Typed read at path, or default on any failure.

    The target type is as_type, or the type of default when omitted.
    """
    try:
        node = at_path(root, path)
    except (PathError, TypeError):
        return default
    return convert_or_default(node, as_type or type(default), default)
