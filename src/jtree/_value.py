"""
The Value node: a tagged union over the seven JSON kinds.

A Value owns everything beneath it. Data stored into a tree is always
deep-copied on the way in, so trees never share nodes and can never contain
cycles. Indexing with [] auto-promotes null nodes into containers the way a
mutable JSON document is usually built up; at() is the checked, read-only
counterpart.
"""

import math
from collections.abc import Callable
from collections.abc import ItemsView
from collections.abc import Iterator
from collections.abc import KeysView
from collections.abc import Mapping
from typing import Any

from ._errors import IndexOutOfRange
from ._errors import KeyNotFound
from ._errors import TypeMismatch
from ._serializer import COMPACT
from ._serializer import dumps
from ._types import INT64_MAX
from ._types import INT64_MIN
from ._types import JsonLike
from ._types import JsonNative
from ._types import Kind


def _copy_payload(kind: Kind, data: Any) -> Any:
    """Deep-copies container payloads; scalars are immutable already."""
    if kind is Kind.ARRAY:
        return [item.copy() for item in data]
    if kind is Kind.OBJECT:
        return {key: member.copy() for key, member in data.items()}
    return data


def _adopt(data: JsonLike) -> tuple[Kind, Any]:  # noqa: PLR0911
    """Converts Python data or another Value into an owned (kind, payload)."""
    if isinstance(data, Value):
        return data._kind, _copy_payload(data._kind, data._data)
    if data is None:
        return Kind.NULL, None
    if isinstance(data, bool):
        return Kind.BOOLEAN, data
    if isinstance(data, int):
        if not INT64_MIN <= data <= INT64_MAX:
            raise OverflowError(f"integer {data} does not fit in 64 bits")
        return Kind.NUMBER_INTEGER, int(data)
    if isinstance(data, float):
        return Kind.NUMBER_FLOAT, float(data)
    if isinstance(data, str):
        return Kind.STRING, str(data)
    if isinstance(data, Mapping):
        members: dict[str, Value] = {}
        for key, item in data.items():
            if not isinstance(key, str):
                msg = f"keys must be str, not {type(key).__name__}"
                raise TypeMismatch(msg)
            members[key] = Value(item)
        return Kind.OBJECT, members
    if isinstance(data, list | tuple):
        return Kind.ARRAY, [Value(item) for item in data]

    msg = f"Object of type {type(data).__name__} is not JSON serializable"
    raise TypeMismatch(msg)


def _check_index(key: object) -> str | int:
    if isinstance(key, str):
        return key
    if isinstance(key, int) and not isinstance(key, bool):
        return key
    msg = f"Value indices must be str or int, not {type(key).__name__}"
    raise TypeMismatch(msg)


class Value:
    """
    A JSON value: null, boolean, integer, float, string, array or object.

    Objects keep their keys in insertion order. Overwriting an existing key
    keeps its position; new keys are appended.
    """

    __slots__ = ("_data", "_kind")

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, data: JsonLike = None) -> None:
        self._kind: Kind
        self._data: Any
        self._kind, self._data = _adopt(data)

    @classmethod
    def _make(cls, kind: Kind, data: Any) -> "Value":
        """Builds a node around a payload the caller already owns."""
        node = cls.__new__(cls)
        node._kind = kind
        node._data = data
        return node

    def _set(self, kind: Kind, data: Any) -> None:
        """Replaces this node's payload in place, dropping the old one."""
        self._kind = kind
        self._data = data

    def _require(self, kind: Kind, operation: str) -> None:
        if self._kind is not kind:
            raise TypeMismatch(
                f"{operation} requires {kind.value}, got {self._kind.value}"
            )

    def _promote(self, kind: Kind, operation: str) -> None:
        """Turns a null node into an empty container of the given kind."""
        if self._kind is Kind.NULL:
            self._set(kind, [] if kind is Kind.ARRAY else {})
        self._require(kind, operation)

    # Type predicates

    @property
    def kind(self) -> Kind:
        return self._kind

    def is_null(self) -> bool:
        return self._kind is Kind.NULL

    def is_boolean(self) -> bool:
        return self._kind is Kind.BOOLEAN

    def is_number(self) -> bool:
        return self._kind.is_number

    def is_number_integer(self) -> bool:
        return self._kind is Kind.NUMBER_INTEGER

    def is_number_float(self) -> bool:
        return self._kind is Kind.NUMBER_FLOAT

    def is_string(self) -> bool:
        return self._kind is Kind.STRING

    def is_array(self) -> bool:
        return self._kind is Kind.ARRAY

    def is_object(self) -> bool:
        return self._kind is Kind.OBJECT

    # Typed getters

    def get_bool(self) -> bool:
        self._require(Kind.BOOLEAN, "get_bool")
        return bool(self._data)

    def get_int(self) -> int:
        """
        Returns the number as an integer.

        Floats are truncated toward zero; ones that cannot be represented as
        a 64-bit integer raise TypeMismatch.
        """
        if self._kind is Kind.NUMBER_INTEGER:
            return int(self._data)
        if self._kind is Kind.NUMBER_FLOAT:
            if not math.isfinite(self._data):
                raise TypeMismatch(f"cannot convert {self._data} to integer")
            truncated = int(self._data)
            if not INT64_MIN <= truncated <= INT64_MAX:
                raise TypeMismatch(
                    f"{self._data} is out of 64-bit integer range"
                )
            return truncated
        raise TypeMismatch(
            f"get_int requires a number, got {self._kind.value}"
        )

    def get_float(self) -> float:
        if self._kind.is_number:
            return float(self._data)
        raise TypeMismatch(
            f"get_float requires a number, got {self._kind.value}"
        )

    def get_string(self) -> str:
        self._require(Kind.STRING, "get_string")
        return str(self._data)

    # Auto-promoting access

    def __getitem__(self, key: str | int) -> "Value":
        key = _check_index(key)
        if isinstance(key, str):
            return self._member(key)
        return self._element(key)

    def __setitem__(self, key: str | int, data: JsonLike) -> None:
        kind, payload = _adopt(data)
        self[key]._set(kind, payload)

    def _member(self, key: str) -> "Value":
        self._promote(Kind.OBJECT, "object access")
        members: dict[str, Value] = self._data
        member = members.get(key)
        if member is None:
            member = members[key] = Value()
        return member

    def _element(self, index: int) -> "Value":
        if index < 0 and self._kind in (Kind.NULL, Kind.ARRAY):
            raise IndexOutOfRange(index, self.size())
        self._promote(Kind.ARRAY, "array access")
        elements: list[Value] = self._data
        while len(elements) <= index:
            elements.append(Value())
        return elements[index]

    # Checked access

    def at(self, key: str | int) -> "Value":
        """Returns the child at key or index without ever inserting."""
        key = _check_index(key)
        if isinstance(key, str):
            self._require(Kind.OBJECT, "at")
            member = self._data.get(key)
            if member is None:
                raise KeyNotFound(key)
            return member  # type: ignore[no-any-return]

        self._require(Kind.ARRAY, "at")
        if not 0 <= key < len(self._data):
            raise IndexOutOfRange(key, len(self._data))
        return self._data[key]  # type: ignore[no-any-return]

    def contains(self, key: str) -> bool:
        return (
            self._kind is Kind.OBJECT
            and isinstance(key, str)
            and key in self._data
        )

    def __contains__(self, item: object) -> bool:
        """Key membership for objects, element equality for arrays."""
        if self._kind is Kind.ARRAY:
            return any(element == item for element in self._data)
        if not self._kind.is_container:
            raise TypeMismatch(f"{self._kind.value} value is not iterable")
        return self.contains(item)  # type: ignore[arg-type]

    def erase(self, key: str) -> bool:
        """Removes key from an object and reports whether it was present."""
        if self._kind is not Kind.OBJECT:
            return False
        return self._data.pop(key, None) is not None

    def find(self, key: str) -> "Value | None":
        """Returns the member stored under key, or None when absent."""
        self._require(Kind.OBJECT, "find")
        return self._data.get(key)  # type: ignore[no-any-return]

    def push_back(self, data: JsonLike) -> None:
        """Appends a copy of data, promoting null to an empty array."""
        self._promote(Kind.ARRAY, "push_back")
        self._data.append(Value(data))

    append = push_back

    def size(self) -> int:
        """
        Element count for containers, UTF-8 byte length for strings.

        Every other kind has size 0.
        """
        if self._kind.is_container:
            return len(self._data)
        if self._kind is Kind.STRING:
            return len(self._data.encode("utf-8", "surrogatepass"))
        return 0

    def empty(self) -> bool:
        return self.size() == 0

    # Native iteration

    def items(self) -> ItemsView[str, "Value"]:
        self._require(Kind.OBJECT, "items")
        return self._data.items()  # type: ignore[no-any-return]

    def keys(self) -> KeysView[str]:
        self._require(Kind.OBJECT, "keys")
        return self._data.keys()  # type: ignore[no-any-return]

    def __iter__(self) -> Iterator[Any]:
        """Iterates array elements, or object keys in insertion order."""
        if not self._kind.is_container:
            raise TypeMismatch(f"{self._kind.value} value is not iterable")
        return iter(self._data)

    # Safe access

    def _lookup(self, key: str | int) -> "Value | None":
        if self._kind is Kind.OBJECT and isinstance(key, str):
            return self._data.get(key)  # type: ignore[no-any-return]
        if (
            self._kind is Kind.ARRAY
            and isinstance(key, int)
            and not isinstance(key, bool)
            and 0 <= key < len(self._data)
        ):
            return self._data[key]  # type: ignore[no-any-return]
        return None

    def value(
        self, key: str | int, default: Any, as_type: type | None = None
    ) -> Any:
        """
        Looks up key and converts the member, falling back to default.

        The target type is as_type, or the type of default when omitted.
        Missing keys, wrong kinds and unsupported target types all yield
        default; this never raises.
        """
        node = self._lookup(key)
        if node is None:
            return default
        return convert_or_default(node, as_type or type(default), default)

    # Copying, equality and conversion

    def copy(self) -> "Value":
        return Value._make(self._kind, _copy_payload(self._kind, self._data))

    def __copy__(self) -> "Value":
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> "Value":
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            try:
                other = Value(other)
            except (TypeError, OverflowError):
                return NotImplemented
        return self._kind is other._kind and self._data == other._data

    def to_python(self) -> JsonNative:
        """Converts the tree into plain dicts, lists and scalars."""
        if self._kind is Kind.ARRAY:
            return [item.to_python() for item in self._data]
        if self._kind is Kind.OBJECT:
            return {
                key: member.to_python() for key, member in self._data.items()
            }
        return self._data  # type: ignore[no-any-return]

    def dump(self, indent: int = COMPACT) -> str:
        """Serializes the tree; compact when indent is negative."""
        return dumps(self, indent)

    def __str__(self) -> str:
        return self.dump()

    def __repr__(self) -> str:
        return f"Value({self.to_python()!r})"


def _as_list(node: Value) -> list[JsonNative]:
    node._require(Kind.ARRAY, "list conversion")
    return node.to_python()  # type: ignore[return-value]


def _as_dict(node: Value) -> dict[str, JsonNative]:
    node._require(Kind.OBJECT, "dict conversion")
    return node.to_python()  # type: ignore[return-value]


_CONVERTERS: dict[type, Callable[[Value], Any]] = {
    bool: Value.get_bool,
    int: Value.get_int,
    float: Value.get_float,
    str: Value.get_string,
    Value: Value.copy,
    list: _as_list,
    dict: _as_dict,
}


def convert_or_default(node: Value, target: type, default: Any) -> Any:
    """Typed read of node as target, or default when it does not convert."""
    converter = _CONVERTERS.get(target)
    if converter is None:
        return default
    try:
        return converter(node)
    except TypeMismatch:
        return default
