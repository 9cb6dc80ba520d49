"""Core type definitions shared by the value model, parser and serializer."""

from enum import Enum
from typing import Any
from typing import TypeAlias

# Type aliases for domain concepts - recursive definition
JsonNative = (
    str
    | int
    | float
    | bool
    | None
    | dict[str, "JsonNative"]
    | list["JsonNative"]
)
Position: TypeAlias = int
PathSegment: TypeAlias = str | int

# Anything Value() knows how to adopt
JsonLike = Any

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Longest decimal digit run that can still fit in a signed 64-bit integer
INT64_MAX_DIGITS = 19


class Kind(Enum):
    """
    The seven kinds a Value can hold.

    Exactly one is active per Value; the payload type follows the kind.
    """

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER_INTEGER = "number_integer"
    NUMBER_FLOAT = "number_float"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"

    @property
    def is_number(self) -> bool:
        return self in (Kind.NUMBER_INTEGER, Kind.NUMBER_FLOAT)

    @property
    def is_container(self) -> bool:
        return self in (Kind.ARRAY, Kind.OBJECT)
