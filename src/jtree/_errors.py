"""
Exception taxonomy for the value model.

Every failure raised by jtree derives from JsonError and also from the
closest builtin exception, so callers can catch either family.
"""

from enum import Enum

from ._types import Position
from ._utf8_mapper import UTF8PositionMapper


class ParseErrorKind(Enum):
    """Classifies what went wrong while parsing."""

    UNEXPECTED_TOKEN = "unexpected_token"
    UNEXPECTED_TRAILING_DATA = "unexpected_trailing_data"
    INVALID_LITERAL = "invalid_literal"
    INVALID_NUMBER = "invalid_number"
    INVALID_STRING = "invalid_string"
    INVALID_ESCAPE = "invalid_escape"
    UNTERMINATED_STRING = "unterminated_string"
    DUPLICATE_KEY = "duplicate_key"
    NESTING_TOO_DEEP = "nesting_too_deep"


class JsonError(Exception):
    """Base class for all jtree failures."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class ParseError(JsonError, ValueError):
    """
    Handles JSON parsing failures with precise position and context information.

    Error state containing position, line/column numbers and the error kind
    to help users identify and fix JSON syntax issues. The position is a
    character offset into the parsed text; byte_pos gives the same location
    as an offset into its UTF-8 encoding.
    """

    def __init__(
        self,
        msg: str,
        doc: str = "",
        pos: Position = 0,
        kind: ParseErrorKind = ParseErrorKind.UNEXPECTED_TOKEN,
    ) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.doc = doc
        self.pos = pos
        self.kind = kind

        # Compute line and column numbers from position
        self.lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1

        super().__init__(f"{msg} at line {self.lineno}, column {self.colno}")

    @property
    def byte_pos(self) -> Position:
        """Offset of the error in the UTF-8 encoding of the document."""
        if not self.doc:
            return self.pos
        return UTF8PositionMapper(self.doc).char_to_byte(self.pos)


class TypeMismatch(JsonError, TypeError):
    """An operation does not apply to the Value's active kind."""


class KeyNotFound(JsonError, KeyError):
    """Checked object access on a key that is not present."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Key not found: {key!r}")


class IndexOutOfRange(JsonError, IndexError):
    """Checked array access outside the current bounds."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(
            f"Index {index} out of range for array of size {size}"
        )


class PathError(JsonError, LookupError):
    """
    A dot-separated path could not be resolved or written.

    Wraps the underlying TypeMismatch, KeyNotFound or IndexOutOfRange as
    `reason` and keeps the full path that was requested.
    """

    def __init__(self, path: str, reason: JsonError) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot resolve path {path!r}: {reason}")
