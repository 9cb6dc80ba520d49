"""
Strict recursive-descent JSON parser producing Value trees.

The lexer scans one token at a time from an explicit cursor; the parser
pulls tokens on demand so that nothing past the end of the document is
scanned before the trailing-data check runs.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ._errors import ParseError
from ._errors import ParseErrorKind
from ._profile import ProfileContext
from ._types import INT64_MAX
from ._types import INT64_MAX_DIGITS
from ._types import INT64_MIN
from ._types import Kind
from ._types import Position
from ._value import Value

logger = logging.getLogger(__name__)

_WHITESPACE = " \t\n\r"
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}
_LITERALS: dict[str, tuple[str, Kind, bool | None]] = {
    "n": ("null", Kind.NULL, None),
    "t": ("true", Kind.BOOLEAN, True),
    "f": ("false", Kind.BOOLEAN, False),
}

# UTF-16 surrogate ranges used to rebuild code points above the BMP
_HIGH_SURROGATES = range(0xD800, 0xDC00)
_LOW_SURROGATES = range(0xDC00, 0xE000)


def _is_digit(char: str) -> bool:
    """ASCII digits only; str.isdigit() also accepts other scripts."""
    return "0" <= char <= "9"


class TokenType(Enum):
    """Token categories produced by the lexer."""

    BEGIN_OBJECT = "{"
    END_OBJECT = "}"
    BEGIN_ARRAY = "["
    END_ARRAY = "]"
    NAME_SEPARATOR = ":"
    VALUE_SEPARATOR = ","
    STRING = "string"
    NUMBER = "number"
    LITERAL = "literal"
    INVALID = "invalid"
    END = "end"


_STRUCTURAL = {
    token.value: token
    for token in (
        TokenType.BEGIN_OBJECT,
        TokenType.END_OBJECT,
        TokenType.BEGIN_ARRAY,
        TokenType.END_ARRAY,
        TokenType.NAME_SEPARATOR,
        TokenType.VALUE_SEPARATOR,
    )
}


@dataclass(frozen=True)
class Token:
    """
    A lexeme with its decoded payload and position.

    Scalar tokens carry the Kind and payload of the Value they become.
    """

    type: TokenType
    text: str
    start: Position
    end: Position
    kind: Kind | None = None
    value: Any = None


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures parsing behavior with immutable settings.

    max_depth bounds array/object nesting (None means unbounded).
    reject_duplicate_keys switches from last-value-wins to strict RFC
    handling of repeated object keys.
    """

    max_depth: int | None = None
    reject_duplicate_keys: bool = False

    def __post_init__(self) -> None:
        if self.max_depth is not None and (
            isinstance(self.max_depth, bool)
            or not isinstance(self.max_depth, int)
            or self.max_depth < 1
        ):
            raise ValueError("max_depth must be a positive integer or None")
        if not isinstance(self.reject_duplicate_keys, bool):
            raise TypeError("reject_duplicate_keys must be a boolean")


class Lexer:
    """
    Tokenizes JSON text for the recursive-descent parser.

    Character-by-character scanning over a single buffer. Strings are
    unescaped and numbers converted while they are scanned.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.length = len(text)

    def peek(self) -> str:
        """Returns current character without advancing."""
        return self.text[self.pos] if self.pos < self.length else "\0"

    def advance(self) -> str:
        """Returns current character and advances position."""
        char = self.peek()
        if self.pos < self.length:
            self.pos += 1
        return char

    def error(
        self, msg: str, pos: Position, kind: ParseErrorKind
    ) -> ParseError:
        return ParseError(msg, self.text, pos, kind)

    def skip_whitespace(self) -> None:
        """Skips whitespace characters according to RFC 8259."""
        while self.pos < self.length and self.text[self.pos] in _WHITESPACE:
            self.pos += 1

    def next_token(self) -> Token:
        """Returns the next token; END once the input is exhausted."""
        self.skip_whitespace()
        start = self.pos

        if self.pos >= self.length:
            return Token(TokenType.END, "", start, start)

        char = self.peek()
        if char in _STRUCTURAL:
            self.advance()
            return Token(_STRUCTURAL[char], char, start, self.pos)
        elif char == '"':
            return self.scan_string()
        elif char == "-" or _is_digit(char):
            return self.scan_number()
        elif char in _LITERALS:
            return self.scan_literal()
        else:
            self.advance()
            return Token(TokenType.INVALID, char, start, self.pos)

    def scan_literal(self) -> Token:
        """Scans literal tokens: true, false, null."""
        start = self.pos
        word, kind, value = _LITERALS[self.peek()]
        end = start + len(word)

        if not self.text.startswith(word, start) or (
            end < self.length and self.text[end].isalnum()
        ):
            raise self.error(
                "Invalid literal", start, ParseErrorKind.INVALID_LITERAL
            )

        self.pos = end
        return Token(TokenType.LITERAL, word, start, end, kind, value)

    def _scan_digits(self, start: Position, what: str) -> None:
        """Consumes a mandatory run of ASCII digits."""
        if not _is_digit(self.peek()):
            raise self.error(
                f"Invalid {what}", start, ParseErrorKind.INVALID_NUMBER
            )
        while _is_digit(self.peek()):
            self.advance()

    def _scan_integer_part(self, start: Position) -> None:
        """Scans the integer part of a JSON number."""
        if self.peek() == "0":
            self.advance()
            if _is_digit(self.peek()):
                raise self.error(
                    "Leading zeros not allowed",
                    start,
                    ParseErrorKind.INVALID_NUMBER,
                )
        else:
            self._scan_digits(start, "number")

    def scan_number(self) -> Token:
        """Scans a JSON number token."""
        with ProfileContext("scan_number"):
            start = self.pos
            is_float = False

            if self.peek() == "-":
                self.advance()

            self._scan_integer_part(start)

            if self.peek() == ".":
                self.advance()
                self._scan_digits(start, "decimal number")
                is_float = True

            if self.peek() in "eE":
                self.advance()
                if self.peek() in "+-":
                    self.advance()
                self._scan_digits(start, "exponent")
                is_float = True

            lexeme = self.text[start : self.pos]
            kind, value = _convert_number(lexeme, is_float)
            if math.isinf(value):
                raise self.error(
                    "Number out of range", start, ParseErrorKind.INVALID_NUMBER
                )
            return Token(
                TokenType.NUMBER, lexeme, start, self.pos, kind, value
            )

    def scan_string(self) -> Token:
        """Scans and unescapes a JSON string token including quotes."""
        with ProfileContext("scan_string"):
            start = self.pos
            self.advance()  # opening quote

            chunks: list[str] = []
            run_start = self.pos
            while self.pos < self.length:
                char = self.text[self.pos]
                if char == '"':
                    chunks.append(self.text[run_start : self.pos])
                    self.pos += 1
                    return Token(
                        TokenType.STRING,
                        self.text[start : self.pos],
                        start,
                        self.pos,
                        Kind.STRING,
                        "".join(chunks),
                    )
                elif char == "\\":
                    chunks.append(self.text[run_start : self.pos])
                    chunks.append(self._scan_escape(start))
                    run_start = self.pos
                elif char < " ":
                    raise self.error(
                        "Invalid control character in string",
                        self.pos,
                        ParseErrorKind.INVALID_STRING,
                    )
                else:
                    self.pos += 1

            raise self.error(
                "Unterminated string starting at",
                start,
                ParseErrorKind.UNTERMINATED_STRING,
            )

    def _scan_escape(self, string_start: Position) -> str:
        """Decodes one escape sequence; the cursor sits on the backslash."""
        escape_pos = self.pos
        self.pos += 1
        if self.pos >= self.length:
            raise self.error(
                "Unterminated string starting at",
                string_start,
                ParseErrorKind.UNTERMINATED_STRING,
            )

        char = self.advance()
        if char in _ESCAPES:
            return _ESCAPES[char]
        if char != "u":
            raise self.error(
                f"Invalid escape sequence: \\{char}",
                escape_pos,
                ParseErrorKind.INVALID_ESCAPE,
            )

        code = self._scan_hex4(escape_pos)
        if code in _LOW_SURROGATES:
            raise self.error(
                "Unpaired low surrogate in unicode escape",
                escape_pos,
                ParseErrorKind.INVALID_ESCAPE,
            )
        if code in _HIGH_SURROGATES:
            if self.text[self.pos : self.pos + 2] != "\\u":
                raise self.error(
                    "Unpaired high surrogate in unicode escape",
                    escape_pos,
                    ParseErrorKind.INVALID_ESCAPE,
                )
            self.pos += 2
            low = self._scan_hex4(escape_pos)
            if low not in _LOW_SURROGATES:
                raise self.error(
                    "Unpaired high surrogate in unicode escape",
                    escape_pos,
                    ParseErrorKind.INVALID_ESCAPE,
                )
            code = 0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00)
        return chr(code)

    def _scan_hex4(self, escape_pos: Position) -> int:
        """Reads exactly four hex digits following a \\u."""
        hex_digits = self.text[self.pos : self.pos + 4]
        if len(hex_digits) < 4 or not _HEX_DIGITS.issuperset(hex_digits):
            raise self.error(
                f"Invalid unicode escape sequence: \\u{hex_digits}",
                escape_pos,
                ParseErrorKind.INVALID_ESCAPE,
            )
        self.pos += 4
        return int(hex_digits, 16)


def _convert_number(lexeme: str, is_float: bool) -> tuple[Kind, int | float]:
    """
    Converts a validated number lexeme.

    Integer literals that do not fit in 64 bits are stored as floats.
    Literals beyond double range come back as infinities for the caller
    to reject.
    """
    if not is_float and len(lexeme.lstrip("-")) <= INT64_MAX_DIGITS:
        number = int(lexeme)
        if INT64_MIN <= number <= INT64_MAX:
            return Kind.NUMBER_INTEGER, number
    return Kind.NUMBER_FLOAT, float(lexeme)


class Parser:
    """
    Recursive-descent parser over the lexer's token stream.

    One method per grammar rule. The first error aborts the parse.
    """

    def __init__(self, lexer: Lexer, config: ParseConfig) -> None:
        self.lexer = lexer
        self.config = config
        self.current_token: Token | None = None
        self.depth = 0

    def peek_token(self) -> Token:
        """Returns the lookahead token, scanning it if needed."""
        if self.current_token is None:
            self.current_token = self.lexer.next_token()
        return self.current_token

    def advance_token(self) -> Token:
        """Consumes and returns the lookahead token."""
        token = self.peek_token()
        self.current_token = None
        return token

    def error(
        self,
        msg: str,
        pos: Position,
        kind: ParseErrorKind = ParseErrorKind.UNEXPECTED_TOKEN,
    ) -> ParseError:
        return ParseError(msg, self.lexer.text, pos, kind)

    def expect_token(self, expected: TokenType) -> Token:
        """Expects a specific structural token and consumes it."""
        token = self.peek_token()
        if token.type is not expected:
            raise self.error(
                f"Expecting '{expected.value}' delimiter", token.start
            )
        return self.advance_token()

    def parse_document(self) -> Value:
        """Parses one value and rejects anything but whitespace after it."""
        result = self.parse_value()

        self.lexer.skip_whitespace()
        if self.lexer.pos < self.lexer.length:
            raise self.error(
                "Extra data",
                self.lexer.pos,
                ParseErrorKind.UNEXPECTED_TRAILING_DATA,
            )
        return result

    def parse_value(self) -> Value:
        """Parses any JSON value based on the lookahead token."""
        token = self.peek_token()

        if token.kind is not None:
            self.advance_token()
            return Value._make(token.kind, token.value)
        elif token.type is TokenType.BEGIN_OBJECT:
            return self.parse_object()
        elif token.type is TokenType.BEGIN_ARRAY:
            return self.parse_array()
        else:
            raise self.error("Expecting value", token.start)

    def _enter_container(self, token: Token) -> None:
        self.depth += 1
        if self.config.max_depth is not None and (
            self.depth > self.config.max_depth
        ):
            raise self.error(
                f"Maximum nesting depth of {self.config.max_depth} exceeded",
                token.start,
                ParseErrorKind.NESTING_TOO_DEEP,
            )

    def _parse_object_key(self) -> Token:
        """Parses an object key and validates it's a proper string token."""
        token = self.peek_token()
        if token.type is not TokenType.STRING:
            raise self.error(
                "Expecting property name enclosed in double quotes",
                token.start,
            )
        return self.advance_token()

    def _continue_after(self, closer: TokenType, container: str) -> bool:
        """Consumes ',' or the closing bracket; True if more items follow."""
        token = self.peek_token()
        if token.type is closer:
            self.advance_token()
            return False
        elif token.type is TokenType.VALUE_SEPARATOR:
            self.advance_token()
            if self.peek_token().type is closer:
                raise self.error(
                    f"Illegal trailing comma before end of {container}",
                    token.start,
                )
            return True
        else:
            raise self.error("Expecting ',' delimiter", token.start)

    def _store_member(
        self, members: dict[str, Value], key_token: Token, member: Value
    ) -> None:
        key: str = key_token.value
        if key in members:
            if self.config.reject_duplicate_keys:
                raise self.error(
                    f"Duplicate object key {key!r}",
                    key_token.start,
                    ParseErrorKind.DUPLICATE_KEY,
                )
            logger.debug(
                "Duplicate key %r at position %d; keeping last value",
                key,
                key_token.start,
            )
        # Reassigning an existing dict key keeps its original position
        members[key] = member

    def parse_object(self) -> Value:
        """Parses a JSON object into an insertion-ordered Value."""
        with ProfileContext("parse_object"):
            self._enter_container(self.expect_token(TokenType.BEGIN_OBJECT))
            members: dict[str, Value] = {}

            if self.peek_token().type is TokenType.END_OBJECT:
                self.advance_token()
            else:
                while True:
                    key_token = self._parse_object_key()
                    self.expect_token(TokenType.NAME_SEPARATOR)
                    self._store_member(members, key_token, self.parse_value())
                    more = self._continue_after(TokenType.END_OBJECT, "object")
                    if not more:
                        break

            self.depth -= 1
            return Value._make(Kind.OBJECT, members)

    def parse_array(self) -> Value:
        """Parses a JSON array."""
        with ProfileContext("parse_array"):
            self._enter_container(self.expect_token(TokenType.BEGIN_ARRAY))
            elements: list[Value] = []

            if self.peek_token().type is TokenType.END_ARRAY:
                self.advance_token()
            else:
                while True:
                    elements.append(self.parse_value())
                    if not self._continue_after(TokenType.END_ARRAY, "array"):
                        break

            self.depth -= 1
            return Value._make(Kind.ARRAY, elements)


def parse(text: str, **kwargs: Any) -> Value:
    """
    Parses JSON text into a Value tree with strict standards compliance.

    Keyword arguments build the ParseConfig. Raises ParseError for any
    malformed input; no partial tree is ever returned.
    """
    if not isinstance(text, str):
        raise TypeError(
            f"the JSON object must be str, not {type(text).__name__}"
        )

    config = ParseConfig(**kwargs)
    with ProfileContext("parse", len(text)):
        # Check for UTF-8 BOM and reject it per JSON specification
        if text.startswith("\ufeff"):
            raise ParseError(
                "JSON input should not contain BOM (Byte Order Mark)",
                text,
                0,
            )

        parser = Parser(Lexer(text), config)
        return parser.parse_document()
