"""
An owned, order-preserving JSON value tree.

Parse JSON text into Value nodes, build and mutate them with auto-promoting
indexing or dot-separated paths, and serialize them back to compact or
pretty-printed text.
"""

from typing import Any

from ._errors import IndexOutOfRange
from ._errors import JsonError
from ._errors import KeyNotFound
from ._errors import ParseError
from ._errors import ParseErrorKind
from ._errors import PathError
from ._errors import TypeMismatch
from ._files import WriteResult
from ._files import dump
from ._files import load
from ._files import load_file
from ._files import save_file
from ._parser import Lexer
from ._parser import ParseConfig
from ._parser import Parser
from ._parser import Token
from ._parser import TokenType
from ._parser import parse
from ._path import at_path
from ._path import has_path
from ._path import set_path
from ._path import split_path
from ._path import value_at_path
from ._profile import HotPathStats
from ._profile import ProfileContext
from ._profile import clear_hot_path_stats
from ._profile import get_hot_path_stats
from ._serializer import EncodeConfig
from ._serializer import dumps
from ._types import Kind
from ._value import Value

__version__ = "0.1.0"

PRETTY_INDENT = 2


def reformat(text: str, indent: int = PRETTY_INDENT, **kwargs: Any) -> str:
    """
    Re-renders JSON text with the given indentation.

    Keyword arguments configure the parse step; a negative indent compacts
    the text instead.
    """
    return dumps(parse(text, **kwargs), indent)


__all__ = [
    "EncodeConfig",
    "HotPathStats",
    "IndexOutOfRange",
    "JsonError",
    "KeyNotFound",
    "Kind",
    "Lexer",
    "ParseConfig",
    "ParseError",
    "ParseErrorKind",
    "Parser",
    "PathError",
    "ProfileContext",
    "Token",
    "TokenType",
    "TypeMismatch",
    "Value",
    "WriteResult",
    "at_path",
    "clear_hot_path_stats",
    "dump",
    "dumps",
    "get_hot_path_stats",
    "has_path",
    "load",
    "load_file",
    "parse",
    "reformat",
    "save_file",
    "set_path",
    "split_path",
    "value_at_path",
]
