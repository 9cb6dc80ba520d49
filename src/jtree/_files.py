"""
File-object and filesystem helpers around parse and dumps.

The core never touches the filesystem; these helpers read or write one
complete text buffer and hand it to the parser or take it from the
serializer.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import IO
from typing import Any

from ._parser import parse
from ._serializer import COMPACT
from ._serializer import dumps
from ._value import Value

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


@dataclass(frozen=True)
class WriteResult:
    """Outcome of save_file: success flag plus a diagnostic on failure."""

    ok: bool
    message: str = ""

    def __bool__(self) -> bool:
        return self.ok


def load(fp: IO[str], **kwargs: Any) -> Value:
    """Parses the complete contents of a text file-like object."""
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return parse(fp.read(), **kwargs)


def dump(value: Value, fp: IO[str], indent: int = COMPACT) -> None:
    """Serializes value into a text file-like object."""
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    fp.write(dumps(value, indent))


def load_file(path: str | os.PathLike[str], **kwargs: Any) -> Value:
    """
    Reads a UTF-8 JSON file and parses it.

    OSError from reading and ParseError from parsing propagate to the
    caller.
    """
    text = Path(path).read_text(encoding=ENCODING)
    return parse(text, **kwargs)


def save_file(
    path: str | os.PathLike[str], value: Value, indent: int = COMPACT
) -> WriteResult:
    """
    Writes value to path as UTF-8 JSON, creating parent directories.

    Encoding and I/O failures are reported in the returned WriteResult
    instead of being raised. The text is encoded before the file is opened,
    so a string holding a lone surrogate leaves an existing file intact.
    """
    target = Path(path)
    try:
        data = dumps(value, indent).encode(ENCODING)
    except UnicodeEncodeError as exc:
        logger.warning("Cannot encode JSON for %s: %s", target, exc)
        return WriteResult(ok=False, message=str(exc))

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
    except OSError as exc:
        logger.warning("Failed to write JSON to %s: %s", target, exc)
        return WriteResult(ok=False, message=str(exc))

    logger.debug("Wrote %d bytes of JSON to %s", len(data), target)
    return WriteResult(ok=True)
