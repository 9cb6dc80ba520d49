"""Character to UTF-8 byte offset mapping for error positions."""

from __future__ import annotations

from typing import Final

# Upper code point bounds for 1, 2 and 3 byte UTF-8 sequences
_ONE_BYTE_LIMIT = 0x80
_TWO_BYTE_LIMIT = 0x800
_THREE_BYTE_LIMIT = 0x10000


def utf8_width(char: str) -> int:
    """Number of bytes the character occupies once encoded as UTF-8."""
    code = ord(char)
    if code < _ONE_BYTE_LIMIT:
        return 1
    if code < _TWO_BYTE_LIMIT:
        return 2
    if code < _THREE_BYTE_LIMIT:
        return 3
    return 4


class UTF8PositionMapper:
    """Maps positions in a str to offsets in its UTF-8 encoding.

    Instead of building a full position map for the entire document,
    the mapper records a checkpoint every `checkpoint_interval` characters
    and walks forward from the nearest one. ASCII-only text short-circuits
    to the identity mapping.
    """

    def __init__(self, text: str, checkpoint_interval: int = 256) -> None:
        """Initialize position mapper with checkpoint system.

        Args:
            text: The text to create position mapping for
            checkpoint_interval: Interval between checkpoints (default 256 chars)
        """
        if checkpoint_interval < 1:
            raise ValueError("checkpoint_interval must be positive")

        self.text: Final = text
        self.checkpoint_interval: Final = checkpoint_interval
        self._is_ascii_only: Final = text.isascii()
        self._char_marks: list[int] = []
        self._byte_marks: list[int] = []
        self.byte_length = len(text)

        if not self._is_ascii_only:
            self._build_checkpoints()

    def _build_checkpoints(self) -> None:
        """Build checkpoint lists at regular character intervals."""
        byte_pos = 0
        for char_pos, char in enumerate(self.text):
            if char_pos % self.checkpoint_interval == 0:
                self._char_marks.append(char_pos)
                self._byte_marks.append(byte_pos)
            byte_pos += utf8_width(char)

        self.byte_length = byte_pos

    def char_to_byte(self, char_pos: int) -> int:
        """Convert character position to byte position.

        Positions past the end of the text map to the encoded length.
        """
        if self._is_ascii_only:
            return min(char_pos, self.byte_length)
        if char_pos >= len(self.text):
            return self.byte_length

        slot = char_pos // self.checkpoint_interval
        byte_pos = self._byte_marks[slot]
        for i in range(self._char_marks[slot], char_pos):
            byte_pos += utf8_width(self.text[i])
        return byte_pos
