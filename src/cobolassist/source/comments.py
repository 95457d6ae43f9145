"""Documentation comment block extraction."""

from __future__ import annotations

from cobolassist.config.constants import COMMENT_MARKER, SEQUENCE_AREA_WIDTH
from cobolassist.source.buffer import SourceBuffer

CommentBlock = tuple[str, ...]
"""Raw comment lines in source order, ending right above a declaration."""

_COMMENT_LINE_PREFIX = " " * SEQUENCE_AREA_WIDTH + COMMENT_MARKER


def is_comment_line(line: str) -> bool:
    """True when the line is a full-line comment in the fixed-format layout."""
    return line.startswith(_COMMENT_LINE_PREFIX)


def extract_comment_block(buffer: SourceBuffer, line_index: int) -> CommentBlock:
    """Collect the contiguous comment lines directly above ``line_index``.

    Walks upward and stops at the first line that is not a comment; blank
    lines end the block. An index outside the buffer, or the first line,
    yields an empty block.
    """
    if line_index <= 0 or line_index >= len(buffer):
        return ()
    collected: list[str] = []
    for index in range(line_index - 1, -1, -1):
        line = buffer[index]
        if not is_comment_line(line):
            break
        collected.append(line)
    collected.reverse()
    return tuple(collected)
