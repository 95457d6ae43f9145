"""Source buffers: the ordered lines of one version of a source file."""

from __future__ import annotations

import re
from collections.abc import Iterable

SourceBuffer = tuple[str, ...]
"""Ordered, 0-indexed, immutable sequence of source lines (no line terminators)."""

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> SourceBuffer:
    """Split raw text into a buffer.

    Accepts any mix of ``\\r\\n``, ``\\r`` and ``\\n`` terminators. A trailing
    terminator does not produce an extra empty line, so a file written by an
    editor and the same text without the final newline give the same buffer.
    """
    if not text:
        return ()
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return tuple(lines)


def as_buffer(lines: str | Iterable[str]) -> SourceBuffer:
    """Normalize raw text or an iterable of lines into a buffer."""
    if isinstance(lines, str):
        return split_lines(lines)
    if isinstance(lines, tuple):
        return lines
    return tuple(lines)
