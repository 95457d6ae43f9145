"""Column-anchored declaration scanning.

Declarations in fixed-format source are recognized by position, not by
grammar. A paragraph declaration is a line with exactly
``DECLARATION_MARGIN`` leading spaces, a name starting in Area A and a
terminating period::

       PARA-NAME.
       PARA-NAME.          *> trailing comments are allowed

A data item declaration starts with a level number at or after Area A::

       01  WS-CUSTOMER.
           05  WS-NAME     PIC X(30).

Lines that only look similar (wrong margin, missing period, extra tokens)
produce no occurrence. Names keep their source casing.
"""

from __future__ import annotations

import string
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum

from cobolassist.config.constants import COMMENT_MARKER, DECLARATION_MARGIN
from cobolassist.source.buffer import SourceBuffer

NAME_CHARS = frozenset(string.ascii_letters + string.digits + "_-")
"""Characters allowed in a user-defined COBOL word."""

DATA_LEVELS = frozenset(
    {f"{n:02d}" for n in range(1, 50)} | {str(n) for n in range(1, 10)} | {"66", "77", "78", "88"}
)
"""Level numbers that introduce a data item."""

_ANONYMOUS_ITEM = "FILLER"


class DeclarationKind(Enum):
    """What a scanned declaration introduces."""

    PARAGRAPH = "paragraph"
    VARIABLE = "variable"


@dataclass(frozen=True, slots=True)
class Occurrence:
    """A declaration found on one line of a buffer."""

    line_index: int
    name: str
    raw_line: str


@dataclass(frozen=True, slots=True)
class DeclarationPattern:
    """A positional declaration rule.

    ``margin`` is the number of leading spaces; with ``exact_margin`` the
    declaration must start right after them, otherwise more indentation is
    allowed.
    """

    kind: DeclarationKind
    margin: int
    exact_margin: bool
    matcher: Callable[[str, int], str | None]

    def match(self, line: str) -> str | None:
        """Return the declared name, or None when the line is not a declaration."""
        start = _leading_spaces(line)
        if start < self.margin or (self.exact_margin and start != self.margin):
            return None
        return self.matcher(line, start)


def _leading_spaces(line: str) -> int:
    count = 0
    for ch in line:
        if ch != " ":
            break
        count += 1
    return count


def _read_word(line: str, start: int) -> int:
    """Return the offset just past the word starting at ``start``."""
    end = start
    while end < len(line) and line[end] in NAME_CHARS:
        end += 1
    return end


def _match_paragraph(line: str, start: int) -> str | None:
    end = _read_word(line, start)
    if end == start or end >= len(line) or line[end] != ".":
        return None
    rest = line[end + 1 :].lstrip()
    if rest and not rest.startswith(COMMENT_MARKER):
        return None
    return line[start:end]


def _match_data_item(line: str, start: int) -> str | None:
    level_end = _read_word(line, start)
    if line[start:level_end] not in DATA_LEVELS:
        return None
    name_start = level_end
    while name_start < len(line) and line[name_start] in " \t":
        name_start += 1
    if name_start == level_end:
        return None
    name_end = _read_word(line, name_start)
    if name_end == name_start:
        return None
    if name_end < len(line) and line[name_end] not in " \t.\r":
        return None
    name = line[name_start:name_end]
    if name.upper() == _ANONYMOUS_ITEM:
        return None
    return name


PARAGRAPH = DeclarationPattern(
    kind=DeclarationKind.PARAGRAPH,
    margin=DECLARATION_MARGIN,
    exact_margin=True,
    matcher=_match_paragraph,
)

DATA_ITEM = DeclarationPattern(
    kind=DeclarationKind.VARIABLE,
    margin=DECLARATION_MARGIN,
    exact_margin=False,
    matcher=_match_data_item,
)


def scan(buffer: SourceBuffer, pattern: DeclarationPattern = PARAGRAPH) -> Iterator[Occurrence]:
    """Lazily yield every declaration matching ``pattern``, top to bottom.

    Each call returns an independent generator.
    """
    for index, line in enumerate(buffer):
        name = pattern.match(line)
        if name is not None:
            yield Occurrence(line_index=index, name=name, raw_line=line)
