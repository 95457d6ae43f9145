"""VALUE clause completion for data item declarations."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from cobolassist.completion.columns import fill_missing_spaces, find_word_start
from cobolassist.completion.items import (
    CompletionItem,
    CompletionItemKind,
    InsertTextFormat,
    Range,
    TextEdit,
)
from cobolassist.config.constants import VALUE_CLAUSE_COLUMN
from cobolassist.source.scanner import DATA_ITEM

_REPEAT_COUNT = re.compile(r"\(\d+\)")
_EDIT_SYMBOLS = frozenset("Z*+-.,B0/$")
_PICTURE_KEYWORDS = frozenset({"PIC", "PICTURE"})
_VALUE_KEYWORDS = frozenset({"VALUE", "VALUES"})
_DISPLAY_USAGES = frozenset({"DISPLAY"})
_BINARY_USAGES = frozenset(
    {
        "BINARY",
        "COMP",
        "COMP-1",
        "COMP-2",
        "COMP-3",
        "COMP-4",
        "COMP-5",
        "COMP-X",
        "COMPUTATIONAL",
        "COMPUTATIONAL-3",
        "COMPUTATIONAL-5",
        "COMPUTATIONAL-X",
        "PACKED-DECIMAL",
        "INDEX",
        "POINTER",
    }
)


class VariableType(Enum):
    ALPHANUMERIC = "alphanumeric"
    INTEGER = "integer"
    DECIMAL = "decimal"


@dataclass(frozen=True, slots=True)
class CobolVariable:
    """The parts of a data item declaration that drive the VALUE clause."""

    level: str
    name: str
    picture: str | None = None
    usage: str | None = None
    has_value: bool = False

    @classmethod
    def parse_line(cls, line: str) -> CobolVariable | None:
        """Parse a declaration line; None when the line declares no data item."""
        name = DATA_ITEM.match(line)
        if name is None:
            return None
        tokens = line.split("*>", 1)[0].split()
        level = tokens[0]
        picture: str | None = None
        usage: str | None = None
        has_value = False
        upper = [token.upper().rstrip(".") for token in tokens]
        for position, token in enumerate(upper[2:], start=2):
            if token in _PICTURE_KEYWORDS and picture is None:
                following = tokens[position + 1 :]
                if following and following[0].upper() == "IS":
                    following = following[1:]
                if following:
                    picture = _strip_terminator(following[0])
            elif token in _DISPLAY_USAGES or token in _BINARY_USAGES:
                usage = token
            elif token in _VALUE_KEYWORDS:
                has_value = True
        return cls(level=level, name=name, picture=picture, usage=usage, has_value=has_value)

    @property
    def type(self) -> VariableType:
        if self.picture is None:
            # Group items are alphanumeric
            return VariableType.ALPHANUMERIC
        symbols = _REPEAT_COUNT.sub("", self.picture.upper())
        if "X" in symbols or "A" in symbols:
            return VariableType.ALPHANUMERIC
        if "V" in symbols or "." in symbols or "," in symbols:
            return VariableType.DECIMAL
        return VariableType.INTEGER

    @property
    def allows_negative(self) -> bool:
        return self.picture is not None and self.picture.upper().startswith("S")

    @property
    def is_display(self) -> bool:
        """True for DISPLAY usage, explicit or implied by an edited picture."""
        if self.usage is not None:
            return self.usage in _DISPLAY_USAGES
        if self.picture is None:
            return True
        symbols = _REPEAT_COUNT.sub("", self.picture.upper())
        return any(symbol in _EDIT_SYMBOLS for symbol in symbols)


def _strip_terminator(picture: str) -> str:
    return picture[:-1] if picture.endswith(".") else picture


def value_clause_text(variable: CobolVariable, column: int) -> str:
    """VALUE clause snippet inserted at ``column``, aligned to the VALUE column."""
    text = fill_missing_spaces(VALUE_CLAUSE_COLUMN, column)
    if variable.type is VariableType.ALPHANUMERIC:
        text += "value is ${1:spaces}"
    else:
        text += "value is ${1:zeros}"
        text += _usage_suggestion(variable)
    return text + "."


def _usage_suggestion(variable: CobolVariable) -> str:
    if variable.usage is not None or variable.is_display:
        return ""
    if variable.type is VariableType.DECIMAL or variable.allows_negative:
        return " ${2:comp}"
    return " ${2:comp-x}"


def value_completion(line_index: int, character: int, line: str) -> CompletionItem | None:
    """VALUE clause item for the data item on ``line``.

    None when the line declares no data item or the item already has a VALUE.
    """
    variable = CobolVariable.parse_line(line)
    if variable is None or variable.has_value:
        return None
    start = find_word_start(line, character)
    return CompletionItem(
        label="VALUE clause",
        kind=CompletionItemKind.VARIABLE,
        detail="Inserts the VALUE clause at the VALUE column",
        text_edit=TextEdit(
            Range.on_line(line_index, start, character),
            value_clause_text(variable, start + 1),
        ),
        insert_text_format=InsertTextFormat.SNIPPET,
        filter_text="value",
        preselect=True,
    )
