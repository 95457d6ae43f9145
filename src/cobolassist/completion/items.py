"""Editor-facing completion item shapes.

Field names follow Python conventions; ``to_dict`` produces the camelCase
JSON the language server protocol expects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class CompletionItemKind(IntEnum):
    """Subset of LSP CompletionItemKind values used here."""

    METHOD = 2
    VARIABLE = 6
    KEYWORD = 14
    SNIPPET = 15


class InsertTextFormat(IntEnum):
    PLAIN_TEXT = 1
    SNIPPET = 2


@dataclass(frozen=True, slots=True)
class Position:
    line: int
    character: int

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "character": self.character}


@dataclass(frozen=True, slots=True)
class Range:
    start: Position
    end: Position

    @classmethod
    def on_line(cls, line: int, start: int, end: int | None = None) -> Range:
        """Range within one line; empty when ``end`` is omitted."""
        return cls(Position(line, start), Position(line, start if end is None else end))

    def to_dict(self) -> dict[str, Any]:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}


@dataclass(frozen=True, slots=True)
class TextEdit:
    range: Range
    new_text: str

    def to_dict(self) -> dict[str, Any]:
        return {"range": self.range.to_dict(), "newText": self.new_text}


@dataclass(frozen=True, slots=True)
class MarkupContent:
    value: str
    kind: str = "markdown"

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind, "value": self.value}


@dataclass(frozen=True, slots=True)
class CompletionItem:
    """A single completion proposal."""

    label: str
    kind: CompletionItemKind
    detail: str = ""
    documentation: MarkupContent | None = None
    insert_text: str | None = None
    text_edit: TextEdit | None = None
    insert_text_format: InsertTextFormat = InsertTextFormat.PLAIN_TEXT
    filter_text: str | None = None
    preselect: bool = False

    @property
    def text(self) -> str:
        """The text this item inserts."""
        if self.text_edit is not None:
            return self.text_edit.new_text
        return self.insert_text if self.insert_text is not None else self.label

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON responses, omitting unset optional fields."""
        result: dict[str, Any] = {
            "label": self.label,
            "kind": int(self.kind),
            "insertTextFormat": int(self.insert_text_format),
        }
        if self.detail:
            result["detail"] = self.detail
        if self.documentation is not None:
            result["documentation"] = self.documentation.to_dict()
        if self.insert_text is not None:
            result["insertText"] = self.insert_text
        if self.text_edit is not None:
            result["textEdit"] = self.text_edit.to_dict()
        if self.filter_text is not None:
            result["filterText"] = self.filter_text
        if self.preselect:
            result["preselect"] = True
        return result
